"""Repository classes for database operations.

A small generic base with the CRUD calls the services need, plus one
repository per model carrying its query shapes. Database failures are
re-raised as `DatabaseError` after a rollback.
"""

from datetime import date, datetime
from typing import TypeVar, Generic, Type, Optional, List, Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import DatabaseError
from core.logger import get_logger
from database.models import Base, DietPlan, HealthData, MealCompletion, MealLog

logger = get_logger("core.repository")

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def _commit(self, operation: str) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("%s failed on %s: %s", operation, self.model.__tablename__, exc)
            raise DatabaseError(f"Failed to {operation} {self.model.__name__}", operation=operation) from exc

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object.

        Args:
            obj: Model instance to persist.

        Returns:
            The persisted object with refreshed attributes.
        """
        self.session.add(obj)
        self._commit("create")
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        return self.session.get(self.model, id)

    def update(self, obj: T) -> T:
        """Commit pending changes on `obj` and refresh it."""
        self._commit("update")
        self.session.refresh(obj)
        return obj

    def delete(self, obj: T) -> None:
        self.session.delete(obj)
        self._commit("delete")

    def delete_by_id(self, id: Any) -> bool:
        """Delete an object by its primary key.

        Returns:
            True if object was deleted, False if not found.
        """
        obj = self.get_by_id(id)
        if obj:
            self.delete(obj)
            return True
        return False


class MealLogRepository(BaseRepository[MealLog]):
    def __init__(self, session: Session):
        super().__init__(MealLog, session)

    def list_for_user(
        self,
        user_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[MealLog]:
        """Meals for a user, newest first, optionally within ``[start, end)``."""
        query = self.session.query(MealLog).filter(MealLog.user_id == user_id)
        if start is not None:
            query = query.filter(MealLog.created_at >= start)
        if end is not None:
            query = query.filter(MealLog.created_at < end)
        return query.order_by(MealLog.created_at.desc(), MealLog.id.desc()).all()


class DietPlanRepository(BaseRepository[DietPlan]):
    def __init__(self, session: Session):
        super().__init__(DietPlan, session)

    def get_active(self, user_id: str) -> Optional[DietPlan]:
        return (
            self.session.query(DietPlan)
            .filter(DietPlan.user_id == user_id, DietPlan.is_active.is_(True))
            .order_by(DietPlan.created_at.desc(), DietPlan.id.desc())
            .first()
        )

    def create_active(self, plan: DietPlan) -> DietPlan:
        """Persist `plan` as the user's only active plan.

        Deactivation of the previous plans and the insert share one commit.
        """
        (
            self.session.query(DietPlan)
            .filter(DietPlan.user_id == plan.user_id, DietPlan.is_active.is_(True))
            .update({DietPlan.is_active: False}, synchronize_session=False)
        )
        plan.is_active = True
        return self.create(plan)


class MealCompletionRepository(BaseRepository[MealCompletion]):
    def __init__(self, session: Session):
        super().__init__(MealCompletion, session)

    def find(
        self,
        user_id: str,
        plan_id: int,
        completion_date: date,
        day_of_week: str,
        meal_type: str,
        meal_id: str,
    ) -> Optional[MealCompletion]:
        """The row for one plan entry on one date, checked or not."""
        return (
            self.session.query(MealCompletion)
            .filter(
                MealCompletion.user_id == user_id,
                MealCompletion.plan_id == plan_id,
                MealCompletion.completion_date == completion_date,
                MealCompletion.day_of_week == day_of_week,
                MealCompletion.meal_type == meal_type,
                MealCompletion.meal_id == meal_id,
            )
            .first()
        )

    def list_completed(
        self,
        user_id: str,
        plan_id: int,
        start: date,
        end: date,
        day_of_week: Optional[str] = None,
    ) -> List[MealCompletion]:
        """Checked rows with ``start <= completion_date <= end``, oldest first."""
        query = self.session.query(MealCompletion).filter(
            MealCompletion.user_id == user_id,
            MealCompletion.plan_id == plan_id,
            MealCompletion.completed_at.isnot(None),
            MealCompletion.completion_date >= start,
            MealCompletion.completion_date <= end,
        )
        if day_of_week is not None:
            query = query.filter(MealCompletion.day_of_week == day_of_week)
        return query.order_by(MealCompletion.completion_date, MealCompletion.completed_at).all()


class HealthDataRepository(BaseRepository[HealthData]):
    def __init__(self, session: Session):
        super().__init__(HealthData, session)

    def get_for_day(self, user_id: str, day: date) -> Optional[HealthData]:
        return (
            self.session.query(HealthData)
            .filter(HealthData.user_id == user_id, HealthData.date == day)
            .first()
        )

    def list_between(self, user_id: str, start: date, end: date) -> List[HealthData]:
        """Rows with ``start <= date <= end``, oldest first."""
        return (
            self.session.query(HealthData)
            .filter(HealthData.user_id == user_id, HealthData.date >= start, HealthData.date <= end)
            .order_by(HealthData.date)
            .all()
        )
