"""Check-off tracking for meals of a stored plan.

A completion row identifies one plan entry (day key, slot, entry id) on one
calendar date. Toggling flips `completed_at` between a timestamp and None;
rows are never deleted, so unchecked entries stay queryable.
"""

from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import MealCompletionRepository
from database.models import DietPlan, MealCompletion
from schemas.meal_plan_schema import SLOTS
from schemas.tracking_schema import DayCompletionResponse, MealCompletionResponse
from services.plan_service import load_weekly_plan

logger = get_logger("services.meal_completion")

STATS_WINDOW_DAYS = 7


def count_day_meals(plan: DietPlan, day_of_week: str) -> int:
    """Number of entries across all slots of one plan day; 0 for a missing day."""
    day_plan = load_weekly_plan(plan).get(day_of_week)
    if day_plan is None:
        return 0
    return sum(len(getattr(day_plan, slot)) for slot in SLOTS)


def completion_percentage(completed: int, total_meals: int) -> float:
    """Share of the day's meals checked off, 0 when the day has no meals."""
    if total_meals <= 0:
        return 0.0
    return completed / total_meals * 100


class MealCompletionService:
    """Persistence and statistics for plan-meal check-offs."""

    def toggle_meal_completion(
        self,
        db: Session,
        plan: DietPlan,
        user_id: str,
        day_of_week: str,
        meal_type: str,
        meal_id: str,
        today: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> MealCompletion:
        """Check an entry for today, or flip it if a row already exists.

        Raises:
            NotFoundError: The plan has no entry `meal_id` in that day and slot.
        """
        day_plan = load_weekly_plan(plan).get(day_of_week)
        entries = getattr(day_plan, meal_type) if day_plan is not None else []
        if not any(entry.id == meal_id for entry in entries):
            raise NotFoundError(f"DietPlan {plan.id} {day_of_week}/{meal_type} entry", meal_id)

        now = now or datetime.now()
        today = today or now.date()
        repo = MealCompletionRepository(db)
        existing = repo.find(user_id, plan.id, today, day_of_week, meal_type, meal_id)
        if existing is not None:
            existing.completed_at = None if existing.completed_at is not None else now
            completion = repo.update(existing)
        else:
            completion = repo.create(MealCompletion(
                user_id=user_id,
                plan_id=plan.id,
                completion_date=today,
                day_of_week=day_of_week,
                meal_type=meal_type,
                meal_id=meal_id,
                completed_at=now,
            ))
        logger.info(
            "Meal %s of plan %s %s for user %s",
            meal_id,
            plan.id,
            "checked" if completion.completed_at is not None else "unchecked",
            user_id,
        )
        return completion

    def get_day_completions(
        self,
        db: Session,
        user_id: str,
        plan_id: int,
        day_of_week: str,
        on: Optional[date] = None,
    ) -> List[MealCompletion]:
        on = on or date.today()
        return MealCompletionRepository(db).list_completed(user_id, plan_id, on, on, day_of_week)

    def is_meal_completed(
        self,
        db: Session,
        user_id: str,
        plan_id: int,
        day_of_week: str,
        meal_type: str,
        meal_id: str,
        on: Optional[date] = None,
    ) -> bool:
        row = MealCompletionRepository(db).find(user_id, plan_id, on or date.today(), day_of_week, meal_type, meal_id)
        return row is not None and row.completed_at is not None

    def get_weekly_completion_stats(
        self,
        db: Session,
        user_id: str,
        plan_id: int,
        today: Optional[date] = None,
    ) -> Dict[str, int]:
        """Checked entries per ISO date over the last seven days plus today.

        Dates without completions are absent from the result.
        """
        today = today or date.today()
        rows = MealCompletionRepository(db).list_completed(
            user_id, plan_id, today - timedelta(days=STATS_WINDOW_DAYS), today
        )
        stats: Dict[str, int] = {}
        for row in rows:
            key = row.completion_date.isoformat()
            stats[key] = stats.get(key, 0) + 1
        return stats

    def get_daily_completion_percentage(
        self,
        db: Session,
        user_id: str,
        plan_id: int,
        day_of_week: str,
        total_meals: int,
        on: Optional[date] = None,
    ) -> float:
        completed = len(self.get_day_completions(db, user_id, plan_id, day_of_week, on))
        return completion_percentage(completed, total_meals)

    def day_summary(
        self,
        db: Session,
        plan: DietPlan,
        user_id: str,
        day_of_week: str,
        on: Optional[date] = None,
    ) -> DayCompletionResponse:
        """Checked entries of a plan day with the percentage against the plan's own meal count."""
        on = on or date.today()
        completions = self.get_day_completions(db, user_id, plan.id, day_of_week, on)
        total = count_day_meals(plan, day_of_week)
        return DayCompletionResponse(
            day_of_week=day_of_week,
            completion_date=on,
            completions=[to_response(c) for c in completions],
            total_meals=total,
            percentage=completion_percentage(len(completions), total),
        )


def to_response(completion: MealCompletion) -> MealCompletionResponse:
    return MealCompletionResponse(
        id=completion.id,
        user_id=completion.user_id,
        plan_id=completion.plan_id,
        completion_date=completion.completion_date,
        day_of_week=completion.day_of_week,
        meal_type=completion.meal_type,
        meal_id=completion.meal_id,
        completed=completion.completed_at is not None,
        completed_at=completion.completed_at.isoformat() if completion.completed_at else None,
    )


# export singleton
meal_completion_service = MealCompletionService()
