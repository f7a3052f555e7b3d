"""Meal log storage and daily summaries."""

from datetime import date, datetime, time, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import MealLogRepository
from database.models import MealLog
from schemas.food_analysis_schema import LoggableMeal
from schemas.meal_plan_schema import DailyTargets
from schemas.meal_schema import DailyProgress, DailyTotal, MealLogCreate, MealLogResponse, TodayMealsResponse
from services.meal_aggregator import calculate_daily_totals, calculate_progress, calculate_weekly_daily_totals

logger = get_logger("services.meal_service")


def _day_bounds(day: date):
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def week_start(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


class MealService:
    """Persistence and summaries for logged meals."""

    def add_meal(self, db: Session, payload: MealLogCreate) -> MealLog:
        meal = MealLog(
            user_id=payload.user_id,
            name=payload.name,
            total_calories=payload.total_calories,
            total_protein=payload.total_protein,
            total_carbs=payload.total_carbs,
            total_fat=payload.total_fat,
            meal_type=payload.meal_type,
            portion=payload.portion,
            created_at=payload.created_at or datetime.now(),
        )
        meal = MealLogRepository(db).create(meal)
        logger.info("Meal %s logged for user %s", meal.id, meal.user_id)
        return meal

    def add_analyzed_meal(self, db: Session, meal: LoggableMeal, created_at: Optional[datetime] = None) -> MealLog:
        """Persist a meal produced by photo analysis."""
        return self.add_meal(db, MealLogCreate(**meal.model_dump(), created_at=created_at))

    def get_meals(
        self,
        db: Session,
        user_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[MealLog]:
        return MealLogRepository(db).list_for_user(user_id, start, end)

    def get_today_meals(self, db: Session, user_id: str, today: Optional[date] = None) -> List[MealLog]:
        start, end = _day_bounds(today or date.today())
        return self.get_meals(db, user_id, start, end)

    def get_week_meals(self, db: Session, user_id: str, today: Optional[date] = None) -> List[MealLog]:
        """Meals from Monday 00:00 of the current week up to the end of `today`."""
        today = today or date.today()
        start, _ = _day_bounds(week_start(today))
        _, end = _day_bounds(today)
        return self.get_meals(db, user_id, start, end)

    def delete_meal(self, db: Session, meal_id: int) -> None:
        if not MealLogRepository(db).delete_by_id(meal_id):
            raise NotFoundError("MealLog", meal_id)
        logger.info("Meal %s deleted", meal_id)

    def today_summary(
        self,
        db: Session,
        user_id: str,
        targets: Optional[DailyTargets] = None,
        today: Optional[date] = None,
    ) -> TodayMealsResponse:
        """Today's meals with totals and, when targets are given, progress."""
        meals = self.get_today_meals(db, user_id, today)
        totals = calculate_daily_totals(meals)
        if today is not None:
            totals = totals.model_copy(update={"date": today.isoformat()})

        progress = None
        if targets is not None:
            progress = DailyProgress(
                calories=calculate_progress(totals.total_calories, targets.calories),
                protein=calculate_progress(totals.total_protein, targets.protein),
                carbs=calculate_progress(totals.total_carbs, targets.carbs),
                fat=calculate_progress(totals.total_fat, targets.fat),
            )
        return TodayMealsResponse(meals=[to_response(m) for m in meals], totals=totals, progress=progress)

    def week_totals(self, db: Session, user_id: str, today: Optional[date] = None) -> List[DailyTotal]:
        return calculate_weekly_daily_totals(self.get_week_meals(db, user_id, today))


def to_response(meal: MealLog) -> MealLogResponse:
    return MealLogResponse(
        id=meal.id,
        user_id=meal.user_id,
        name=meal.name,
        total_calories=meal.total_calories,
        total_protein=meal.total_protein,
        total_carbs=meal.total_carbs,
        total_fat=meal.total_fat,
        meal_type=meal.meal_type,
        portion=meal.portion,
        created_at=meal.created_at.isoformat() if meal.created_at else "",
    )


# export singleton
meal_service = MealService()
