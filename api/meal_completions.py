"""Meal completion API router.

Checking plan meals off and reading daily and weekly completion figures.
"""

from datetime import date
from typing import Dict, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.logger import get_logger
from database.deps import get_db_read, get_db_write
from schemas import DayCompletionResponse, MealCompletionResponse, MealCompletionToggle
from schemas.tracking_schema import LocalDayKey
from services.meal_completion import meal_completion_service, to_response
from services.plan_service import local_weekday_key, plan_service

logger = get_logger("api.meal_completions")
router = APIRouter(prefix="/api/plans", tags=["meal-completions"])


@router.post("/{plan_id}/completions", response_model=MealCompletionResponse)
def toggle_meal_completion(plan_id: int, payload: MealCompletionToggle, db: Session = Depends(get_db_write)):
    """Check a plan meal for today, or flip it when it was already toggled today.

    Raises:
        NotFoundError: Unknown plan, or no such entry in the given day and slot.
    """
    plan = plan_service.get_plan(db, plan_id)
    completion = meal_completion_service.toggle_meal_completion(
        db, plan, payload.user_id, payload.day_of_week, payload.meal_type, payload.meal_id
    )
    return to_response(completion)


@router.get("/{plan_id}/completions/{user_id}", response_model=DayCompletionResponse)
def get_day_completions(
    plan_id: int,
    user_id: str,
    day_of_week: Optional[LocalDayKey] = None,
    on: Optional[date] = None,
    db: Session = Depends(get_db_read),
):
    """Checked meals of one plan day; defaults to today's weekday and date."""
    plan = plan_service.get_plan(db, plan_id)
    on = on or date.today()
    return meal_completion_service.day_summary(db, plan, user_id, day_of_week or local_weekday_key(on), on)


@router.get("/{plan_id}/completions/{user_id}/week", response_model=Dict[str, int])
def get_weekly_completion_stats(plan_id: int, user_id: str, db: Session = Depends(get_db_read)):
    return meal_completion_service.get_weekly_completion_stats(db, user_id, plan_id)
