"""Meals API router.

Logging meals and reading them back as daily and weekly summaries.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from core.logger import get_logger
from database.deps import get_db_read, get_db_write
from schemas import DailyTargets, DailyTotal, MealLogCreate, MealLogResponse, TodayMealsResponse
from services.meal_service import meal_service, to_response

logger = get_logger("api.meals")
router = APIRouter(prefix="/api", tags=["meals"])


@router.post("/meals", response_model=MealLogResponse, status_code=201)
def add_meal(payload: MealLogCreate, db: Session = Depends(get_db_write)):
    """Persist a logged meal and return it with its id."""
    return to_response(meal_service.add_meal(db, payload))


@router.get("/meals/{user_id}/today", response_model=TodayMealsResponse)
def get_today_meals(
    user_id: str,
    target_calories: Optional[int] = None,
    target_protein: Optional[int] = None,
    target_carbs: Optional[int] = None,
    target_fat: Optional[int] = None,
    db: Session = Depends(get_db_read),
):
    """Today's meals and totals.

    Progress percentages are included when `target_calories` is given;
    macro targets left out count as zero.
    """
    targets = None
    if target_calories is not None:
        targets = DailyTargets(
            calories=target_calories,
            protein=target_protein or 0,
            carbs=target_carbs or 0,
            fat=target_fat or 0,
        )
    return meal_service.today_summary(db, user_id, targets)


@router.get("/meals/{user_id}/week", response_model=List[DailyTotal])
def get_week_totals(user_id: str, db: Session = Depends(get_db_read)):
    return meal_service.week_totals(db, user_id)


@router.delete("/meals/{meal_id}", status_code=204)
def delete_meal(meal_id: int, db: Session = Depends(get_db_write)):
    meal_service.delete_meal(db, meal_id)
    return Response(status_code=204)
