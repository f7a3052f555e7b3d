"""Meal plan API router.

Plan generation (stateless) and personalised plans stored per user.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.logger import get_logger
from database.deps import get_db_read, get_db_write
from schemas import DayPlan, DietPlanResponse, GeneratedMealPlan, MealPlanRequest, UserProfile
from services.ai_meal_plan import AIMealPlanService, ai_meal_plan_service
from services.plan_converter import coerce_generated_plan
from services.plan_service import local_weekday_key, plan_service, to_response

logger = get_logger("api.meal_plans")
router = APIRouter(prefix="/api", tags=["meal-plans"])


def get_meal_plan_generator() -> AIMealPlanService:
    """Generator used by the plan endpoints; overridden in tests."""
    return ai_meal_plan_service


@router.post("/meal-plans/generate", response_model=GeneratedMealPlan)
def generate_meal_plan(payload: MealPlanRequest, generator: AIMealPlanService = Depends(get_meal_plan_generator)):
    """Generate a plan keyed by English day names without storing it.

    The model output (or the offline fallback) is coerced so every field of
    the response is present.
    """
    logger.info("Generating %s-day plan for goal %s", payload.duration, payload.goal)
    raw = generator.generate_meal_plan(payload)
    return coerce_generated_plan(raw, fallback_goal=payload.goal, fallback_duration=payload.duration)


@router.post("/plans/personalized/{user_id}", response_model=DietPlanResponse, status_code=201)
def create_personalized_plan(
    user_id: str,
    profile: Optional[UserProfile] = None,
    db: Session = Depends(get_db_write),
    generator: AIMealPlanService = Depends(get_meal_plan_generator),
):
    """Generate a 7-day plan for the user and store it as their active plan."""
    plan = plan_service.generate_personalized_plan(db, user_id, profile, generator=generator)
    return to_response(plan)


@router.get("/plans/active/{user_id}", response_model=DietPlanResponse)
def get_active_plan(user_id: str, db: Session = Depends(get_db_read)):
    return to_response(plan_service.get_active_plan(db, user_id))


@router.get("/plans/{plan_id}/today", response_model=DayPlan)
def get_today_plan(plan_id: int, db: Session = Depends(get_db_read)):
    """Today's meals from the plan, looked up by the local weekday key.

    Raises:
        NotFoundError: Unknown plan, or the plan has no entry for today.
    """
    plan = plan_service.get_plan(db, plan_id)
    day_plan = plan_service.get_today_meals(plan)
    if day_plan is None:
        raise NotFoundError(f"DietPlan {plan_id} day", local_weekday_key(date.today()))
    return day_plan
