"""Personalised diet plans: generation, storage and day lookup.

Plans are generated with English day keys and stored with Turkish ones
(see `services.plan_converter`). Storing a new plan for a user makes it
the only active one.
"""

import json
import random
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import DietPlanRepository
from database.models import DietPlan
from schemas.meal_plan_schema import SLOTS, DailyTargets, DayPlan, DietPlanResponse, MealPlanRequest
from schemas.profile_schema import UserProfile
from services.ai_meal_plan import AIMealPlanService, ai_meal_plan_service
from services.health_calculator import (
    DEFAULT_ACTIVITY_LEVEL,
    DEFAULT_AGE,
    DEFAULT_GENDER,
    DEFAULT_GOAL,
    DEFAULT_HEIGHT_CM,
    DEFAULT_WEIGHT_KG,
    normalize_goal,
)
from services.plan_converter import LOCAL_DAY_KEYS, coerce_generated_plan, localize_weekly_plan

logger = get_logger("services.plan_service")

PLAN_DURATION_DAYS = 7


def with_profile_defaults(profile: Optional[UserProfile]) -> UserProfile:
    """Copy of `profile` with every missing physiological field defaulted."""
    profile = profile or UserProfile()
    defaults = {
        "age": DEFAULT_AGE,
        "weight": DEFAULT_WEIGHT_KG,
        "height": DEFAULT_HEIGHT_CM,
        "gender": DEFAULT_GENDER,
        "activity_level": DEFAULT_ACTIVITY_LEVEL,
        "goal": DEFAULT_GOAL,
    }
    update = {field: value for field, value in defaults.items() if getattr(profile, field) is None}
    return profile.model_copy(update=update)


def local_weekday_key(day: date) -> str:
    """Stored plan key for the weekday of `day` (Monday is "pazartesi")."""
    return LOCAL_DAY_KEYS[day.weekday()]


def load_weekly_plan(plan: DietPlan) -> Dict[str, DayPlan]:
    raw = json.loads(plan.weekly_plan or "{}")
    return {day: DayPlan(**day_plan) for day, day_plan in raw.items()}


def dump_weekly_plan(weekly_plan: Dict[str, DayPlan]) -> str:
    return json.dumps({day: dp.model_dump() for day, dp in weekly_plan.items()}, ensure_ascii=False)


class PlanService:
    """Stores and serves personalised plans."""

    def generate_personalized_plan(
        self,
        db: Session,
        user_id: str,
        profile: Optional[UserProfile] = None,
        generator: Optional[AIMealPlanService] = None,
        rng: Optional[random.Random] = None,
    ) -> DietPlan:
        """Generate a 7-day plan for the user and store it as the active plan.

        Args:
            db: Write session.
            user_id: Owner of the plan.
            profile: User profile; missing fields take the usual defaults.
            generator: Meal-plan generator; defaults to the module singleton.
            rng: Random source for ids the generator left out.

        Returns:
            The persisted `DietPlan` row.
        """
        profile = with_profile_defaults(profile)
        generator = generator or ai_meal_plan_service
        request = MealPlanRequest(
            user_profile=profile,
            goal=normalize_goal(profile.goal),
            duration=PLAN_DURATION_DAYS,
            preferences=[],
            allergies=list(profile.allergies),
            restrictions=list(profile.dislikes),
        )

        raw = generator.generate_meal_plan(request)
        generated = coerce_generated_plan(raw, fallback_goal=request.goal, fallback_duration=PLAN_DURATION_DAYS, rng=rng)
        weekly = localize_weekly_plan(generated.weekly_plan, rng=rng)

        plan = DietPlan(
            user_id=user_id,
            name=generated.name,
            goal=generated.goal,
            daily_calories=generated.daily_calories,
            daily_protein=generated.daily_protein,
            daily_carbs=generated.daily_carbs,
            daily_fat=generated.daily_fat,
            weekly_plan=dump_weekly_plan(weekly),
        )
        plan = DietPlanRepository(db).create_active(plan)
        logger.info("Plan %s stored for user %s with %s days", plan.id, user_id, len(weekly))
        return plan

    def get_active_plan(self, db: Session, user_id: str) -> DietPlan:
        plan = DietPlanRepository(db).get_active(user_id)
        if plan is None:
            raise NotFoundError("Active DietPlan for user", user_id)
        return plan

    def get_plan(self, db: Session, plan_id: int) -> DietPlan:
        plan = DietPlanRepository(db).get_by_id(plan_id)
        if plan is None:
            raise NotFoundError("DietPlan", plan_id)
        return plan

    def get_day_meals(self, plan: DietPlan, day_key: str) -> Optional[DayPlan]:
        return load_weekly_plan(plan).get(day_key)

    def get_today_meals(self, plan: DietPlan, today: Optional[date] = None) -> Optional[DayPlan]:
        """Day plan for today's weekday, or None when the plan has no such day."""
        day_key = local_weekday_key(today or date.today())
        day_plan = self.get_day_meals(plan, day_key)
        logger.debug("Today's key %s found in plan %s: %s", day_key, plan.id, day_plan is not None)
        return day_plan

    def calculate_daily_targets(self, plan: DietPlan) -> DailyTargets:
        return DailyTargets(
            calories=plan.daily_calories,
            protein=plan.daily_protein,
            carbs=plan.daily_carbs,
            fat=plan.daily_fat,
        )

    def calculate_plan_totals(self, day_plan: DayPlan) -> DailyTargets:
        """Sum of every entry across the four slots of a day."""
        entries: List = [e for slot in SLOTS for e in getattr(day_plan, slot)]
        return DailyTargets(
            calories=sum(e.calories for e in entries),
            protein=sum(e.protein for e in entries),
            carbs=sum(e.carbs for e in entries),
            fat=sum(e.fat for e in entries),
        )


def to_response(plan: DietPlan) -> DietPlanResponse:
    return DietPlanResponse(
        id=plan.id,
        user_id=plan.user_id,
        name=plan.name,
        goal=normalize_goal(plan.goal),
        daily_calories=plan.daily_calories,
        daily_protein=plan.daily_protein,
        daily_carbs=plan.daily_carbs,
        daily_fat=plan.daily_fat,
        weekly_plan=load_weekly_plan(plan),
        is_active=bool(plan.is_active),
        created_at=plan.created_at.isoformat() if plan.created_at else "",
        updated_at=plan.updated_at.isoformat() if plan.updated_at else None,
    )


# export singleton
plan_service = PlanService()
