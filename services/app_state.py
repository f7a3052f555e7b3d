"""Client-side application state with pure reducer functions.

`AppState` holds what a session is working on: the signed-in user, the
meals logged so far and the plan being edited. Every reducer takes a
state and returns a new one; inputs are never mutated.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from core.logger import get_logger
from schemas.meal_plan_schema import DayPlan, DietPlanResponse, MealPlanEntry
from schemas.meal_schema import DailyTotal, MealLogResponse
from schemas.profile_schema import UserProfile
from services.meal_aggregator import calculate_daily_totals
from services.plan_converter import LOCAL_DAY_KEYS

logger = get_logger("services.app_state")

DRAFT_PLAN_DEFAULTS = {
    "name": "Yeni Plan",
    "goal": "maintenance",
    "daily_calories": 2000,
    "daily_protein": 150,
    "daily_carbs": 250,
    "daily_fat": 65,
}


class AppState(BaseModel):
    user_id: Optional[str] = None
    user: Optional[UserProfile] = None
    meals: List[MealLogResponse] = Field(default_factory=list)
    current_plan: Optional[DietPlanResponse] = None
    is_editing_plan: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


def set_user(state: AppState, user_id: Optional[str], user: Optional[UserProfile] = None) -> AppState:
    return state.model_copy(update={"user_id": user_id, "user": user})


def add_meal(state: AppState, meal: MealLogResponse) -> AppState:
    return state.model_copy(update={"meals": state.meals + [meal]})


def update_meal(state: AppState, meal_id: int, changes: Dict[str, Any]) -> AppState:
    meals = [m.model_copy(update=changes) if m.id == meal_id else m for m in state.meals]
    return state.model_copy(update={"meals": meals})


def delete_meal(state: AppState, meal_id: int) -> AppState:
    return state.model_copy(update={"meals": [m for m in state.meals if m.id != meal_id]})


def empty_weekly_plan() -> Dict[str, DayPlan]:
    return {day: DayPlan() for day in LOCAL_DAY_KEYS}


def new_draft_plan(user_id: Optional[str] = None, now: Optional[datetime] = None, **overrides) -> DietPlanResponse:
    """Unsaved plan (id 0) with an empty week and default targets."""
    stamp = (now or datetime.now()).isoformat()
    values = dict(DRAFT_PLAN_DEFAULTS)
    values.update({k: v for k, v in overrides.items() if v is not None})
    return DietPlanResponse(
        id=0,
        user_id=user_id or "",
        weekly_plan=empty_weekly_plan(),
        is_active=True,
        created_at=stamp,
        updated_at=stamp,
        **values,
    )


def create_new_plan(state: AppState, now: Optional[datetime] = None, **overrides) -> AppState:
    plan = new_draft_plan(state.user_id, now=now, **overrides)
    return state.model_copy(update={"current_plan": plan, "is_editing_plan": True})


def set_current_plan(state: AppState, plan: Optional[DietPlanResponse]) -> AppState:
    return state.model_copy(update={"current_plan": plan})


def clear_current_plan(state: AppState) -> AppState:
    return state.model_copy(update={"current_plan": None, "is_editing_plan": False})


def _edit_slot(state: AppState, day: str, slot: str, edit) -> AppState:
    """Apply `edit(entries) -> entries` to one slot of a copy of the current plan."""
    if state.current_plan is None or day not in state.current_plan.weekly_plan:
        return state
    plan = state.current_plan.model_copy(deep=True)
    day_plan = plan.weekly_plan[day]
    setattr(day_plan, slot, edit(list(getattr(day_plan, slot))))
    plan.updated_at = datetime.now().isoformat()
    return state.model_copy(update={"current_plan": plan})


def add_plan_meal(state: AppState, day: str, slot: str, entry: MealPlanEntry) -> AppState:
    """Append an entry; starts a draft plan when none is being edited."""
    if state.current_plan is None:
        logger.debug("No plan in progress, starting a draft")
        state = create_new_plan(state)
    if day not in state.current_plan.weekly_plan:
        plan = state.current_plan.model_copy(deep=True)
        plan.weekly_plan[day] = DayPlan()
        state = state.model_copy(update={"current_plan": plan})
    state = _edit_slot(state, day, slot, lambda entries: entries + [entry])
    return state.model_copy(update={"is_editing_plan": True})


def update_plan_meal(state: AppState, day: str, slot: str, index: int, changes: Dict[str, Any]) -> AppState:
    def edit(entries):
        return [e.model_copy(update=changes) if i == index else e for i, e in enumerate(entries)]
    return _edit_slot(state, day, slot, edit)


def remove_plan_meal(state: AppState, day: str, slot: str, index: int) -> AppState:
    return _edit_slot(state, day, slot, lambda entries: [e for i, e in enumerate(entries) if i != index])


def today_totals(state: AppState, today: Optional[date] = None) -> DailyTotal:
    """Totals over the logged meals whose timestamp falls on `today`."""
    day = (today or date.today()).isoformat()
    meals = [m for m in state.meals if m.created_at[:10] == day]
    return calculate_daily_totals(meals).model_copy(update={"date": day})
