"""Tests for the application-state reducers."""

from datetime import date

from schemas import MealLogResponse, MealPlanEntry, UserProfile
from services import app_state
from services.app_state import AppState


def _meal(meal_id, created_at="2024-05-08T09:00:00", calories=300):
    return MealLogResponse(
        id=meal_id, user_id="u1", name=f"meal-{meal_id}", total_calories=calories,
        total_protein=10, total_carbs=20, total_fat=5, meal_type="lunch", created_at=created_at,
    )


def _entry(name="Menemen"):
    return MealPlanEntry(id="x1", name=name, calories=400)


def test_set_user_marks_authenticated():
    state = AppState()
    new_state = app_state.set_user(state, "u1", UserProfile(name="Ali"))
    assert new_state.is_authenticated
    assert not state.is_authenticated


def test_meal_reducers_do_not_mutate_input():
    state = app_state.add_meal(AppState(), _meal(1))
    state2 = app_state.add_meal(state, _meal(2))
    updated = app_state.update_meal(state2, 2, {"name": "Çorba"})
    removed = app_state.delete_meal(updated, 1)

    assert [m.id for m in state.meals] == [1]
    assert state2.meals[1].name == "meal-2"
    assert updated.meals[1].name == "Çorba"
    assert [m.id for m in removed.meals] == [2]


def test_add_plan_meal_starts_draft_plan():
    state = app_state.add_plan_meal(AppState(user_id="u1"), "pazartesi", "breakfast", _entry())
    plan = state.current_plan
    assert state.is_editing_plan
    assert plan.id == 0
    assert plan.user_id == "u1"
    assert plan.daily_calories == 2000
    assert len(plan.weekly_plan) == 7
    assert plan.weekly_plan["pazartesi"].breakfast[0].name == "Menemen"


def test_update_and_remove_plan_meal_by_index():
    state = app_state.create_new_plan(AppState(), name="Benim Planım")
    state = app_state.add_plan_meal(state, "sali", "lunch", _entry("A"))
    state = app_state.add_plan_meal(state, "sali", "lunch", _entry("B"))

    updated = app_state.update_plan_meal(state, "sali", "lunch", 1, {"calories": 250})
    assert updated.current_plan.weekly_plan["sali"].lunch[1].calories == 250
    assert state.current_plan.weekly_plan["sali"].lunch[1].calories == 400

    removed = app_state.remove_plan_meal(updated, "sali", "lunch", 0)
    assert [e.name for e in removed.current_plan.weekly_plan["sali"].lunch] == ["B"]
    assert removed.current_plan.name == "Benim Planım"


def test_plan_edits_without_plan_are_noops():
    state = AppState()
    assert app_state.update_plan_meal(state, "sali", "lunch", 0, {"name": "x"}) is state
    assert app_state.remove_plan_meal(state, "sali", "lunch", 0) is state


def test_clear_current_plan():
    state = app_state.create_new_plan(AppState())
    cleared = app_state.clear_current_plan(state)
    assert cleared.current_plan is None
    assert not cleared.is_editing_plan


def test_today_totals_filter_by_date():
    state = AppState(meals=[
        _meal(1, "2024-05-08T08:00:00", 300),
        _meal(2, "2024-05-08T20:00:00", 450),
        _meal(3, "2024-05-07T20:00:00", 999),
    ])
    totals = app_state.today_totals(state, today=date(2024, 5, 8))
    assert totals.total_calories == 750
    assert totals.meal_count == 2
    assert totals.date == "2024-05-08"
