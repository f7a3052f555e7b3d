"""Tests for plan-meal completion tracking."""

from datetime import date, datetime

import pytest

from core.exceptions import NotFoundError
from core.repository import DietPlanRepository
from database.models import DietPlan
from schemas import DayPlan, MealPlanEntry
from services.meal_completion import completion_percentage, count_day_meals, meal_completion_service
from services.plan_service import dump_weekly_plan

TODAY = date(2024, 5, 6)  # Monday
NOW = datetime(2024, 5, 6, 8, 30)


def _entry(entry_id, name="Menemen"):
    return MealPlanEntry(id=entry_id, name=name, calories=300)


@pytest.fixture
def plan(db):
    weekly = {
        "pazartesi": DayPlan(
            breakfast=[_entry("b1")],
            lunch=[_entry("l1", "Akdeniz Salatası")],
            dinner=[_entry("d1", "Tavuk Sote")],
            snacks=[_entry("s1", "Hummus ve Sebze")],
        ),
        "sali": DayPlan(breakfast=[_entry("b2")]),
    }
    row = DietPlan(
        user_id="u1", name="Plan", goal="maintenance",
        daily_calories=2000, daily_protein=125, daily_carbs=225, daily_fat=67,
        weekly_plan=dump_weekly_plan(weekly),
    )
    return DietPlanRepository(db).create_active(row)


def test_first_toggle_checks_the_meal(db, plan):
    row = meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "breakfast", "b1", today=TODAY, now=NOW)
    assert row.completed_at == NOW
    assert row.completion_date == TODAY
    assert meal_completion_service.is_meal_completed(db, "u1", plan.id, "pazartesi", "breakfast", "b1", on=TODAY)


def test_second_toggle_unchecks_and_keeps_the_row(db, plan):
    first = meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "breakfast", "b1", today=TODAY, now=NOW)
    second = meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "breakfast", "b1", today=TODAY, now=NOW)
    assert second.id == first.id
    assert second.completed_at is None
    assert not meal_completion_service.is_meal_completed(db, "u1", plan.id, "pazartesi", "breakfast", "b1", on=TODAY)

    third = meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "breakfast", "b1", today=TODAY, now=NOW)
    assert third.completed_at == NOW


def test_unknown_meal_is_not_found(db, plan):
    with pytest.raises(NotFoundError):
        meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "lunch", "b1", today=TODAY)
    with pytest.raises(NotFoundError):
        meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazar", "breakfast", "b1", today=TODAY)


def test_never_toggled_meal_is_not_completed(db, plan):
    assert meal_completion_service.is_meal_completed(db, "u1", plan.id, "pazartesi", "dinner", "d1", on=TODAY) is False


def test_day_completions_and_percentage(db, plan):
    for slot, meal_id in (("breakfast", "b1"), ("lunch", "l1"), ("dinner", "d1")):
        meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", slot, meal_id, today=TODAY, now=NOW)
    meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "dinner", "d1", today=TODAY, now=NOW)

    completions = meal_completion_service.get_day_completions(db, "u1", plan.id, "pazartesi", on=TODAY)
    assert sorted(c.meal_id for c in completions) == ["b1", "l1"]
    assert meal_completion_service.get_daily_completion_percentage(db, "u1", plan.id, "pazartesi", 4, on=TODAY) == 50

    summary = meal_completion_service.day_summary(db, plan, "u1", "pazartesi", on=TODAY)
    assert summary.total_meals == 4
    assert summary.percentage == 50
    assert all(c.completed for c in summary.completions)


def test_completions_are_per_user_and_date(db, plan):
    meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "breakfast", "b1", today=TODAY, now=NOW)
    assert meal_completion_service.get_day_completions(db, "u2", plan.id, "pazartesi", on=TODAY) == []
    assert meal_completion_service.get_day_completions(db, "u1", plan.id, "pazartesi", on=date(2024, 5, 13)) == []


def test_weekly_stats_group_by_date(db, plan):
    meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "breakfast", "b1", today=date(2024, 5, 6), now=NOW)
    meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "lunch", "l1", today=date(2024, 5, 6), now=NOW)
    meal_completion_service.toggle_meal_completion(db, plan, "u1", "sali", "breakfast", "b2", today=date(2024, 5, 7), now=NOW)
    meal_completion_service.toggle_meal_completion(db, plan, "u1", "pazartesi", "breakfast", "b1", today=date(2024, 4, 29), now=NOW)

    stats = meal_completion_service.get_weekly_completion_stats(db, "u1", plan.id, today=date(2024, 5, 6))
    assert stats == {"2024-04-29": 1, "2024-05-06": 2}

    stats = meal_completion_service.get_weekly_completion_stats(db, "u1", plan.id, today=date(2024, 5, 7))
    assert stats == {"2024-05-06": 2, "2024-05-07": 1}


def test_count_day_meals_and_percentage_helpers(plan):
    assert count_day_meals(plan, "pazartesi") == 4
    assert count_day_meals(plan, "sali") == 1
    assert count_day_meals(plan, "pazar") == 0
    assert completion_percentage(1, 3) == pytest.approx(33.333, rel=1e-3)
    assert completion_percentage(2, 0) == 0
