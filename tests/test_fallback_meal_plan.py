"""Tests for the offline meal-plan synthesizer."""

import random

import pytest

from data.meal_options import LUNCH_OPTIONS, MEAL_OPTIONS, SAFE_OPTION_INDEX
from schemas import MealPlanRequest, UserProfile
from schemas.meal_plan_schema import SLOTS
from services.fallback_meal_plan import FallbackMealPlanSynthesizer
from services.plan_converter import GENERATION_DAY_KEYS


def _request(**kwargs):
    profile = kwargs.pop("profile", UserProfile(weight=70, height=170, age=25, gender="male"))
    return MealPlanRequest(user_profile=profile, **kwargs)


def _names(plan):
    return {
        day: {slot: [e.name for e in getattr(day_plan, slot)] for slot in SLOTS}
        for day, day_plan in plan.weekly_plan.items()
    }


def test_plan_has_every_day_and_slot():
    plan = FallbackMealPlanSynthesizer(rng=random.Random(1)).synthesize(_request(goal="maintenance"))
    assert list(plan.weekly_plan) == list(GENERATION_DAY_KEYS)
    for day_plan in plan.weekly_plan.values():
        for slot in SLOTS:
            assert len(getattr(day_plan, slot)) == 1


def test_daily_targets_use_flat_offset_on_mifflin_bmr():
    plan = FallbackMealPlanSynthesizer().synthesize(_request(goal="weight_loss"))
    assert plan.daily_calories == 1643 - 400
    # 30/40/30 split
    assert plan.daily_protein == 93
    assert plan.daily_carbs == 124
    assert plan.daily_fat == 41
    assert plan.name == "Sağlıklı Kilo Verme Planı"


def test_duration_limits_days():
    plan = FallbackMealPlanSynthesizer().synthesize(_request(duration=3))
    assert list(plan.weekly_plan) == ["monday", "tuesday", "wednesday"]
    assert plan.duration == 3


@pytest.mark.parametrize("daily", [1, 999, 1243, 1643, 2547, 4001])
def test_slot_budgets_sum_close_to_daily(daily):
    budgets = FallbackMealPlanSynthesizer().slot_calories(daily)
    assert abs(sum(budgets.values()) - daily) <= 4


def test_entry_macros_scale_with_slot_calories():
    plan = FallbackMealPlanSynthesizer().synthesize(_request(goal="maintenance"))
    lunch = plan.weekly_plan["monday"].lunch[0]
    assert lunch.calories == 575  # 1643 * 0.35
    assert lunch.protein == 36
    assert lunch.carbs == 65
    assert lunch.fat == 19


def test_allergy_excluding_everything_uses_safe_option():
    synthesizer = FallbackMealPlanSynthesizer()
    allergies = [tag for option in LUNCH_OPTIONS for tag in option["allergens"]]
    options = synthesizer.filter_options("lunch", allergies=allergies)
    assert options == [LUNCH_OPTIONS[SAFE_OPTION_INDEX["lunch"]]]

    plan = synthesizer.synthesize(_request(allergies=allergies))
    for day_plan in plan.weekly_plan.values():
        assert len(day_plan.lunch) == 1
        assert day_plan.lunch[0].name == LUNCH_OPTIONS[SAFE_OPTION_INDEX["lunch"]]["name"]


def test_allergy_filter_matches_allergen_tags():
    options = FallbackMealPlanSynthesizer().filter_options("lunch", allergies=["Balık"])
    names = [o["name"] for o in options]
    assert "Balık Izgara" not in names
    assert "Somon Bowl" not in names
    assert "Akdeniz Salatası" in names


def test_allergy_filter_ignores_ingredient_text():
    # Smoothie Bowl uses almond milk but is tagged only with "fındık".
    options = FallbackMealPlanSynthesizer().filter_options("breakfast", allergies=["badem"])
    names = [o["name"] for o in options]
    assert "Smoothie Bowl" in names
    assert len(options) == len(MEAL_OPTIONS["breakfast"])


def test_dislikes_are_not_treated_as_allergies():
    profile = UserProfile(weight=70, height=170, age=25, gender="male", dislikes=["et"])
    plan = FallbackMealPlanSynthesizer(rng=random.Random(2)).synthesize(_request(profile=profile))
    breakfasts = {day["breakfast"][0] for day in _names(plan).values()}
    assert {"Protein Kahvaltısı", "Menemen"} <= breakfasts


def test_profile_allergies_are_excluded():
    profile = UserProfile(weight=70, height=170, age=25, gender="male", allergies=["yumurta"])
    plan = FallbackMealPlanSynthesizer().synthesize(_request(profile=profile))
    breakfasts = {day["breakfast"][0] for day in _names(plan).values()}
    assert "Menemen" not in breakfasts
    assert "Protein Kahvaltısı" not in breakfasts


def test_blank_allergies_are_ignored():
    options = FallbackMealPlanSynthesizer().filter_options("breakfast", allergies=["", "  "])
    assert len(options) == len(MEAL_OPTIONS["breakfast"])


def test_vegetarian_restriction_removes_meat_and_fish():
    options = FallbackMealPlanSynthesizer().filter_options("dinner", restrictions=["vegetarian"])
    names = [o["name"] for o in options]
    assert "Tavuk Sote" not in names
    assert "Izgara Et" not in names
    assert "Vegan Curry" in names


def test_vegan_restriction_keeps_only_plant_based_breakfasts():
    options = FallbackMealPlanSynthesizer().filter_options("breakfast", restrictions=["vegan"])
    assert {o["name"] for o in options} == {"Smoothie Bowl", "Vegan Protein Bowl"}


def test_preferences_narrow_options():
    options = FallbackMealPlanSynthesizer().filter_options("breakfast", preferences=["turkish"])
    assert [o["name"] for o in options] == ["Menemen"]


def test_selection_is_deterministic_except_ids():
    first = FallbackMealPlanSynthesizer(rng=random.Random(1)).synthesize(_request(goal="muscle_gain"))
    second = FallbackMealPlanSynthesizer(rng=random.Random(2)).synthesize(_request(goal="muscle_gain"))
    assert _names(first) == _names(second)
    assert first.weekly_plan["monday"].breakfast[0].id != second.weekly_plan["monday"].breakfast[0].id


def test_seeded_rng_reproduces_ids():
    first = FallbackMealPlanSynthesizer(rng=random.Random(5)).synthesize(_request())
    second = FallbackMealPlanSynthesizer(rng=random.Random(5)).synthesize(_request())
    assert first == second
    entry_id = first.weekly_plan["friday"].snacks[0].id
    assert len(entry_id) == 9
    assert entry_id.isalnum() and entry_id == entry_id.lower()
