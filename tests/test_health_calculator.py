"""Tests for the health metric formulas."""

import pytest

from schemas import UserProfile
from services.health_calculator import (
    MACRO_RATIOS,
    MEAL_PLAN_MACRO_RATIOS,
    DEFAULT_MACRO_RATIOS,
    health_calculator,
    macros_from_ratios,
    round_half_up,
)


def test_round_half_up_does_not_use_bankers_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(1642.5) == 1643
    assert round_half_up(0.49) == 0


@pytest.mark.parametrize("weight,height,age", [(70, 170, 25), (55.5, 160, 41), (120, 195, 63)])
def test_bmr_male_female_differ_by_166(weight, height, age):
    male = health_calculator.calculate_bmr(weight, height, age, "male")
    female = health_calculator.calculate_bmr(weight, height, age, "female")
    assert male - female == 166


def test_bmr_reference_profile():
    """10*70 + 6.25*170 - 5*25 + 5 = 1642.5, rounded half-up."""
    assert health_calculator.calculate_bmr(70, 170, 25, "male") == 1643


def test_bmr_missing_or_invalid_inputs_use_defaults():
    expected = health_calculator.calculate_bmr(70, 170, 25, "male")
    assert health_calculator.calculate_bmr() == expected
    assert health_calculator.calculate_bmr("abc", 0, -3, None) == expected
    assert health_calculator.calculate_bmr(70, 170, 25, "other") == expected


@pytest.mark.parametrize("bmr", [0, 1, 1643, 1500.5, 987654])
def test_tdee_moderate_is_rounded_bmr_times_155(bmr):
    assert health_calculator.calculate_tdee(bmr, "moderate") == round_half_up(bmr * 1.55)


def test_tdee_unknown_activity_counts_as_moderate():
    assert health_calculator.calculate_tdee(1000, "couch") == 1550
    assert health_calculator.calculate_tdee(1000, "low") == 1200
    assert health_calculator.calculate_tdee(1000, "high") == 1725


def test_tdee_non_numeric_bmr_is_zero():
    assert health_calculator.calculate_tdee("n/a", "high") == 0


def test_daily_calorie_goal_ratio_policy():
    assert health_calculator.calculate_daily_calorie_goal(2000, "weight_loss") == 1600
    assert health_calculator.calculate_daily_calorie_goal(2000, "weight_gain") == 2200
    assert health_calculator.calculate_daily_calorie_goal(2000, "muscle_gain") == 2300
    assert health_calculator.calculate_daily_calorie_goal(2000, "maintenance") == 2000
    assert health_calculator.calculate_daily_calorie_goal(2000, "unknown") == 2000


def test_flat_offset_policy_differs_from_ratio_policy():
    assert health_calculator.adjust_calories_for_goal(1643, "weight_loss") == 1243
    assert health_calculator.adjust_calories_for_goal(1643, "weight_gain") == 1943
    assert health_calculator.adjust_calories_for_goal(1643, "muscle_gain") == 1943
    assert health_calculator.adjust_calories_for_goal(1643, "maintenance") == 1643


def test_bmi_category_boundaries():
    assert health_calculator.get_bmi_category(18.4) == "Underweight"
    assert health_calculator.get_bmi_category(18.5) == "Normal"
    assert health_calculator.get_bmi_category(24.9) == "Normal"
    assert health_calculator.get_bmi_category(25.0) == "Overweight"
    assert health_calculator.get_bmi_category(30) == "Obese"


def test_bmi_has_one_decimal():
    assert health_calculator.calculate_bmi(70, 170) == 24.2
    assert health_calculator.get_bmi_category_label("Overweight") == "Fazla Kilolu"


def test_macro_goals_per_goal():
    assert health_calculator.calculate_macro_goals(2000, "weight_loss") == {"protein": 150, "carbs": 200, "fat": 67}
    assert health_calculator.calculate_macro_goals(2000, "maintenance") == {"protein": 125, "carbs": 250, "fat": 56}


@pytest.mark.parametrize("calories", [0, 1, 999, 1643, 3500.7])
def test_macros_are_non_negative_ints_for_both_tables(calories):
    rows = list(MACRO_RATIOS.values()) + [DEFAULT_MACRO_RATIOS] + list(MEAL_PLAN_MACRO_RATIOS.values())
    for ratios in rows:
        for grams in macros_from_ratios(calories, ratios).values():
            assert isinstance(grams, int)
            assert grams >= 0


def test_macro_ratios_for_goal_returns_copy():
    ratios = health_calculator.get_macro_ratios_for_goal("maintenance")
    ratios["protein"] = 1.0
    assert MEAL_PLAN_MACRO_RATIOS["maintenance"]["protein"] == 0.25


def test_water_and_ideal_weight():
    assert health_calculator.calculate_water_intake(70, "high") == 2800
    assert health_calculator.calculate_ideal_weight_range(170) == {"min": 53, "max": 72}


def test_all_metrics_reference_profile():
    """Maintenance: daily goal equals TDEE."""
    profile = UserProfile(weight=70, height=170, age=25, gender="male", activity_level="moderate")
    metrics = health_calculator.calculate_all_health_metrics(profile, "maintenance")
    assert metrics.bmr == 1643
    assert metrics.tdee == round_half_up(1643 * 1.55)
    assert metrics.daily_calorie_goal == metrics.tdee
    assert metrics.bmi_category == "Normal"


def test_all_metrics_accepts_camel_case_dict():
    metrics = health_calculator.calculate_all_health_metrics({"weight": 80, "activityLevel": "high", "goal": "weight_loss"})
    assert metrics.tdee == round_half_up(health_calculator.calculate_bmr(80) * 1.725)
    assert metrics.daily_calorie_goal == round_half_up(metrics.tdee * 0.8)


def test_overflowing_inputs_do_not_raise():
    assert round_half_up(float("inf")) == 0
    assert health_calculator.calculate_bmr(1e308, 170, 25, "male") == 0
    assert health_calculator.calculate_tdee(1e308, "high") == 0
    metrics = health_calculator.calculate_all_health_metrics(UserProfile(weight=1e308))
    assert metrics.bmr == 0
    assert metrics.bmi_category == "Underweight"
