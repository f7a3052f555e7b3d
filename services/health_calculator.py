"""Health metric formulas.

BMR, TDEE, BMI, calorie goals, macro targets, water and ideal weight. Every
function is pure and tolerant of partially filled profiles: missing or
unusable physiological inputs fall back to the defaults below instead of
raising, because these are called with in-progress form input.

All rounding is half-up (``floor(x + 0.5)``), not Python's banker's rounding.
"""

import math
from typing import Any, Dict, Optional

from core.logger import get_logger
from schemas.profile_schema import HealthMetrics

logger = get_logger("services.health_calculator")

DEFAULT_AGE = 25
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_GENDER = "male"
DEFAULT_ACTIVITY_LEVEL = "moderate"
DEFAULT_GOAL = "maintenance"

# Shared by every calorie computation in the service.
ACTIVITY_MULTIPLIERS = {
    "low": 1.2,
    "moderate": 1.55,
    "high": 1.725,
}

WATER_ML_PER_KG = {
    "low": 30,
    "moderate": 35,
    "high": 40,
}

KCAL_PER_GRAM = {"protein": 4, "carbs": 4, "fat": 9}

# Daily targets shown on the health screen (maintenance and weight_gain share the default row).
MACRO_RATIOS = {
    "muscle_gain": {"protein": 0.30, "carbs": 0.45, "fat": 0.25},
    "weight_loss": {"protein": 0.30, "carbs": 0.40, "fat": 0.30},
}
DEFAULT_MACRO_RATIOS = {"protein": 0.25, "carbs": 0.50, "fat": 0.25}

# Meal-plan generation uses its own table; rows differ for weight_gain and maintenance.
MEAL_PLAN_MACRO_RATIOS = {
    "weight_loss": {"protein": 0.30, "carbs": 0.40, "fat": 0.30},
    "muscle_gain": {"protein": 0.30, "carbs": 0.45, "fat": 0.25},
    "weight_gain": {"protein": 0.25, "carbs": 0.50, "fat": 0.25},
    "maintenance": {"protein": 0.25, "carbs": 0.45, "fat": 0.30},
}

GOAL_CALORIE_FACTORS = {
    "weight_loss": 0.8,
    "weight_gain": 1.1,
    "muscle_gain": 1.15,
}

GOAL_CALORIE_OFFSETS = {
    "weight_loss": -400,
    "weight_gain": 300,
    "muscle_gain": 300,
}

BMI_CATEGORY_LABELS = {
    "Underweight": "Zayıf",
    "Normal": "Normal",
    "Overweight": "Fazla Kilolu",
    "Obese": "Obez",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up.

    Non-finite values (products that overflowed) round to 0.
    """
    if not math.isfinite(value):
        logger.debug("Non-finite value %s rounded to 0", value)
        return 0
    return int(math.floor(value + 0.5))


def to_number(value: Any, default: float = 0) -> float:
    """Coerce user input to a finite float, or return `default`."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def _positive_or(value: Any, default: float) -> float:
    number = to_number(value, default)
    return number if number > 0 else default


def normalize_gender(gender: Any) -> str:
    return "female" if str(gender or "").strip().lower() == "female" else "male"


def normalize_activity_level(activity_level: Any) -> str:
    level = str(activity_level or "").strip().lower()
    return level if level in ACTIVITY_MULTIPLIERS else DEFAULT_ACTIVITY_LEVEL


def normalize_goal(goal: Any) -> str:
    value = str(goal or "").strip().lower()
    return value if value in MEAL_PLAN_MACRO_RATIOS else DEFAULT_GOAL


def profile_value(profile: Any, field: str, default: Any = None) -> Any:
    """Read a field from a `UserProfile`, a plain dict or None."""
    if profile is None:
        return default
    if isinstance(profile, dict):
        if field in profile:
            return profile[field]
        camel = field.split("_")[0] + "".join(part.title() for part in field.split("_")[1:])
        return profile.get(camel, default)
    value = getattr(profile, field, None)
    return default if value is None else value


def macros_from_ratios(calories: Any, ratios: Dict[str, float]) -> Dict[str, int]:
    """Convert a calorie budget into gram targets for the given ratio row."""
    kcal = max(to_number(calories, 0), 0)
    return {
        macro: round_half_up(kcal * ratios[macro] / KCAL_PER_GRAM[macro])
        for macro in ("protein", "carbs", "fat")
    }


class HealthCalculator:
    """Class-based health calculator used across the app."""

    def calculate_bmr(self, weight=None, height=None, age=None, gender=None) -> int:
        """Mifflin-St Jeor BMR in kcal/day.

        ``10*weight + 6.25*height - 5*age`` plus 5 for men, minus 161 for women.
        """
        weight = _positive_or(weight, DEFAULT_WEIGHT_KG)
        height = _positive_or(height, DEFAULT_HEIGHT_CM)
        age = _positive_or(age, DEFAULT_AGE)
        base = 10 * weight + 6.25 * height - 5 * age
        if normalize_gender(gender) == "male":
            return round_half_up(base + 5)
        return round_half_up(base - 161)

    def calculate_bmr_harris_benedict(self, weight=None, height=None, age=None, gender=None) -> int:
        """Revised Harris-Benedict BMR; only the AI prompt path uses it."""
        weight = _positive_or(weight, DEFAULT_WEIGHT_KG)
        height = _positive_or(height, DEFAULT_HEIGHT_CM)
        age = _positive_or(age, DEFAULT_AGE)
        if normalize_gender(gender) == "male":
            return round_half_up(88.362 + 13.397 * weight + 4.799 * height - 5.677 * age)
        return round_half_up(447.593 + 9.247 * weight + 3.098 * height - 4.330 * age)

    def calculate_tdee(self, bmr, activity_level=None) -> int:
        multiplier = ACTIVITY_MULTIPLIERS[normalize_activity_level(activity_level)]
        val = round_half_up(to_number(bmr, 0) * multiplier)
        logger.debug("TDEE calculated: %s", val)
        return val

    def calculate_daily_calorie_goal(self, tdee, goal=None) -> int:
        """Ratio-based goal adjustment: -20% loss, +10% gain, +15% muscle."""
        tdee = to_number(tdee, 0)
        factor = GOAL_CALORIE_FACTORS.get(normalize_goal(goal))
        if factor is None:
            return round_half_up(tdee)
        val = round_half_up(tdee * factor)
        logger.debug("Daily calorie goal for %s: %s", goal, val)
        return val

    def adjust_calories_for_goal(self, bmr, goal=None) -> int:
        """Flat-offset goal adjustment used by meal-plan generation.

        -400 kcal for weight_loss, +300 kcal for weight_gain and muscle_gain,
        unchanged otherwise. Not interchangeable with
        `calculate_daily_calorie_goal`.
        """
        bmr = to_number(bmr, 0)
        offset = GOAL_CALORIE_OFFSETS.get(normalize_goal(goal), 0)
        return round_half_up(bmr + offset)

    def calculate_bmi(self, weight=None, height=None) -> float:
        """BMI with one decimal place."""
        weight = _positive_or(weight, DEFAULT_WEIGHT_KG)
        h_m = _positive_or(height, DEFAULT_HEIGHT_CM) / 100.0
        return round_half_up((weight / (h_m * h_m)) * 10) / 10

    def get_bmi_category(self, bmi) -> str:
        bmi = to_number(bmi, 0)
        if bmi < 18.5:
            return "Underweight"
        if bmi < 25:
            return "Normal"
        if bmi < 30:
            return "Overweight"
        return "Obese"

    def get_bmi_category_label(self, category: str) -> str:
        """Localised display label for a BMI category."""
        return BMI_CATEGORY_LABELS.get(category, category)

    def calculate_macro_goals(self, daily_calories, goal=None) -> Dict[str, int]:
        """Daily macro grams for the health screen."""
        ratios = MACRO_RATIOS.get(normalize_goal(goal), DEFAULT_MACRO_RATIOS)
        macros = macros_from_ratios(daily_calories, ratios)
        logger.debug("Macro goals calculated: %s", macros)
        return macros

    def get_macro_ratios_for_goal(self, goal=None) -> Dict[str, float]:
        """Macro split used when generating meal plans."""
        return dict(MEAL_PLAN_MACRO_RATIOS[normalize_goal(goal)])

    def calculate_water_intake(self, weight=None, activity_level=None) -> int:
        """Daily water target in ml."""
        weight = _positive_or(weight, DEFAULT_WEIGHT_KG)
        return round_half_up(weight * WATER_ML_PER_KG[normalize_activity_level(activity_level)])

    def calculate_ideal_weight_range(self, height=None) -> Dict[str, int]:
        """Weights giving BMI 18.5 and 25.0 at this height."""
        h_m = _positive_or(height, DEFAULT_HEIGHT_CM) / 100.0
        return {
            "min": round_half_up(18.5 * h_m * h_m),
            "max": round_half_up(25.0 * h_m * h_m),
        }

    def calculate_all_health_metrics(self, profile=None, goal: Optional[str] = None) -> HealthMetrics:
        """Compute every derived metric for a profile in one pass.

        Args:
            profile: `UserProfile`, dict or None.
            goal: Overrides the profile goal when given.

        Returns:
            A fresh `HealthMetrics`; nothing is cached.
        """
        weight = profile_value(profile, "weight")
        height = profile_value(profile, "height")
        goal = goal or profile_value(profile, "goal", DEFAULT_GOAL)

        bmr = self.calculate_bmr(weight, height, profile_value(profile, "age"), profile_value(profile, "gender"))
        tdee = self.calculate_tdee(bmr, profile_value(profile, "activity_level"))
        daily = self.calculate_daily_calorie_goal(tdee, goal)
        bmi = self.calculate_bmi(weight, height)
        macros = self.calculate_macro_goals(daily, goal)
        return HealthMetrics(
            bmr=bmr,
            tdee=tdee,
            daily_calorie_goal=daily,
            bmi=bmi,
            bmi_category=self.get_bmi_category(bmi),
            protein_goal=macros["protein"],
            carbs_goal=macros["carbs"],
            fat_goal=macros["fat"],
        )


# export singleton
health_calculator = HealthCalculator()
__all__ = [
    "HealthCalculator",
    "health_calculator",
    "ACTIVITY_MULTIPLIERS",
    "MEAL_PLAN_MACRO_RATIOS",
    "round_half_up",
    "to_number",
    "profile_value",
    "macros_from_ratios",
]
