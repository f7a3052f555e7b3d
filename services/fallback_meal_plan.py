"""Offline meal-plan synthesizer.

Builds a plan from the curated options in `data.meal_options` when the
text model is unavailable. Options are filtered per slot (allergies, then
dietary restrictions, then preferences) and rotated across days. A slot
is never left empty: if filtering removes everything, the slot's safe
vegan option is used.
"""

import random
import re
from typing import Dict, List, Optional

from core.logger import get_logger
from data.meal_options import MEAL_OPTIONS, SAFE_OPTION_INDEX
from schemas.meal_plan_schema import SLOTS, DayPlan, GeneratedMealPlan, MealPlanEntry, MealPlanRequest
from services.health_calculator import (
    health_calculator,
    macros_from_ratios,
    normalize_goal,
    profile_value,
    round_half_up,
)
from services.meal_plan_prompts import SLOT_CALORIE_RATIOS, goal_text
from services.plan_converter import GENERATION_DAY_KEYS, generate_entry_id

logger = get_logger("services.fallback_meal_plan")

# Matched as word prefixes so "et" hits "etli" but not "adet".
MEAT_FISH_KEYWORDS = ("tavuk", "et", "balık", "balığ", "kıyma", "dana", "bonfile", "somon", "levrek")
ANIMAL_PRODUCT_ALLERGENS = ("süt", "yumurta")
GLUTEN_KEYWORDS = ("ekmek", "bulgur")

_WORD = re.compile(r"\w+")


def _clean(values: Optional[List[str]]) -> List[str]:
    return [v.strip().lower() for v in (values or []) if v and v.strip()]


def _merge(*lists: Optional[List[str]]) -> List[str]:
    merged = []
    for values in lists:
        for value in _clean(values):
            if value not in merged:
                merged.append(value)
    return merged


def _words(texts: List[str]) -> List[str]:
    return _WORD.findall(" ".join(texts).lower())


def _has_keyword(words: List[str], keywords) -> bool:
    return any(word.startswith(kw) for word in words for kw in keywords)


class FallbackMealPlanSynthesizer:
    """Deterministic plan builder over the curated option tables.

    Args:
        rng: Random source for entry ids; pass a seeded `random.Random`
            for reproducible output.
        options: Slot -> option list; defaults to `MEAL_OPTIONS`.
    """

    def __init__(self, rng: Optional[random.Random] = None, options: Optional[Dict[str, list]] = None):
        self.rng = rng or random.Random()
        self.options = options or MEAL_OPTIONS

    def contains_allergen(self, option: dict, allergies: List[str]) -> bool:
        """True when any allergy and any allergen tag contain each other. Ingredients are not searched."""
        tags = [a.lower() for a in option.get("allergens", []) if a and a.strip()]
        for allergy in _clean(allergies):
            for tag in tags:
                if allergy in tag or tag in allergy:
                    return True
        return False

    def violates_restriction(self, option: dict, restrictions: List[str]) -> bool:
        tags = [t.lower() for t in option.get("dietary_tags", [])]
        allergens = [a.lower() for a in option.get("allergens", [])]
        words = _words(option.get("ingredients", []) + [option.get("name", "")])
        for restriction in _clean(restrictions):
            if "vegan" in restriction and "vegan" not in tags:
                if any(a in allergens for a in ANIMAL_PRODUCT_ALLERGENS) or _has_keyword(words, MEAT_FISH_KEYWORDS):
                    return True
            if ("vegetarian" in restriction or "vejetaryen" in restriction) and _has_keyword(words, MEAT_FISH_KEYWORDS):
                return True
            if "gluten" in restriction:
                if "gluten" in allergens or _has_keyword(words, GLUTEN_KEYWORDS):
                    return True
        return False

    def matches_preference(self, option: dict, preferences: List[str]) -> bool:
        fields = [t.lower() for t in option.get("dietary_tags", [])]
        fields.append(str(option.get("cuisine", "")).lower())
        fields.append(str(option.get("name", "")).lower())
        return any(pref in field for pref in _clean(preferences) for field in fields)

    def filter_options(
        self,
        slot: str,
        allergies: Optional[List[str]] = None,
        restrictions: Optional[List[str]] = None,
        preferences: Optional[List[str]] = None,
    ) -> List[dict]:
        """Options for `slot` that survive every filter, never empty."""
        options = self.options[slot]
        filtered = [o for o in options if not self.contains_allergen(o, allergies or [])]
        filtered = [o for o in filtered if not self.violates_restriction(o, restrictions or [])]
        if _clean(preferences):
            filtered = [o for o in filtered if self.matches_preference(o, preferences)]
        if not filtered:
            logger.info("No %s option survived filtering; using safe option", slot)
            filtered = [options[SAFE_OPTION_INDEX[slot]]]
        logger.debug("Filtered %s options: %s -> %s", slot, len(options), len(filtered))
        return filtered

    def slot_calories(self, daily_calories: int) -> Dict[str, int]:
        return {slot: round_half_up(daily_calories * SLOT_CALORIE_RATIOS[slot]) for slot in SLOTS}

    def build_entry(self, option: dict, calories: int, ratios: Dict[str, float]) -> MealPlanEntry:
        macros = macros_from_ratios(calories, ratios)
        return MealPlanEntry(
            id=generate_entry_id(self.rng),
            name=option["name"],
            description=option.get("description", ""),
            calories=calories,
            protein=macros["protein"],
            carbs=macros["carbs"],
            fat=macros["fat"],
            ingredients=list(option.get("ingredients", [])),
            instructions=list(option.get("instructions", [])),
        )

    def build_weekly_plan(
        self,
        duration: int,
        daily_calories: int,
        goal: str,
        allergies: Optional[List[str]] = None,
        restrictions: Optional[List[str]] = None,
        preferences: Optional[List[str]] = None,
    ) -> Dict[str, DayPlan]:
        """Rotate filtered options over the first `duration` days (max 7)."""
        ratios = health_calculator.get_macro_ratios_for_goal(goal)
        budgets = self.slot_calories(daily_calories)
        pools = {slot: self.filter_options(slot, allergies, restrictions, preferences) for slot in SLOTS}

        weekly = {}
        for index, day in enumerate(GENERATION_DAY_KEYS[: max(0, min(duration, 7))]):
            weekly[day] = DayPlan(**{
                slot: [self.build_entry(pools[slot][index % len(pools[slot])], budgets[slot], ratios)]
                for slot in SLOTS
            })
        return weekly

    def synthesize(self, request: MealPlanRequest) -> GeneratedMealPlan:
        """Build a complete plan for the request.

        Daily calories are the Mifflin-St Jeor BMR with the flat goal offset.
        Profile allergies are excluded like request allergies; dislikes only
        reach the filters through `request.restrictions`.
        """
        profile = request.user_profile
        goal = normalize_goal(request.goal)
        bmr = health_calculator.calculate_bmr(
            profile_value(profile, "weight"),
            profile_value(profile, "height"),
            profile_value(profile, "age"),
            profile_value(profile, "gender"),
        )
        daily = health_calculator.adjust_calories_for_goal(bmr, goal)
        targets = macros_from_ratios(daily, health_calculator.get_macro_ratios_for_goal(goal))

        allergies = _merge(request.allergies, profile_value(profile, "allergies"))
        restrictions = _merge(request.restrictions)
        preferences = _merge(request.preferences)

        title = goal_text(goal)
        owner = profile_value(profile, "name") or "Kullanıcı"
        plan = GeneratedMealPlan(
            name=f"{title} Planı",
            description=(
                f"{request.duration} günlük kişiselleştirilmiş beslenme planı. "
                f"{owner} için özel olarak hazırlanmış, {title.lower()} hedefine uygun beslenme programı."
            ),
            goal=goal,
            duration=request.duration,
            daily_calories=daily,
            daily_protein=targets["protein"],
            daily_carbs=targets["carbs"],
            daily_fat=targets["fat"],
            weekly_plan=self.build_weekly_plan(request.duration, daily, goal, allergies, restrictions, preferences),
        )
        logger.info("Fallback meal plan synthesized: %s days, %s kcal/day", len(plan.weekly_plan), daily)
        return plan
