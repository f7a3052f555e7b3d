"""Conversion between raw generated plans and the stored plan shape.

Two jobs live here:

* coercing whatever the text model returned into a `GeneratedMealPlan`,
  filling every missing field with a safe default, and
* translating day keys between the English vocabulary used during
  generation and the Turkish keys the plan store and the app use.
"""

import random
import string
from typing import Any, Dict, Optional

from core.logger import get_logger
from schemas.meal_plan_schema import SLOTS, DayPlan, GeneratedMealPlan, MealPlanEntry
from schemas.profile_schema import GOALS
from services.health_calculator import round_half_up, to_number

logger = get_logger("services.plan_converter")

GENERATION_DAY_KEYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
LOCAL_DAY_KEYS = ("pazartesi", "sali", "carsamba", "persembe", "cuma", "cumartesi", "pazar")

GENERATION_TO_LOCAL = dict(zip(GENERATION_DAY_KEYS, LOCAL_DAY_KEYS))
LOCAL_TO_GENERATION = dict(zip(LOCAL_DAY_KEYS, GENERATION_DAY_KEYS))

UNKNOWN_MEAL_NAME = "Bilinmeyen Yemek"

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_entry_id(rng: Optional[random.Random] = None) -> str:
    """Random 9-character base-36 id for a plan entry."""
    rng = rng or random
    return "".join(rng.choice(_ID_ALPHABET) for _ in range(9))


def to_local_day_key(day: str) -> Optional[str]:
    """English (or already local) day key to the local key; None if unknown."""
    key = str(day or "").strip().lower()
    if key in GENERATION_TO_LOCAL:
        return GENERATION_TO_LOCAL[key]
    if key in LOCAL_TO_GENERATION:
        return key
    return None


def to_generation_day_key(day: str) -> Optional[str]:
    key = str(day or "").strip().lower()
    if key in LOCAL_TO_GENERATION:
        return LOCAL_TO_GENERATION[key]
    if key in GENERATION_TO_LOCAL:
        return key
    return None


def _string_list(value: Any) -> list:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def coerce_entry(raw: Any, rng: Optional[random.Random] = None) -> Optional[MealPlanEntry]:
    """Build an entry from loosely shaped model output; None for non-objects."""
    if not isinstance(raw, dict):
        return None
    description = raw.get("description")
    return MealPlanEntry(
        id=str(raw.get("id") or generate_entry_id(rng)),
        name=str(raw.get("name") or UNKNOWN_MEAL_NAME),
        description=str(description) if description else "",
        calories=round_half_up(to_number(raw.get("calories"), 0)),
        protein=round_half_up(to_number(raw.get("protein"), 0)),
        carbs=round_half_up(to_number(raw.get("carbs"), 0)),
        fat=round_half_up(to_number(raw.get("fat"), 0)),
        ingredients=_string_list(raw.get("ingredients")),
        instructions=_string_list(raw.get("instructions")),
    )


def coerce_day_plan(raw: Any, rng: Optional[random.Random] = None) -> Optional[DayPlan]:
    if isinstance(raw, DayPlan):
        return raw
    if not isinstance(raw, dict):
        return None
    slots = {}
    for slot in SLOTS:
        meals = raw.get(slot)
        entries = [coerce_entry(m, rng) for m in meals] if isinstance(meals, list) else []
        slots[slot] = [e for e in entries if e is not None]
    return DayPlan(**slots)


def coerce_generated_plan(
    raw: Any,
    fallback_goal: str = "maintenance",
    fallback_duration: int = 7,
    rng: Optional[random.Random] = None,
) -> GeneratedMealPlan:
    """Turn a raw generation result into a `GeneratedMealPlan`.

    Invalid day payloads are skipped with a warning. Day keys are left as
    returned; translation happens in `localize_weekly_plan`.
    """
    if isinstance(raw, GeneratedMealPlan):
        return raw
    if not isinstance(raw, dict):
        raw = {}

    weekly = {}
    raw_weekly = raw.get("weekly_plan")
    if isinstance(raw_weekly, dict):
        for day, day_raw in raw_weekly.items():
            day_plan = coerce_day_plan(day_raw, rng)
            if day_plan is None:
                logger.warning("Invalid day plan for %s skipped", day)
                continue
            weekly[str(day).strip().lower()] = day_plan

    goal = raw.get("goal")
    if goal not in GOALS:
        goal = fallback_goal if fallback_goal in GOALS else "maintenance"

    duration = int(to_number(raw.get("duration"), fallback_duration)) or fallback_duration

    return GeneratedMealPlan(
        name=str(raw.get("name") or "Beslenme Planı"),
        description=str(raw.get("description") or ""),
        goal=goal,
        duration=duration,
        daily_calories=round_half_up(to_number(raw.get("daily_calories"), 0)),
        daily_protein=round_half_up(to_number(raw.get("daily_protein"), 0)),
        daily_carbs=round_half_up(to_number(raw.get("daily_carbs"), 0)),
        daily_fat=round_half_up(to_number(raw.get("daily_fat"), 0)),
        weekly_plan=weekly,
    )


def localize_weekly_plan(weekly_plan: Dict[str, Any], rng: Optional[random.Random] = None) -> Dict[str, DayPlan]:
    """Re-key a plan with local day names, dropping keys that don't translate."""
    localized = {}
    for day, day_raw in (weekly_plan or {}).items():
        local_key = to_local_day_key(day)
        if local_key is None:
            logger.warning("Dropping unrecognised day key %r", day)
            continue
        day_plan = coerce_day_plan(day_raw, rng)
        if day_plan is None:
            logger.warning("Invalid day plan for %s skipped", day)
            continue
        localized[local_key] = day_plan
    return localized
