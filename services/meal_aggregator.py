"""Daily and weekly nutrition aggregation over logged meals.

Meals may be ORM rows, pydantic models or plain dicts; each needs
``total_calories``/``total_protein``/``total_carbs``/``total_fat`` and, for
the weekly grouping, ``created_at``.
"""

import math
from collections import OrderedDict
from datetime import date, datetime
from typing import Any, Iterable, List

from core.logger import get_logger
from schemas.meal_schema import DailyTotal
from services.health_calculator import round_half_up, to_number

logger = get_logger("services.meal_aggregator")


def _field(meal: Any, name: str) -> Any:
    if isinstance(meal, dict):
        return meal.get(name)
    return getattr(meal, name, None)


def _date_key(created_at: Any) -> str:
    """Day portion of a timestamp, by truncation; no timezone conversion."""
    if created_at is None:
        return ""
    if isinstance(created_at, (datetime, date)):
        return created_at.isoformat()[:10]
    return str(created_at).split("T")[0].split(" ")[0]


def calculate_daily_totals(meals: Iterable[Any]) -> DailyTotal:
    """Sum a pre-filtered list of meals; `date` is today's date.

    Non-numeric totals count as zero. An empty list gives all zeros.
    """
    calories = protein = carbs = fat = 0.0
    count = 0
    for meal in meals:
        calories += to_number(_field(meal, "total_calories"), 0)
        protein += to_number(_field(meal, "total_protein"), 0)
        carbs += to_number(_field(meal, "total_carbs"), 0)
        fat += to_number(_field(meal, "total_fat"), 0)
        count += 1

    return DailyTotal(
        date=date.today().isoformat(),
        total_calories=calories,
        total_protein=protein,
        total_carbs=carbs,
        total_fat=fat,
        meal_count=count,
    )


def calculate_weekly_daily_totals(meals: Iterable[Any]) -> List[DailyTotal]:
    """One `DailyTotal` per calendar day found in `created_at`, oldest first."""
    grouped = OrderedDict()
    for meal in meals:
        grouped.setdefault(_date_key(_field(meal, "created_at")), []).append(meal)

    totals = []
    for day, day_meals in grouped.items():
        daily = calculate_daily_totals(day_meals)
        totals.append(daily.model_copy(update={"date": day}))

    logger.debug("Weekly totals: %s days", len(totals))
    return sorted(totals, key=lambda t: t.date)


def calculate_progress(current: Any, target: Any) -> int:
    """Percent of `target` reached, capped at 100; 0 when the target is 0."""
    target = to_number(target, 0)
    if target == 0:
        return 0
    ratio = to_number(current, 0) / target * 100
    if math.isinf(ratio):
        return 100 if ratio > 0 else 0
    return min(round_half_up(ratio), 100)
