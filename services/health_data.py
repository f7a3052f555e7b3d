"""Daily health tracking: water, steps, sleep and weight.

One `HealthData` row per user and calendar day. Every update upserts
today's row and refreshes `calories_consumed` from the meal log, so the
row always reflects what was eaten so far.
"""

from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from core.logger import get_logger
from core.repository import HealthDataRepository
from database.models import HealthData
from schemas.tracking_schema import (
    ChartPoint,
    DailyGoals,
    DailyHealthProgress,
    HealthDataResponse,
    TodayHealthResponse,
    WeeklyHealthResponse,
)
from services.health_calculator import round_half_up, to_number
from services.meal_aggregator import calculate_daily_totals, calculate_progress
from services.meal_service import meal_service

logger = get_logger("services.health_data")

HISTORY_DAYS = 7
CHART_DAYS = 7

# Monday first, matching `date.weekday()`.
SHORT_DAY_NAMES = ("Pzt", "Sal", "Çar", "Per", "Cum", "Cmt", "Paz")

AVERAGED_FIELDS = ("water_intake", "steps", "sleep_hours", "weight", "calories_consumed")


def calculate_weekly_average(records: Iterable[Any], field: str) -> int:
    """Rounded mean of `field` over records that have it set; 0 when none do."""
    values = []
    for record in records:
        value = record.get(field) if isinstance(record, dict) else getattr(record, field, None)
        if value is not None:
            values.append(to_number(value, 0))
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


def format_chart_data(records: Iterable[Any], field: str, today: Optional[date] = None) -> List[ChartPoint]:
    """One point per day for the seven days ending `today`; days without data are 0."""
    today = today or date.today()
    by_day = {}
    for record in records:
        day = record.get("date") if isinstance(record, dict) else record.date
        value = record.get(field) if isinstance(record, dict) else getattr(record, field, None)
        by_day[day] = to_number(value, 0)

    points = []
    for offset in range(CHART_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        points.append(ChartPoint(date=day, day=SHORT_DAY_NAMES[day.weekday()], value=by_day.get(day, 0)))
    return points


class HealthDataService:
    """Reads and upserts the per-day health rows."""

    def get_daily_goals(self) -> DailyGoals:
        return DailyGoals()

    def get_today_health_data(self, db: Session, user_id: str, today: Optional[date] = None) -> Optional[HealthData]:
        return HealthDataRepository(db).get_for_day(user_id, today or date.today())

    def get_weekly_health_data(self, db: Session, user_id: str, today: Optional[date] = None) -> List[HealthData]:
        """Rows from seven days ago through today, oldest first."""
        today = today or date.today()
        return HealthDataRepository(db).list_between(user_id, today - timedelta(days=HISTORY_DAYS), today)

    def calculate_today_calories(self, db: Session, user_id: str, today: Optional[date] = None) -> float:
        meals = meal_service.get_today_meals(db, user_id, today)
        return calculate_daily_totals(meals).total_calories

    def save_health_data(self, db: Session, user_id: str, today: Optional[date] = None, **fields) -> HealthData:
        """Create or update today's row with `fields`.

        Args:
            db: Write session.
            user_id: Owner of the row.
            today: Day of the row; defaults to the local date.
            **fields: Column values to set, e.g. ``steps=8500``.

        Returns:
            The persisted row.
        """
        today = today or date.today()
        repo = HealthDataRepository(db)
        fields["calories_consumed"] = self.calculate_today_calories(db, user_id, today)
        row = repo.get_for_day(user_id, today)
        if row is None:
            row = repo.create(HealthData(user_id=user_id, date=today, **fields))
        else:
            for name, value in fields.items():
                setattr(row, name, value)
            row = repo.update(row)
        logger.debug("Health data for %s on %s saved: %s", user_id, today, sorted(fields))
        return row

    def update_water_intake(self, db: Session, user_id: str, water_ml: int, today: Optional[date] = None) -> HealthData:
        """Add `water_ml` to today's water total."""
        current = self.get_today_health_data(db, user_id, today)
        total = (current.water_intake if current is not None else 0) + water_ml
        logger.info("Water intake for %s now %s ml", user_id, total)
        return self.save_health_data(db, user_id, today, water_intake=total)

    def update_steps(self, db: Session, user_id: str, steps: int, today: Optional[date] = None) -> HealthData:
        return self.save_health_data(db, user_id, today, steps=steps)

    def update_sleep_hours(self, db: Session, user_id: str, hours: float, today: Optional[date] = None) -> HealthData:
        return self.save_health_data(db, user_id, today, sleep_hours=hours)

    def update_weight(self, db: Session, user_id: str, weight: float, today: Optional[date] = None) -> HealthData:
        return self.save_health_data(db, user_id, today, weight=weight)

    def today_summary(self, db: Session, user_id: str, today: Optional[date] = None) -> TodayHealthResponse:
        """Today's row (if any), calories from the meal log and progress against the daily goals."""
        row = self.get_today_health_data(db, user_id, today)
        calories = self.calculate_today_calories(db, user_id, today)
        goals = self.get_daily_goals()
        return TodayHealthResponse(
            data=to_response(row) if row is not None else None,
            calories_consumed=calories,
            goals=goals,
            progress=DailyHealthProgress(
                water=calculate_progress(row.water_intake if row else 0, goals.water),
                steps=calculate_progress(row.steps if row else 0, goals.steps),
                sleep=calculate_progress(row.sleep_hours if row else 0, goals.sleep),
                calories=calculate_progress(calories, goals.calories),
            ),
        )

    def weekly_summary(
        self,
        db: Session,
        user_id: str,
        chart_field: str = "water_intake",
        today: Optional[date] = None,
    ) -> WeeklyHealthResponse:
        today = today or date.today()
        rows = self.get_weekly_health_data(db, user_id, today)
        averages: Dict[str, int] = {field: calculate_weekly_average(rows, field) for field in AVERAGED_FIELDS}
        return WeeklyHealthResponse(
            records=[to_response(r) for r in rows],
            averages=averages,
            chart_field=chart_field,
            chart=format_chart_data(rows, chart_field, today),
        )


def to_response(row: HealthData) -> HealthDataResponse:
    return HealthDataResponse(
        id=row.id,
        user_id=row.user_id,
        date=row.date,
        calories_consumed=row.calories_consumed or 0,
        calories_burned=row.calories_burned,
        water_intake=row.water_intake or 0,
        steps=row.steps,
        sleep_hours=row.sleep_hours,
        weight=row.weight,
    )


# export singleton
health_data_service = HealthDataService()
