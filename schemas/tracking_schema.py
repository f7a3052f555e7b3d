"""Schemas for plan-meal completions and daily health tracking."""

from datetime import date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .meal_plan_schema import Slot

LocalDayKey = Literal["pazartesi", "sali", "carsamba", "persembe", "cuma", "cumartesi", "pazar"]

HealthField = Literal["water_intake", "steps", "sleep_hours", "weight", "calories_consumed", "calories_burned"]


class MealCompletionToggle(BaseModel):
    """Check or uncheck one plan entry for today."""

    user_id: str = Field(..., min_length=1, examples=["user-1"])
    day_of_week: LocalDayKey = Field(..., examples=["pazartesi"])
    meal_type: Slot = Field(..., examples=["breakfast"])
    meal_id: str = Field(..., min_length=1, examples=["k3j9x0a1b"])


class MealCompletionResponse(BaseModel):
    id: int
    user_id: str
    plan_id: int
    completion_date: date
    day_of_week: str
    meal_type: str
    meal_id: str
    completed: bool
    completed_at: Optional[str] = None


class DayCompletionResponse(BaseModel):
    """Checked entries of one plan day and the share of the day they cover."""

    day_of_week: str
    completion_date: date
    completions: List[MealCompletionResponse]
    total_meals: int
    percentage: float


class HealthDataResponse(BaseModel):
    id: int
    user_id: str
    date: date
    calories_consumed: float = 0
    calories_burned: Optional[float] = None
    water_intake: int = 0
    steps: Optional[int] = None
    sleep_hours: Optional[float] = None
    weight: Optional[float] = None


class WaterIntakeUpdate(BaseModel):
    amount_ml: int = Field(..., gt=0, examples=[250], description="Added to today's total")


class StepsUpdate(BaseModel):
    steps: int = Field(..., ge=0, examples=[8500])


class SleepUpdate(BaseModel):
    hours: float = Field(..., ge=0, le=24, examples=[7.5])


class WeightUpdate(BaseModel):
    weight: float = Field(..., gt=0, examples=[68.2], description="Weight in kilograms")


class DailyGoals(BaseModel):
    water: int = 2000
    steps: int = 10000
    sleep: int = 8
    calories: int = 2000


class DailyHealthProgress(BaseModel):
    """Percent of each daily goal reached, capped at 100."""

    water: int
    steps: int
    sleep: int
    calories: int


class TodayHealthResponse(BaseModel):
    data: Optional[HealthDataResponse] = None
    calories_consumed: float
    goals: DailyGoals
    progress: DailyHealthProgress


class ChartPoint(BaseModel):
    date: date
    day: str
    value: float


class WeeklyHealthResponse(BaseModel):
    """Last eight days of records with per-field averages and a seven-day chart."""

    records: List[HealthDataResponse]
    averages: Dict[str, int]
    chart_field: HealthField
    chart: List[ChartPoint]
