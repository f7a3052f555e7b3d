"""Schemas for logged meals and their daily aggregates."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class MealLogCreate(BaseModel):
    """Payload for logging a meal."""

    user_id: str = Field(..., min_length=1, examples=["user-1"])
    name: str = Field(..., min_length=1, examples=["Menemen"])
    total_calories: float = Field(0, ge=0, examples=[420])
    total_protein: float = Field(0, ge=0, examples=[22])
    total_carbs: float = Field(0, ge=0, examples=[18])
    total_fat: float = Field(0, ge=0, examples=[28])
    meal_type: MealType = Field(..., examples=["breakfast"])
    portion: Optional[str] = Field(None, examples=["1 porsiyon"])
    created_at: Optional[datetime] = Field(None, description="Defaults to the current local time")


class MealLogResponse(BaseModel):
    id: int
    user_id: str
    name: str
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    meal_type: MealType
    portion: Optional[str] = None
    created_at: str


class DailyTotal(BaseModel):
    """Nutrition totals for one calendar day (``YYYY-MM-DD``)."""

    date: str
    total_calories: float = 0
    total_protein: float = 0
    total_carbs: float = 0
    total_fat: float = 0
    meal_count: int = 0


class DailyProgress(BaseModel):
    """Percent of each target reached, capped at 100."""

    calories: int
    protein: int
    carbs: int
    fat: int


class TodayMealsResponse(BaseModel):
    meals: List[MealLogResponse]
    totals: DailyTotal
    progress: Optional[DailyProgress] = None
