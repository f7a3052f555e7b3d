"""Schemas for photo-based food analysis."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .meal_schema import MealType


class FoodItem(BaseModel):
    name: str
    grams: float = 0
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0
    confidence: Optional[float] = None

    @field_validator("confidence")
    @classmethod
    def clamp_confidence(cls, value):
        if value is None:
            return None
        return min(max(value, 0.0), 1.0)


class NutritionTotals(BaseModel):
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0


class FoodAnalysisResult(BaseModel):
    """Normalised analysis; `totals` is always the sum of `items`."""

    items: List[FoodItem]
    totals: NutritionTotals
    portion: str = ""
    image_url: Optional[str] = None
    analysis_type: Literal["mock", "ai"]


class LoggableMeal(BaseModel):
    """A meal record ready to hand to the meal store."""

    user_id: str
    name: str
    total_calories: int
    total_protein: int
    total_carbs: int
    total_fat: int
    meal_type: MealType
    portion: Optional[str] = None


class PhotoAnalysisRequest(BaseModel):
    image_url: str = Field(..., min_length=1, examples=["https://example.com/plate.jpg"])
    use_ai: bool = Field(True, description="Use the vision model when a key is configured")
    user_id: Optional[str] = Field(None, description="When set, the response carries a loggable meal")


class PhotoAnalysisResponse(BaseModel):
    analysis: FoodAnalysisResult
    meal: Optional[LoggableMeal] = None
