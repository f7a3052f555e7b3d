"""Schemas for generated meal plans and persisted diet plans."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .profile_schema import Goal, UserProfile

Slot = Literal["breakfast", "lunch", "dinner", "snacks"]

SLOTS = ("breakfast", "lunch", "dinner", "snacks")


class MealPlanEntry(BaseModel):
    """A single meal inside a day of a plan."""

    id: str
    name: str
    description: Optional[str] = None
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)


class DayPlan(BaseModel):
    """Four meal slots; list order is display order."""

    breakfast: List[MealPlanEntry] = Field(default_factory=list)
    lunch: List[MealPlanEntry] = Field(default_factory=list)
    dinner: List[MealPlanEntry] = Field(default_factory=list)
    snacks: List[MealPlanEntry] = Field(default_factory=list)


class GeneratedMealPlan(BaseModel):
    """Result of one generation request, keyed by English day names."""

    name: str
    description: str
    goal: Goal
    duration: int
    daily_calories: int
    daily_protein: int
    daily_carbs: int
    daily_fat: int
    weekly_plan: Dict[str, DayPlan] = Field(default_factory=dict)


class MealPlanRequest(BaseModel):
    """Inbound generation request."""

    user_profile: UserProfile = Field(default_factory=UserProfile)
    goal: Goal = Field("maintenance", examples=["weight_loss"])
    duration: int = Field(7, ge=1, le=7, examples=[7], description="Plan length in days")
    preferences: Optional[List[str]] = Field(None, examples=[["mediterranean"]])
    allergies: Optional[List[str]] = Field(None, examples=[["balık"]])
    restrictions: Optional[List[str]] = Field(None, examples=[["vegetarian"]])


class DietPlanResponse(BaseModel):
    """A persisted plan, keyed by Turkish day names."""

    id: int
    user_id: str
    name: str
    goal: Goal
    daily_calories: int
    daily_protein: int
    daily_carbs: int
    daily_fat: int
    weekly_plan: Dict[str, DayPlan]
    is_active: bool
    created_at: str
    updated_at: Optional[str] = None


class DailyTargets(BaseModel):
    calories: int
    protein: int
    carbs: int
    fat: int
