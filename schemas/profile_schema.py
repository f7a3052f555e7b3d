"""Schemas for user profiles and the health metrics derived from them."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Gender = Literal["male", "female"]
ActivityLevel = Literal["low", "moderate", "high"]
Goal = Literal["weight_loss", "weight_gain", "maintenance", "muscle_gain"]

GOALS = ("weight_loss", "weight_gain", "maintenance", "muscle_gain")


class UserProfile(BaseModel):
    """Physiological and preference record consumed by the calculators.

    Every physiological field is optional; missing values are replaced by
    the calculator defaults (25 years, 70 kg, 170 cm, male, moderate).
    """

    name: Optional[str] = Field(None, examples=["Ayşe"])
    age: Optional[int] = Field(None, examples=[30], description="Age in years")
    weight: Optional[float] = Field(None, examples=[68.5], description="Weight in kilograms")
    height: Optional[float] = Field(None, examples=[165.0], description="Height in centimeters")
    gender: Optional[Gender] = Field(None, examples=["female"])
    activity_level: Optional[ActivityLevel] = Field(None, examples=["moderate"])
    goal: Optional[Goal] = Field(None, examples=["weight_loss"])
    allergies: List[str] = Field(default_factory=list, examples=[["fındık"]])
    dislikes: List[str] = Field(default_factory=list, examples=[["vegetarian"]], description="Dislikes and dietary restrictions")
    preferences: List[str] = Field(default_factory=list, examples=[["turkish"]])


class HealthMetrics(BaseModel):
    """Derived metrics, recomputed from the profile on every call."""

    bmr: int
    tdee: int
    daily_calorie_goal: int
    bmi: float
    bmi_category: str
    protein_goal: int
    carbs_goal: int
    fat_goal: int


class IdealWeightRange(BaseModel):
    min: int
    max: int


class HealthMetricsRequest(BaseModel):
    """Payload for `/api/health/metrics`; `goal` overrides `profile.goal` when set."""

    profile: UserProfile = Field(default_factory=UserProfile)
    goal: Optional[Goal] = None


class HealthReport(BaseModel):
    metrics: HealthMetrics
    bmi_category_label: str
    water_intake_ml: int
    ideal_weight_range: IdealWeightRange
