"""Pydantic schema package for request and response models."""

from .profile_schema import UserProfile, HealthMetrics, HealthMetricsRequest, HealthReport, IdealWeightRange
from .meal_schema import MealLogCreate, MealLogResponse, DailyTotal, DailyProgress, TodayMealsResponse
from .meal_plan_schema import (
    MealPlanEntry,
    DayPlan,
    GeneratedMealPlan,
    MealPlanRequest,
    DietPlanResponse,
    DailyTargets,
)
from .food_analysis_schema import (
    FoodItem,
    NutritionTotals,
    FoodAnalysisResult,
    LoggableMeal,
    PhotoAnalysisRequest,
    PhotoAnalysisResponse,
)
from .tracking_schema import (
    MealCompletionToggle,
    MealCompletionResponse,
    DayCompletionResponse,
    HealthDataResponse,
    WaterIntakeUpdate,
    StepsUpdate,
    SleepUpdate,
    WeightUpdate,
    DailyGoals,
    DailyHealthProgress,
    TodayHealthResponse,
    ChartPoint,
    WeeklyHealthResponse,
)

__all__ = [
    "UserProfile",
    "HealthMetrics",
    "HealthMetricsRequest",
    "HealthReport",
    "IdealWeightRange",
    "MealLogCreate",
    "MealLogResponse",
    "DailyTotal",
    "DailyProgress",
    "TodayMealsResponse",
    "MealPlanEntry",
    "DayPlan",
    "GeneratedMealPlan",
    "MealPlanRequest",
    "DietPlanResponse",
    "DailyTargets",
    "FoodItem",
    "NutritionTotals",
    "FoodAnalysisResult",
    "LoggableMeal",
    "PhotoAnalysisRequest",
    "PhotoAnalysisResponse",
    "MealCompletionToggle",
    "MealCompletionResponse",
    "DayCompletionResponse",
    "HealthDataResponse",
    "WaterIntakeUpdate",
    "StepsUpdate",
    "SleepUpdate",
    "WeightUpdate",
    "DailyGoals",
    "DailyHealthProgress",
    "TodayHealthResponse",
    "ChartPoint",
    "WeeklyHealthResponse",
]
