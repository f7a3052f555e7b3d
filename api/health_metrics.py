"""Health metrics API router.

Computes BMR, TDEE, BMI, calorie and macro goals for a (possibly partial)
profile. Nothing is persisted.
"""

from fastapi import APIRouter

from core.logger import get_logger
from schemas import HealthMetricsRequest, HealthReport, IdealWeightRange
from services.health_calculator import health_calculator, profile_value

logger = get_logger("api.health_metrics")
router = APIRouter(prefix="/api/health", tags=["health"])


@router.post("/metrics", response_model=HealthReport)
def calculate_metrics(payload: HealthMetricsRequest):
    """Return derived health metrics for the submitted profile.

    Missing profile fields take the calculator defaults; `goal` in the body
    overrides the profile goal.
    """
    profile = payload.profile
    metrics = health_calculator.calculate_all_health_metrics(profile, payload.goal)
    logger.info("Health metrics computed: bmi=%s daily=%s", metrics.bmi, metrics.daily_calorie_goal)
    return HealthReport(
        metrics=metrics,
        bmi_category_label=health_calculator.get_bmi_category_label(metrics.bmi_category),
        water_intake_ml=health_calculator.calculate_water_intake(
            profile_value(profile, "weight"), profile_value(profile, "activity_level")
        ),
        ideal_weight_range=IdealWeightRange(**health_calculator.calculate_ideal_weight_range(profile_value(profile, "height"))),
    )
