"""Health data API router.

Daily water, steps, sleep and weight tracking with goals and weekly averages.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.logger import get_logger
from database.deps import get_db_read, get_db_write
from schemas import (
    DailyGoals,
    HealthDataResponse,
    SleepUpdate,
    StepsUpdate,
    TodayHealthResponse,
    WaterIntakeUpdate,
    WeeklyHealthResponse,
    WeightUpdate,
)
from schemas.tracking_schema import HealthField
from services.health_data import health_data_service, to_response

logger = get_logger("api.health_data")
router = APIRouter(prefix="/api/health-data", tags=["health-data"])


@router.get("/goals", response_model=DailyGoals)
def get_daily_goals():
    return health_data_service.get_daily_goals()


@router.get("/{user_id}/today", response_model=TodayHealthResponse)
def get_today(user_id: str, db: Session = Depends(get_db_read)):
    """Today's tracked values, calories from the meal log and goal progress.

    `data` is null until something was tracked today.
    """
    return health_data_service.today_summary(db, user_id)


@router.get("/{user_id}/week", response_model=WeeklyHealthResponse)
def get_week(user_id: str, chart_field: HealthField = "water_intake", db: Session = Depends(get_db_read)):
    return health_data_service.weekly_summary(db, user_id, chart_field)


@router.post("/{user_id}/water", response_model=HealthDataResponse)
def add_water(user_id: str, payload: WaterIntakeUpdate, db: Session = Depends(get_db_write)):
    return to_response(health_data_service.update_water_intake(db, user_id, payload.amount_ml))


@router.post("/{user_id}/steps", response_model=HealthDataResponse)
def set_steps(user_id: str, payload: StepsUpdate, db: Session = Depends(get_db_write)):
    return to_response(health_data_service.update_steps(db, user_id, payload.steps))


@router.post("/{user_id}/sleep", response_model=HealthDataResponse)
def set_sleep(user_id: str, payload: SleepUpdate, db: Session = Depends(get_db_write)):
    return to_response(health_data_service.update_sleep_hours(db, user_id, payload.hours))


@router.post("/{user_id}/weight", response_model=HealthDataResponse)
def set_weight(user_id: str, payload: WeightUpdate, db: Session = Depends(get_db_write)):
    return to_response(health_data_service.update_weight(db, user_id, payload.weight))
