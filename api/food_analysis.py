"""Food photo analysis API router."""

from fastapi import APIRouter, Depends

from core.logger import get_logger
from schemas import PhotoAnalysisRequest, PhotoAnalysisResponse
from services.food_analysis import FoodAnalysisService, food_analysis_service

logger = get_logger("api.food_analysis")
router = APIRouter(prefix="/api", tags=["food-analysis"])


def get_food_analyzer() -> FoodAnalysisService:
    return food_analysis_service


@router.post("/food-analysis", response_model=PhotoAnalysisResponse)
def analyze_photo(payload: PhotoAnalysisRequest, analyzer: FoodAnalysisService = Depends(get_food_analyzer)):
    """Itemise a meal photo; with `user_id` set, also return a loggable meal.

    The meal is not stored here; clients post it to `/api/meals` once the
    user confirms it.
    """
    analysis = analyzer.analyze_food_photo(payload.image_url, use_ai=payload.use_ai)
    logger.info("Photo analysed (%s): %s items", analysis.analysis_type, len(analysis.items))
    meal = analyzer.format_as_meal(analysis, payload.user_id) if payload.user_id else None
    return PhotoAnalysisResponse(analysis=analysis, meal=meal)
