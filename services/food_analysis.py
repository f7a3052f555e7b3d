"""Food photo analysis.

Uses the configured vision model to itemise a meal photo and falls back to
a canned analysis from `data.mock_food_analyses` when no key is set, when
AI is not requested, or when the model call fails.
"""

import json
import random
from datetime import datetime
from typing import Any, List, Optional

import httpx

from core import config
from core.exceptions import AIResponseError, AIServiceError
from core.logger import get_logger
from data.mock_food_analyses import MOCK_FOOD_ANALYSES
from schemas.food_analysis_schema import FoodAnalysisResult, FoodItem, LoggableMeal, NutritionTotals
from services.chat_client import ChatCompletionClient, strip_code_fences
from services.health_calculator import round_half_up, to_number
from services.plan_converter import UNKNOWN_MEAL_NAME

logger = get_logger("services.food_analysis")

VISION_PROMPT = """Bu yemek fotoğrafını analiz et ve tabakta/kasede görünen tüm yiyecekleri tespit et.

Her yiyecek için şunları belirle:
1. İsim (Türkçe)
2. Tahmini ağırlık (gram cinsinden, görsel porsiyon büyüklüğüne göre)
3. Tahmini kalori
4. Protein (gram)
5. Karbonhidrat (gram)
6. Yağ (gram)
7. Güven skoru (0-1 arası, ne kadar emin olduğun)

Sonucu TAM OLARAK bu JSON formatında dön (başka hiçbir şey yazma):
{
  "items": [
    {
      "name": "Yiyecek adı Türkçe",
      "grams": 150,
      "calories": 200,
      "protein": 20,
      "carbs": 10,
      "fats": 8,
      "confidence": 0.85
    }
  ],
  "portion": "1 porsiyon"
}

Besin değerlerinde mümkün olduğunca doğru ol. Emin olmadığın yiyecekler için confidence değerini düşür. Sadece JSON dön, başka açıklama yapma."""

CONFIDENCE_HIGH = 0.8
CONFIDENCE_MEDIUM = 0.6


def sum_totals(items: List[FoodItem]) -> NutritionTotals:
    """Sum of item nutrition; always recomputed, never taken from the model."""
    return NutritionTotals(
        calories=sum(i.calories for i in items),
        protein=sum(i.protein for i in items),
        carbs=sum(i.carbs for i in items),
        fats=sum(i.fats for i in items),
    )


def determine_meal_type(hour: int) -> str:
    """Meal type for a local hour of day; the 15-18 gap counts as a snack."""
    if 6 <= hour < 11:
        return "breakfast"
    if 11 <= hour < 15:
        return "lunch"
    if 18 <= hour < 22:
        return "dinner"
    return "snack"


def get_confidence_text(confidence: Optional[float]) -> str:
    if not confidence:
        return "Tahmini"
    if confidence >= CONFIDENCE_HIGH:
        return "Yüksek güven"
    if confidence >= CONFIDENCE_MEDIUM:
        return "Orta güven"
    return "Düşük güven"


def get_confidence_color(confidence: Optional[float]) -> str:
    if not confidence:
        return "#999"
    if confidence >= CONFIDENCE_HIGH:
        return "#4CAF50"
    if confidence >= CONFIDENCE_MEDIUM:
        return "#FF9800"
    return "#F44336"


def _parse_item(raw: Any) -> FoodItem:
    if not isinstance(raw, dict):
        raise AIResponseError("Food item is not an object", content=str(raw))
    confidence = raw.get("confidence")
    return FoodItem(
        name=str(raw.get("name") or "Bilinmeyen"),
        grams=to_number(raw.get("grams"), 0),
        calories=to_number(raw.get("calories"), 0),
        protein=to_number(raw.get("protein"), 0),
        carbs=to_number(raw.get("carbs"), 0),
        fats=to_number(raw.get("fats"), 0),
        confidence=None if confidence is None else to_number(confidence, 0),
    )


class FoodAnalysisService:
    """Photo analyzer with a mock fallback.

    Args:
        api_key: Vision-model key; the placeholder value counts as missing.
        rng: Random source used to pick a canned analysis.
        client: Pre-built chat client.
        transport: httpx transport used when `client` is not given.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        rng: Optional[random.Random] = None,
        client: Optional[ChatCompletionClient] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = config.OPENAI_API_KEY if api_key is None else api_key
        self.rng = rng or random.Random()
        self.client = client or ChatCompletionClient(config.OPENAI_VISION_URL, self.api_key, transport=transport)

    def has_api_key(self) -> bool:
        return config.is_api_key_configured(self.api_key, config.OPENAI_API_KEY_PLACEHOLDER)

    def analyze_food_photo(self, image_url: str, use_ai: bool = True) -> FoodAnalysisResult:
        """Analyze a photo, preferring the vision model when allowed."""
        if not self.has_api_key():
            logger.info("Vision model key not configured, using mock analysis")
            return self.get_mock_analysis(image_url)
        if not use_ai:
            return self.get_mock_analysis(image_url)
        try:
            return self.analyze_with_vision(image_url)
        except (AIServiceError, AIResponseError) as exc:
            logger.error("Vision analysis failed, using mock analysis: %s", exc.message)
            return self.get_mock_analysis(image_url)

    def get_mock_analysis(self, image_url: Optional[str] = None) -> FoodAnalysisResult:
        template = self.rng.choice(MOCK_FOOD_ANALYSES)
        items = [FoodItem(**item) for item in template["items"]]
        return FoodAnalysisResult(
            items=items,
            totals=sum_totals(items),
            portion=template["portion"],
            image_url=image_url,
            analysis_type="mock",
        )

    def analyze_with_vision(self, image_url: str) -> FoodAnalysisResult:
        """Call the vision model; raises AIServiceError/AIResponseError on failure."""
        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": VISION_PROMPT},
                    {"type": "image_url", "image_url": {"url": image_url, "detail": "low"}},
                ],
            }
        ]
        content = self.client.complete(messages, model=config.OPENAI_VISION_MODEL, max_tokens=1000)
        cleaned = strip_code_fences(content)
        try:
            parsed = json.loads(cleaned)
        except ValueError as exc:
            raise AIResponseError("Vision response is not valid JSON", content=cleaned) from exc

        if not isinstance(parsed, dict) or not isinstance(parsed.get("items"), list):
            raise AIResponseError("Vision response has no item list", content=cleaned)

        items = [_parse_item(raw) for raw in parsed["items"]]
        logger.info("Vision analysis found %s items", len(items))
        return FoodAnalysisResult(
            items=items,
            totals=sum_totals(items),
            portion=str(parsed.get("portion") or "1 porsiyon"),
            image_url=image_url,
            analysis_type="ai",
        )

    def format_as_meal(
        self,
        analysis: FoodAnalysisResult,
        user_id: str,
        now: Optional[datetime] = None,
    ) -> LoggableMeal:
        """Convert an analysis into a meal record for the meal store."""
        now = now or datetime.now()
        return LoggableMeal(
            user_id=user_id,
            name=", ".join(item.name for item in analysis.items) or UNKNOWN_MEAL_NAME,
            total_calories=round_half_up(analysis.totals.calories),
            total_protein=round_half_up(analysis.totals.protein),
            total_carbs=round_half_up(analysis.totals.carbs),
            total_fat=round_half_up(analysis.totals.fats),
            meal_type=determine_meal_type(now.hour),
            portion=analysis.portion,
        )


# export singleton
food_analysis_service = FoodAnalysisService()
