"""AI meal-plan generation with an offline fallback.

`generate_meal_plan` always returns a plan dict keyed by English day
names. When no text-model key is configured, or the model call fails in
any way, the plan comes from `FallbackMealPlanSynthesizer` instead.
"""

import json
import random
from typing import Any, Dict, Optional

import httpx

from core import config
from core.exceptions import AIResponseError, AIServiceError
from core.logger import get_logger
from schemas.meal_plan_schema import MealPlanRequest
from services.chat_client import ChatCompletionClient, strip_code_fences
from services.fallback_meal_plan import FallbackMealPlanSynthesizer
from services.meal_plan_prompts import build_system_prompt, build_user_prompt

logger = get_logger("services.ai_meal_plan")


class AIMealPlanService:
    """Meal-plan generator backed by the configured text model.

    Args:
        api_key: Text-model key; the placeholder value counts as missing.
        client: Pre-built chat client (tests inject one with a mock transport).
        rng: Random source forwarded to the fallback synthesizer.
        transport: httpx transport used when `client` is not given.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[ChatCompletionClient] = None,
        rng: Optional[random.Random] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = config.GROQ_API_KEY if api_key is None else api_key
        self.client = client or ChatCompletionClient(config.GROQ_API_URL, self.api_key, transport=transport)
        self.fallback = FallbackMealPlanSynthesizer(rng=rng)

    def has_api_key(self) -> bool:
        return config.is_api_key_configured(self.api_key, config.GROQ_API_KEY_PLACEHOLDER)

    def generate_fallback_plan(self, request: MealPlanRequest) -> Dict[str, Any]:
        return self.fallback.synthesize(request).model_dump()

    def generate_meal_plan(self, request: MealPlanRequest) -> Dict[str, Any]:
        """Generate a plan for `request`, never raising for upstream failures."""
        if not self.has_api_key():
            logger.info("Text model key not configured, using fallback meal plan")
            return self.generate_fallback_plan(request)

        messages = [
            {"role": "system", "content": build_system_prompt(request)},
            {"role": "user", "content": build_user_prompt(request)},
        ]
        try:
            content = self.client.complete(
                messages,
                model=config.GROQ_MODEL,
                max_tokens=2000,
                temperature=0.7,
                response_format={"type": "json_object"},
            )
            plan = json.loads(strip_code_fences(content))
        except (AIServiceError, AIResponseError) as exc:
            logger.error("Meal plan generation failed, using fallback: %s", exc.message)
            return self.generate_fallback_plan(request)
        except ValueError as exc:
            logger.error("Meal plan response is not valid JSON, using fallback: %s", exc)
            return self.generate_fallback_plan(request)

        if not isinstance(plan, dict):
            logger.error("Meal plan response is not a JSON object, using fallback")
            return self.generate_fallback_plan(request)

        logger.info("Meal plan generated by %s", config.GROQ_MODEL)
        return plan


# export singleton
ai_meal_plan_service = AIMealPlanService()
