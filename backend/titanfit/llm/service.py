from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from openai import OpenAI

from ..config import settings
from ..exceptions import AIServiceError
from ..schemas import AiDietResult, AiWorkoutResult, Exercise, FoodAnalysisResult
from .prompts import DIET_PLAN_PROMPT, FOOD_IMAGE_PROMPT, FOOD_SEARCH_PROMPT, WORKOUT_PROMPT
from .tools import ai_exercise_id, image_message, parse_json_reply

logger = logging.getLogger(__name__)


class GenerationService:
    """
    Stateless request/response wrappers around a hosted chat model.

    Every call asks for a JSON object, strips code fences from the reply and
    parses it. Nothing is retried; failures are logged and re-raised.
    """

    def __init__(self, model: Optional[str] = None, client: Any = None):
        self.model = model or (settings.model_id or "gpt-4o")
        if client is not None:
            self.client = client
            return
        if not settings.openai_api_key:
            raise AIServiceError("OPENAI_API_KEY not configured")
        self.client = OpenAI(api_key=settings.openai_api_key)

    def _generate_json(self, messages: List[Dict[str, Any]], temperature: Optional[float] = None) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "response_format": {"type": "json_object"},
        }
        if temperature is not None:
            kwargs["temperature"] = temperature
        response = self.client.chat.completions.create(**kwargs)
        text = response.choices[0].message.content if response.choices else None
        return parse_json_reply(text)

    def analyze_food_image(self, base64_image: str, mime_type: str = "image/jpeg") -> FoodAnalysisResult:
        try:
            data = self._generate_json(
                image_message(FOOD_IMAGE_PROMPT, base64_image, mime_type),
                temperature=0.2,
            )
            return FoodAnalysisResult.model_validate(data)
        except Exception as e:
            logger.error(f"Food image analysis failed: {e}")
            raise

    def search_food(self, query: str) -> FoodAnalysisResult:
        """Per-100 g nutrition for a free-text food name."""
        try:
            data = self._generate_json(
                [{"role": "user", "content": FOOD_SEARCH_PROMPT.format(query=query)}],
            )
            return FoodAnalysisResult.model_validate(data)
        except Exception as e:
            logger.error(f"Food search failed: {e}")
            raise

    def generate_diet(self, age: int, weight: float, goal: str, gender: Optional[str] = None) -> AiDietResult:
        prompt = DIET_PLAN_PROMPT.format(
            age=age,
            weight=weight,
            goal=goal,
            gender_line=f"\n- Gender: {gender}" if gender else "",
        )
        try:
            data = self._generate_json([{"role": "user", "content": prompt}], temperature=0.7)
            return AiDietResult.model_validate(data)
        except Exception as e:
            logger.error(f"AI diet generation failed: {e}")
            raise

    def generate_workout(self, goal: str, day: str, focus: Optional[str] = None) -> AiWorkoutResult:
        prompt = WORKOUT_PROMPT.format(goal=goal, day=day, focus=focus or "General")
        try:
            data = self._generate_json([{"role": "user", "content": prompt}], temperature=0.7)
            exercises = [
                Exercise(
                    id=ai_exercise_id(),
                    name=ex["name"],
                    sets=int(ex["sets"]),
                    reps=str(ex["reps"]),
                    completed=False,
                )
                for ex in data["exercises"]
            ]
            return AiWorkoutResult(title=data["title"], exercises=exercises)
        except Exception as e:
            logger.error(f"AI workout generation failed: {e}")
            raise


def get_generation_service() -> GenerationService:
    """FastAPI dependency; 503 when no API key is configured."""
    try:
        return GenerationService()
    except AIServiceError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


def get_optional_generation_service() -> Optional[GenerationService]:
    """Like get_generation_service, but None when the AI is not configured."""
    try:
        return GenerationService()
    except AIServiceError:
        logger.warning("AI service not configured; AI fallbacks disabled")
        return None
