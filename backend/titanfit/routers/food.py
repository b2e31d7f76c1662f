"""
Food logging routes: manual and photo logging, catalog search, daily totals.
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from urllib.parse import quote
import logging

from .. import schemas, analytics
from ..auth import get_current_client
from ..config import settings
from ..llm.service import GenerationService, get_generation_service, get_optional_generation_service
from ..seed import FOOD_DATABASE
from ..store import FitnessStore, get_store, new_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/food", tags=["Food"])

LOW_CONFIDENCE = 0.5
AI_SEARCH_MIN_QUERY = 3


def _food_image(name: str) -> str:
    return f"https://image.pollinations.ai/prompt/delicious%20{quote(name)}%20plated%20food%20photo?width=400&height=300&nologo=true"


def _own_client(store: FitnessStore, user: schemas.User) -> schemas.ClientProfile:
    client = store.get_client(user.id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client


def _search_with_fallback(query: str, service: Optional[GenerationService]) -> List[schemas.FoodItem]:
    """Catalog matches, else an AI per-100 g estimate for queries longer than three characters."""
    results = analytics.search_food_catalog(query, FOOD_DATABASE)
    if results or len(query) <= AI_SEARCH_MIN_QUERY or service is None:
        return results

    try:
        found = service.search_food(query)
    except Exception as e:
        logger.warning(f"AI food search failed for '{query}': {e}")
        return []
    return [
        analytics.per_100g(
            id=f"ai-{new_id()}",
            name=found.food_name,
            macros=found.macros,
            grams=found.grams,
            image_url=_food_image(found.food_name),
        )
    ]


@router.get("", response_model=List[schemas.FoodLog])
def list_food_logs(
    log_date: Optional[str] = Query(None, alias="date", description="ISO date (YYYY-MM-DD)"),
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """
    Get the current client's food logs, newest first.

    - **date**: only logs from this day
    """
    logs = [log for log in store.get_food_logs() if log.client_id == current_user.id]
    if log_date:
        logs = [log for log in logs if log.date.startswith(log_date)]
    return logs


@router.post("", response_model=schemas.FoodLog, status_code=status.HTTP_201_CREATED)
def create_food_log(
    entry: schemas.FoodLogCreate,
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """
    Log a portion of food.

    - **foodId**: a catalog food, or
    - **food**: a per-100 g item returned by search or photo review
    - **grams**: portion size
    - **mealType**: Breakfast, Lunch, Dinner, Snack...
    """
    if entry.grams <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Grams must be positive"
        )

    food = entry.food
    if entry.food_id:
        food = analytics.find_food(entry.food_id)
        if not food:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Food not found"
            )
    if food is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Either foodId or food is required"
        )

    log = schemas.FoodLog(
        id=new_id(),
        client_id=current_user.id,
        date=analytics.utc_now_iso(),
        meal_type=entry.meal_type,
        food_name=food.name,
        grams=entry.grams,
        macros=analytics.scale_macros(food, entry.grams),
        is_verified=True,
        photo_url=food.image_url,
    )
    store.add_food_log(log)
    return log


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_food_log(
    log_id: str,
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """Delete one of the current client's food logs."""
    if not any(log.id == log_id and log.client_id == current_user.id for log in store.get_food_logs()):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Food log not found"
        )
    store.delete_food_log(log_id)
    return None


@router.get("/daily", response_model=schemas.DailyNutrition)
def get_daily_nutrition(
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """
    Today's (UTC) consumed macros against the client's targets.
    """
    client = _own_client(store, current_user)
    today = analytics.utc_today()
    logs = [log for log in store.get_food_logs() if log.client_id == client.id and log.date.startswith(today)]
    return schemas.DailyNutrition(
        date=today,
        consumed=analytics.daily_macro_totals(logs, today),
        targets=client.daily_macro_targets,
        logs=logs,
    )


@router.get("/search", response_model=List[schemas.FoodItem])
def search_food(
    q: str = Query(..., description="Food name"),
    current_user: schemas.User = Depends(get_current_client),
    service: Optional[GenerationService] = Depends(get_optional_generation_service),
):
    """
    Search the food catalog.

    When nothing matches and the query is longer than three characters, the AI
    estimates per-100 g values instead. AI failures yield an empty result.
    """
    return _search_with_fallback(q, service)


@router.post("/photo", response_model=schemas.FoodPhotoResult)
def log_food_photo(
    photo: schemas.FoodPhotoRequest,
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
    service: GenerationService = Depends(get_generation_service),
):
    """
    Identify a meal from a photo.

    Confident detections are logged straight away; anything else comes back as
    a per-100 g candidate for the client to review and log manually.
    """
    try:
        result = service.analyze_food_image(photo.image_base64, photo.mime_type)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="AI Analysis failed. Please enter manually."
        )

    photo_url = f"data:{photo.mime_type};base64,{photo.image_base64}"
    if result.confidence > settings.food_confidence_threshold:
        log = schemas.FoodLog(
            id=new_id(),
            client_id=current_user.id,
            date=analytics.utc_now_iso(),
            meal_type=photo.meal_type,
            food_name=result.food_name,
            grams=result.grams,
            macros=result.macros,
            is_verified=True,
            photo_url=photo_url,
            ai_confidence=result.confidence,
        )
        store.add_food_log(log)
        return schemas.FoodPhotoResult(
            accepted=True,
            message=f"Added: {result.food_name} ({result.grams:g}g)",
            log=log,
        )

    name = result.food_name + (" (?)" if result.confidence < LOW_CONFIDENCE else "")
    return schemas.FoodPhotoResult(
        accepted=False,
        message="Low confidence detection. Please review details.",
        candidate=analytics.per_100g(
            id=f"ai-temp-{new_id()}",
            name=name,
            macros=result.macros,
            grams=result.grams,
            image_url=photo_url,
        ),
        suggested_grams=result.grams,
    )


@router.get("/quick-log", response_model=schemas.QuickLogSuggestion)
def quick_log(
    slot: str = Query(..., description="Meal plan slot, e.g. lunch"),
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
    service: Optional[GenerationService] = Depends(get_optional_generation_service),
):
    """
    Turn the coach's plan for a meal slot into a loggable suggestion.

    The first "<grams>g <name>" item is matched against the catalog; without a
    match the parsed name is returned as a search query with the same results
    GET /search would give, AI fallback included.
    """
    client = _own_client(store, current_user)
    text = (client.meal_plan or {}).get(slot)
    if not text:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No meal planned for {slot}"
        )

    grams, query = analytics.parse_meal_suggestion(text)
    suggestion = schemas.QuickLogSuggestion(meal_type=slot, grams=grams, query=query)
    if grams is not None:
        suggestion.food = next((f for f in FOOD_DATABASE if query.lower() in f.name.lower()), None)
    if suggestion.food is None:
        suggestion.results = _search_with_fallback(query, service)
    return suggestion
