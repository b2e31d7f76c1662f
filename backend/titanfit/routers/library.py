"""
Reference data routes: food catalog and exercise library.
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from .. import schemas, analytics
from ..auth import get_current_user
from ..seed import EXERCISE_LIBRARY, FOOD_DATABASE

router = APIRouter(prefix="/api/library", tags=["Library"])


@router.get("/foods", response_model=List[schemas.FoodItem])
def list_foods(
    q: Optional[str] = Query(None, description="Case-insensitive name filter"),
    current_user: schemas.User = Depends(get_current_user),
):
    """Catalog foods with per-100 g nutrition."""
    if q:
        return analytics.search_food_catalog(q, FOOD_DATABASE)
    return FOOD_DATABASE


@router.get("/exercises", response_model=List[schemas.ExerciseDefinition])
def list_exercises(
    muscle_group: Optional[str] = Query(None, alias="muscleGroup"),
    current_user: schemas.User = Depends(get_current_user),
):
    if muscle_group:
        return [ex for ex in EXERCISE_LIBRARY if ex.muscle_group.lower() == muscle_group.lower()]
    return EXERCISE_LIBRARY
