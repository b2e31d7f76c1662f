"""
Workout routes: coaches assign daily workouts, clients tick off exercises.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from .. import schemas, analytics
from ..auth import get_current_client, get_current_coach
from ..llm.service import GenerationService, get_generation_service
from ..store import FitnessStore, get_store, new_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/workouts", tags=["Workouts"])


def _get_workout_or_404(store: FitnessStore, workout_id: str) -> schemas.Workout:
    workout = store.get_workout(workout_id)
    if not workout:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Workout not found"
        )
    return workout


def _require_client(store: FitnessStore, client_id: str) -> schemas.ClientProfile:
    client = store.get_client(client_id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client


@router.post("", response_model=schemas.Workout, status_code=status.HTTP_201_CREATED)
def assign_workout(
    workout: schemas.WorkoutSave,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Assign a workout to a client.

    - **clientId**: the client
    - **dayOfWeek**: e.g. Monday
    - **title**: e.g. Push Day
    - **exercises**: list of exercises (sets, reps, optional weight)
    """
    _require_client(store, workout.client_id)
    record = schemas.Workout(
        id=new_id(),
        client_id=workout.client_id,
        day_of_week=workout.day_of_week,
        title=workout.title,
        exercises=workout.exercises,
        completed=analytics.is_workout_complete(workout.exercises),
    )
    store.add_workout(record)
    return record


@router.put("/{workout_id}", response_model=schemas.Workout)
def update_workout(
    workout_id: str,
    workout: schemas.WorkoutSave,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Replace a workout's day, title and exercises.
    """
    _get_workout_or_404(store, workout_id)
    _require_client(store, workout.client_id)
    record = schemas.Workout(
        id=workout_id,
        client_id=workout.client_id,
        day_of_week=workout.day_of_week,
        title=workout.title,
        exercises=workout.exercises,
        completed=analytics.is_workout_complete(workout.exercises),
    )
    store.update_workout(record)
    return record


@router.post("/generate", response_model=schemas.AiWorkoutResult)
def generate_workout(
    request: schemas.WorkoutPlanRequest,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
    service: GenerationService = Depends(get_generation_service),
):
    """
    Draft a workout for the client's goal. Nothing is saved.
    """
    client = _require_client(store, request.client_id)
    try:
        return service.generate_workout(client.goal, request.day_of_week, request.focus)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to generate workout. Please try again."
        )


@router.get("", response_model=List[schemas.Workout])
def list_workouts(
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """Get the current client's assigned workouts."""
    return [w for w in store.get_workouts() if w.client_id == current_user.id]


@router.post("/{workout_id}/exercises/{exercise_id}/toggle", response_model=schemas.Workout)
def toggle_exercise(
    workout_id: str,
    exercise_id: str,
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """
    Flip one exercise's completed flag.

    The workout counts as completed once every exercise is.
    """
    workout = _get_workout_or_404(store, workout_id)
    if workout.client_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Workout not found"
        )
    if not any(ex.id == exercise_id for ex in workout.exercises):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Exercise not found"
        )

    updated = analytics.toggle_exercise(workout, exercise_id)
    store.update_workout(updated)
    logger.debug(f"Workout {workout_id} exercise {exercise_id} toggled; completed={updated.completed}")
    return updated
