"""
Client home routes: the dashboard summary and step progress.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional

from .. import schemas, analytics
from ..auth import get_current_client
from ..store import FitnessStore, get_store

router = APIRouter(prefix="/api/progress", tags=["Progress"])


def _own_client(store: FitnessStore, user: schemas.User) -> schemas.ClientProfile:
    client = store.get_client(user.id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client


@router.get("/summary", response_model=schemas.ClientSummary)
def get_summary(
    hour: Optional[int] = Query(None, ge=0, le=23, description="Client's local hour; defaults to the UTC hour"),
    steps: int = Query(0, ge=0, description="Steps walked so far today"),
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """
    Everything the client home screen shows.

    - **greeting** and **mealContext** from the hour of day
    - today's consumed macros against targets
    - weight trend, step progress and measurement changes
    """
    client = _own_client(store, current_user)
    if hour is None:
        hour = datetime.now(timezone.utc).hour

    food_logs = [log for log in store.get_food_logs() if log.client_id == client.id]
    weight_logs = [w for w in store.get_weight_logs() if w.client_id == client.id]
    measurements = [m for m in store.get_measurements() if m.client_id == client.id]

    return schemas.ClientSummary(
        greeting=analytics.greeting(hour),
        meal_context=analytics.meal_context(hour),
        consumed=analytics.daily_macro_totals(food_logs),
        targets=client.daily_macro_targets,
        trend=analytics.classify_weight_trend(weight_logs),
        steps=analytics.weekly_step_progress(steps, client.weekly_step_goal, client.step_goal),
        measurement_changes=analytics.measurement_changes(measurements),
    )


@router.get("/steps", response_model=schemas.StepProgress)
def get_step_progress(
    steps: int = Query(..., ge=0, description="Steps walked so far today"),
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """
    Project the week's steps from today's count. The count is not stored.
    """
    client = _own_client(store, current_user)
    return analytics.weekly_step_progress(steps, client.weekly_step_goal, client.step_goal)
