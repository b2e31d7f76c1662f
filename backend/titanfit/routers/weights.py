"""
Weight entry routes: client weigh-ins and the recent trend.
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from datetime import date

from .. import schemas, analytics
from ..auth import get_current_client
from ..store import FitnessStore, get_store, new_id

router = APIRouter(prefix="/api/weights", tags=["Weights"])


def _client_weight_logs(store: FitnessStore, client_id: str) -> List[schemas.WeightLog]:
    return analytics.sort_by_date(w for w in store.get_weight_logs() if w.client_id == client_id)


@router.post("", response_model=schemas.WeightLog, status_code=status.HTTP_201_CREATED)
def create_weight(
    weight: schemas.WeightLogCreate,
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store)
):
    """
    Log today's weight for the current client.

    - **weightKg**: Weight in kg
    - **source**: manual or photo

    The client's current weight is updated with the same write.
    """
    if weight.weight_kg <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Weight must be positive"
        )

    log = schemas.WeightLog(
        id=new_id(),
        client_id=current_user.id,
        date=analytics.utc_today(),
        weight_kg=weight.weight_kg,
        source=weight.source,
    )

    # Stamp the log with the trend it produces
    trend = analytics.classify_weight_trend(_client_weight_logs(store, current_user.id) + [log])
    if trend.color:
        log.trend_status = trend.color
        log.trend_message = trend.message

    store.add_weight_log(log)
    return log


@router.get("", response_model=List[schemas.WeightLog])
def list_weights(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store)
):
    """
    Get the current client's weigh-ins, oldest first.

    - **start_date**: Filter from this date (inclusive)
    - **end_date**: Filter to this date (inclusive)
    """
    logs = _client_weight_logs(store, current_user.id)
    if start_date:
        logs = [w for w in logs if analytics.parse_timestamp(w.date).date() >= start_date]
    if end_date:
        logs = [w for w in logs if analytics.parse_timestamp(w.date).date() <= end_date]
    return logs[skip:skip + limit]


@router.get("/trend", response_model=schemas.TrendResult)
def get_trend(
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store)
):
    """
    Classify the recent trend from the last four weigh-ins.
    """
    return analytics.classify_weight_trend(_client_weight_logs(store, current_user.id))
