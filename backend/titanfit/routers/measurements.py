"""
Body measurement routes: tape measurements and progress photos.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Dict, List, Optional

from .. import schemas, analytics
from ..auth import get_current_client
from ..store import FitnessStore, get_store, new_id

router = APIRouter(prefix="/api/measurements", tags=["Measurements"])


def _client_measurements(store: FitnessStore, client_id: str) -> List[schemas.MeasurementLog]:
    return [m for m in store.get_measurements() if m.client_id == client_id]


@router.post("", response_model=schemas.MeasurementLog, status_code=status.HTTP_201_CREATED)
def create_measurement(
    measurement: schemas.MeasurementCreate,
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """
    Log body measurements in cm. Chest or waist is required.
    """
    if not measurement.chest and not measurement.waist:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Chest or waist measurement is required"
        )

    log = schemas.MeasurementLog(
        id=new_id(),
        client_id=current_user.id,
        date=analytics.utc_now_iso(),
        **measurement.model_dump(),
    )
    store.add_measurement(log)
    return log


@router.post("/photo", response_model=schemas.MeasurementLog, status_code=status.HTTP_201_CREATED)
def upload_progress_photo(
    photo: schemas.ProgressPhotoCreate,
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """
    Store a progress photo (URL or data URL) as a measurement entry without sizes.
    """
    log = schemas.MeasurementLog(
        id=new_id(),
        client_id=current_user.id,
        date=analytics.utc_now_iso(),
        photo_url=photo.photo_url,
        notes=photo.notes,
    )
    store.add_measurement(log)
    return log


@router.get("", response_model=List[schemas.MeasurementLog])
def list_measurements(
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    return _client_measurements(store, current_user.id)


@router.get("/changes", response_model=Dict[str, Optional[float]])
def get_measurement_changes(
    current_user: schemas.User = Depends(get_current_client),
    store: FitnessStore = Depends(get_store),
):
    """Latest minus previous value per site; null when either is missing."""
    return analytics.measurement_changes(_client_measurements(store, current_user.id))
