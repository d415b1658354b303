"""
Measurement History API Endpoints

Per-user list / append / clear of BMI measurements. BMI and category are
calculated server-side from weight and height.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.auth import get_current_user
from core.exceptions import InvalidMeasurementError
from models import User
from schemas import HistoryResponse, MeasurementCreate
from services.bmi_calculator import validate_measurement
from services.history_service import append_measurement, clear_history, list_history

router = APIRouter(prefix="/v1", tags=["history"])


@router.get("/history", response_model=HistoryResponse)
def get_history(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Newest-first measurements of the authenticated user."""
    return {"items": list_history(db, current_user.id)}


@router.post("/history", response_model=HistoryResponse, status_code=status.HTTP_201_CREATED)
def add_history_item(
    measurement: MeasurementCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Record a measurement and return the refreshed list.
    """
    errors = validate_measurement(measurement.weight_kg, measurement.height_cm)
    if errors:
        raise InvalidMeasurementError(errors)

    append_measurement(
        db,
        user_id=current_user.id,
        weight_kg=measurement.weight_kg,
        height_cm=measurement.height_cm,
        at=measurement.at,
    )
    db.commit()

    return {"items": list_history(db, current_user.id)}


@router.delete("/history", response_model=HistoryResponse)
def delete_history(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete all measurements of the authenticated user."""
    clear_history(db, current_user.id)
    db.commit()
    return {"items": []}
