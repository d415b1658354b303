"""
Measurement history store.

Append / list / clear of a user's BMI measurements. BMI and category are
always derived here from weight and height via the classifier, so stored
rows can never disagree with the formula.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from core.config import settings
from core.logging import log_context
from models import BmiHistoryEntry
from services.bmi_calculator import calculate_bmi, classify_bmi, round1

logger = logging.getLogger(__name__)


def list_history(db: Session, user_id: UUID, limit: Optional[int] = None) -> List[BmiHistoryEntry]:
    """Newest-first measurements for one user, capped at ``limit`` (default HISTORY_LIMIT)."""
    if limit is None:
        limit = settings.HISTORY_LIMIT
    return (
        db.query(BmiHistoryEntry)
        .filter(BmiHistoryEntry.user_id == user_id)
        .order_by(BmiHistoryEntry.at.desc())
        .limit(limit)
        .all()
    )


def latest_entry(db: Session, user_id: UUID) -> Optional[BmiHistoryEntry]:
    """Most recent measurement, or None for an empty history."""
    return (
        db.query(BmiHistoryEntry)
        .filter(BmiHistoryEntry.user_id == user_id)
        .order_by(BmiHistoryEntry.at.desc())
        .first()
    )


def append_measurement(
    db: Session,
    user_id: UUID,
    weight_kg: float,
    height_cm: float,
    at: Optional[datetime] = None,
) -> BmiHistoryEntry:
    """
    Record one measurement.

    Weight and height are stored as given; BMI is stored rounded to one
    decimal alongside its category label.
    """
    bmi = calculate_bmi(weight_kg, height_cm)
    category = classify_bmi(bmi)

    if at is not None and at.tzinfo is None:
        at = at.replace(tzinfo=timezone.utc)

    entry = BmiHistoryEntry(
        user_id=user_id,
        at=at or datetime.now(timezone.utc),
        weight_kg=weight_kg,
        height_cm=height_cm,
        bmi=round1(bmi),
        category=category.label,
    )
    db.add(entry)
    db.flush()

    logger.info(
        "Recorded measurement",
        extra=log_context(user_id=user_id, category=category.label),
    )
    return entry


def clear_history(db: Session, user_id: UUID) -> int:
    """Delete every measurement of a user; returns the number removed."""
    deleted = (
        db.query(BmiHistoryEntry)
        .filter(BmiHistoryEntry.user_id == user_id)
        .delete(synchronize_session=False)
    )
    logger.info(
        "Cleared history",
        extra=log_context(user_id=user_id, deleted=deleted),
    )
    return deleted
