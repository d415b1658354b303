"""
Admin API endpoints.

Read-only views over users and their measurement history. Admin role required.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from core.config import settings
from core.database import get_db
from core.auth import require_admin
from core.exceptions import UserNotFoundError
from models import User
from schemas import AdminUserResponse, HistoryResponse
from services.history_service import list_history

router = APIRouter(prefix="/v1/admin", tags=["admin"])


@router.get("/users", response_model=List[AdminUserResponse])
def list_users(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Newest accounts first."""
    return (
        db.query(User)
        .order_by(User.created_at.desc())
        .limit(settings.ADMIN_USERS_LIMIT)
        .all()
    )


@router.get("/history/{user_id}", response_model=HistoryResponse)
def user_history(
    user_id: UUID,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Measurement history of any user."""
    if not db.query(User).filter(User.id == user_id).first():
        raise UserNotFoundError(user_id)
    return {"items": list_history(db, user_id)}
