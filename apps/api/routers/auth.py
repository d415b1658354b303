"""
Authentication API endpoints.

Provides:
- User registration
- Login (JWT token generation)
- Current user profile (read/update)
- Password change
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from core.database import get_db
from core.security import (
    verify_password,
    get_password_hash,
    create_user_token,
    ACCESS_TOKEN_EXPIRE_MINUTES,
)
from core.auth import get_current_user
from core.exceptions import EmailTakenError, UnauthorizedError
from core.password_policy import validate_password
from models import User
from schemas import (
    ChangePasswordRequest,
    TokenResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from services.user_service import create_user, get_user_by_email, normalize_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/auth", tags=["auth"])


def _token_response(user: User) -> dict:
    return {
        "access_token": create_user_token(user),
        "token_type": "bearer",
        "expires_in": ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        "user": UserResponse.model_validate(user),
    }


def _check_password_policy(password: str) -> None:
    ok, errors = validate_password(password)
    if not ok:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="; ".join(errors),
        )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    Issues a token immediately so the client does not need a second login call.
    """
    email = normalize_email(user_data.email)

    if get_user_by_email(db, email):
        raise EmailTakenError("Email already registered")

    _check_password_policy(user_data.password)

    user = create_user(db, email=email, password=user_data.password, name=user_data.name or "")
    db.commit()
    db.refresh(user)

    logger.info(f"User registered: {email}")
    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
):
    """Authenticate user and return JWT token."""
    email = normalize_email(credentials.email)
    user = get_user_by_email(db, email)

    # Same message for unknown email and wrong password (prevents enumeration)
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Failed login attempt for {email}")
        raise UnauthorizedError("Invalid email or password")

    return _token_response(user)


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """Get current authenticated user information."""
    return current_user


@router.put("/me", response_model=TokenResponse)
def update_current_user(
    update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Update name and email.

    Returns a fresh token because the email and name are token claims.
    """
    email = normalize_email(update.email)

    if email != current_user.email:
        existing = get_user_by_email(db, email)
        if existing and existing.id != current_user.id:
            raise EmailTakenError()

    user = current_user
    user.email = email
    user.name = (update.name or "").strip()
    db.commit()
    db.refresh(user)

    return _token_response(user)


@router.post("/change-password")
def change_password(
    request: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Set a new password for the authenticated user."""
    _check_password_policy(request.new_password)

    user = current_user
    user.password_hash = get_password_hash(request.new_password)
    db.commit()

    logger.info(f"Password changed for user {user.id}")
    return {"success": True}
