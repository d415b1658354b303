"""
User account helpers shared by the auth router and application startup.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from core.config import settings
from core.security import get_password_hash
from models import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def create_user(db: Session, email: str, password: str, name: str = "", role: str = "user") -> User:
    """Create a user with a hashed password. Caller commits."""
    user = User(
        email=normalize_email(email),
        password_hash=get_password_hash(password),
        name=(name or "").strip(),
        role=role,
    )
    db.add(user)
    db.flush()
    return user


def ensure_admin_user(db: Session) -> Optional[User]:
    """
    Create or promote the bootstrap admin from ADMIN_EMAIL / ADMIN_PASSWORD.

    Does nothing when either setting is missing. An existing account keeps
    its password and is only promoted.
    """
    email = normalize_email(settings.ADMIN_EMAIL or "")
    password = (settings.ADMIN_PASSWORD or "").strip()
    if not email or not password:
        return None

    user = get_user_by_email(db, email)
    if user:
        if user.role != "admin":
            user.role = "admin"
            db.commit()
            logger.info(f"Admin role granted to {email}")
        return user

    user = create_user(db, email=email, password=password, role="admin")
    db.commit()
    logger.info(f"Admin user created: {email}")
    return user
