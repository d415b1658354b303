from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from core.database import Base
import uuid
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False)
    name = Column(Text, default="", nullable=False)
    email = Column(Text, unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    role = Column(Text, default="user", nullable=False)  # 'user' | 'admin'

    history = relationship(
        "BmiHistoryEntry",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class BmiHistoryEntry(Base):
    """
    One recorded measurement.

    BMI and category are computed server-side by the classifier when the
    entry is appended; workout plans are never stored.
    """
    __tablename__ = "bmi_history"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    weight_kg = Column(Float, nullable=False)
    height_cm = Column(Float, nullable=False)
    bmi = Column(Float, nullable=False)
    category = Column(Text, nullable=False)

    user = relationship("User", back_populates="history")

    __table_args__ = (
        Index("idx_bmi_history_user_at", "user_id", "at"),
    )
