from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime
from uuid import UUID
from typing import Optional, List

from services.goal_selection import GoalSelection
from services.workout_plan import Goal


# --- Auth ---

class UserRegister(BaseModel):
    """Schema for user registration."""
    email: EmailStr
    password: str
    name: Optional[str] = None


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class UserUpdate(BaseModel):
    """Schema for profile update (name/email)."""
    email: EmailStr
    name: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    new_password: str


class UserResponse(BaseModel):
    id: UUID
    name: str = ""
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class AdminUserResponse(UserResponse):
    created_at: datetime


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


# --- History ---

class MeasurementCreate(BaseModel):
    """A new measurement; BMI and category are calculated server-side."""
    weight_kg: float
    height_cm: float
    at: Optional[datetime] = None


class HistoryItem(BaseModel):
    id: UUID
    at: datetime
    weight_kg: float
    height_cm: float
    bmi: float
    category: str

    model_config = ConfigDict(from_attributes=True)


class HistoryResponse(BaseModel):
    items: List[HistoryItem]


# --- BMI / workout plan ---

class BmiRequest(BaseModel):
    weight_kg: float
    height_cm: float


class BmiResponse(BaseModel):
    bmi: float
    category: str
    note: str
    severity: int


class WorkoutPlanRequest(BaseModel):
    weight_kg: float
    height_cm: float
    bmi: Optional[float] = None  # calculated from weight/height when omitted
    goal: GoalSelection = GoalSelection.NONE


class GymPlanResponse(BaseModel):
    strength_sessions_per_week: int
    strength_minutes_per_session: int
    cardio_sessions_per_week: int
    cardio_minutes_per_session: int
    steps_per_day: int


class WorkoutPlanBody(BaseModel):
    goal: Goal
    target_bmi: float
    current_weight_kg: float
    target_weight_kg: float
    delta_kg: float
    estimated_weeks: int = Field(ge=0)
    summary: str
    gym_plan: GymPlanResponse
    notes: List[str]


class WorkoutPlanResponse(BaseModel):
    bmi: float
    category: str
    suggested_goal: Goal
    goal: Goal
    plan: WorkoutPlanBody
