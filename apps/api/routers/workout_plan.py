"""
BMI and Workout Plan API Endpoints

- POST /v1/bmi/calculate: BMI value and WHO category for one measurement
- POST /v1/workout-plan: plan for an ad-hoc measurement (no auth)
- GET /v1/workout-plan/current: plan for the user's latest recorded measurement

Plans are recomputed on every request and never stored.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.auth import get_current_user
from core.exceptions import EmptyHistoryError, InvalidMeasurementError
from models import User
from schemas import BmiRequest, BmiResponse, WorkoutPlanRequest, WorkoutPlanResponse
from services.bmi_calculator import (
    calculate_bmi,
    classify_bmi,
    round1,
    validate_measurement,
    validate_supplied_bmi,
)
from services.goal_selection import GoalSelection, resolve_goal, suggest_goal
from services.history_service import latest_entry
from services.workout_plan import build_workout_plan

router = APIRouter(prefix="/v1", tags=["workout_plan"])


def _validated(weight_kg: float, height_cm: float) -> None:
    errors = validate_measurement(weight_kg, height_cm)
    if errors:
        raise InvalidMeasurementError(errors)


def _plan_response(weight_kg: float, height_cm: float, bmi: float, selection: GoalSelection) -> dict:
    goal = resolve_goal(selection, bmi)
    plan = build_workout_plan(weight_kg, height_cm, bmi, goal)
    return {
        "bmi": round1(bmi),
        "category": classify_bmi(bmi).label,
        "suggested_goal": suggest_goal(bmi),
        "goal": goal,
        "plan": plan.to_dict(),
    }


@router.post("/bmi/calculate", response_model=BmiResponse)
def calculate(request: BmiRequest):
    """Calculate BMI and classify it."""
    _validated(request.weight_kg, request.height_cm)

    bmi = calculate_bmi(request.weight_kg, request.height_cm)
    category = classify_bmi(bmi)
    return {
        "bmi": round1(bmi),
        "category": category.label,
        "note": category.note,
        "severity": category.severity,
    }


@router.post("/workout-plan", response_model=WorkoutPlanResponse)
def workout_plan(request: WorkoutPlanRequest):
    """
    Build a workout plan for the given measurement.

    ``goal`` defaults to "none", in which case the goal suggested by BMI is used.
    A supplied ``bmi`` must agree with weight and height.
    """
    _validated(request.weight_kg, request.height_cm)

    if request.bmi is None:
        bmi = calculate_bmi(request.weight_kg, request.height_cm)
    else:
        errors = validate_supplied_bmi(request.bmi, request.weight_kg, request.height_cm)
        if errors:
            raise InvalidMeasurementError(errors)
        bmi = request.bmi

    return _plan_response(request.weight_kg, request.height_cm, bmi, request.goal)


@router.get("/workout-plan/current", response_model=WorkoutPlanResponse)
def current_workout_plan(
    goal: GoalSelection = GoalSelection.NONE,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Plan for the most recent measurement in the user's history."""
    entry = latest_entry(db, current_user.id)
    if entry is None:
        raise EmptyHistoryError()

    # Stored BMI is rounded; recompute from the raw measurement
    bmi = calculate_bmi(entry.weight_kg, entry.height_cm)
    return _plan_response(entry.weight_kg, entry.height_cm, bmi, goal)
