"""
Workout Plan Builder

Turns one body measurement and a goal into a training plan: target BMI and
weight, time-to-goal estimate, a weekly gym template and advisory notes.

This is a simple, explainable heuristic. It is not medical advice and does
not check contraindications.

Stateless: every call builds a fresh, immutable WorkoutPlan from its inputs.
Callers must pass a BMI computed with calculate_bmi() for the same
weight/height; the builder does not recompute it.
"""

import logging
import math
from dataclasses import asdict, dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from services.bmi_calculator import round1

logger = logging.getLogger(__name__)


class Goal(str, Enum):
    """What the user is training for."""
    LOSE = "lose"
    GAIN = "gain"
    FIT = "fit"


# Safe rates of weight change used for the duration estimate (kg/week)
LOSS_RATE_KG_PER_WEEK = 0.5
LOSS_RATE_HIGH_BMI_KG_PER_WEEK = 0.75
HIGH_BMI_THRESHOLD = 30.0
GAIN_RATE_KG_PER_WEEK = 0.35

# Recomposition window for the "fit" goal
FIT_CENTER_BMI = 22.0
FIT_MIN_WEEKS = 8
FIT_MAX_WEEKS = 12
FIT_WEEKS_PER_BMI_POINT = 2


@dataclass(frozen=True)
class GymPlan:
    """Weekly session template."""

    strength_sessions_per_week: int
    strength_minutes_per_session: int
    cardio_sessions_per_week: int
    cardio_minutes_per_session: int
    steps_per_day: int

    @property
    def strength_minutes_per_week(self) -> int:
        return self.strength_sessions_per_week * self.strength_minutes_per_session

    @property
    def cardio_minutes_per_week(self) -> int:
        return self.cardio_sessions_per_week * self.cardio_minutes_per_session


@dataclass(frozen=True)
class GoalProfile:
    """Everything about a goal that does not depend on the measurement."""

    target_bmi: float
    gym_plan: GymPlan
    summary_template: str
    notes: Tuple[str, ...]


@dataclass(frozen=True)
class WorkoutPlan:
    """Result of build_workout_plan()."""

    goal: Goal
    target_bmi: float
    current_weight_kg: float
    target_weight_kg: float
    delta_kg: float
    estimated_weeks: int
    summary: str
    gym_plan: GymPlan
    notes: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["goal"] = self.goal.value
        data["notes"] = list(self.notes)
        return data


# Lose/Gain targets sit just inside the normal band (18.5-25) rather than on
# its edge; Fit aims at the middle of it.
GOAL_PROFILES: Mapping[Goal, GoalProfile] = MappingProxyType({
    Goal.LOSE: GoalProfile(
        target_bmi=24.0,
        gym_plan=GymPlan(
            strength_sessions_per_week=3,
            strength_minutes_per_session=45,
            cardio_sessions_per_week=3,
            cardio_minutes_per_session=35,
            steps_per_day=8000,
        ),
        summary_template="Target: reduce weight to ~{target_weight_kg:g} kg (BMI ≈ {target_bmi:g}).",
        notes=(
            "Consistency matters most: strength training to preserve muscle plus moderate cardio.",
            "If you have contraindications (heart, joints, blood pressure), agree the load with a specialist.",
        ),
    ),
    Goal.GAIN: GoalProfile(
        target_bmi=20.0,
        gym_plan=GymPlan(
            strength_sessions_per_week=4,
            strength_minutes_per_session=55,
            cardio_sessions_per_week=2,
            cardio_minutes_per_session=20,
            steps_per_day=6000,
        ),
        summary_template="Target: gain weight up to ~{target_weight_kg:g} kg (BMI ≈ {target_bmi:g}).",
        notes=(
            "Gaining depends on progressive overload and sufficient nutrition (protein and calories).",
            "Cardio stays short, just enough to maintain endurance.",
        ),
    ),
    Goal.FIT: GoalProfile(
        target_bmi=22.0,
        gym_plan=GymPlan(
            strength_sessions_per_week=3,
            strength_minutes_per_session=50,
            cardio_sessions_per_week=2,
            cardio_minutes_per_session=25,
            steps_per_day=7000,
        ),
        summary_template="Target: improve your form around BMI ≈ {target_bmi:g} (strength + moderate cardio).",
        notes=(
            "BMI does not distinguish muscle from fat: for accuracy track circumferences, photos or body-fat percentage.",
        ),
    ),
})


def weight_for_bmi(height_cm: float, bmi: float) -> float:
    """Invert the BMI formula: the weight that gives ``bmi`` at ``height_cm``."""
    height_m = height_cm / 100.0
    return bmi * height_m * height_m


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _weeks_to_cover(needed_kg: float, rate_kg_per_week: float) -> int:
    if needed_kg <= 0:
        return 0
    return math.ceil(needed_kg / rate_kg_per_week)


def estimate_weeks(goal: Goal, weight_kg: float, target_weight_kg: float, bmi: float) -> int:
    """
    Estimate how many weeks the goal takes.

    Lose/Gain divide the remaining kilograms by a safe weekly rate, using the
    raw input weight (never the rounded delta). Fit is a fixed 8-12 week
    recomposition window that widens the further BMI sits from 22.
    """
    if goal is Goal.LOSE:
        rate = LOSS_RATE_HIGH_BMI_KG_PER_WEEK if bmi >= HIGH_BMI_THRESHOLD else LOSS_RATE_KG_PER_WEEK
        return _weeks_to_cover(max(0.0, weight_kg - target_weight_kg), rate)

    if goal is Goal.GAIN:
        return _weeks_to_cover(max(0.0, target_weight_kg - weight_kg), GAIN_RATE_KG_PER_WEEK)

    raw = FIT_MIN_WEEKS + abs(FIT_CENTER_BMI - bmi) * FIT_WEEKS_PER_BMI_POINT
    # Clamp before rounding: far-off BMI values overflow to inf
    return _round_half_up(min(FIT_MAX_WEEKS, max(FIT_MIN_WEEKS, raw)))


def build_workout_plan(weight_kg: float, height_cm: float, bmi: float, goal: Goal) -> WorkoutPlan:
    """
    Build a workout plan for one measurement and goal.

    Args:
        weight_kg: Current weight in kilograms
        height_cm: Height in centimeters
        bmi: BMI for the same weight/height (see calculate_bmi)
        goal: Goal.LOSE, Goal.GAIN or Goal.FIT

    Returns:
        WorkoutPlan with display values rounded to one decimal
    """
    goal = Goal(goal)
    profile = GOAL_PROFILES[goal]

    target_weight_kg = round1(weight_for_bmi(height_cm, profile.target_bmi))
    delta_kg = round1(target_weight_kg - weight_kg)
    estimated_weeks = estimate_weeks(goal, weight_kg, target_weight_kg, bmi)

    summary = profile.summary_template.format(
        target_weight_kg=target_weight_kg,
        target_bmi=profile.target_bmi,
    )

    logger.debug(
        "Built %s plan: target %.1f kg, %d weeks", goal.value, target_weight_kg, estimated_weeks
    )

    return WorkoutPlan(
        goal=goal,
        target_bmi=profile.target_bmi,
        current_weight_kg=round1(weight_kg),
        target_weight_kg=target_weight_kg,
        delta_kg=delta_kg,
        estimated_weeks=estimated_weeks,
        summary=summary,
        gym_plan=profile.gym_plan,
        notes=profile.notes,
    )
