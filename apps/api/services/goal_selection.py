"""
Goal selection for the workout plan.

The plan builder takes a plain Goal. Deciding which goal to use is the
caller's job: a user who never picked one gets the goal suggested by their
latest BMI, while an explicit choice (including "fit") is always kept.
"""
from enum import Enum
from typing import Optional

from services.workout_plan import Goal

UNDERWEIGHT_BELOW_BMI = 18.5
OVERWEIGHT_FROM_BMI = 25.0


class GoalSelection(str, Enum):
    """A user's goal choice, with "never chosen" kept distinct from "fit"."""
    NONE = "none"
    LOSE = "lose"
    GAIN = "gain"
    FIT = "fit"

    @property
    def is_explicit(self) -> bool:
        return self is not GoalSelection.NONE


def suggest_goal(bmi: Optional[float]) -> Goal:
    """Goal implied by BMI alone; ``fit`` when no measurement exists yet."""
    if bmi is None:
        return Goal.FIT
    if bmi >= OVERWEIGHT_FROM_BMI:
        return Goal.LOSE
    if bmi < UNDERWEIGHT_BELOW_BMI:
        return Goal.GAIN
    return Goal.FIT


def resolve_goal(selection: GoalSelection, bmi: Optional[float]) -> Goal:
    """Explicit selections win; otherwise fall back to the BMI suggestion."""
    selection = GoalSelection(selection)
    if selection.is_explicit:
        return Goal(selection.value)
    return suggest_goal(bmi)
