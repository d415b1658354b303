"""
BMI Calculation Service

BMI = weight_kg / (height_m)²

Classifies a BMI value into the six WHO adult categories. Pure functions:
no state, no I/O. Input range checks live in validate_measurement() and are
applied by the HTTP layer, never inside calculate/classify.
"""
import math
from dataclasses import dataclass
from typing import List

# Accepted measurement ranges for user input
MIN_WEIGHT_KG = 20.0
MAX_WEIGHT_KG = 300.0
MIN_HEIGHT_CM = 80.0
MAX_HEIGHT_CM = 250.0

# round1 moves a value by at most 0.05
SUPPLIED_BMI_TOLERANCE = 0.1


@dataclass(frozen=True)
class BmiCategory:
    """WHO category label with its fixed advisory note."""

    label: str
    note: str
    severity: int  # 0 = Underweight ... 5 = Obesity class III


UNDERWEIGHT = BmiCategory(
    label="Underweight",
    note="Consider discussing your diet and routine with a physician or dietitian.",
    severity=0,
)
NORMAL_WEIGHT = BmiCategory(
    label="Normal weight",
    note="Keep up your current activity and diet.",
    severity=1,
)
OVERWEIGHT = BmiCategory(
    label="Overweight",
    note="Moderate activity and some diet adjustment will be beneficial.",
    severity=2,
)
OBESITY_CLASS_I = BmiCategory(
    label="Obesity class I",
    note="A specialist consultation and a weight-loss plan are recommended.",
    severity=3,
)
OBESITY_CLASS_II = BmiCategory(
    label="Obesity class II",
    note="Medical supervision and lifestyle correction are recommended.",
    severity=4,
)
OBESITY_CLASS_III = BmiCategory(
    label="Obesity class III",
    note="An urgent medical consultation and comprehensive treatment are recommended.",
    severity=5,
)

# Upper bound (exclusive) -> category, checked in order. Anything at or
# above the last bound is OBESITY_CLASS_III.
_THRESHOLDS = (
    (18.5, UNDERWEIGHT),
    (25.0, NORMAL_WEIGHT),
    (30.0, OVERWEIGHT),
    (35.0, OBESITY_CLASS_I),
    (40.0, OBESITY_CLASS_II),
)

CATEGORIES = tuple(category for _, category in _THRESHOLDS) + (OBESITY_CLASS_III,)


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate BMI from weight (kg) and height (cm).

    The value is returned unrounded; use round1() for display.

    Examples:
        >>> round1(calculate_bmi(70, 175))
        22.9
    """
    height_m = height_cm / 100.0
    return weight_kg / (height_m * height_m)


def classify_bmi(bmi: float) -> BmiCategory:
    """
    Map a BMI value to its WHO adult category.

    The first threshold that ``bmi`` is strictly below wins, so boundary
    values (18.5, 25, 30, 35, 40) belong to the heavier category. Zero and
    negative values land in Underweight.
    """
    for upper_bound, category in _THRESHOLDS:
        if bmi < upper_bound:
            return category
    return OBESITY_CLASS_III


def round1(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return math.copysign(math.floor(abs(value) * 10 + 0.5), value) / 10


def validate_measurement(weight_kg: float, height_cm: float) -> List[str]:
    """
    Check raw user input before it reaches the calculator.

    Returns a list of human-readable errors, empty when the input is usable.
    Range errors are reported alongside sign errors, so -5 kg yields both;
    NaN fails only the sign check since it compares false to every bound.
    """
    errors = []

    if not (math.isfinite(weight_kg) and weight_kg > 0):
        errors.append("Weight must be a positive number.")
    if not (math.isfinite(height_cm) and height_cm > 0):
        errors.append("Height must be a positive number.")
    if height_cm < MIN_HEIGHT_CM or height_cm > MAX_HEIGHT_CM:
        errors.append(
            f"Height looks incorrect (expected {MIN_HEIGHT_CM:g}-{MAX_HEIGHT_CM:g} cm)."
        )
    if weight_kg < MIN_WEIGHT_KG or weight_kg > MAX_WEIGHT_KG:
        errors.append(
            f"Weight looks incorrect (expected {MIN_WEIGHT_KG:g}-{MAX_WEIGHT_KG:g} kg)."
        )
    return errors


def validate_supplied_bmi(bmi: float, weight_kg: float, height_cm: float) -> List[str]:
    """
    Check a BMI sent by a client against the measurement it came with.

    Call only after validate_measurement passed. A value rounded for display
    is accepted; anything further from the formula is rejected.
    """
    if not math.isfinite(bmi):
        return ["BMI must be a finite number."]
    if abs(bmi - calculate_bmi(weight_kg, height_cm)) > SUPPLIED_BMI_TOLERANCE:
        return ["BMI does not match the given weight and height."]
    return []
