"""
Age-adjusted BMI classification engine.

Maps a validated Measurement to an AdviceResult:

    age group -> BMI -> category -> healthy weight range -> advice

BMI = weight_kg / height_m^2, rounded half-up to 2 decimals.
Healthy weight range = band bounds * height_m^2, rounded half-up to 1 decimal.

Every function here is pure and total over valid measurements.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from agebmi.models import (
    AdviceResult,
    AgeGroup,
    Category,
    Direction,
    Measurement,
    MessageKind,
)
from agebmi.validation import validate
from knowledge.bands import get_age_group_key, obese_threshold

logger = logging.getLogger(__name__)

# Beyond this magnitude a value is reported unrounded
_MAX_ROUNDABLE_EXPONENT = 15


def round_half_up(value: float | Decimal, places: int) -> float:
    """
    Round to a number of decimal places, halves away from zero.

    Works on the shortest decimal representation of a float, so 2.675
    rounds to 2.68 rather than following its binary approximation.
    """
    d = value if isinstance(value, Decimal) else Decimal(repr(value))
    if not d.is_finite() or d.adjusted() >= _MAX_ROUNDABLE_EXPONENT:
        return float(d)
    return float(d.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def _height_m_squared(height_cm: float) -> Decimal:
    height_m = Decimal(repr(height_cm)) / 100
    return height_m * height_m


def age_group_of(age_years: int) -> AgeGroup:
    """
    Resolve the age group for an age in whole years.

    2-17 is Child, 18-64 is Adult, 65 and over is Senior.

    Raises:
        ValueError: for ages below 2
    """
    return AgeGroup(get_age_group_key(age_years))


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate BMI from weight (kg) and height (cm), rounded to 2 decimals.

    Divides in floating point and rounds the quotient's exact binary value,
    so 2.0 kg at 80 cm (3.1249999...) gives 3.12.
    """
    height_m = height_cm / 100
    h2 = height_m * height_m
    try:
        bmi = weight_kg / h2
    except (ZeroDivisionError, OverflowError):
        # height_m^2 underflows for vanishingly small heights
        return math.inf
    return round_half_up(Decimal(bmi), 2)


def classify(bmi: float, age_group: AgeGroup) -> Category:
    """
    Classify a BMI against an age group's healthy band.

    Both ends of the healthy band count as Normal. The obese threshold
    (high + 5) itself is Obese.
    """
    if bmi < age_group.bmi_low:
        return Category.UNDERWEIGHT
    if bmi <= age_group.bmi_high:
        return Category.NORMAL
    if bmi < obese_threshold(age_group.value):
        return Category.OVERWEIGHT
    return Category.OBESE


def healthy_weight_range(height_cm: float, age_group: AgeGroup) -> tuple[float, float]:
    """
    Weight range (kg) whose BMI falls in the age group's healthy band.

    Returns:
        (healthy_min_kg, healthy_max_kg), each rounded to 1 decimal
    """
    h2 = _height_m_squared(height_cm)
    healthy_min = round_half_up(Decimal(repr(age_group.bmi_low)) * h2, 1)
    healthy_max = round_half_up(Decimal(repr(age_group.bmi_high)) * h2, 1)
    return healthy_min, healthy_max


def advise(
    weight_kg: float,
    category: Category,
    healthy_min_kg: float,
    healthy_max_kg: float,
) -> tuple[float, Direction, MessageKind]:
    """
    Derive the weight adjustment toward the nearest healthy bound.

    Returns:
        (delta_kg, direction, message_kind); delta_kg is never negative
    """
    if category == Category.NORMAL:
        return 0.0, Direction.NONE, MessageKind.CONGRATULATE

    if category == Category.UNDERWEIGHT:
        delta = round_half_up(Decimal(repr(healthy_min_kg)) - Decimal(repr(weight_kg)), 1)
        return max(0.0, delta), Direction.GAIN, MessageKind.SUGGEST_GAIN

    delta = round_half_up(Decimal(repr(weight_kg)) - Decimal(repr(healthy_max_kg)), 1)
    if category == Category.OVERWEIGHT:
        return max(0.0, delta), Direction.LOSE, MessageKind.SUGGEST_LOSE
    return max(0.0, delta), Direction.LOSE, MessageKind.SUGGEST_LOSE_URGENT


def evaluate(measurement: Measurement) -> AdviceResult:
    """
    Evaluate a validated measurement.

    Args:
        measurement: Validated weight, height, and age

    Returns:
        AdviceResult with BMI, category, healthy range, and advice
    """
    age_group = age_group_of(measurement.age_years)
    bmi = calculate_bmi(measurement.weight_kg, measurement.height_cm)
    category = classify(bmi, age_group)
    healthy_min, healthy_max = healthy_weight_range(measurement.height_cm, age_group)
    delta, direction, message_kind = advise(
        measurement.weight_kg, category, healthy_min, healthy_max
    )

    logger.debug(
        "Evaluated age=%s bmi=%.2f group=%s category=%s",
        measurement.age_years, bmi, age_group.value, category.value,
    )

    return AdviceResult(
        measurement=measurement,
        bmi=bmi,
        category=category,
        age_group=age_group,
        healthy_min_kg=healthy_min,
        healthy_max_kg=healthy_max,
        delta_kg=delta,
        direction=direction,
        message_kind=message_kind,
    )


def evaluate_raw(weight_raw, height_raw, age_raw) -> AdviceResult:
    """
    Validate raw input and evaluate it.

    Raises:
        InvalidMeasurementError: if any field fails validation
    """
    return evaluate(validate(weight_raw, height_raw, age_raw).unwrap())
