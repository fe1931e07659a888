"""
Input validation for raw weight, height, and age.

Every field is checked independently so the caller always gets the full set
of field errors, one per invalid field. Nothing here raises on bad input.
"""

from __future__ import annotations

import logging
import re
from typing import Union

from agebmi.models import (
    MAX_AGE_YEARS,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    MIN_AGE_YEARS,
    ErrorCode,
    FieldError,
    Measurement,
    MeasurementField,
    ValidationResult,
)

logger = logging.getLogger(__name__)

RawValue = Union[str, int, float, None]

# Plain ASCII decimal or exponent notation, plus infinity. Narrower than
# float(), which also takes "1_00" and non-ASCII digits.
_NUMBER_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?inf(?:inity)?",
    re.IGNORECASE,
)

# Field -> error code -> user-facing message
ERROR_MESSAGES: dict[MeasurementField, dict[ErrorCode, str]] = {
    MeasurementField.WEIGHT: {
        ErrorCode.EMPTY: "Weight cannot be empty.",
        ErrorCode.NOT_POSITIVE_NUMBER: "Please enter a valid positive weight.",
        ErrorCode.TOO_LARGE: f"Weight seems too high. Max: {MAX_WEIGHT_KG} kg.",
    },
    MeasurementField.HEIGHT: {
        ErrorCode.EMPTY: "Height cannot be empty.",
        ErrorCode.NOT_POSITIVE_NUMBER: "Height cannot be zero or negative.",
        ErrorCode.TOO_LARGE: f"Height seems too high. Max: {MAX_HEIGHT_CM} cm.",
    },
    MeasurementField.AGE: {
        ErrorCode.EMPTY: "Age cannot be empty.",
        ErrorCode.INVALID_INTEGER: f"Please enter a valid age (min {MIN_AGE_YEARS} years).",
        ErrorCode.TOO_LARGE: f"Age seems too high. Max: {MAX_AGE_YEARS} years.",
    },
}


def _error(field: MeasurementField, code: ErrorCode) -> FieldError:
    return FieldError(field=field, code=code, message=ERROR_MESSAGES[field][code])


def _to_text(raw: RawValue) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


def _parse_number(text: str) -> float | None:
    """Parse a plain ASCII decimal number; None when unparseable or NaN."""
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def _check_positive(field: MeasurementField, raw: RawValue, maximum: float) -> tuple[float | None, FieldError | None]:
    text = _to_text(raw)
    if text == "":
        return None, _error(field, ErrorCode.EMPTY)

    value = _parse_number(text)
    if value is None or value <= 0:
        return None, _error(field, ErrorCode.NOT_POSITIVE_NUMBER)
    if value > maximum:
        return None, _error(field, ErrorCode.TOO_LARGE)
    return value, None


def check_weight(raw: RawValue) -> tuple[float | None, FieldError | None]:
    """Validate a raw weight. Returns (weight_kg, None) or (None, error)."""
    return _check_positive(MeasurementField.WEIGHT, raw, MAX_WEIGHT_KG)


def check_height(raw: RawValue) -> tuple[float | None, FieldError | None]:
    """Validate a raw height. Returns (height_cm, None) or (None, error)."""
    return _check_positive(MeasurementField.HEIGHT, raw, MAX_HEIGHT_CM)


def check_age(raw: RawValue) -> tuple[int | None, FieldError | None]:
    """
    Validate a raw age.

    Non-integer values and ages below the minimum share one error. A
    whole-valued decimal such as "18.0" counts as an integer.
    """
    field = MeasurementField.AGE
    text = _to_text(raw)
    if text == "":
        return None, _error(field, ErrorCode.EMPTY)

    value = _parse_number(text)
    if value is None or not value.is_integer() or value < MIN_AGE_YEARS:
        return None, _error(field, ErrorCode.INVALID_INTEGER)
    if value > MAX_AGE_YEARS:
        return None, _error(field, ErrorCode.TOO_LARGE)
    return int(value), None


_CHECKS = {
    MeasurementField.WEIGHT: check_weight,
    MeasurementField.HEIGHT: check_height,
    MeasurementField.AGE: check_age,
}


def validate_field(field: MeasurementField | str, raw: RawValue) -> FieldError | None:
    """
    Validate a single field in isolation.

    Returns:
        The field's error, or None when the value is valid
    """
    field = MeasurementField(field)
    _, error = _CHECKS[field](raw)
    return error


def validate(weight_raw: RawValue, height_raw: RawValue, age_raw: RawValue) -> ValidationResult:
    """
    Validate raw weight, height, and age.

    Args:
        weight_raw: Weight in kilograms as typed by the user
        height_raw: Height in centimeters as typed by the user
        age_raw: Age in whole years as typed by the user

    Returns:
        ValidationResult with a Measurement when all three fields are valid,
        otherwise with one FieldError per invalid field
    """
    weight, weight_error = check_weight(weight_raw)
    height, height_error = check_height(height_raw)
    age, age_error = check_age(age_raw)

    errors = [e for e in (weight_error, height_error, age_error) if e is not None]
    if errors:
        logger.debug("Rejected input: %s", ", ".join(f"{e.field.value}={e.code.value}" for e in errors))
        return ValidationResult(errors=errors)

    return ValidationResult(
        measurement=Measurement(weight_kg=weight, height_cm=height, age_years=age),
    )
