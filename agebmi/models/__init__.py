"""
Data models for Agebmi.
"""

from .bmi import (
    MAX_AGE_YEARS,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    MIN_AGE_YEARS,
    AdviceResult,
    AgeGroup,
    Category,
    Direction,
    ErrorCode,
    FieldError,
    HealthSummary,
    Measurement,
    MeasurementField,
    MessageKind,
    ReferenceRange,
    ValidationResult,
)

__all__ = [
    "MAX_AGE_YEARS",
    "MAX_HEIGHT_CM",
    "MAX_WEIGHT_KG",
    "MIN_AGE_YEARS",
    "AdviceResult",
    "AgeGroup",
    "Category",
    "Direction",
    "ErrorCode",
    "FieldError",
    "HealthSummary",
    "Measurement",
    "MeasurementField",
    "MessageKind",
    "ReferenceRange",
    "ValidationResult",
]
