"""
Core data models for Agebmi.

These Pydantic models define the inputs and outputs of an evaluation.
Validation, classification, and export all work with these models.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, computed_field

from agebmi.errors import InvalidMeasurementError
from knowledge.bands import (
    AGE_GROUP_LABELS,
    AGE_GROUP_NOTES,
    CATEGORY_STYLES,
    get_band,
)


# =============================================================================
# LIMITS
# =============================================================================

MAX_WEIGHT_KG = 500
MAX_HEIGHT_CM = 300
MIN_AGE_YEARS = 2
MAX_AGE_YEARS = 120


# =============================================================================
# ENUMS
# =============================================================================


class AgeGroup(str, Enum):
    CHILD = "child"
    ADULT = "adult"
    SENIOR = "senior"

    @property
    def bmi_low(self) -> float:
        return get_band(self.value)[0]

    @property
    def bmi_high(self) -> float:
        return get_band(self.value)[1]

    @property
    def label(self) -> str:
        return AGE_GROUP_LABELS[self.value]

    @property
    def note(self) -> str:
        """Disclaimer shown alongside results for this age group."""
        return AGE_GROUP_NOTES[self.value]


class Category(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @property
    def label(self) -> str:
        return CATEGORY_STYLES[self.value].label

    @property
    def color(self) -> str:
        return CATEGORY_STYLES[self.value].color

    @property
    def sort_order(self) -> int:
        return CATEGORY_STYLES[self.value].sort_order


class Direction(str, Enum):
    NONE = "none"
    GAIN = "gain"
    LOSE = "lose"


class MessageKind(str, Enum):
    CONGRATULATE = "congratulate"
    SUGGEST_GAIN = "suggest_gain"
    SUGGEST_LOSE = "suggest_lose"
    SUGGEST_LOSE_URGENT = "suggest_lose_urgent"


class MeasurementField(str, Enum):
    WEIGHT = "weight"
    HEIGHT = "height"
    AGE = "age"


class ErrorCode(str, Enum):
    EMPTY = "empty"
    NOT_POSITIVE_NUMBER = "not_positive_number"
    INVALID_INTEGER = "invalid_integer"
    TOO_LARGE = "too_large"


# =============================================================================
# INPUT
# =============================================================================


class Measurement(BaseModel):
    """A validated weight/height/age reading."""
    weight_kg: float = Field(gt=0, le=MAX_WEIGHT_KG, description="Body weight in kilograms")
    height_cm: float = Field(gt=0, le=MAX_HEIGHT_CM, description="Height in centimeters")
    age_years: int = Field(ge=MIN_AGE_YEARS, le=MAX_AGE_YEARS, description="Age in whole years")

    @computed_field
    @property
    def height_m(self) -> float:
        return self.height_cm / 100


class FieldError(BaseModel):
    """A single field-level validation failure."""
    field: MeasurementField
    code: ErrorCode
    message: str


class ValidationResult(BaseModel):
    """
    Outcome of validating raw input.

    Holds either a Measurement or the complete set of field errors, never both.
    """
    measurement: Measurement | None = None
    errors: list[FieldError] = Field(default_factory=list)

    @computed_field
    @property
    def ok(self) -> bool:
        return self.measurement is not None and not self.errors

    def error_for(self, field: MeasurementField) -> FieldError | None:
        """Get the error for a field, if it failed."""
        for error in self.errors:
            if error.field == field:
                return error
        return None

    def unwrap(self) -> Measurement:
        """Return the measurement or raise InvalidMeasurementError."""
        if not self.ok:
            raise InvalidMeasurementError(self.errors)
        return self.measurement


# =============================================================================
# OUTPUT
# =============================================================================


class AdviceResult(BaseModel):
    """Classification and weight advice for one measurement."""
    measurement: Measurement
    bmi: float = Field(ge=0)
    category: Category
    age_group: AgeGroup
    healthy_min_kg: float
    healthy_max_kg: float
    delta_kg: float = Field(ge=0, description="Kilograms to gain or lose; 0 when healthy")
    direction: Direction
    message_kind: MessageKind

    @computed_field
    @property
    def bmi_low(self) -> float:
        return self.age_group.bmi_low

    @computed_field
    @property
    def bmi_high(self) -> float:
        return self.age_group.bmi_high


class ReferenceRange(BaseModel):
    """One row of the category reference table."""
    category: Category
    range_text: str

    @computed_field
    @property
    def label(self) -> str:
        return self.category.label


class HealthSummary(BaseModel):
    """
    Everything a presentation layer needs to render a result.

    Built from an AdviceResult; carries rendered text but no layout.
    """
    result: AdviceResult
    age_group_label: str
    age_note: str = ""
    suggestion: str
    advice_message: str
    reference_title: str
    reference_ranges: list[ReferenceRange] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def category_label(self) -> str:
        return self.result.category.label

    @computed_field
    @property
    def category_color(self) -> str:
        return self.result.category.color
