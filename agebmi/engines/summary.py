"""
Health summary composition.

Turns an AdviceResult into the text a presentation layer shows: suggestion,
advice message, age-group disclaimer, and the age-adjusted reference table.
"""

from __future__ import annotations

from agebmi.models import (
    AdviceResult,
    AgeGroup,
    Category,
    HealthSummary,
    ReferenceRange,
)
from knowledge.advice import AdviceTemplates
from knowledge.bands import REFERENCE_TITLES, reference_rows


def reference_ranges(age_group: AgeGroup) -> list[ReferenceRange]:
    """Category reference table for an age group, in category order."""
    return [
        ReferenceRange(category=Category(key), range_text=text)
        for key, text in reference_rows(age_group.value)
    ]


def reference_title(age_group: AgeGroup) -> str:
    return REFERENCE_TITLES[age_group.value]


def summarize(result: AdviceResult, templates: AdviceTemplates | None = None) -> HealthSummary:
    """
    Build a HealthSummary for an evaluation result.

    Args:
        result: Output of evaluate()
        templates: Advice templates (defaults to the bundled messages)

    Returns:
        HealthSummary with rendered suggestion and advice text
    """
    templates = templates or AdviceTemplates.get()
    kind = result.message_kind.value

    return HealthSummary(
        result=result,
        age_group_label=result.age_group.label,
        age_note=result.age_group.note,
        suggestion=templates.suggestion(kind, result.delta_kg),
        advice_message=templates.message(kind, result.delta_kg),
        reference_title=reference_title(result.age_group),
        reference_ranges=reference_ranges(result.age_group),
    )
