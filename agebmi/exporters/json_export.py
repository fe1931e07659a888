"""
JSON exporter for Agebmi.

Exports health summaries as clean, human-readable JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from agebmi.models import HealthSummary


def export_json(
    summary: HealthSummary,
    output_path: Path | None = None,
    indent: int = 2,
) -> str:
    """
    Export a health summary to JSON format.

    Args:
        summary: The summary to export
        output_path: Optional path to write the JSON file
        indent: JSON indentation level

    Returns:
        JSON string representation of the summary
    """
    data = summary.model_dump(mode="json")
    json_str = json.dumps(data, indent=indent, ensure_ascii=False)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_str, encoding="utf-8")

    return json_str


def export_json_summary(summary: HealthSummary) -> dict[str, Any]:
    """
    Export the headline figures of a summary (useful for listings/previews).
    """
    r = summary.result
    return {
        "bmi": r.bmi,
        "category": r.category.value,
        "category_label": summary.category_label,
        "age_group": r.age_group.value,
        "healthy_range_kg": {"min": r.healthy_min_kg, "max": r.healthy_max_kg},
        "delta_kg": r.delta_kg,
        "direction": r.direction.value,
        "suggestion": summary.suggestion,
    }
