"""
Markdown exporter for Agebmi.

Exports a health summary as a human-readable Markdown report.
"""

from __future__ import annotations

from pathlib import Path

from agebmi.models import HealthSummary


def export_markdown(
    summary: HealthSummary,
    output_path: Path | None = None,
    include_reference: bool = True,
) -> str:
    """
    Export a health summary to Markdown format.

    Args:
        summary: The summary to export
        output_path: Optional path to write the Markdown file
        include_reference: Whether to include the category reference table

    Returns:
        Markdown string representation of the summary
    """
    lines = []
    r = summary.result
    m = r.measurement

    # Header
    lines.append("# BMI Health Summary")
    lines.append("")
    lines.append(f"**Generated:** {summary.generated_at.strftime('%Y-%m-%d %H:%M')}")
    lines.append("")

    # Measurement
    lines.append("## Measurement")
    lines.append("")
    lines.append(f"- **Weight:** {m.weight_kg:g} kg")
    lines.append(f"- **Height:** {m.height_cm:g} cm")
    lines.append(f"- **Age:** {m.age_years} years ({summary.age_group_label})")
    lines.append("")

    # Result
    lines.append("## Result")
    lines.append("")
    lines.append(f"- **BMI:** {r.bmi:.2f}")
    lines.append(f"- **Category:** {summary.category_label}")
    lines.append(f"- **Healthy BMI for age group:** {r.bmi_low:g} – {r.bmi_high:g}")
    if summary.age_note:
        lines.append("")
        lines.append(f"> {summary.age_note}")
    lines.append("")

    # Advice
    lines.append("## Weight Advice")
    lines.append("")
    lines.append(f"- **Healthy weight range:** {r.healthy_min_kg:.1f} – {r.healthy_max_kg:.1f} kg")
    lines.append(f"- **Suggestion:** {summary.suggestion}")
    lines.append("")
    lines.append(summary.advice_message)
    lines.append("")

    if include_reference and summary.reference_ranges:
        lines.append(f"## {summary.reference_title}")
        lines.append("")
        lines.append("| Category | BMI |")
        lines.append("|---|---|")
        for row in summary.reference_ranges:
            marker = " **(you)**" if row.category == r.category else ""
            lines.append(f"| {row.label}{marker} | {row.range_text} |")
        lines.append("")

    md = "\n".join(lines)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(md, encoding="utf-8")

    return md
