#!/usr/bin/env python3
"""
Agebmi CLI

Command-line interface for age-adjusted BMI evaluation.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def setup_paths():
    """Add the project root to sys.path for imports."""
    root = Path(__file__).parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


setup_paths()

from agebmi import __version__  # noqa: E402


def _summary_panel(summary) -> Panel:
    """Render a health summary as a rich panel."""
    r = summary.result
    color = r.category.color
    body = (
        f"[bold {color}]BMI {r.bmi:.2f}[/bold {color}]  "
        f"[{color}]{summary.category_label}[/{color}]\n"
        f"Age group: {summary.age_group_label}\n\n"
        f"Healthy weight range: {r.healthy_min_kg:.1f} – {r.healthy_max_kg:.1f} kg\n"
        f"[bold]{summary.suggestion}[/bold]\n\n"
        f"{summary.advice_message}"
    )
    if summary.age_note:
        body += f"\n\n[dim]{summary.age_note}[/dim]"
    return Panel(body, title="BMI Result", border_style=color)


def _reference_table(summary) -> Table:
    table = Table(title=summary.reference_title)
    table.add_column("Category", style="cyan")
    table.add_column("BMI", justify="right")
    for row in summary.reference_ranges:
        style = "bold" if row.category == summary.result.category else None
        table.add_row(row.label, row.range_text, style=style)
    return table


@click.group()
@click.version_option(version=__version__, prog_name="agebmi")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """
    Agebmi - Age-Adjusted BMI Calculator

    Classify a BMI against the healthy band for the user's age group
    and suggest how much weight to gain or lose.
    """
    from agebmi.logging import setup_logging

    setup_logging(level="DEBUG" if verbose else "WARNING", stream=sys.stderr)


@cli.command()
@click.option("--weight", "-w", type=str, required=True, help="Weight in kilograms")
@click.option("--height", "-h", "height", type=str, required=True, help="Height in centimeters")
@click.option("--age", "-a", type=str, required=True, help="Age in whole years (2-120)")
@click.option("--format", "fmt", type=click.Choice(["text", "json", "markdown"]), default="text",
              help="Output format")
@click.option("--output", "-o", type=click.Path(), help="Write json/markdown output to a file")
def evaluate(weight: str, height: str, age: str, fmt: str, output: Optional[str]):
    """
    Evaluate a weight/height/age reading.

    Examples:

        agebmi evaluate --weight 70 --height 175 --age 30

        agebmi evaluate -w 45 -h 170 -a 25 --format json

        agebmi evaluate -w 90 -h 170 -a 70 --format markdown -o ./summary.md
    """
    from agebmi import validate, evaluate as evaluate_measurement, summarize
    from agebmi.exporters import export_json, export_markdown

    checked = validate(weight, height, age)
    if not checked.ok:
        for error in checked.errors:
            err_console.print(f"[red]⚠ {error.field.value}: {error.message}[/red]")
        sys.exit(1)

    summary = summarize(evaluate_measurement(checked.measurement))
    out_path = Path(output) if output else None

    if fmt == "json":
        text = export_json(summary, out_path)
    elif fmt == "markdown":
        text = export_markdown(summary, out_path)
    else:
        console.print(_summary_panel(summary))
        console.print(_reference_table(summary))
        return

    if out_path:
        console.print(f"[green]✓ Exported to {out_path}[/green]")
    else:
        click.echo(text)


@cli.command()
def bands():
    """
    List age groups and their healthy BMI bands.
    """
    from agebmi import AgeGroup
    from agebmi.engines import reference_ranges

    table = Table(title="Age-Adjusted BMI Bands")
    table.add_column("Age Group", style="cyan")
    table.add_column("Ages")
    table.add_column("Healthy BMI", justify="right")
    table.add_column("Overweight", justify="right")
    table.add_column("Obese", justify="right")

    ages = {AgeGroup.CHILD: "2-17", AgeGroup.ADULT: "18-64", AgeGroup.SENIOR: "65+"}
    for group in AgeGroup:
        rows = {row.category.value: row.range_text for row in reference_ranges(group)}
        table.add_row(
            group.label,
            ages[group],
            rows["normal"],
            rows["overweight"],
            rows["obese"],
        )

    console.print(table)


@cli.command()
def info():
    """
    Show information about Agebmi.
    """
    console.print(Panel(
        "[bold]Agebmi[/bold]\n\n"
        "Age-adjusted BMI classification with personalised weight advice.\n\n"
        "[dim]Child/teen bands are a simplified approximation of BMI-for-age[/dim]\n"
        "[dim]growth charts, not a clinical assessment.[/dim]",
        title="About",
        border_style="blue",
    ))

    console.print("\n[bold]Age groups:[/bold]")
    console.print("  • Child / Teen (2-17): healthy BMI 14 – 21 (approx.)")
    console.print("  • Adult (18-64): healthy BMI 18.5 – 24.9")
    console.print("  • Senior (65+): healthy BMI 22 – 27")

    console.print("\n[bold]Quick Start:[/bold]")
    console.print("  agebmi evaluate --weight 70 --height 175 --age 30")
    console.print("  agebmi bands")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
