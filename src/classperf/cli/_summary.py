"""The ``summary`` command: both curves condensed into one report."""

from __future__ import annotations

from pathlib import Path

import typer

from classperf.report import summarize

from ._app import app, console, fail, settings_from
from ._rich_output import optimum_table, summary_panel
from ._targets import load_sweep


@app.command("summary", rich_help_panel="Reports")
def summary_cmd(
    ctx: typer.Context,
    table: Path | None = typer.Argument(
        None, help="Prediction table with predictions/labels columns (default: stdin)."
    ),
    normalize_precision: bool = typer.Option(
        False,
        "--normalize-precision",
        help="Rescale precision so that a random classifier scores 0.",
    ),
    format: str = typer.Option("rich", "--format", "-f", help="rich or json."),
) -> None:
    """Report both areas under curve and both optimal thresholds.

    [dim]Examples:[/dim]
      classperf summary scores.table
      classperf summary scores.table --format json
    """
    if format not in ("rich", "json"):
        raise fail(f"unknown format: {format}. Available: json, rich.")

    settings = settings_from(ctx, normalize_precision=normalize_precision)
    report = summarize(load_sweep(table), normalize=settings.curves.normalize_precision)

    if format == "json":
        typer.echo(report.to_json())
        return

    console.print(summary_panel(report))
    console.print(optimum_table(report))
