"""Curve, area-under-curve and optimal-threshold commands."""

from __future__ import annotations

from pathlib import Path

import typer

from classperf.config_loader import EvaluationConfig
from classperf.curves import precision_recall_curve, roc_curve
from classperf.errors import ValidationError
from classperf.metrics import area_under_curve, optimum
from classperf.sweep import build_sweep_from_dataset
from classperf.table import format_point, format_table, load_predictions
from classperf.types import PerformanceSweep

from ._app import app, fail, settings_from


def _table_argument() -> Path | None:
    return typer.Argument(
        None, help="Prediction table with predictions/labels columns (default: stdin)."
    )


def _header_option() -> bool:
    return typer.Option(False, "--print-header", help="Print a header line.")


def _thresholds_option() -> bool:
    return typer.Option(
        False, "--print-thresholds", help="Print an additional column with thresholds."
    )


def _normalize_option() -> bool:
    return typer.Option(
        False,
        "--normalize-precision",
        help="Rescale precision so that a random classifier scores 0.",
    )


def load_sweep(table: Path | None) -> PerformanceSweep:
    """Read ``table`` and build its sweep, exiting with code 1 on bad input."""
    try:
        dataset = load_predictions(table)
    except ValidationError as exc:
        raise fail(f"{exc} (in {table if table is not None else 'stdin'})") from None
    except OSError as exc:
        raise fail(f"cannot read predictions: {exc}") from None
    return build_sweep_from_dataset(dataset)


def _emit(lines) -> None:
    for line in lines:
        typer.echo(line)


def _precision_recall(table: Path | None, settings: EvaluationConfig):
    sweep = load_sweep(table)
    recall, precision = precision_recall_curve(
        sweep, normalize=settings.curves.normalize_precision
    )
    return sweep, recall, precision


@app.command("precision-recall", rich_help_panel="Curves")
def precision_recall_cmd(
    ctx: typer.Context,
    table: Path | None = _table_argument(),
    normalize_precision: bool = _normalize_option(),
    print_header: bool = _header_option(),
    print_thresholds: bool = _thresholds_option(),
) -> None:
    """Print the precision-recall curve as [bold]recall precision[/bold] rows."""
    settings = settings_from(
        ctx,
        print_header=print_header,
        print_thresholds=print_thresholds,
        normalize_precision=normalize_precision,
    )
    sweep, recall, precision = _precision_recall(table, settings)
    columns = [recall, precision]
    names = ["recall", "precision"]
    if settings.output.print_thresholds:
        columns.append(sweep.thresholds)
        names.append("threshold")
    _emit(format_table(columns, names, print_header=settings.output.print_header))


@app.command("roc", rich_help_panel="Curves")
def roc_cmd(
    ctx: typer.Context,
    table: Path | None = _table_argument(),
    print_header: bool = _header_option(),
    print_thresholds: bool = _thresholds_option(),
) -> None:
    """Print the ROC curve as [bold]FPR TPR[/bold] rows."""
    settings = settings_from(ctx, print_header=print_header, print_thresholds=print_thresholds)
    sweep = load_sweep(table)
    fpr, tpr = roc_curve(sweep)
    columns = [fpr, tpr]
    names = ["FPR", "TPR"]
    if settings.output.print_thresholds:
        columns.append(sweep.thresholds)
        names.append("threshold")
    _emit(format_table(columns, names, print_header=settings.output.print_header))


@app.command("precision-recall-auc", rich_help_panel="Areas")
def precision_recall_auc_cmd(
    ctx: typer.Context,
    table: Path | None = _table_argument(),
    normalize_precision: bool = _normalize_option(),
) -> None:
    """Print the area under the precision-recall curve."""
    settings = settings_from(ctx, normalize_precision=normalize_precision)
    _, recall, precision = _precision_recall(table, settings)
    typer.echo(repr(area_under_curve(recall, precision)))


@app.command("roc-auc", rich_help_panel="Areas")
def roc_auc_cmd(
    table: Path | None = _table_argument(),
) -> None:
    """Print the area under the ROC curve."""
    fpr, tpr = roc_curve(load_sweep(table))
    typer.echo(repr(area_under_curve(fpr, tpr)))


@app.command("optimal-precision-recall", rich_help_panel="Optimal thresholds")
def optimal_precision_recall_cmd(
    ctx: typer.Context,
    table: Path | None = _table_argument(),
    normalize_precision: bool = _normalize_option(),
    print_header: bool = _header_option(),
) -> None:
    """Print the threshold maximizing recall times precision."""
    settings = settings_from(
        ctx, print_header=print_header, normalize_precision=normalize_precision
    )
    sweep, recall, precision = _precision_recall(table, settings)
    i = optimum(sweep.thresholds, recall, precision)
    typer.echo(
        format_point(
            {"recall": recall[i], "precision": precision[i], "threshold": sweep.thresholds[i]},
            print_header=settings.output.print_header,
        )
    )


@app.command("optimal-roc", rich_help_panel="Optimal thresholds")
def optimal_roc_cmd(
    ctx: typer.Context,
    table: Path | None = _table_argument(),
    print_header: bool = _header_option(),
) -> None:
    """Print the threshold maximizing specificity times sensitivity."""
    settings = settings_from(ctx, print_header=print_header)
    sweep = load_sweep(table)
    fpr, tpr = roc_curve(sweep)
    i = optimum(sweep.thresholds, 1.0 - fpr, tpr)
    typer.echo(
        format_point(
            {"fpr": fpr[i], "tpr": tpr[i], "threshold": sweep.thresholds[i]},
            print_header=settings.output.print_header,
        )
    )
