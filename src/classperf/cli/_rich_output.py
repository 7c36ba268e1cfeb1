"""Rich rendering helpers for the ``summary`` command."""

from __future__ import annotations

import math
from typing import Any

from rich.box import ROUNDED
from rich.panel import Panel
from rich.table import Table

from classperf.report import PerformanceReport

from ._theme import PANEL_PADDING


def _fmt(value: float, digits: int = 4) -> str:
    if math.isnan(value):
        return "[cp.warn]nan[/cp.warn]"
    return f"{value:.{digits}f}"


def key_value_panel(
    data: dict[str, Any],
    *,
    title: str | None = None,
    border: str = "cp.border",
) -> Panel:
    """Render a dict as an aligned key-value panel."""
    max_key_len = max((len(str(k)) for k in data), default=0)
    lines: list[str] = []
    for key, value in data.items():
        padded = str(key).ljust(max_key_len)
        lines.append(f"[cp.label]{padded}[/cp.label]  {value}")
    return Panel(
        "\n".join(lines),
        title=title,
        border_style=border,
        box=ROUNDED,
        padding=PANEL_PADDING,
    )


def summary_panel(report: PerformanceReport) -> Panel:
    """Render sample counts and both areas under curve."""
    precision_name = "normalized precision" if report.normalized_precision else "precision"
    return key_value_panel(
        {
            "Samples": f"{report.n_samples} ({report.n_pos} positive, {report.n_neg} negative)",
            "Thresholds": str(report.n_thresholds),
            "PR AUC": f"{_fmt(report.precision_recall_auc)} [cp.muted]({precision_name})[/cp.muted]",
            "ROC AUC": _fmt(report.roc_auc),
        },
        title="[cp.header]Classifier performance[/cp.header]",
    )


def optimum_table(report: PerformanceReport) -> Table:
    """Render the optimal precision-recall and ROC operating points."""
    table = Table(title="Optimal thresholds")
    table.add_column("Curve", style="cp.label")
    table.add_column("Threshold", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    pr = report.optimal_precision_recall
    roc = report.optimal_roc
    table.add_row(
        "precision-recall",
        _fmt(pr.threshold, 6),
        f"recall {_fmt(pr.x)}",
        f"precision {_fmt(pr.y)}",
    )
    table.add_row(
        "roc",
        _fmt(roc.threshold, 6),
        f"FPR {_fmt(roc.x)}",
        f"TPR {_fmt(roc.y)}",
    )
    return table
