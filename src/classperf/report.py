"""Summary report combining both curves, their areas and optima."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .curves import precision_recall_curve, roc_curve
from .metrics import area_under_curve, optimum
from .sweep import build_sweep_from_dataset
from .types import Dataset, OptimalPoint, PerformanceSweep


@dataclass(frozen=True)
class PerformanceReport:
    """Scalar summary of a classifier evaluated on one dataset."""

    n_samples: int
    n_pos: int
    n_neg: int
    n_thresholds: int
    normalized_precision: bool
    precision_recall_auc: float
    roc_auc: float
    optimal_precision_recall: OptimalPoint  # x = recall, y = precision
    optimal_roc: OptimalPoint  # x = fpr, y = tpr

    def to_dict(self) -> dict[str, Any]:
        return {
            "n_samples": self.n_samples,
            "n_pos": self.n_pos,
            "n_neg": self.n_neg,
            "n_thresholds": self.n_thresholds,
            "normalized_precision": self.normalized_precision,
            "precision_recall_auc": self.precision_recall_auc,
            "roc_auc": self.roc_auc,
            "optimal_precision_recall": {
                "threshold": self.optimal_precision_recall.threshold,
                "recall": self.optimal_precision_recall.x,
                "precision": self.optimal_precision_recall.y,
            },
            "optimal_roc": {
                "threshold": self.optimal_roc.threshold,
                "fpr": self.optimal_roc.x,
                "tpr": self.optimal_roc.y,
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def summarize(data: Dataset | PerformanceSweep, normalize: bool = False) -> PerformanceReport:
    """Evaluate ``data`` once and collect AUCs and optimal thresholds."""
    sweep = build_sweep_from_dataset(data) if isinstance(data, Dataset) else data

    recall, precision = precision_recall_curve(sweep, normalize=normalize)
    fpr, tpr = roc_curve(sweep)

    pr_index = optimum(sweep.thresholds, recall, precision)
    roc_index = optimum(sweep.thresholds, 1.0 - fpr, tpr)

    return PerformanceReport(
        n_samples=sweep.n_pos + sweep.n_neg,
        n_pos=sweep.n_pos,
        n_neg=sweep.n_neg,
        n_thresholds=len(sweep),
        normalized_precision=normalize,
        precision_recall_auc=area_under_curve(recall, precision),
        roc_auc=area_under_curve(fpr, tpr),
        optimal_precision_recall=OptimalPoint.at(pr_index, sweep.thresholds, recall, precision),
        optimal_roc=OptimalPoint.at(roc_index, sweep.thresholds, fpr, tpr),
    )
