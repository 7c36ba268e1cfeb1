"""
classperf - precision-recall and ROC evaluation of binary classifier scores.

Simple Usage:
    from classperf import build_sweep, roc_curve, area_under_curve

    sweep = build_sweep([0.1, 0.4, 0.35, 0.8], [0, 0, 1, 1])
    fpr, tpr = roc_curve(sweep)
    auc = area_under_curve(fpr, tpr)

Thresholds are the distinct score values; a sample is predicted positive
when its score is strictly greater than the threshold.
"""

from .curves import precision_recall_curve, roc_curve
from .errors import ContractError, DegenerateInputWarning, ValidationError
from .metrics import area_under_curve, optimal_point, optimum
from .report import PerformanceReport, summarize
from .sweep import build_sweep, build_sweep_from_dataset
from .table import load_predictions, read_predictions
from .types import Dataset, OptimalPoint, PerformanceSweep

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("classperf")
except PackageNotFoundError:
    __version__ = "0.1.0.dev0"

__all__ = [
    "Dataset",
    "PerformanceSweep",
    "OptimalPoint",
    "PerformanceReport",
    "ValidationError",
    "ContractError",
    "DegenerateInputWarning",
    "build_sweep",
    "build_sweep_from_dataset",
    "precision_recall_curve",
    "roc_curve",
    "area_under_curve",
    "optimum",
    "optimal_point",
    "summarize",
    "read_predictions",
    "load_predictions",
    "__version__",
]
