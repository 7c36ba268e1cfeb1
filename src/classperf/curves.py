"""Precision-recall and ROC curves derived from a threshold sweep."""

from __future__ import annotations

import warnings

import numpy as np

from .errors import DegenerateInputWarning
from .types import PerformanceSweep


def _warn_degenerate(message: str) -> None:
    warnings.warn(message, DegenerateInputWarning, stacklevel=3)


def precision_recall_curve(
    sweep: PerformanceSweep,
    normalize: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(recall, precision)`` aligned with ``sweep.thresholds``.

    Where no sample is predicted positive precision is undefined; it is
    carried forward from the previous threshold instead (0 at the first).
    Since ``tp`` never increases with the threshold these entries always form
    a tail of the curve.

    With ``normalize`` precision is rescaled by the base rate
    ``c = P / (P + N)`` to ``(precision - c) / (1 - c)``, which maps a random
    classifier to 0 and perfect precision to 1. Values below ``c`` become
    negative.
    """
    tp = sweep.tp.astype(np.float64)
    fp = sweep.fp.astype(np.float64)
    fn = sweep.fn.astype(np.float64)
    predicted = tp > 0

    recall = np.zeros_like(tp)
    precision = np.zeros_like(tp)
    np.divide(tp, tp + fn, out=recall, where=predicted)
    np.divide(tp, tp + fp, out=precision, where=predicted)

    n_defined = int(np.count_nonzero(predicted))
    if 0 < n_defined < precision.size:
        precision[n_defined:] = precision[n_defined - 1]

    if normalize:
        c = sweep.n_pos / (sweep.n_pos + sweep.n_neg)
        if c == 1.0:
            _warn_degenerate("all samples are positive; normalized precision is undefined")
        with np.errstate(divide="ignore", invalid="ignore"):
            precision = (precision - c) / np.float64(1.0 - c)

    return recall, precision


def roc_curve(sweep: PerformanceSweep) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(fpr, tpr)`` aligned with ``sweep.thresholds``.

    A dataset without positives (or without negatives) leaves TPR (or FPR)
    undefined. The resulting NaN/Inf values are returned as they are and a
    ``DegenerateInputWarning`` is issued.
    """
    if sweep.n_pos == 0:
        _warn_degenerate("dataset has no positive samples; TPR is undefined")
    if sweep.n_neg == 0:
        _warn_degenerate("dataset has no negative samples; FPR is undefined")

    with np.errstate(divide="ignore", invalid="ignore"):
        tpr = sweep.tp.astype(np.float64) / np.float64(sweep.n_pos)
        fpr = sweep.fp.astype(np.float64) / np.float64(sweep.n_neg)
    return fpr, tpr
