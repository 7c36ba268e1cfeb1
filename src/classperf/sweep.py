"""Confusion-matrix sweep over all distinct prediction values.

Threshold convention used throughout classperf: a sample is predicted
positive iff its score is strictly greater than the threshold. Samples whose
score equals the threshold are therefore predicted negative, so with
``cp(t)``/``cn(t)`` the number of positives/negatives scoring ``<= t``::

    fn = cp(t)    tp = P - cp(t)
    tn = cn(t)    fp = N - cn(t)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from .types import Dataset, PerformanceSweep, validate_labels

logger = logging.getLogger(__name__)


def build_sweep(
    scores: Sequence[float] | np.ndarray,
    labels: Sequence[int] | np.ndarray,
) -> PerformanceSweep:
    """Compute one confusion matrix per distinct score value.

    Raises
    ------
    ValidationError
        If the input is empty, misaligned, contains a NaN score or a label
        other than 0 or 1.
    """
    return build_sweep_from_dataset(Dataset(scores=scores, labels=labels))


def build_sweep_from_dataset(dataset: Dataset) -> PerformanceSweep:
    """Compute the threshold sweep of an already validated dataset."""
    validate_labels(dataset.labels)

    order = np.argsort(dataset.scores, kind="stable")
    sorted_scores = dataset.scores[order]
    sorted_labels = dataset.labels[order].astype(np.int64)

    # Cumulative counts as of and including each sample.
    cum_pos = np.cumsum(sorted_labels)
    cum_neg = np.arange(1, sorted_labels.size + 1) - cum_pos

    # Keep the last sample of each run of equal scores so duplicates collapse
    # onto the count after all of them.
    run_end = np.append(sorted_scores[1:] != sorted_scores[:-1], True)

    thresholds = sorted_scores[run_end]
    cp = cum_pos[run_end]
    cn = cum_neg[run_end]
    n_pos = int(cum_pos[-1])
    n_neg = int(cum_neg[-1])

    logger.debug(
        "Sweep over %d samples: %d distinct thresholds, %d positives, %d negatives",
        len(dataset),
        thresholds.size,
        n_pos,
        n_neg,
    )
    return PerformanceSweep(
        thresholds=thresholds,
        tp=n_pos - cp,
        fp=n_neg - cn,
        tn=cn,
        fn=cp,
        n_pos=n_pos,
        n_neg=n_neg,
    )
