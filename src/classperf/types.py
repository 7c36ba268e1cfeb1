"""Typed containers for predictions, threshold sweeps and operating points."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from .errors import ValidationError


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def validate_labels(labels: np.ndarray) -> None:
    """Raise ``ValidationError`` unless every label is exactly 0 or 1."""
    invalid = np.flatnonzero((labels != 0) & (labels != 1))
    if invalid.size:
        first = int(invalid[0])
        raise ValidationError(f"invalid label `{labels[first]}' observed at sample {first}")


def _as_labels(labels: Sequence[int] | np.ndarray) -> np.ndarray:
    raw = np.asarray(labels)
    if raw.dtype.kind == "f":
        if np.any(raw != np.round(raw)):
            raise ValidationError("labels must be integers 0 or 1")
    elif raw.dtype.kind not in "iub":
        raise ValidationError(f"labels must be integers 0 or 1, got dtype {raw.dtype}")
    validate_labels(raw)
    return raw.astype(np.int8)


@dataclass(frozen=True)
class Dataset:
    """Aligned classifier scores and ground-truth labels for N >= 1 samples."""

    scores: np.ndarray
    labels: np.ndarray

    def __post_init__(self) -> None:
        scores = np.array(self.scores, dtype=np.float64)
        raw_labels = np.asarray(self.labels)
        if scores.ndim != 1 or raw_labels.ndim != 1:
            raise ValidationError(
                f"scores and labels must be 1-D, got shapes {scores.shape} and {raw_labels.shape}"
            )
        labels = _as_labels(raw_labels)
        if scores.size == 0:
            raise ValidationError("dataset is empty")
        if scores.size != labels.size:
            raise ValidationError(
                f"got {scores.size} scores but {labels.size} labels; both must be aligned"
            )
        if np.isnan(scores).any():
            raise ValidationError("scores must not contain NaN")
        object.__setattr__(self, "scores", _frozen(scores))
        object.__setattr__(self, "labels", _frozen(labels.copy()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, int]]) -> Dataset:
        """Build a dataset from ``(score, label)`` pairs."""
        rows = list(pairs)
        if not rows:
            raise ValidationError("dataset is empty")
        scores, labels = zip(*rows)
        return cls(scores=np.asarray(scores, dtype=np.float64), labels=np.asarray(labels))

    def __len__(self) -> int:
        return int(self.scores.size)

    @property
    def n_pos(self) -> int:
        return int(np.count_nonzero(self.labels == 1))

    @property
    def n_neg(self) -> int:
        return int(np.count_nonzero(self.labels == 0))


@dataclass(frozen=True)
class PerformanceSweep:
    """Confusion matrices for every distinct score used as threshold.

    Entry ``i`` describes the classifier that predicts positive for samples
    scoring strictly above ``thresholds[i]``.
    """

    thresholds: np.ndarray
    tp: np.ndarray
    fp: np.ndarray
    tn: np.ndarray
    fn: np.ndarray
    n_pos: int
    n_neg: int

    def __post_init__(self) -> None:
        for name in ("thresholds", "tp", "fp", "tn", "fn"):
            object.__setattr__(self, name, _frozen(np.array(getattr(self, name))))

    def __len__(self) -> int:
        return int(self.thresholds.size)


@dataclass(frozen=True)
class OptimalPoint:
    """Operating point selected on a curve."""

    index: int
    threshold: float
    x: float
    y: float

    @classmethod
    def at(
        cls,
        index: int,
        thresholds: Sequence[float] | np.ndarray,
        x: Sequence[float] | np.ndarray,
        y: Sequence[float] | np.ndarray,
    ) -> OptimalPoint:
        return cls(
            index=int(index),
            threshold=float(thresholds[index]),
            x=float(x[index]),
            y=float(y[index]),
        )

    def to_dict(self) -> dict[str, float | int]:
        return {"index": self.index, "threshold": self.threshold, "x": self.x, "y": self.y}
