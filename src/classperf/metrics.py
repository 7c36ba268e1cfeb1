"""Area under curve and optimal operating point selection."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .errors import ContractError
from .types import OptimalPoint

ArrayLike = Sequence[float] | np.ndarray


def area_under_curve(x: ArrayLike, y: ArrayLike) -> float:
    """Integrate ``y`` over ``x`` with the composite trapezoidal rule.

    Points are taken in index order, which for sweep-derived curves is
    ascending threshold and generally not ascending ``x``. Segment widths are
    unsigned, so the result does not depend on the direction of traversal.
    """
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)
    if xs.shape != ys.shape or xs.ndim != 1:
        raise ContractError(
            f"area_under_curve expects two aligned 1-D sequences, got shapes {xs.shape} and {ys.shape}"
        )
    if xs.size < 2:
        return 0.0
    widths = np.abs(np.diff(xs))
    heights = (ys[1:] + ys[:-1]) / 2.0
    return float(np.sum(widths * heights))


def optimum(thresholds: ArrayLike, x: ArrayLike, y: ArrayLike) -> int:
    """Return the index maximizing ``x[i] * y[i]``.

    Ties resolve to the lowest index. NaN products are never selected; if
    every product is NaN the first index is returned. For ROC curves pass
    ``1 - fpr`` as ``x`` so that specificity times sensitivity is maximized.
    """
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)
    n = len(thresholds)
    if xs.shape != (n,) or ys.shape != (n,):
        raise ContractError(
            f"optimum expects aligned sequences, got lengths {n}, {xs.size} and {ys.size}"
        )
    if n == 0:
        raise ContractError("optimum requires at least one threshold")
    products = xs * ys
    products[np.isnan(products)] = -np.inf
    return int(np.argmax(products))


def optimal_point(thresholds: ArrayLike, x: ArrayLike, y: ArrayLike) -> OptimalPoint:
    """Select the optimum and return it with its threshold and coordinates."""
    return OptimalPoint.at(optimum(thresholds, x, y), thresholds, x, y)
