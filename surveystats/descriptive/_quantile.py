"""
Nearest-rank quantile rule used by every survey chart.

The dashboard's box plots and ANOVA panels have always placed Q1, the
median and Q3 at ``sorted[floor(n * p)]`` (index clamped to ``[0, n-1]``),
with no interpolation between order statistics. This is neither R type 1
(which uses ``ceil(n * p) - 1``) nor type 7 (linear interpolation), so
existing dashboards only reproduce if this exact rule is kept.

Examples (x = 1..4):
    p = 0.25 -> index 1 -> 2
    p = 0.50 -> index 2 -> 3
    p = 0.75 -> index 3 -> 4
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from surveystats.core.exceptions import ValidationError

QUARTILE_PROBS = (0.25, 0.5, 0.75)
PERCENTILE_PROBS = (0.25, 0.5, 0.75, 0.9, 0.95)


def nearest_rank_index(n: int, p: float) -> int:
    """Index into a sorted sample of length n for probability p."""
    if n < 1:
        raise ValidationError(f"n: need at least 1 value, got {n}")
    if not (0.0 <= p <= 1.0):
        raise ValidationError(f"p: must be in [0, 1], got {p}")
    return min(max(int(math.floor(n * p)), 0), n - 1)


def nearest_rank_quantiles(sorted_x: NDArray, probs: ArrayLike) -> NDArray:
    """
    Quantiles of an already-sorted, finite, non-empty sample.

    Parameters
    ----------
    sorted_x : NDArray
        1D array sorted ascending.
    probs : array-like
        Probabilities in [0, 1].

    Returns
    -------
    NDArray
        One value per probability.
    """
    n = len(sorted_x)
    probs = np.asarray(probs, dtype=np.float64)
    idx = np.array([nearest_rank_index(n, float(p)) for p in probs], dtype=np.intp)
    return sorted_x[idx]
