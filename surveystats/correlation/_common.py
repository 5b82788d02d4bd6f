"""
Common data types and classification bands for correlation.

Band edges follow the dashboard's correlation legend: |r| >= 0.9 very
strong, >= 0.7 strong, >= 0.5 moderate, >= 0.3 weak, otherwise very weak.
A coefficient within +/-0.1 of zero has no direction.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

STRENGTH_BANDS = (
    (0.9, 'very strong'),
    (0.7, 'strong'),
    (0.5, 'moderate'),
    (0.3, 'weak'),
)
WEAKEST = 'very weak'
DIRECTION_THRESHOLD = 0.1


def classify_strength(r: float) -> str:
    a = abs(r)
    for edge, label in STRENGTH_BANDS:
        if a >= edge:
            return label
    return WEAKEST


def classify_direction(r: float) -> str:
    if r > DIRECTION_THRESHOLD:
        return 'positive'
    if r < -DIRECTION_THRESHOLD:
        return 'negative'
    return 'none'


@dataclass(frozen=True)
class PairCorrelation:
    """Pearson coefficient between two variables, with its verbal bands."""
    variable1: str
    variable2: str
    coefficient: float
    strength: str
    direction: str

    def to_dict(self) -> dict[str, Any]:
        return {
            'variable1': self.variable1,
            'variable2': self.variable2,
            'coefficient': self.coefficient,
            'strength': self.strength,
            'direction': self.direction,
        }


@dataclass(frozen=True)
class CorrelationParams:
    """Parameter payload for correlation_matrix()."""
    variables: tuple[str, ...]
    matrix: NDArray[np.floating[Any]]     # (p, p), read-only
    n_obs: int
    zero_variance: tuple[str, ...]        # variables whose correlations fell back to 0
