"""
Correlation solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from surveystats.core.exceptions import ValidationError
from surveystats.core.result import Result
from surveystats.correlation._common import (
    CorrelationParams,
    PairCorrelation,
    classify_direction,
    classify_strength,
)


@dataclass
class CorrelationSolution:
    """
    User-facing correlation matrix.

    Wraps Result[CorrelationParams]. The matrix is symmetric with an exact
    unit diagonal; zero-variance variables correlate 0 with everything else.
    """
    _result: Result[CorrelationParams]

    @property
    def variables(self) -> tuple[str, ...]:
        return self._result.params.variables

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Correlation matrix (p x p), read-only."""
        return self._result.params.matrix

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def zero_variance(self) -> tuple[str, ...]:
        return self._result.params.zero_variance

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def engine(self) -> str:
        return self._result.engine

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def coefficient(self, a: str, b: str) -> float:
        """Coefficient between two named variables."""
        names = self.variables
        try:
            i = names.index(a)
            j = names.index(b)
        except ValueError as e:
            raise ValidationError(
                f"unknown variable in ({a!r}, {b!r}); known: {list(names)}"
            ) from e
        return float(self.matrix[i, j])

    def pairs(self) -> list[PairCorrelation]:
        """Off-diagonal pairs, strongest |r| first (ties keep matrix order)."""
        names = self.variables
        m = self.matrix
        out = []
        for i in range(len(names)):
            for j in range(i + 1, len(names)):
                r = float(m[i, j])
                out.append(PairCorrelation(
                    variable1=names[i],
                    variable2=names[j],
                    coefficient=r,
                    strength=classify_strength(r),
                    direction=classify_direction(r),
                ))
        out.sort(key=lambda pc: -abs(pc.coefficient))
        return out

    def to_dict(self) -> dict[str, Any]:
        """CorrelationData chart contract."""
        return {
            'variables': list(self.variables),
            'matrix': self.matrix.tolist(),
        }

    def summary(self) -> str:
        names = self.variables
        width = max(8, max(len(n) for n in names))
        lines = [f"Pearson correlation (n = {self.n_obs})"]
        lines.append(" " * (width + 2) + "  ".join(n.rjust(width) for n in names))
        for i, name in enumerate(names):
            row = "  ".join(f"{self.matrix[i, j]:.4f}".rjust(width) for j in range(len(names)))
            lines.append(f"{name.ljust(width)}  {row}")
        if self.zero_variance:
            lines.append(
                f"Zero variance (correlations set to 0): {', '.join(self.zero_variance)}"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CorrelationSolution(p={len(self.variables)}, n={self.n_obs})"
