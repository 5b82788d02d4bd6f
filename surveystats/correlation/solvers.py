"""
Solver dispatch for correlation.

Public API:
    correlation_matrix(variables) -> CorrelationSolution
    pearson(x, y) -> PairCorrelation
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from surveystats.core.capabilities import ENGINE_CORRELATION
from surveystats.core.compute.timing import Timer
from surveystats.core.result import Result
from surveystats.correlation._common import (
    CorrelationParams,
    PairCorrelation,
    classify_direction,
    classify_strength,
)
from surveystats.correlation.design import CorrelationDesign
from surveystats.correlation.solution import CorrelationSolution


def _pearson(xc: NDArray, yc: NDArray, ssx: float, ssy: float) -> float:
    """r from centered columns; 0 when either side has no variance."""
    if ssx == 0.0 or ssy == 0.0:
        return 0.0
    r = float(np.dot(xc, yc)) / math.sqrt(ssx * ssy)
    return min(1.0, max(-1.0, r))


def correlation_matrix(variables: Any) -> CorrelationSolution:
    """
    Pairwise Pearson correlation matrix.

    Only the upper triangle is computed; the lower triangle is a mirror and
    the diagonal is set to exactly 1. A variable with zero variance
    correlates 0 with every other variable.

    Parameters
    ----------
    variables : mapping or sequence
        {name: values}, or Variable / (name, values) / {'name', 'values'}
        items. All value arrays must have equal length.

    Returns
    -------
    CorrelationSolution

    Raises
    ------
    MismatchedLengthError
        Value arrays differ in length.
    ValidationError
        No variables, duplicate names or non-finite values.
    """
    timer = Timer()
    timer.start()

    design = CorrelationDesign.from_variables(variables)
    data = design.data
    p = design.p

    with timer.section('center'):
        centered = data - data.mean(axis=0)
        ss = np.einsum('ij,ij->j', centered, centered)
        # constant columns are exactly zero-variance even if the mean rounds
        ss[np.ptp(data, axis=0) == 0] = 0.0

    with timer.section('pairs'):
        matrix = np.eye(p, dtype=np.float64)
        for i in range(p):
            for j in range(i + 1, p):
                r = _pearson(centered[:, i], centered[:, j], float(ss[i]), float(ss[j]))
                matrix[i, j] = r
                matrix[j, i] = r
        matrix.setflags(write=False)

    timer.stop()

    zero_var = tuple(name for name, s in zip(design.variables, ss) if s == 0.0)

    warnings_list: list[str] = []
    if zero_var and p > 1:
        warnings_list.append(
            f"zero variance in {list(zero_var)}; their correlations are reported as 0"
        )
    if design.n < 2:
        warnings_list.append("fewer than 2 paired observations")

    params = CorrelationParams(
        variables=design.variables,
        matrix=matrix,
        n_obs=design.n,
        zero_variance=zero_var,
    )

    result = Result(
        params=params,
        info={'method': 'pearson', 'zero_variance_fallback': 0.0},
        timing=timer.result(),
        engine=ENGINE_CORRELATION,
        warnings=tuple(warnings_list),
    )

    return CorrelationSolution(_result=result)


def pearson(
    x: ArrayLike,
    y: ArrayLike,
    *,
    names: tuple[str, str] = ('x', 'y'),
) -> PairCorrelation:
    """
    Pearson coefficient between two paired samples, with strength and
    direction bands.

    Raises
    ------
    MismatchedLengthError
        x and y differ in length.
    """
    design = CorrelationDesign.from_variables([(names[0], x), (names[1], y)])
    centered = design.data - design.data.mean(axis=0)
    ss = np.einsum('ij,ij->j', centered, centered)
    ss[np.ptp(design.data, axis=0) == 0] = 0.0
    r = _pearson(centered[:, 0], centered[:, 1], float(ss[0]), float(ss[1]))
    return PairCorrelation(
        variable1=design.variables[0],
        variable2=design.variables[1],
        coefficient=r,
        strength=classify_strength(r),
        direction=classify_direction(r),
    )
