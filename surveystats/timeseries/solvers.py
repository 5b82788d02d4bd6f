"""
Trend summarizer.

Public API:
    summarize_trend(series) -> TrendSolution
"""

from __future__ import annotations

from typing import Any

from surveystats.core.capabilities import ENGINE_TIMESERIES
from surveystats.core.compute.timing import Timer
from surveystats.core.exceptions import DivisionByZeroError
from surveystats.core.result import Result
from surveystats.timeseries._common import (
    DIRECTION_DOWN,
    DIRECTION_STABLE,
    DIRECTION_UP,
    TrendParams,
)
from surveystats.timeseries.design import TrendDesign
from surveystats.timeseries.solution import TrendSolution


def _direction(values) -> str:
    mid = values.size // 2
    first = float(values[:mid].mean())
    second = float(values[mid:].mean())
    if second > first:
        return DIRECTION_UP
    if second < first:
        return DIRECTION_DOWN
    return DIRECTION_STABLE


def summarize_trend(series: Any) -> TrendSolution:
    """
    Summarize an ordered series of (date, value, predicted) points.

    Only historical points feed mean, min, max, direction and change.
    Direction compares the mean of the second half of the historical
    values against the first half, split at floor(n/2).
    percentage_change = (last - first) / first * 100.

    With fewer than 2 historical points the direction is 'stable' and the
    change is 0.

    Raises:
        EmptySampleError: empty series or no historical point
        ValidationError: malformed point or non-finite value
        DivisionByZeroError: first historical value is 0 and there are at
            least 2 historical points
    """
    timer = Timer()
    timer.start()

    design = TrendDesign.from_series(series)
    hist = design.historical
    n = design.n_historical

    mean = float(hist.mean())
    lo = float(hist.min())
    hi = float(hist.max())

    if n < 2:
        direction = DIRECTION_STABLE
        change = 0.0
    else:
        direction = _direction(hist)
        first = float(hist[0])
        last = float(hist[-1])
        if first == 0.0:
            raise DivisionByZeroError(
                "percentage_change: first historical value is 0, change is undefined",
                quantity='percentage_change',
                baseline=first,
            )
        change = (last - first) / first * 100.0

    variation = None if mean == 0.0 else (hi - lo) / mean * 100.0

    timer.stop()

    params = TrendParams(
        mean=mean,
        min=lo,
        max=hi,
        direction=direction,
        percentage_change=change,
        axis_min=float(design.all_values.min()),
        axis_max=float(design.all_values.max()),
        n_historical=n,
        n_predicted=design.n_predicted,
        variation=variation,
    )

    warnings_list = []
    if n < 2:
        warnings_list.append("fewer than 2 historical points; trend reported as stable")

    result = Result(
        params=params,
        info={'points': design.points, 'split_index': n // 2},
        timing=timer.result(),
        engine=ENGINE_TIMESERIES,
        warnings=tuple(warnings_list),
    )

    return TrendSolution(_result=result)
