"""
Solver dispatch for descriptive statistics.

Provides describe() for the full single-sample summary, detect_outliers()
for box-plot fences, and percentile() for one-off lookups.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from surveystats.core.capabilities import ENGINE_DESCRIPTIVE, ENGINE_OUTLIERS
from surveystats.core.compute.timing import Timer
from surveystats.core.exceptions import ValidationError
from surveystats.core.result import Result
from surveystats.descriptive._quantile import (
    PERCENTILE_PROBS,
    QUARTILE_PROBS,
    nearest_rank_index,
    nearest_rank_quantiles,
)
from surveystats.descriptive.design import SampleDesign
from surveystats.descriptive.solution import (
    DescriptiveParams,
    DescriptiveSolution,
    OutlierParams,
    OutlierSolution,
)

IQR_FENCE = 1.5


def _ensure_design(sample: ArrayLike | SampleDesign, name: str) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(sample, SampleDesign):
        return sample
    return SampleDesign.from_array(sample, name=name)


def _mode(sorted_x: NDArray) -> tuple[float, ...]:
    """Most frequent values; empty when every value occurs exactly once."""
    values, counts = np.unique(sorted_x, return_counts=True)
    top = counts.max()
    modes = values[counts == top]
    if len(modes) == len(sorted_x):
        return ()
    return tuple(float(v) for v in modes)


def describe(
    sample: ArrayLike | SampleDesign,
    *,
    name: str = 'sample',
) -> DescriptiveSolution:
    """
    Compute descriptive statistics for one sample.

    Non-finite values are discarded first. Quartiles use the nearest-rank
    rule ``sorted[floor(n * p)]``; the standard deviation uses the
    population formula (divisor n).

    Parameters
    ----------
    sample : array-like or SampleDesign
        1D numeric values.
    name : str
        Label for messages and chart payloads (ignored for a SampleDesign).

    Returns
    -------
    DescriptiveSolution

    Raises
    ------
    EmptySampleError
        If the sample has no finite values.
    """
    timer = Timer()
    timer.start()

    design = _ensure_design(sample, name)
    x = design.data
    n = design.n

    with timer.section('sort'):
        ordered = np.sort(x)

    with timer.section('moments'):
        mean = float(np.mean(x))
        variance = float(np.mean((x - mean) ** 2))
        sd = math.sqrt(variance)

    with timer.section('quantiles'):
        q1, median, q3 = (float(v) for v in nearest_rank_quantiles(ordered, QUARTILE_PROBS))
        pct_values = nearest_rank_quantiles(ordered, PERCENTILE_PROBS)
        percentiles = {
            f"p{int(round(p * 100))}": float(v)
            for p, v in zip(PERCENTILE_PROBS, pct_values)
        }

    with timer.section('mode'):
        mode = _mode(ordered)

    timer.stop()

    lo = float(ordered[0])
    hi = float(ordered[-1])

    params = DescriptiveParams(
        mean=mean,
        sd=sd,
        min=lo,
        max=hi,
        q1=q1,
        median=median,
        q3=q3,
        count=n,
        variance=variance,
        range=hi - lo,
        mode=mode,
        percentiles=percentiles,
    )

    warnings_list: list[str] = []
    if design.n_dropped:
        warnings_list.append(f"{design.n_dropped} non-finite value(s) discarded")

    result = Result(
        params=params,
        info={
            'n_dropped': design.n_dropped,
            'quantile_method': 'nearest_rank',
            'sd_method': 'population',
        },
        timing=timer.result(),
        engine=ENGINE_DESCRIPTIVE,
        warnings=tuple(warnings_list),
    )

    return DescriptiveSolution(_result=result, _design=design)


def detect_outliers(
    sample: ArrayLike | SampleDesign,
    *,
    fence: float = IQR_FENCE,
    name: str = 'sample',
) -> OutlierSolution:
    """
    Flag values outside the Tukey fences ``[q1 - fence*iqr, q3 + fence*iqr]``.

    q1 and q3 come from describe(), so they follow the nearest-rank rule.
    When iqr is 0 the fences collapse to [q1, q3] and any value that differs
    from them is reported.

    Parameters
    ----------
    sample : array-like or SampleDesign
        1D numeric values.
    fence : float
        IQR multiplier. Default 1.5.
    name : str
        Label for messages and chart payloads.

    Returns
    -------
    OutlierSolution with outliers in input order.
    """
    try:
        fence = float(fence)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"fence: expected a number, got {fence!r}") from e
    if not math.isfinite(fence) or fence < 0:
        raise ValidationError(f"fence: must be finite and >= 0, got {fence}")

    timer = Timer()
    timer.start()

    design = _ensure_design(sample, name)
    stats = describe(design)

    q1 = stats.q1
    q3 = stats.q3
    iqr = q3 - q1
    lower = q1 - fence * iqr
    upper = q3 + fence * iqr

    with timer.section('classify'):
        x = design.data
        mask = (x < lower) | (x > upper)
        outliers = tuple(float(v) for v in x[mask])

    timer.stop()

    params = OutlierParams(
        q1=q1,
        q3=q3,
        iqr=iqr,
        lower_bound=lower,
        upper_bound=upper,
        outliers=outliers,
        fence=fence,
        count=design.n,
    )

    warnings_list: list[str] = list(stats.warnings)
    if iqr == 0 and outliers:
        warnings_list.append("IQR is 0; every value different from Q1/Q3 is an outlier")

    result = Result(
        params=params,
        info={
            'n_dropped': design.n_dropped,
            'quantile_method': 'nearest_rank',
            'fence': fence,
        },
        timing=timer.result(),
        engine=ENGINE_OUTLIERS,
        warnings=tuple(warnings_list),
    )

    return OutlierSolution(_result=result, _design=design)


def percentile(
    sample: ArrayLike | SampleDesign,
    p: float,
    *,
    name: str = 'sample',
) -> float:
    """
    Single nearest-rank percentile.

    Parameters
    ----------
    sample : array-like or SampleDesign
    p : float
        Percentile in [0, 100].
    """
    if not (0.0 <= p <= 100.0):
        raise ValidationError(f"p: percentile must be between 0 and 100, got {p}")
    design = _ensure_design(sample, name)
    ordered = design.sorted()
    return float(ordered[nearest_rank_index(design.n, p / 100.0)])
