"""
ANOVA solver dispatch.

Public API:
    anova_oneway(groups, ...) -> AnovaSolution
"""

import math
from typing import Any

import numpy as np
from scipy import stats as sp_stats

from surveystats.core.capabilities import ENGINE_ANOVA
from surveystats.core.compute.timing import Timer
from surveystats.core.exceptions import DegenerateVarianceError
from surveystats.core.result import Result
from surveystats.core.validation import check_open_unit_interval
from surveystats.anova._common import AnovaParams, GroupSummary
from surveystats.anova.design import AnovaDesign
from surveystats.anova.solution import AnovaSolution
from surveystats.descriptive import describe

DEFAULT_ALPHA = 0.05

# Group means closer than this, relative to the largest |value|, count as equal
MEAN_RTOL = 1e-12


def anova_oneway(
    groups: Any,
    *,
    alpha: float = DEFAULT_ALPHA,
) -> AnovaSolution:
    """
    One-way Analysis of Variance.

    Tests whether the means of two or more groups are equal. The p-value is
    the right tail of F(df_between, df_within) at the observed statistic.

    Args:
        groups: {name: values} or a sequence of Group / (name, values) /
            {'name', 'values'} items. Non-finite values are discarded.
        alpha: Significance level in (0, 1). Default 0.05.

    Returns:
        AnovaSolution with F, p, degrees of freedom, mean squares, the
        significance verdict and per-group summaries

    Raises:
        InsufficientGroupsError: fewer than 2 groups
        EmptyGroupError: a group has no finite values
        DegenerateVarianceError: N - k <= 0 (every group has one value)

    Examples:
        >>> result = anova_oneway({'A': [1, 2, 3], 'B': [4, 5, 6], 'C': [7, 8, 9]})
        >>> result.df_between, result.df_within
        (2, 6)
        >>> result.significant
        True
    """
    timer = Timer()
    timer.start()

    alpha = check_open_unit_interval(alpha, "alpha")
    design = AnovaDesign.from_groups(groups)

    k = design.k
    n_total = design.n
    df_between = k - 1
    df_within = n_total - k

    if df_within <= 0:
        raise DegenerateVarianceError(
            f"df_within = N - k = {n_total} - {k} = {df_within}; "
            f"need more observations than groups to estimate within-group variance",
            df_within=df_within,
            n_obs=n_total,
            n_groups=k,
        )

    with timer.section('sums_of_squares'):
        grand_mean, ss_between, ss_within = _sums_of_squares(design.samples)

    ms_between = ss_between / df_between
    ms_within = ss_within / df_within

    warnings_list: list[str] = []
    if ms_within > 0:
        f_statistic = ms_between / ms_within
        p_value = float(sp_stats.f.sf(f_statistic, df_between, df_within))
    elif ms_between > 0:
        # No spread inside any group but the means differ
        f_statistic = math.inf
        p_value = 0.0
        warnings_list.append(
            "within-group variance is 0; groups are perfectly separated"
        )
    else:
        f_statistic = 0.0
        p_value = 1.0

    total_ss = ss_between + ss_within
    eta_squared = ss_between / total_ss if total_ss > 0 else 0.0

    summaries = tuple(
        _summarize_group(name, sample)
        for name, sample in zip(design.names, design.samples)
    )

    n_dropped = sum(design.n_dropped.values())
    if n_dropped:
        warnings_list.append(f"{n_dropped} non-finite value(s) discarded")

    timer.stop()

    params = AnovaParams(
        f_statistic=float(f_statistic),
        p_value=p_value,
        df_between=df_between,
        df_within=df_within,
        ss_between=ss_between,
        ss_within=ss_within,
        ms_between=ms_between,
        ms_within=ms_within,
        alpha=alpha,
        significant=bool(p_value < alpha),
        n_obs=n_total,
        grand_mean=grand_mean,
        eta_squared=eta_squared,
        groups=summaries,
    )

    result = Result(
        params=params,
        info={
            'design_type': 'oneway',
            'n_dropped': dict(design.n_dropped),
        },
        timing=timer.result(),
        engine=ENGINE_ANOVA,
        warnings=tuple(warnings_list),
    )

    return AnovaSolution(_result=result)


def _sums_of_squares(samples: tuple[np.ndarray, ...]) -> tuple[float, float, float]:
    """
    (grand mean, SSB, SSW).

    A constant group contributes exactly 0 to SSW and has its repeated
    value as mean. When all group means agree within MEAN_RTOL, SSB is
    exactly 0, so rounding in np.mean never separates identical groups.
    """
    pooled = np.concatenate(samples)
    grand_mean = float(np.mean(pooled))
    scale = float(np.max(np.abs(pooled)))

    constant = [bool(np.ptp(s) == 0) for s in samples]
    means = [float(s[0]) if c else float(np.mean(s)) for s, c in zip(samples, constant)]

    ss_within = 0.0
    for sample, mean, c in zip(samples, means, constant):
        if not c:
            ss_within += float(np.sum((sample - mean) ** 2))

    if max(means) - min(means) <= MEAN_RTOL * scale:
        return grand_mean, 0.0, ss_within

    ss_between = 0.0
    for sample, mean in zip(samples, means):
        ss_between += sample.size * (mean - grand_mean) ** 2
    return grand_mean, ss_between, ss_within


def _summarize_group(name: str, sample: np.ndarray) -> GroupSummary:
    stats = describe(sample, name=name)
    return GroupSummary(
        name=name,
        count=stats.count,
        mean=stats.mean,
        sd=stats.sd,
        min=stats.min,
        q1=stats.q1,
        median=stats.median,
        q3=stats.q3,
        max=stats.max,
    )
