"""
Payload builders, one per chart component.

Every builder is guarded: invalid or degenerate input yields
ChartPayload(available=False, reason=...) instead of an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from numpy.typing import ArrayLike

from surveystats.anova import DEFAULT_ALPHA, anova_oneway
from surveystats.charts.payload import ChartPayload, guarded
from surveystats.clustering import summarize_clusters
from surveystats.core.capabilities import (
    ENGINE_ANOVA,
    ENGINE_CLUSTERING,
    ENGINE_CORRELATION,
    ENGINE_DESCRIPTIVE,
    ENGINE_OUTLIERS,
    ENGINE_TIMESERIES,
)
from surveystats.core.exceptions import EmptySampleError, SurveyStatsError, ValidationError
from surveystats.correlation import correlation_matrix
from surveystats.descriptive import IQR_FENCE, describe, detect_outliers
from surveystats.timeseries import summarize_trend

logger = logging.getLogger(__name__)


def _named_samples(series: Any, what: str) -> Mapping[str, ArrayLike]:
    if not isinstance(series, Mapping):
        raise ValidationError(
            f"{what}: expected a mapping of name to values, got {type(series).__name__}"
        )
    if not series:
        raise EmptySampleError(f"{what}: no series given", name=what)
    return series


def _per_series(series: Any, what: str, build) -> list[dict[str, Any]]:
    """Run build(name, values) per series; failures become unavailable entries."""
    entries = []
    for name, values in _named_samples(series, what).items():
        name = str(name)
        try:
            entry = build(name, values)
        except SurveyStatsError as e:
            logger.warning("Series %s unavailable | %s: %s", name, type(e).__name__, e)
            entries.append({'name': name, 'available': False, 'reason': str(e)})
            continue
        entries.append({'name': name, 'available': True, **entry})
    if not any(e['available'] for e in entries):
        raise EmptySampleError(f"{what}: no series has finite values", name=what)
    return entries


@guarded(ENGINE_DESCRIPTIVE)
def descriptive_payload(series: Mapping[str, ArrayLike]) -> ChartPayload:
    """Summary cards: {'series': [{name, available, stats}]}."""
    def build(name, values):
        return {'stats': describe(values, name=name).to_dict()}

    return ChartPayload.ok(ENGINE_DESCRIPTIVE, {'series': _per_series(series, 'series', build)})


@guarded(ENGINE_OUTLIERS)
def boxplot_payload(
    series: Mapping[str, ArrayLike],
    *,
    fence: float = IQR_FENCE,
) -> ChartPayload:
    """
    Box plots: per series ``y = [min, q1, median, q3, max]`` and the
    outlier report. A series without finite values gets an unavailable
    entry; the payload is unavailable only when every series is.
    """
    def build(name, values):
        stats = describe(values, name=name)
        report = detect_outliers(values, fence=fence, name=name)
        return {'y': list(stats.five_number), 'outliers': report.to_dict()}

    return ChartPayload.ok(ENGINE_OUTLIERS, {'series': _per_series(series, 'series', build)})


@guarded(ENGINE_ANOVA)
def anova_payload(groups: Any, alpha: float = DEFAULT_ALPHA) -> ChartPayload:
    sol = anova_oneway(groups, alpha=alpha)
    return ChartPayload.ok(ENGINE_ANOVA, {
        'groups': [g.to_dict() for g in sol.groups],
        'result': sol.to_dict(),
        'alpha': sol.alpha,
        'interpretation': sol.interpretation(),
    })


@guarded(ENGINE_CORRELATION)
def correlation_payload(variables: Any) -> ChartPayload:
    sol = correlation_matrix(variables)
    data = sol.to_dict()
    data['pairs'] = [pc.to_dict() for pc in sol.pairs()]
    return ChartPayload.ok(ENGINE_CORRELATION, data)


@guarded(ENGINE_CLUSTERING)
def clustering_payload(
    points: Any,
    centroids: Any,
    silhouette_score: float | None = None,
    inertia: float | None = None,
) -> ChartPayload:
    sol = summarize_clusters(
        points, centroids, silhouette_score=silhouette_score, inertia=inertia,
    )
    data = sol.to_dict()
    data['points'] = [p.to_dict() for p in sol.points]
    data['centroids'] = [c.to_dict() for c in sol.centroids]
    return ChartPayload.ok(ENGINE_CLUSTERING, data)


@guarded(ENGINE_TIMESERIES)
def timeseries_payload(series: Any) -> ChartPayload:
    sol = summarize_trend(series)
    return ChartPayload.ok(ENGINE_TIMESERIES, {
        'points': [p.to_dict() for p in sol.points],
        'summary': sol.to_dict(),
        'axis': {'min': sol.axis_min, 'max': sol.axis_max},
        'variation': sol.variation,
    })
