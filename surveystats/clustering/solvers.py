"""
Cluster summary solvers.

Public API:
    summarize_clusters(points, centroids, ...) -> ClusterSummarySolution
    silhouette_quality(score) -> str

Clustering itself (Lloyd's algorithm, silhouette computation) runs
upstream; this module only aggregates the labels it produced.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Any

from surveystats.core.capabilities import ENGINE_CLUSTERING
from surveystats.core.compute.timing import Timer
from surveystats.core.exceptions import ValidationError
from surveystats.core.result import Result
from surveystats.clustering._common import (
    ClusterStat,
    ClusterSummaryParams,
    as_centroid,
    as_point,
)
from surveystats.clustering.solution import ClusterSummarySolution

QUALITY_BANDS = (
    (0.7, 'excellent'),
    (0.5, 'good'),
    (0.25, 'fair'),
)
LOWEST_QUALITY = 'poor'


def silhouette_quality(score: float) -> str:
    """
    Verbal band for a silhouette score computed upstream.

    > 0.7 excellent, > 0.5 good, > 0.25 fair, otherwise poor.

    Raises:
        ValidationError: score is not a finite number in [-1, 1]
    """
    try:
        s = float(score)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"silhouette_score: expected a number, got {score!r}") from e
    if not math.isfinite(s) or not (-1.0 <= s <= 1.0):
        raise ValidationError(f"silhouette_score: must be in [-1, 1], got {s}")
    for edge, label in QUALITY_BANDS:
        if s > edge:
            return label
    return LOWEST_QUALITY


def summarize_clusters(
    points: Any,
    centroids: Any,
    *,
    silhouette_score: float | None = None,
    inertia: float | None = None,
) -> ClusterSummarySolution:
    """
    Count points per centroid.

    Args:
        points: Sequence of ClusterPoint or mappings with id/x/y/cluster.
        centroids: Sequence of ClusterCentroid or mappings with x/y/cluster,
            one per distinct cluster label.
        silhouette_score: Upstream silhouette score, classified into a
            quality band when given.
        inertia: Upstream within-cluster sum of squares, passed through.

    Returns:
        ClusterSummarySolution with one ClusterStat per centroid, in
        centroid order. percentage = 100 * count / len(points), or 0 when
        there are no points.

    Raises:
        ValidationError: malformed points/centroids or duplicate centroid labels
    """
    timer = Timer()
    timer.start()

    pts = [as_point(item, i) for i, item in enumerate(points)]
    cents = [as_centroid(item, i) for i, item in enumerate(centroids)]

    labels = [c.cluster for c in cents]
    duplicates = sorted({lbl for lbl in labels if labels.count(lbl) > 1})
    if duplicates:
        raise ValidationError(f"centroids: duplicate cluster labels {duplicates}")

    counts = Counter(p.cluster for p in pts)
    n_points = len(pts)

    stats = tuple(
        ClusterStat(
            cluster=c.cluster,
            count=counts.get(c.cluster, 0),
            percentage=(100.0 * counts.get(c.cluster, 0) / n_points) if n_points else 0.0,
            centroid=c,
        )
        for c in cents
    )

    known = set(labels)
    n_unassigned = sum(n for lbl, n in counts.items() if lbl not in known)

    quality = None
    if silhouette_score is not None:
        quality = silhouette_quality(silhouette_score)
        silhouette_score = float(silhouette_score)

    if inertia is not None:
        try:
            inertia = float(inertia)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"inertia: expected a number, got {inertia!r}") from e
        if not math.isfinite(inertia) or inertia < 0:
            raise ValidationError(f"inertia: must be finite and >= 0, got {inertia}")

    warnings_list: list[str] = []
    if n_unassigned:
        orphan = sorted(lbl for lbl in counts if lbl not in known)
        warnings_list.append(
            f"{n_unassigned} point(s) carry cluster labels with no centroid: {orphan}"
        )

    timer.stop()

    params = ClusterSummaryParams(
        stats=stats,
        n_points=n_points,
        n_unassigned=n_unassigned,
        silhouette_score=silhouette_score,
        quality=quality,
        inertia=inertia,
    )

    result = Result(
        params=params,
        info={'n_clusters': len(cents), 'points': tuple(pts)},
        timing=timer.result(),
        engine=ENGINE_CLUSTERING,
        warnings=tuple(warnings_list),
    )

    return ClusterSummarySolution(_result=result)
