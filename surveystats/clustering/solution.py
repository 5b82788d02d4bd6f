"""
User-facing cluster summary.
"""

from dataclasses import dataclass
from typing import Any

from surveystats.core.result import Result
from surveystats.clustering._common import (
    ClusterCentroid,
    ClusterPoint,
    ClusterStat,
    ClusterSummaryParams,
)


@dataclass
class ClusterSummarySolution:
    """
    Per-cluster counts and percentages, plus the optional quality band.

    Produced by summarize_clusters().
    """
    _result: Result[ClusterSummaryParams]

    @property
    def stats(self) -> tuple[ClusterStat, ...]:
        return self._result.params.stats

    @property
    def n_points(self) -> int:
        return self._result.params.n_points

    @property
    def n_unassigned(self) -> int:
        """Points whose cluster label has no centroid."""
        return self._result.params.n_unassigned

    @property
    def silhouette_score(self) -> float | None:
        return self._result.params.silhouette_score

    @property
    def quality(self) -> str | None:
        """'excellent', 'good', 'fair', 'poor', or None without a score."""
        return self._result.params.quality

    @property
    def inertia(self) -> float | None:
        return self._result.params.inertia

    @property
    def points(self) -> tuple[ClusterPoint, ...]:
        return self._result.info['points']

    @property
    def centroids(self) -> tuple[ClusterCentroid, ...]:
        return tuple(s.centroid for s in self._result.params.stats)

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

    def largest(self) -> ClusterStat | None:
        """Cluster with the most points (first in centroid order on ties)."""
        if not self.stats:
            return None
        return max(self.stats, key=lambda s: s.count)

    def to_dict(self) -> dict[str, Any]:
        p = self._result.params
        return {
            'stats': [s.to_dict() for s in p.stats],
            'silhouetteScore': p.silhouette_score,
            'quality': p.quality,
            'inertia': p.inertia,
        }

    def summary(self) -> str:
        p = self._result.params
        lines = [f"Cluster summary ({p.n_points} points, {len(p.stats)} clusters)"]
        for s in p.stats:
            lines.append(
                f"  Cluster {s.cluster}: {s.count} point(s), {s.percentage:.1f}% "
                f"(centroid {s.centroid.x:.2f}, {s.centroid.y:.2f})"
            )
        if p.silhouette_score is not None:
            lines.append(f"  Silhouette: {p.silhouette_score:.3f} ({p.quality})")
        if p.inertia is not None:
            lines.append(f"  Inertia: {p.inertia:.2f}")
        if p.n_unassigned:
            lines.append(f"  Unassigned: {p.n_unassigned}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return f"ClusterSummarySolution(k={len(p.stats)}, n={p.n_points}, quality={p.quality})"
