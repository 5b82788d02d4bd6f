"""
Common data types for cluster summaries.

Cluster assignments and centroids come from an upstream job; these types
only carry them to the summary and the scatter-plot contract.
"""

from collections.abc import Mapping
from dataclasses import dataclass
import math
import numbers
from typing import Any

from surveystats.core.exceptions import ValidationError


@dataclass(frozen=True)
class ClusterPoint:
    """One respondent projected to 2D, with its assigned cluster."""
    id: str
    x: float
    y: float
    cluster: int
    label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {'id': self.id, 'x': self.x, 'y': self.y, 'cluster': self.cluster}
        if self.label is not None:
            d['label'] = self.label
        return d


@dataclass(frozen=True)
class ClusterCentroid:
    x: float
    y: float
    cluster: int

    def to_dict(self) -> dict[str, Any]:
        return {'x': self.x, 'y': self.y, 'cluster': self.cluster}


@dataclass(frozen=True)
class ClusterStat:
    """Size of one cluster."""
    cluster: int
    count: int
    percentage: float
    centroid: ClusterCentroid

    def to_dict(self) -> dict[str, Any]:
        return {
            'cluster': self.cluster,
            'count': self.count,
            'percentage': self.percentage,
            'centroid': self.centroid.to_dict(),
        }


@dataclass(frozen=True)
class ClusterSummaryParams:
    """Parameter payload for summarize_clusters()."""
    stats: tuple[ClusterStat, ...]
    n_points: int
    n_unassigned: int
    silhouette_score: float | None
    quality: str | None
    inertia: float | None


def _coordinate(value: Any, name: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {value!r}") from e
    if not math.isfinite(v):
        raise ValidationError(f"{name}: must be finite, got {v}")
    return v


def _cluster_label(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a non-negative integer, got {value!r}")
    if not isinstance(value, numbers.Integral) and not float(value).is_integer():
        raise ValidationError(f"{name}: expected a non-negative integer, got {value!r}")
    label = int(value)
    if label < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {label}")
    return label


def as_point(item: Any, index: int) -> ClusterPoint:
    """Accept a ClusterPoint or a mapping with id/x/y/cluster[/label]."""
    if isinstance(item, ClusterPoint):
        item = item.to_dict()
    if not isinstance(item, Mapping):
        raise ValidationError(
            f"points[{index}]: expected ClusterPoint or mapping, got {type(item).__name__}"
        )
    missing = [k for k in ('x', 'y', 'cluster') if k not in item]
    if missing:
        raise ValidationError(f"points[{index}]: missing keys {missing}")
    label = item.get('label')
    return ClusterPoint(
        id=str(item.get('id', index)),
        x=_coordinate(item['x'], f"points[{index}].x"),
        y=_coordinate(item['y'], f"points[{index}].y"),
        cluster=_cluster_label(item['cluster'], f"points[{index}].cluster"),
        label=None if label is None else str(label),
    )


def as_centroid(item: Any, index: int) -> ClusterCentroid:
    """Accept a ClusterCentroid or a mapping with x/y/cluster."""
    if isinstance(item, ClusterCentroid):
        item = item.to_dict()
    if not isinstance(item, Mapping):
        raise ValidationError(
            f"centroids[{index}]: expected ClusterCentroid or mapping, got {type(item).__name__}"
        )
    missing = [k for k in ('x', 'y', 'cluster') if k not in item]
    if missing:
        raise ValidationError(f"centroids[{index}]: missing keys {missing}")
    return ClusterCentroid(
        x=_coordinate(item['x'], f"centroids[{index}].x"),
        y=_coordinate(item['y'], f"centroids[{index}].y"),
        cluster=_cluster_label(item['cluster'], f"centroids[{index}].cluster"),
    )
