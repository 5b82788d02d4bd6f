"""
Cluster summaries for pre-computed segmentations.

Public API:
    summarize_clusters(points, centroids, ...) -> ClusterSummarySolution
    silhouette_quality(score) -> 'excellent' | 'good' | 'fair' | 'poor'
"""

from surveystats.clustering._common import (
    ClusterCentroid,
    ClusterPoint,
    ClusterStat,
    ClusterSummaryParams,
)
from surveystats.clustering.solution import ClusterSummarySolution
from surveystats.clustering.solvers import silhouette_quality, summarize_clusters

__all__ = [
    "summarize_clusters",
    "silhouette_quality",
    "ClusterPoint",
    "ClusterCentroid",
    "ClusterStat",
    "ClusterSummaryParams",
    "ClusterSummarySolution",
]
