"""
Chart payloads.

Builders wrap the engines and never raise SurveyStatsError: failures
come back as ChartPayload(available=False, reason=...) so the dashboard
can show a "data unavailable" state per chart.

Public API:
    descriptive_payload, boxplot_payload, anova_payload,
    correlation_payload, clustering_payload, timeseries_payload,
    build_dashboard(responses, tier, ...) -> {engine: ChartPayload}
"""

from surveystats.charts.builders import (
    anova_payload,
    boxplot_payload,
    clustering_payload,
    correlation_payload,
    descriptive_payload,
    timeseries_payload,
)
from surveystats.charts.dashboard import build_dashboard
from surveystats.charts.payload import ChartPayload, guarded

__all__ = [
    "ChartPayload",
    "guarded",
    "descriptive_payload",
    "boxplot_payload",
    "anova_payload",
    "correlation_payload",
    "clustering_payload",
    "timeseries_payload",
    "build_dashboard",
]
