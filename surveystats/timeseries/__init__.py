"""
Time-series trend summaries.

Public API:
    summarize_trend(series) -> TrendSolution
"""

from surveystats.timeseries._common import TrendParams
from surveystats.timeseries.design import TimeSeriesPoint, TrendDesign
from surveystats.timeseries.solution import TrendSolution
from surveystats.timeseries.solvers import summarize_trend

__all__ = [
    "summarize_trend",
    "TimeSeriesPoint",
    "TrendDesign",
    "TrendParams",
    "TrendSolution",
]
