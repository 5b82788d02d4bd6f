"""
surveystats: statistics behind survey analytics dashboards.

Turns per-question survey answers into descriptive statistics, outlier
fences, one-way ANOVA, correlation matrices, cluster summaries and trend
summaries, plus the chart payloads that render them.

Submodules:
    descriptive: Mean, SD, nearest-rank quartiles, IQR outliers
    anova: One-way analysis of variance
    correlation: Pearson correlation matrices
    clustering: Summaries of upstream cluster assignments
    timeseries: Historical/forecast trend summaries
    responses: Adapters from stored answers to samples and tallies
    plans: Subscription tiers and engine gating
    charts: Guarded chart payload builders
"""

__version__ = "0.1.0"

from surveystats import descriptive
from surveystats import anova
from surveystats import correlation
from surveystats import clustering
from surveystats import timeseries
from surveystats import responses
from surveystats import plans
from surveystats import charts

__all__ = [
    "__version__",
    "descriptive",
    "anova",
    "correlation",
    "clustering",
    "timeseries",
    "responses",
    "plans",
    "charts",
]
