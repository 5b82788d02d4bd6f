"""
Descriptive statistics module.

Single-sample summaries behind the dashboard's summary cards and box plots.

Public API:
    describe(sample)          - Mean, SD, quartiles, min/max, mode, percentiles
    detect_outliers(sample)   - 1.5 x IQR fences and flagged values
    percentile(sample, p)     - One nearest-rank percentile
"""

from surveystats.descriptive.design import SampleDesign
from surveystats.descriptive.solution import (
    DescriptiveParams,
    DescriptiveSolution,
    OutlierParams,
    OutlierSolution,
)
from surveystats.descriptive.solvers import (
    IQR_FENCE,
    describe,
    detect_outliers,
    percentile,
)

__all__ = [
    "describe",
    "detect_outliers",
    "percentile",
    "IQR_FENCE",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "OutlierParams",
    "OutlierSolution",
]
