"""
Correlation between numeric survey questions.

Public API:
    correlation_matrix(variables) -> CorrelationSolution
    pearson(x, y) -> PairCorrelation
"""

from surveystats.correlation._common import (
    CorrelationParams,
    PairCorrelation,
    classify_direction,
    classify_strength,
)
from surveystats.correlation.design import CorrelationDesign, Variable
from surveystats.correlation.solution import CorrelationSolution
from surveystats.correlation.solvers import correlation_matrix, pearson

__all__ = [
    "correlation_matrix",
    "pearson",
    "classify_strength",
    "classify_direction",
    "Variable",
    "CorrelationDesign",
    "CorrelationParams",
    "CorrelationSolution",
    "PairCorrelation",
]
