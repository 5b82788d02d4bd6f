"""
Core infrastructure for surveystats.

This module provides shared abstractions and utilities used by all
engine subpackages (descriptive, anova, correlation, ...).

Key components:
    protocols: ResponseRepository, SentimentClassifier protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    capabilities: Engine name constants
    compute: Timing utilities
"""

from surveystats.core.protocols import ResponseRepository, SentimentClassifier
from surveystats.core.result import Result
from surveystats.core.exceptions import (
    SurveyStatsError,
    ValidationError,
    DimensionError,
    MismatchedLengthError,
    EmptySampleError,
    InsufficientGroupsError,
    EmptyGroupError,
    NumericalError,
    DegenerateVarianceError,
    DivisionByZeroError,
    PlanError,
    UnknownTierError,
    FeatureNotAvailableError,
)

__all__ = [
    # Protocols
    "ResponseRepository",
    "SentimentClassifier",
    # Result
    "Result",
    # Exceptions
    "SurveyStatsError",
    "ValidationError",
    "DimensionError",
    "MismatchedLengthError",
    "EmptySampleError",
    "InsufficientGroupsError",
    "EmptyGroupError",
    "NumericalError",
    "DegenerateVarianceError",
    "DivisionByZeroError",
    "PlanError",
    "UnknownTierError",
    "FeatureNotAvailableError",
]
