"""
Parameter payload for trend summaries.
"""

from dataclasses import dataclass

DIRECTION_UP = 'up'
DIRECTION_DOWN = 'down'
DIRECTION_STABLE = 'stable'


@dataclass(frozen=True)
class TrendParams:
    """
    Aggregates over the historical points of a series.

    axis_min / axis_max also cover predicted points so forecasts fit on
    the plotted axis. variation is None when the mean is 0.
    """
    mean: float
    min: float
    max: float
    direction: str
    percentage_change: float
    axis_min: float
    axis_max: float
    n_historical: int
    n_predicted: int
    variation: float | None
