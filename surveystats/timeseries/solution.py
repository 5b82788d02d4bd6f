"""
User-facing trend summary.
"""

from dataclasses import dataclass
from typing import Any

from surveystats.core.result import Result
from surveystats.timeseries._common import TrendParams
from surveystats.timeseries.design import TimeSeriesPoint


@dataclass
class TrendSolution:
    """
    Mean, range and two-halves trend of a series.

    Produced by summarize_trend().
    """
    _result: Result[TrendParams]

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def direction(self) -> str:
        """'up', 'down' or 'stable'."""
        return self._result.params.direction

    @property
    def percentage_change(self) -> float:
        return self._result.params.percentage_change

    @property
    def axis_min(self) -> float:
        return self._result.params.axis_min

    @property
    def axis_max(self) -> float:
        return self._result.params.axis_max

    @property
    def n_historical(self) -> int:
        return self._result.params.n_historical

    @property
    def n_predicted(self) -> int:
        return self._result.params.n_predicted

    @property
    def variation(self) -> float | None:
        """(max - min) / mean * 100 over historical points."""
        return self._result.params.variation

    @property
    def points(self) -> tuple[TimeSeriesPoint, ...]:
        return self._result.info['points']

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

    def to_dict(self) -> dict[str, Any]:
        """TrendSummary chart contract."""
        p = self._result.params
        return {
            'mean': p.mean,
            'min': p.min,
            'max': p.max,
            'direction': p.direction,
            'percentageChange': p.percentage_change,
        }

    def summary(self) -> str:
        p = self._result.params
        arrow = {'up': '^', 'down': 'v'}.get(p.direction, '=')
        lines = [
            f"Trend over {p.n_historical} historical point(s)"
            + (f" + {p.n_predicted} predicted" if p.n_predicted else ""),
            f"  Mean: {p.mean:.4f}   Min: {p.min:.4f}   Max: {p.max:.4f}",
            f"  Direction: {p.direction} {arrow}   Change: {p.percentage_change:+.1f}%",
        ]
        if p.variation is not None:
            lines.append(f"  Variation: {p.variation:.1f}%")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TrendSolution(direction={p.direction!r}, "
            f"change={p.percentage_change:.2f}%, n={p.n_historical})"
        )
