"""
TrendDesign: ordered (date, value) series split into historical and
forecast points.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import datetime as dt
import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from surveystats.core.exceptions import EmptySampleError, ValidationError


@dataclass(frozen=True)
class TimeSeriesPoint:
    """
    One observation of a series.

    ``date`` is kept as an ISO-style string and only used for labelling;
    ordering is the order the points were supplied in.
    """
    date: str
    value: float
    predicted: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {'date': self.date, 'value': self.value, 'predicted': self.predicted}


def _as_date(value: Any, name: str) -> str:
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    if isinstance(value, str) and value:
        return value
    raise ValidationError(f"{name}: expected an ISO date string or date, got {value!r}")


def as_series_point(item: Any, index: int) -> TimeSeriesPoint:
    """Accept a TimeSeriesPoint, a mapping, or a (date, value[, predicted]) tuple."""
    if isinstance(item, TimeSeriesPoint):
        date, value, predicted = item.date, item.value, item.predicted
    elif isinstance(item, Mapping):
        if 'date' not in item or 'value' not in item:
            raise ValidationError(f"series[{index}]: mapping needs 'date' and 'value' keys")
        date, value = item['date'], item['value']
        predicted = item.get('predicted', False)
    elif isinstance(item, (tuple, list)) and len(item) in (2, 3):
        date, value = item[0], item[1]
        predicted = item[2] if len(item) == 3 else False
    else:
        raise ValidationError(
            f"series[{index}]: expected TimeSeriesPoint, mapping or tuple, "
            f"got {type(item).__name__}"
        )

    if isinstance(value, bool):
        raise ValidationError(f"series[{index}].value: expected a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"series[{index}].value: expected a number, got {value!r}") from e
    if not math.isfinite(v):
        raise ValidationError(f"series[{index}].value: must be finite, got {v}")

    return TimeSeriesPoint(
        date=_as_date(date, f"series[{index}].date"),
        value=v,
        predicted=bool(predicted),
    )


@dataclass(frozen=True)
class TrendDesign:
    """
    Validated series. Non-finite values are rejected rather than dropped,
    because dropping one would shift the halves used for the trend.
    """
    _points: tuple[TimeSeriesPoint, ...]
    _historical: NDArray[np.floating[Any]]
    _all_values: NDArray[np.floating[Any]]

    @classmethod
    def from_series(cls, series: Any) -> TrendDesign:
        """
        Raises
        ------
        EmptySampleError
            Empty series, or no historical (non-predicted) point.
        ValidationError
            Malformed point or non-finite value.
        """
        if isinstance(series, (str, bytes, Mapping)):
            raise ValidationError(
                f"series: expected a sequence of points, got {type(series).__name__}"
            )
        points = tuple(as_series_point(item, i) for i, item in enumerate(series))
        if not points:
            raise EmptySampleError("series: no points", name='series')

        historical = np.array([p.value for p in points if not p.predicted], dtype=np.float64)
        if historical.size == 0:
            raise EmptySampleError(
                f"series: all {len(points)} point(s) are predictions; "
                f"at least one historical point is required",
                name='series',
            )
        all_values = np.array([p.value for p in points], dtype=np.float64)
        historical.setflags(write=False)
        all_values.setflags(write=False)
        return cls(_points=points, _historical=historical, _all_values=all_values)

    @property
    def points(self) -> tuple[TimeSeriesPoint, ...]:
        return self._points

    @property
    def historical(self) -> NDArray[np.floating[Any]]:
        """Values of non-predicted points, in order (read-only)."""
        return self._historical

    @property
    def all_values(self) -> NDArray[np.floating[Any]]:
        return self._all_values

    @property
    def n_historical(self) -> int:
        return int(self._historical.size)

    @property
    def n_predicted(self) -> int:
        return len(self._points) - self.n_historical
