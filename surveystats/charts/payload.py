"""
Chart payload envelope and the guard that turns engine failures into a
"data unavailable" state.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import functools
import logging
from typing import Any, TypeVar

from surveystats.core.exceptions import SurveyStatsError

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., 'ChartPayload'])


@dataclass(frozen=True)
class ChartPayload:
    """
    Input for one chart component.

    When available is False, data is None and reason carries the error
    message to show in place of the chart.
    """
    kind: str
    available: bool
    data: dict[str, Any] | None = None
    reason: str | None = None

    @classmethod
    def ok(cls, kind: str, data: dict[str, Any]) -> ChartPayload:
        return cls(kind=kind, available=True, data=data)

    @classmethod
    def unavailable(cls, kind: str, reason: str) -> ChartPayload:
        return cls(kind=kind, available=False, data=None, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        return {
            'kind': self.kind,
            'available': self.available,
            'data': self.data,
            'reason': self.reason,
        }


def guarded(kind: str) -> Callable[[F], F]:
    """
    Decorate a payload builder so SurveyStatsError becomes an unavailable
    payload. Other exceptions propagate.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> ChartPayload:
            try:
                return func(*args, **kwargs)
            except SurveyStatsError as e:
                logger.warning("Chart %s unavailable | %s: %s", kind, type(e).__name__, e)
                return ChartPayload.unavailable(kind, str(e))
        return wrapper  # type: ignore[return-value]
    return decorator
