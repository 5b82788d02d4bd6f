"""
Descriptive statistics solution types.

Contains the parameter payloads and user-facing solution wrappers for
describe() and detect_outliers().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from surveystats.core.result import Result

if TYPE_CHECKING:
    from surveystats.descriptive.design import SampleDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for describe().

    sd is the population standard deviation (divisor n). Quartiles and
    percentiles follow the nearest-rank rule.
    """
    mean: float
    sd: float
    min: float
    max: float
    q1: float
    median: float
    q3: float
    count: int
    variance: float
    range: float
    mode: tuple[float, ...]              # empty when every value is distinct
    percentiles: dict[str, float]        # 'p25', 'p50', 'p75', 'p90', 'p95'


@dataclass(frozen=True)
class OutlierParams:
    """Parameter payload for detect_outliers()."""
    q1: float
    q3: float
    iqr: float
    lower_bound: float
    upper_bound: float
    outliers: tuple[float, ...]          # input order
    fence: float
    count: int


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def sd(self) -> float:
        """Population standard deviation."""
        return self._result.params.sd

    @property
    def variance(self) -> float:
        """Population variance (divisor n)."""
        return self._result.params.variance

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def q1(self) -> float:
        return self._result.params.q1

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def q3(self) -> float:
        return self._result.params.q3

    @property
    def count(self) -> int:
        return self._result.params.count

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def mode(self) -> tuple[float, ...]:
        """Most frequent value(s), ascending; empty if all values are distinct."""
        return self._result.params.mode

    @property
    def percentiles(self) -> dict[str, float]:
        return dict(self._result.params.percentiles)

    @property
    def five_number(self) -> tuple[float, float, float, float, float]:
        """(min, q1, median, q3, max) in box-plot order."""
        p = self._result.params
        return (p.min, p.q1, p.median, p.q3, p.max)

    @property
    def name(self) -> str:
        return self._design.name

    @property
    def n_dropped(self) -> int:
        return self._design.n_dropped

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
        """DescriptiveStats chart contract."""
        p = self._result.params
        return {
            'mean': p.mean,
            'stdDev': p.sd,
            'min': p.min,
            'max': p.max,
            'q1': p.q1,
            'median': p.median,
            'q3': p.q3,
            'count': p.count,
            'variance': p.variance,
            'range': p.range,
            'mode': list(p.mode),
            'percentiles': dict(p.percentiles),
        }

    def summary(self) -> str:
        """Plain-text summary table."""
        p = self._result.params
        rows = [
            ("N", f"{p.count}"),
            ("Mean", f"{p.mean:.4f}"),
            ("Std. Dev.", f"{p.sd:.4f}"),
            ("Min.", f"{p.min:.4f}"),
            ("1st Qu.", f"{p.q1:.4f}"),
            ("Median", f"{p.median:.4f}"),
            ("3rd Qu.", f"{p.q3:.4f}"),
            ("Max.", f"{p.max:.4f}"),
        ]
        if p.mode:
            rows.append(("Mode", ", ".join(f"{m:g}" for m in p.mode)))
        label_width = max(len(label) for label, _ in rows)
        lines = [f"Descriptive Statistics: {self.name}"]
        lines.extend(f"  {label.ljust(label_width)}  {value}" for label, value in rows)
        if self.n_dropped:
            lines.append(f"  ({self.n_dropped} non-finite value(s) discarded)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(name={self.name!r}, n={p.count}, "
            f"mean={p.mean:.4g}, sd={p.sd:.4g})"
        )


@dataclass
class OutlierSolution:
    """
    User-facing outlier report.

    Wraps Result[OutlierParams].
    """
    _result: Result[OutlierParams]
    _design: 'SampleDesign'

    @property
    def q1(self) -> float:
        return self._result.params.q1

    @property
    def q3(self) -> float:
        return self._result.params.q3

    @property
    def iqr(self) -> float:
        return self._result.params.iqr

    @property
    def lower_bound(self) -> float:
        return self._result.params.lower_bound

    @property
    def upper_bound(self) -> float:
        return self._result.params.upper_bound

    @property
    def outliers(self) -> tuple[float, ...]:
        return self._result.params.outliers

    @property
    def n_outliers(self) -> int:
        return len(self._result.params.outliers)

    @property
    def fence(self) -> float:
        return self._result.params.fence

    @property
    def name(self) -> str:
        return self._design.name

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

    def is_outlier(self, value: float) -> bool:
        """Whether a value falls strictly outside the fences."""
        return value < self.lower_bound or value > self.upper_bound

    def to_dict(self) -> dict[str, Any]:
        """OutlierReport chart contract."""
        p = self._result.params
        return {
            'q1': p.q1,
            'q3': p.q3,
            'iqr': p.iqr,
            'lowerBound': p.lower_bound,
            'upperBound': p.upper_bound,
            'outliers': list(p.outliers),
        }

    def summary(self) -> str:
        p = self._result.params
        lines = [
            f"Outliers ({p.fence:g} x IQR): {self.name}",
            f"  IQR = {p.iqr:.4f} (Q1 = {p.q1:.4f}, Q3 = {p.q3:.4f})",
            f"  Fences: [{p.lower_bound:.4f}, {p.upper_bound:.4f}]",
            f"  {self.n_outliers} of {p.count} value(s) outside the fences",
        ]
        if p.outliers:
            shown = ", ".join(f"{v:.1f}" for v in p.outliers[:3])
            more = ", ..." if len(p.outliers) > 3 else ""
            lines.append(f"  Values: {shown}{more}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"OutlierSolution(name={self.name!r}, n={p.count}, "
            f"outliers={self.n_outliers})"
        )
