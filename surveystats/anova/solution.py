"""
User-facing ANOVA solution type.

Wraps a Result[AnovaParams] and provides convenient accessors, an
R-style ANOVA table, a plain-language interpretation and the chart
contract.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from surveystats.core.result import Result
from surveystats.anova._common import AnovaParams, GroupSummary


@dataclass
class AnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by anova_oneway().
    """
    _result: Result[AnovaParams]

    @property
    def f_statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def ss_between(self) -> float:
        return self._result.params.ss_between

    @property
    def ss_within(self) -> float:
        return self._result.params.ss_within

    @property
    def ms_between(self) -> float:
        return self._result.params.ms_between

    @property
    def ms_within(self) -> float:
        return self._result.params.ms_within

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def significant(self) -> bool:
        """True iff p_value < alpha."""
        return self._result.params.significant

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

    @property
    def groups(self) -> tuple[GroupSummary, ...]:
        return self._result.params.groups

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
        """ANOVAResult chart contract."""
        p = self._result.params
        return {
            'fStatistic': p.f_statistic,
            'pValue': p.p_value,
            'dfBetween': p.df_between,
            'dfWithin': p.df_within,
            'msBetween': p.ms_between,
            'msWithin': p.ms_within,
            'significant': p.significant,
        }

    def interpretation(self) -> str:
        """Plain-language verdict for the dashboard's interpretation panel."""
        p = self._result.params
        if p.significant:
            return (
                f"With p = {p.p_value:.4f} < alpha = {p.alpha:g}, the null hypothesis "
                f"of equal means is rejected: at least one group mean differs "
                f"significantly from the others."
            )
        return (
            f"With p = {p.p_value:.4f} >= alpha = {p.alpha:g}, the null hypothesis "
            f"of equal means is not rejected: there is not enough evidence that "
            f"the group means differ."
        )

    def summary(self) -> str:
        """Generate R-style one-way ANOVA table."""
        p = self._result.params
        sig = _significance_stars(p.p_value)
        lines = [
            "One-way Analysis of Variance",
            "=" * 72,
            f"Observations: {p.n_obs}    Groups: {len(p.groups)}",
            "",
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
            "-" * 72,
            f"{'Between groups':<20} {p.df_between:>6} {p.ss_between:>14.4f} "
            f"{p.ms_between:>14.4f} {p.f_statistic:>10.4f} {p.p_value:>12.4e} {sig}",
            f"{'Residuals':<20} {p.df_within:>6} {p.ss_within:>14.4f} "
            f"{p.ms_within:>14.4f}",
            "-" * 72,
            "Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1",
            "",
            f"eta^2 = {p.eta_squared:.4f}",
            "",
            "Group means:",
        ]
        for g in p.groups:
            lines.append(f"  {g.name}: mean = {g.mean:.4f}, sd = {g.sd:.4f}, n = {g.count}")
        lines.append("")
        lines.append(self.interpretation())
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"AnovaSolution(k={len(p.groups)}, n={p.n_obs}, "
            f"F={p.f_statistic:.4g}, p={p.p_value:.4g}, significant={p.significant})"
        )


def _significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value."""
    if p is None or np.isnan(p):
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
