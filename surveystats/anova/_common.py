"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Payloads are plain data containers with no computation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GroupSummary:
    """Per-group statistics shown next to the ANOVA table and box plots."""
    name: str
    count: int
    mean: float
    sd: float            # population SD, same convention as describe()
    min: float
    q1: float
    median: float
    q3: float
    max: float

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'count': self.count,
            'mean': self.mean,
            'std': self.sd,
            'min': self.min,
            'q1': self.q1,
            'median': self.median,
            'q3': self.q3,
            'max': self.max,
        }


@dataclass(frozen=True)
class AnovaParams:
    """Parameter payload for one-way ANOVA."""
    f_statistic: float
    p_value: float
    df_between: int
    df_within: int
    ss_between: float
    ss_within: float
    ms_between: float
    ms_within: float
    alpha: float
    significant: bool
    n_obs: int
    grand_mean: float
    eta_squared: float
    groups: tuple[GroupSummary, ...]
