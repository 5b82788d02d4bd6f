"""
Analysis of Variance (ANOVA).

Public API:
    anova_oneway(groups, alpha=0.05) -> AnovaSolution
"""

from surveystats.anova.design import AnovaDesign, Group
from surveystats.anova.solvers import DEFAULT_ALPHA, anova_oneway
from surveystats.anova.solution import AnovaSolution
from surveystats.anova._common import AnovaParams, GroupSummary

__all__ = [
    "anova_oneway",
    "DEFAULT_ALPHA",
    "Group",
    "AnovaDesign",
    "AnovaSolution",
    "AnovaParams",
    "GroupSummary",
]
