"""
Engine name constants for surveystats.

This module is the SINGLE SOURCE OF TRUTH for engine names. Plan tiers
enable engines by these names and chart builders check them before running.
Import from here, never use raw strings.

Usage:
    from surveystats.core.capabilities import ENGINE_ANOVA

    if tier.enables(ENGINE_ANOVA):
        payload = anova_payload(groups)
"""

# Mean, standard deviation, quartiles (bar charts, summary cards)
ENGINE_DESCRIPTIVE = 'descriptive'

# 1.5 x IQR fences (box plots)
ENGINE_OUTLIERS = 'outliers'

# Pairwise Pearson matrix (heatmaps)
ENGINE_CORRELATION = 'correlation'

# One-way ANOVA across groups
ENGINE_ANOVA = 'anova'

# Aggregation of upstream cluster assignments
ENGINE_CLUSTERING = 'clustering'

# Historical/forecast trend summary
ENGINE_TIMESERIES = 'timeseries'

# All engines as a frozenset for validation
ALL_ENGINES = frozenset({
    ENGINE_DESCRIPTIVE,
    ENGINE_OUTLIERS,
    ENGINE_CORRELATION,
    ENGINE_ANOVA,
    ENGINE_CLUSTERING,
    ENGINE_TIMESERIES,
})

__all__ = [
    'ENGINE_DESCRIPTIVE',
    'ENGINE_OUTLIERS',
    'ENGINE_CORRELATION',
    'ENGINE_ANOVA',
    'ENGINE_CLUSTERING',
    'ENGINE_TIMESERIES',
    'ALL_ENGINES',
]
