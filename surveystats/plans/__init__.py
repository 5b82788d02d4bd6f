"""
Subscription plan tiers and engine gating.

Public API:
    get_tier(name) -> PlanTier
    is_enabled(tier, engine) -> bool
    require_engine(tier, engine) -> PlanTier
    load_tier_table(path) -> dict[str, PlanTier]
    TierEntry: pydantic model of one YAML tier entry
"""

from surveystats.plans.loader import TierEntry, load_tier_table, parse_tier_table
from surveystats.plans.tiers import (
    DEFAULT_TIERS,
    TIER_NEXUS,
    TIER_START,
    TIER_VORTEX,
    PlanTier,
    get_tier,
    is_enabled,
    normalize_tier_name,
    require_engine,
)

__all__ = [
    "PlanTier",
    "DEFAULT_TIERS",
    "TIER_START",
    "TIER_VORTEX",
    "TIER_NEXUS",
    "get_tier",
    "is_enabled",
    "require_engine",
    "normalize_tier_name",
    "load_tier_table",
    "parse_tier_table",
    "TierEntry",
]
