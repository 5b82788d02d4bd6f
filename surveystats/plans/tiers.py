"""
Plan tier table and feature gating.

The engines are tier-agnostic; callers consult this table once and only
invoke what the subscriber's tier enables.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import unicodedata

from surveystats.core.capabilities import (
    ALL_ENGINES,
    ENGINE_ANOVA,
    ENGINE_CLUSTERING,
    ENGINE_CORRELATION,
    ENGINE_DESCRIPTIVE,
    ENGINE_OUTLIERS,
    ENGINE_TIMESERIES,
)
from surveystats.core.exceptions import (
    FeatureNotAvailableError,
    UnknownTierError,
    ValidationError,
)

TIER_START = 'start-quantico'
TIER_VORTEX = 'vortex-neural'
TIER_NEXUS = 'nexus-infinito'


@dataclass(frozen=True)
class PlanTier:
    """
    Limits and enabled engines of one subscription tier.

    A limit of None means unlimited.
    """
    name: str
    max_questions: int | None
    max_responses: int | None
    max_surveys_per_month: int | None
    enabled_engines: frozenset[str]

    def enables(self, engine: str) -> bool:
        return engine in self.enabled_engines

    def allows_questions(self, n: int) -> bool:
        return self.max_questions is None or n <= self.max_questions

    def allows_responses(self, n: int) -> bool:
        return self.max_responses is None or n <= self.max_responses


DEFAULT_TIERS: dict[str, PlanTier] = {
    TIER_START: PlanTier(
        name=TIER_START,
        max_questions=5,
        max_responses=100,
        max_surveys_per_month=2,
        enabled_engines=frozenset({ENGINE_DESCRIPTIVE}),
    ),
    TIER_VORTEX: PlanTier(
        name=TIER_VORTEX,
        max_questions=10,
        max_responses=250,
        max_surveys_per_month=4,
        enabled_engines=frozenset({ENGINE_DESCRIPTIVE, ENGINE_OUTLIERS, ENGINE_CORRELATION}),
    ),
    TIER_NEXUS: PlanTier(
        name=TIER_NEXUS,
        max_questions=None,
        max_responses=None,
        max_surveys_per_month=15,
        enabled_engines=frozenset({
            ENGINE_DESCRIPTIVE,
            ENGINE_OUTLIERS,
            ENGINE_CORRELATION,
            ENGINE_ANOVA,
            ENGINE_CLUSTERING,
            ENGINE_TIMESERIES,
        }),
    ),
}


def normalize_tier_name(name: str) -> str:
    """
    Canonical tier key: lower case, accents stripped, spaces and
    underscores folded to '-'.

    >>> normalize_tier_name("Start Quântico")
    'start-quantico'
    """
    if not isinstance(name, str):
        raise ValidationError(f"tier: expected a string, got {type(name).__name__}")
    folded = unicodedata.normalize('NFKD', name)
    folded = ''.join(c for c in folded if not unicodedata.combining(c))
    folded = folded.strip().lower().replace('_', ' ')
    return '-'.join(folded.split())


def get_tier(name: str, table: Mapping[str, PlanTier] | None = None) -> PlanTier:
    """
    Look up a tier by name.

    Raises:
        UnknownTierError: name does not match any tier in the table
    """
    table = DEFAULT_TIERS if table is None else table
    key = normalize_tier_name(name)
    try:
        return table[key]
    except KeyError:
        raise UnknownTierError(
            f"unknown plan tier {name!r}; known tiers: {sorted(table)}",
            tier=name,
            known=tuple(sorted(table)),
        ) from None


def is_enabled(
    tier: str | PlanTier,
    engine: str,
    table: Mapping[str, PlanTier] | None = None,
) -> bool:
    """True if the tier enables the engine."""
    if engine not in ALL_ENGINES:
        raise ValidationError(f"engine: unknown engine {engine!r}; known: {sorted(ALL_ENGINES)}")
    plan = tier if isinstance(tier, PlanTier) else get_tier(tier, table)
    return plan.enables(engine)


def require_engine(
    tier: str | PlanTier,
    engine: str,
    table: Mapping[str, PlanTier] | None = None,
) -> PlanTier:
    """
    Return the tier if it enables the engine.

    Raises:
        FeatureNotAvailableError: tier does not enable the engine
        UnknownTierError: tier name is not in the table
    """
    plan = tier if isinstance(tier, PlanTier) else get_tier(tier, table)
    if not is_enabled(plan, engine):
        raise FeatureNotAvailableError(
            f"'{engine}' is not available on the {plan.name} plan",
            tier=plan.name,
            engine=engine,
        )
    return plan

