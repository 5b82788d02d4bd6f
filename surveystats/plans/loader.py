"""
YAML overrides for the plan tier table.

File format::

    tiers:
      vortex-neural:
        max_questions: 12
        engines: [descriptive, outliers, correlation, timeseries]
      enterprise:
        max_questions: null        # unlimited
        max_responses: null
        max_surveys_per_month: 50
        engines: [descriptive, outliers, correlation, anova, clustering, timeseries]

Entries for built-in tiers override only the keys they name. New tiers
must name every limit.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from surveystats.core.capabilities import ALL_ENGINES
from surveystats.core.exceptions import ValidationError
from surveystats.plans.tiers import DEFAULT_TIERS, PlanTier, normalize_tier_name

logger = logging.getLogger(__name__)

_LIMIT_KEYS = ('max_questions', 'max_responses', 'max_surveys_per_month')

Limit = Annotated[StrictInt, Field(ge=0)]


class TierEntry(BaseModel):
    """
    One tier as written in the YAML file.

    A limit of null means unlimited. Keys left out are taken from the
    built-in tier of the same name; model_fields_set tells them apart
    from an explicit null.
    """

    model_config = ConfigDict(extra="forbid")

    max_questions: Limit | None = None
    max_responses: Limit | None = None
    max_surveys_per_month: Limit | None = None
    engines: list[str] | None = None

    @field_validator("engines", mode="before")
    @classmethod
    def _engines_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            raise ValueError("expected a list of engine names, got a string")
        return value

    @field_validator("engines")
    @classmethod
    def _known_engines(cls, value: list[str]) -> list[str]:
        unknown = sorted(set(value) - ALL_ENGINES)
        if unknown:
            raise ValueError(f"unknown engine(s) {unknown}; known: {sorted(ALL_ENGINES)}")
        return value

    def to_tier(self, name: str, base: PlanTier | None) -> PlanTier:
        """Resolve against ``base``; a new tier (base None) must set everything."""
        fields: dict[str, Any] = {}
        for key in _LIMIT_KEYS:
            if key in self.model_fields_set:
                fields[key] = getattr(self, key)
            elif base is not None:
                fields[key] = getattr(base, key)
            else:
                raise ValidationError(f"tiers.{name}: new tier must set '{key}'")

        if 'engines' in self.model_fields_set:
            engines = frozenset(self.engines or ())
        elif base is not None:
            engines = base.enabled_engines
        else:
            raise ValidationError(f"tiers.{name}: new tier must set 'engines'")

        return PlanTier(name=name, enabled_engines=engines, **fields)


def _describe(error: dict[str, Any]) -> str:
    where = ".".join(str(part) for part in error['loc'])
    if error['type'] == 'extra_forbidden':
        return f"{where}: unknown key"
    return f"{where}: {error['msg']}" if where else error['msg']


def _parse_entry(name: str, entry: Any) -> TierEntry:
    try:
        return TierEntry.model_validate(entry)
    except pydantic.ValidationError as e:
        details = "; ".join(_describe(err) for err in e.errors())
        raise ValidationError(f"tiers.{name}: {details}") from e


def parse_tier_table(
    data: Any,
    base: dict[str, PlanTier] | None = None,
) -> dict[str, PlanTier]:
    """Merge a parsed YAML document over ``base`` (defaults when None)."""
    table = dict(DEFAULT_TIERS if base is None else base)
    if not data:
        return table
    if not isinstance(data, dict) or not isinstance(data.get('tiers', {}), dict):
        raise ValidationError("tier table: expected a mapping with a 'tiers' mapping")

    for raw_name, entry in (data.get('tiers') or {}).items():
        name = normalize_tier_name(str(raw_name))
        base_tier = table.get(name)
        table[name] = _parse_entry(name, entry).to_tier(name, base_tier)
        logger.debug(
            "Tier %s | %s | engines=%s",
            name, "override" if base_tier is not None else "added",
            sorted(table[name].enabled_engines),
        )
    return table


def load_tier_table(
    path: str | Path,
    base: dict[str, PlanTier] | None = None,
) -> dict[str, PlanTier]:
    """
    Load a tier table from YAML, merged over the built-in tiers.

    Raises:
        ValidationError: malformed document
        OSError: file cannot be read
    """
    resolved = Path(path).resolve()
    with resolved.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as e:
            raise ValidationError(f"tier table {resolved}: invalid YAML ({e})") from e
    table = parse_tier_table(data, base)
    logger.info("Tier table loaded | path=%s | tiers=%s", resolved, sorted(table))
    return table
