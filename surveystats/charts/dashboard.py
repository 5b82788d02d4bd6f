"""
Plan-gated dashboard assembly.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging
from typing import Any

from surveystats.anova import DEFAULT_ALPHA
from surveystats.charts.builders import (
    anova_payload,
    boxplot_payload,
    clustering_payload,
    correlation_payload,
    descriptive_payload,
    timeseries_payload,
)
from surveystats.charts.payload import ChartPayload, guarded
from surveystats.core.capabilities import (
    ENGINE_ANOVA,
    ENGINE_CLUSTERING,
    ENGINE_CORRELATION,
    ENGINE_DESCRIPTIVE,
    ENGINE_OUTLIERS,
    ENGINE_TIMESERIES,
)
from surveystats.plans.tiers import PlanTier, get_tier
from surveystats.responses.response_set import ResponseSet

logger = logging.getLogger(__name__)


@guarded(ENGINE_CORRELATION)
def _respondent_correlation(responses: ResponseSet, question_ids: list[str]) -> ChartPayload:
    """Correlation over respondents who answered every question numerically."""
    return correlation_payload(responses.paired_numeric(question_ids))


def build_dashboard(
    responses: ResponseSet,
    tier: str | PlanTier,
    *,
    questions: Sequence[str] | None = None,
    groups: Sequence[str] | None = None,
    series: Any = None,
    clusters: Mapping[str, Any] | None = None,
    alpha: float = DEFAULT_ALPHA,
    table: Mapping[str, PlanTier] | None = None,
) -> dict[str, ChartPayload]:
    """
    Build every chart payload the tier enables.

    Args:
        responses: Survey answers.
        tier: Plan tier name (any spelling normalize_tier_name accepts) or
            a PlanTier.
        questions: Numeric question ids to chart. Defaults to every
            question in ``responses``. The correlation chart pairs them by
            respondent and keeps only respondents who answered all of them.
        groups: Question ids compared by ANOVA, each question one group.
            Defaults to ``questions``.
        series: Time series points for the trend chart. Skipped when None.
        clusters: {'points', 'centroids'[, 'silhouette_score', 'inertia']}
            from an upstream clustering job. Skipped when None.
        alpha: ANOVA significance level.
        table: Tier table override (see load_tier_table).

    Returns:
        {engine name: ChartPayload} for enabled engines with input. Engines
        the tier does not enable are left out.

    Raises:
        UnknownTierError: tier is not in the table
        ValidationError: a question id is not in ``responses``
    """
    plan = tier if isinstance(tier, PlanTier) else get_tier(tier, table)

    qids = list(responses.question_ids if questions is None else questions)
    samples = {qid: responses.numeric(qid) for qid in qids}
    group_samples = {
        g: samples[g] if g in samples else responses.numeric(g)
        for g in (qids if groups is None else groups)
    }

    builders = {
        ENGINE_DESCRIPTIVE: lambda: descriptive_payload(samples),
        ENGINE_OUTLIERS: lambda: boxplot_payload(samples),
        ENGINE_CORRELATION: lambda: _respondent_correlation(responses, qids),
        ENGINE_ANOVA: lambda: anova_payload(group_samples, alpha),
    }
    if clusters is not None:
        builders[ENGINE_CLUSTERING] = lambda: clustering_payload(
            clusters.get('points', ()),
            clusters.get('centroids', ()),
            silhouette_score=clusters.get('silhouette_score'),
            inertia=clusters.get('inertia'),
        )
    if series is not None:
        builders[ENGINE_TIMESERIES] = lambda: timeseries_payload(series)

    dashboard: dict[str, ChartPayload] = {}
    for engine, build in builders.items():
        if not plan.enables(engine):
            logger.debug("Engine %s skipped | not enabled on %s", engine, plan.name)
            continue
        dashboard[engine] = build()

    logger.info(
        "Dashboard built | survey=%s | tier=%s | charts=%s | unavailable=%s",
        responses.survey_id, plan.name, sorted(dashboard),
        sorted(k for k, p in dashboard.items() if not p.available),
    )
    return dashboard
