"""
Tests for build_dashboard().
"""

import pytest

from surveystats.charts import build_dashboard
from surveystats.core.capabilities import (
    ENGINE_ANOVA,
    ENGINE_CLUSTERING,
    ENGINE_CORRELATION,
    ENGINE_DESCRIPTIVE,
    ENGINE_OUTLIERS,
    ENGINE_TIMESERIES,
)
from surveystats.core.exceptions import UnknownTierError, ValidationError
from surveystats.plans import PlanTier
from surveystats.responses import ResponseSet


@pytest.fixture
def responses():
    return ResponseSet.from_mapping('survey-1', {
        'q_service': [8, 9, 7, 9, 10, 8],
        'q_price': [5, 6, 4, 6, 7, 5],
        'q_speed': [3, 4, 2, 5, 4, 3],
    })


@pytest.fixture
def clusters():
    return {
        'points': [{'x': 0, 'y': 0, 'cluster': 0}, {'x': 3, 'y': 3, 'cluster': 1}],
        'centroids': [{'x': 0, 'y': 0, 'cluster': 0}, {'x': 3, 'y': 3, 'cluster': 1}],
        'silhouette_score': 0.6,
    }


@pytest.fixture
def series():
    return [('2024-01-01', 7.0), ('2024-02-01', 7.5), ('2024-03-01', 8.1)]


class TestGating:

    def test_start_only_descriptive(self, responses, clusters, series):
        dashboard = build_dashboard(responses, 'Start Quântico', clusters=clusters, series=series)
        assert set(dashboard) == {ENGINE_DESCRIPTIVE}

    def test_vortex(self, responses, clusters, series):
        dashboard = build_dashboard(responses, 'vortex-neural', clusters=clusters, series=series)
        assert set(dashboard) == {ENGINE_DESCRIPTIVE, ENGINE_OUTLIERS, ENGINE_CORRELATION}

    def test_nexus_everything(self, responses, clusters, series):
        dashboard = build_dashboard(responses, 'nexus-infinito', clusters=clusters, series=series)
        assert set(dashboard) == {
            ENGINE_DESCRIPTIVE, ENGINE_OUTLIERS, ENGINE_CORRELATION,
            ENGINE_ANOVA, ENGINE_CLUSTERING, ENGINE_TIMESERIES,
        }
        assert all(p.available for p in dashboard.values())

    def test_optional_inputs_skipped(self, responses):
        dashboard = build_dashboard(responses, 'nexus-infinito')
        assert ENGINE_CLUSTERING not in dashboard
        assert ENGINE_TIMESERIES not in dashboard

    def test_custom_tier(self, responses):
        tier = PlanTier(
            name='anova-only', max_questions=None, max_responses=None,
            max_surveys_per_month=None, enabled_engines=frozenset({ENGINE_ANOVA}),
        )
        dashboard = build_dashboard(responses, tier)
        assert set(dashboard) == {ENGINE_ANOVA}

    def test_unknown_tier(self, responses):
        with pytest.raises(UnknownTierError):
            build_dashboard(responses, 'gold')


class TestContent:

    def test_anova_compares_questions(self, responses):
        dashboard = build_dashboard(responses, 'nexus-infinito', groups=['q_service', 'q_speed'])
        anova = dashboard[ENGINE_ANOVA]
        assert [g['name'] for g in anova.data['groups']] == ['q_service', 'q_speed']
        assert anova.data['result']['significant'] is True

    def test_question_subset(self, responses):
        dashboard = build_dashboard(responses, 'vortex-neural', questions=['q_price'])
        names = [s['name'] for s in dashboard[ENGINE_DESCRIPTIVE].data['series']]
        assert names == ['q_price']

    def test_degenerate_input_is_unavailable_not_raised(self):
        responses = ResponseSet.from_mapping('s', {'q1': ['n/a'], 'q2': [1, 2]})
        dashboard = build_dashboard(responses, 'nexus-infinito')
        assert dashboard[ENGINE_DESCRIPTIVE].available
        assert not dashboard[ENGINE_ANOVA].available
        assert not dashboard[ENGINE_CORRELATION].available

    def test_unknown_question(self, responses):
        with pytest.raises(ValidationError):
            build_dashboard(responses, 'nexus-infinito', questions=['q_missing'])


class TestRespondentPairing:

    def test_staggered_missing_answers(self):
        responses = ResponseSet.from_mapping('s', {
            'q_a': [1, None, 2, 3],
            'q_b': [3, 1, None, 1],
        })
        corr = build_dashboard(responses, 'nexus-infinito')[ENGINE_CORRELATION]
        assert corr.available
        assert corr.data['matrix'] == [[1.0, -1.0], [-1.0, 1.0]]

    def test_non_numeric_answer_drops_whole_respondent(self):
        responses = ResponseSet.from_mapping('s', {
            'q_a': [1, 2, 'n/a', 4, 5],
            'q_b': [2, 4, 100, 8, 10],
        })
        corr = build_dashboard(responses, 'vortex-neural')[ENGINE_CORRELATION]
        assert corr.data['matrix'][0][1] == pytest.approx(1.0)

    def test_descriptive_still_uses_every_answer(self):
        responses = ResponseSet.from_mapping('s', {
            'q_a': [1, None, 2, 3],
            'q_b': [3, 1, None, 1],
        })
        descriptive = build_dashboard(responses, 'start-quantico')[ENGINE_DESCRIPTIVE]
        counts = [s['stats']['count'] for s in descriptive.data['series']]
        assert counts == [3, 3]

    def test_no_shared_respondent_is_unavailable(self):
        responses = ResponseSet.from_mapping('s', {
            'q_a': [1, None],
            'q_b': [None, 2],
        })
        corr = build_dashboard(responses, 'nexus-infinito')[ENGINE_CORRELATION]
        assert not corr.available

    def test_unequal_answer_counts_are_unavailable(self):
        responses = ResponseSet.from_mapping('s', {
            'q_a': [1, 2, 3],
            'q_b': [3, 2],
        })
        corr = build_dashboard(responses, 'nexus-infinito')[ENGINE_CORRELATION]
        assert not corr.available
        assert "answer counts differ" in corr.reason
