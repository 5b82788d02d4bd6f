"""
Tests for one-way ANOVA.

Validates:
    - Known textbook case (F = 27, df 2/6)
    - Agreement with scipy.stats.f_oneway
    - 2-group F equals t^2
    - significant == (p < alpha)
    - Zero within-group variance and degenerate df
    - Group summaries and output contracts
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from surveystats.anova import Group, anova_oneway
from surveystats.core.exceptions import (
    DegenerateVarianceError,
    EmptyGroupError,
    InsufficientGroupsError,
    ValidationError,
)


class TestKnownCase:

    def test_table(self, textbook_groups):
        result = anova_oneway(textbook_groups)
        assert result.df_between == 2
        assert result.df_within == 6
        np.testing.assert_allclose(result.ss_between, 54.0)
        np.testing.assert_allclose(result.ss_within, 6.0)
        np.testing.assert_allclose(result.ms_between, 27.0)
        np.testing.assert_allclose(result.ms_within, 1.0)
        np.testing.assert_allclose(result.f_statistic, 27.0)

    def test_p_value(self, textbook_groups):
        result = anova_oneway(textbook_groups)
        expected = sp_stats.f.sf(27.0, 2, 6)
        np.testing.assert_allclose(result.p_value, expected, rtol=1e-12)
        assert 0.0009 < result.p_value < 0.0011
        assert result.significant

    def test_eta_squared(self, textbook_groups):
        result = anova_oneway(textbook_groups)
        np.testing.assert_allclose(result.eta_squared, 54.0 / 60.0)

    def test_grand_mean(self, textbook_groups):
        assert anova_oneway(textbook_groups).grand_mean == 5.0


class TestAgainstScipy:

    def test_balanced(self, oneway_balanced):
        result = anova_oneway(oneway_balanced)
        f, p = sp_stats.f_oneway(*oneway_balanced.values())
        np.testing.assert_allclose(result.f_statistic, f, rtol=1e-10)
        np.testing.assert_allclose(result.p_value, p, rtol=1e-8)
        assert result.significant

    def test_no_effect(self, oneway_no_effect):
        result = anova_oneway(oneway_no_effect)
        f, p = sp_stats.f_oneway(*oneway_no_effect.values())
        np.testing.assert_allclose(result.f_statistic, f, rtol=1e-10)
        np.testing.assert_allclose(result.p_value, p, rtol=1e-8)

    def test_f_equals_t_squared(self, oneway_two_groups):
        result = anova_oneway(oneway_two_groups)
        t_stat, t_p = sp_stats.ttest_ind(
            oneway_two_groups['control'], oneway_two_groups['treatment']
        )
        np.testing.assert_allclose(result.f_statistic, t_stat ** 2, rtol=1e-8)
        np.testing.assert_allclose(result.p_value, t_p, rtol=1e-6)


class TestSignificance:

    @pytest.mark.parametrize("alpha", [0.0005, 0.001, 0.01, 0.05, 0.5])
    def test_verdict_matches_alpha(self, textbook_groups, alpha):
        result = anova_oneway(textbook_groups, alpha=alpha)
        assert result.significant == (result.p_value < alpha)
        assert result.alpha == alpha

    def test_identical_groups(self):
        result = anova_oneway({'A': [1, 2, 3], 'B': [1, 2, 3]})
        assert result.f_statistic == 0.0
        np.testing.assert_allclose(result.p_value, 1.0)
        assert not result.significant

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.05])
    def test_bad_alpha(self, textbook_groups, alpha):
        with pytest.raises(ValidationError, match="alpha"):
            anova_oneway(textbook_groups, alpha=alpha)


class TestZeroVariance:

    def test_all_constant_same_value(self):
        result = anova_oneway({'A': [4, 4], 'B': [4, 4]})
        assert result.f_statistic == 0.0
        assert result.p_value == 1.0
        assert not result.significant

    def test_null_fixture(self):
        result = anova_oneway({'A': [5, 5, 5], 'B': [5, 5, 5]})
        assert result.ms_between == 0.0
        assert result.ms_within == 0.0
        assert result.f_statistic == 0.0
        assert result.p_value == 1.0
        assert result.warnings == ()

    @pytest.mark.parametrize("value", [0.1, 0.01, 0.3, 0.7, 1.1, 2.3, 9.99])
    @pytest.mark.parametrize("n", [2, 3, 5])
    def test_identical_inexact_constants(self, value, n):
        result = anova_oneway({'A': [value] * n, 'B': [value] * n})
        assert result.f_statistic == 0.0
        assert result.p_value == 1.0
        assert not result.significant
        assert not any("perfectly separated" in w for w in result.warnings)

    def test_three_identical_inexact_groups(self):
        result = anova_oneway({'A': [0.1] * 3, 'B': [0.1] * 3, 'C': [0.1] * 3})
        assert result.ss_between == 0.0
        assert result.ss_within == 0.0
        assert result.f_statistic == 0.0
        assert result.p_value == 1.0
        assert result.eta_squared == 0.0

    def test_close_but_distinct_constants_separate(self):
        result = anova_oneway({'A': [0.1] * 3, 'B': [0.2] * 3})
        assert math.isinf(result.f_statistic)
        assert result.p_value == 0.0

    def test_mixed_constant_and_varying_groups(self):
        groups = {'A': [0.1] * 4, 'B': [0.1, 0.2, 0.3, 0.4]}
        result = anova_oneway(groups)
        f, p = sp_stats.f_oneway(*groups.values())
        np.testing.assert_allclose(result.f_statistic, f, rtol=1e-10)
        np.testing.assert_allclose(result.p_value, p, rtol=1e-8)

    def test_perfect_separation(self):
        result = anova_oneway({'A': [1, 1, 1], 'B': [5, 5, 5]})
        assert math.isinf(result.f_statistic)
        assert result.p_value == 0.0
        assert result.significant
        assert any("perfectly separated" in w for w in result.warnings)

    def test_singleton_groups_are_degenerate(self):
        with pytest.raises(DegenerateVarianceError) as exc_info:
            anova_oneway({'A': [1], 'B': [2], 'C': [3]})
        assert exc_info.value.df_within == 0
        assert exc_info.value.n_groups == 3

    def test_one_singleton_group_is_fine(self):
        result = anova_oneway({'A': [5], 'B': [1, 2, 3]})
        assert result.df_within == 2
        assert result.groups[0].sd == 0.0


class TestPreconditions:

    def test_one_group(self):
        with pytest.raises(InsufficientGroupsError) as exc_info:
            anova_oneway({'A': [1, 2, 3]})
        assert exc_info.value.n_groups == 1

    def test_empty_group(self):
        with pytest.raises(EmptyGroupError) as exc_info:
            anova_oneway({'A': [1, 2], 'B': [np.nan]})
        assert exc_info.value.group == 'B'

    def test_non_finite_values_dropped(self, textbook_groups):
        groups = dict(textbook_groups)
        groups['A'] = [1, 2, np.nan, 3]
        result = anova_oneway(groups)
        np.testing.assert_allclose(result.f_statistic, 27.0)
        assert result.info['n_dropped'] == {'A': 1, 'B': 0, 'C': 0}
        assert any("discarded" in w for w in result.warnings)


class TestGroupSummaries:

    def test_order_and_values(self, textbook_groups):
        result = anova_oneway(textbook_groups)
        names = [g.name for g in result.groups]
        assert names == ['A', 'B', 'C']
        b = result.groups[1]
        assert (b.count, b.mean, b.min, b.q1, b.median, b.q3, b.max) == (3, 5.0, 4.0, 4.0, 5.0, 6.0, 6.0)
        np.testing.assert_allclose(b.sd, math.sqrt(2.0 / 3.0))

    def test_accepts_group_objects(self, textbook_groups):
        groups = [Group(name, values) for name, values in textbook_groups.items()]
        result = anova_oneway(groups)
        np.testing.assert_allclose(result.f_statistic, 27.0)

    def test_group_order_does_not_change_statistics(self, textbook_groups):
        a = anova_oneway(textbook_groups)
        b = anova_oneway(dict(reversed(list(textbook_groups.items()))))
        np.testing.assert_allclose(a.f_statistic, b.f_statistic)
        np.testing.assert_allclose(a.p_value, b.p_value)


class TestOutput:

    def test_to_dict(self, textbook_groups):
        d = anova_oneway(textbook_groups).to_dict()
        assert set(d) == {
            'fStatistic', 'pValue', 'dfBetween', 'dfWithin',
            'msBetween', 'msWithin', 'significant',
        }
        assert d['dfBetween'] == 2
        assert d['significant'] is True

    def test_interpretation(self, textbook_groups):
        result = anova_oneway(textbook_groups)
        assert "rejected" in result.interpretation()
        assert "not rejected" not in result.interpretation()

    def test_interpretation_not_significant(self):
        result = anova_oneway({'A': [1, 2, 3], 'B': [1, 2, 3]})
        assert "not rejected" in result.interpretation()

    def test_summary(self, textbook_groups):
        text = anova_oneway(textbook_groups).summary()
        assert "Between groups" in text
        assert "Residuals" in text
        assert "**" in text

    def test_engine(self, textbook_groups):
        assert anova_oneway(textbook_groups).engine == 'anova'
