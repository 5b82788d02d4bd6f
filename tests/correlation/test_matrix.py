"""
Tests for correlation_matrix() and pearson().

Validates:
    - Perfect linear relationships give +/-1
    - Agreement with numpy.corrcoef
    - Symmetry, exact unit diagonal, range [-1, 1]
    - Zero-variance fallback to 0
    - Length mismatch and non-finite values
"""

import numpy as np
import pytest

from surveystats.core.exceptions import (
    EmptySampleError,
    MismatchedLengthError,
    ValidationError,
)
from surveystats.correlation import Variable, correlation_matrix, pearson


@pytest.fixture
def survey_matrix(rng):
    n = 60
    satisfaction = rng.normal(7.0, 1.5, n)
    return {
        'satisfaction': satisfaction,
        'nps': satisfaction * 1.2 + rng.normal(0.0, 0.8, n),
        'effort': -0.5 * satisfaction + rng.normal(0.0, 1.0, n),
        'tenure': rng.normal(24.0, 6.0, n),
    }


class TestKnownValues:

    def test_perfect_positive(self):
        result = correlation_matrix({'x': [1, 2, 3, 4], 'y': [2, 4, 6, 8]})
        assert result.coefficient('x', 'y') == 1.0

    def test_perfect_negative(self):
        result = correlation_matrix({'x': [1, 2, 3, 4], 'y': [8, 6, 4, 2]})
        assert result.coefficient('x', 'y') == -1.0

    def test_matches_numpy(self, survey_matrix):
        result = correlation_matrix(survey_matrix)
        expected = np.corrcoef(np.column_stack(list(survey_matrix.values())), rowvar=False)
        np.testing.assert_allclose(result.matrix, expected, atol=1e-12)


class TestStructure:

    def test_symmetric_unit_diagonal(self, survey_matrix):
        m = correlation_matrix(survey_matrix).matrix
        np.testing.assert_array_equal(m, m.T)
        np.testing.assert_array_equal(np.diag(m), np.ones(4))
        assert np.all(m >= -1.0) and np.all(m <= 1.0)

    def test_read_only(self, survey_matrix):
        m = correlation_matrix(survey_matrix).matrix
        with pytest.raises(ValueError):
            m[0, 1] = 0.5

    def test_variable_order_kept(self, survey_matrix):
        result = correlation_matrix(survey_matrix)
        assert result.variables == ('satisfaction', 'nps', 'effort', 'tenure')

    def test_single_variable(self):
        result = correlation_matrix({'x': [1, 2, 3]})
        assert result.matrix.tolist() == [[1.0]]

    def test_accepts_variables_and_pairs(self):
        a = correlation_matrix([Variable('x', [1, 2, 3]), Variable('y', [3, 1, 2])])
        b = correlation_matrix([('x', [1, 2, 3]), ('y', [3, 1, 2])])
        np.testing.assert_array_equal(a.matrix, b.matrix)


class TestZeroVariance:

    def test_constant_column_is_zero(self):
        result = correlation_matrix({'x': [1, 2, 3, 4], 'flat': [5, 5, 5, 5]})
        assert result.coefficient('x', 'flat') == 0.0
        assert result.coefficient('flat', 'flat') == 1.0
        assert result.zero_variance == ('flat',)
        assert any("zero variance" in w for w in result.warnings)

    def test_constant_non_representable_mean(self):
        # the mean of 0.1 repeated does not round-trip exactly
        result = correlation_matrix({'x': [1, 2, 3], 'flat': [0.1, 0.1, 0.1]})
        assert result.coefficient('x', 'flat') == 0.0

    def test_single_observation(self):
        result = correlation_matrix({'x': [1.0], 'y': [2.0]})
        assert result.coefficient('x', 'y') == 0.0
        assert any("fewer than 2" in w for w in result.warnings)


class TestRejected:

    def test_mismatched_lengths(self):
        with pytest.raises(MismatchedLengthError) as exc_info:
            correlation_matrix({'x': [1, 2, 3], 'y': [1, 2]})
        assert exc_info.value.lengths == {'x': 3, 'y': 2}

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            correlation_matrix({'x': [1, 2, np.nan], 'y': [1, 2, 3]})

    def test_no_variables(self):
        with pytest.raises(ValidationError):
            correlation_matrix({})

    def test_no_observations(self):
        with pytest.raises(EmptySampleError):
            correlation_matrix({'x': [], 'y': []})

    def test_duplicate_names(self):
        with pytest.raises(ValidationError, match="duplicate"):
            correlation_matrix([('x', [1, 2]), ('x', [2, 1])])

    def test_unknown_variable_lookup(self):
        result = correlation_matrix({'x': [1, 2], 'y': [2, 1]})
        with pytest.raises(ValidationError, match="unknown variable"):
            result.coefficient('x', 'z')


class TestPairsAndOutput:

    def test_pairs_sorted_by_strength(self, survey_matrix):
        pairs = correlation_matrix(survey_matrix).pairs()
        assert len(pairs) == 6
        strengths = [abs(p.coefficient) for p in pairs]
        assert strengths == sorted(strengths, reverse=True)
        top = pairs[0]
        assert {top.variable1, top.variable2} == {'satisfaction', 'nps'}
        assert top.direction == 'positive'

    def test_to_dict(self):
        d = correlation_matrix({'x': [1, 2, 3, 4], 'y': [2, 4, 6, 8]}).to_dict()
        assert d == {'variables': ['x', 'y'], 'matrix': [[1.0, 1.0], [1.0, 1.0]]}

    def test_summary(self):
        text = correlation_matrix({'x': [1, 2, 3], 'flat': [1, 1, 1]}).summary()
        assert "n = 3" in text
        assert "Zero variance" in text

    def test_engine(self):
        assert correlation_matrix({'x': [1, 2]}).engine == 'correlation'


class TestPearson:

    def test_bands(self):
        pc = pearson([1, 2, 3, 4], [2, 4, 6, 8])
        assert pc.coefficient == 1.0
        assert pc.strength == 'very strong'
        assert pc.direction == 'positive'

    def test_names(self):
        pc = pearson([1, 2, 3], [3, 2, 1], names=('price', 'satisfaction'))
        assert (pc.variable1, pc.variable2) == ('price', 'satisfaction')
        assert pc.direction == 'negative'

    def test_mismatch(self):
        with pytest.raises(MismatchedLengthError):
            pearson([1, 2, 3], [1, 2])
