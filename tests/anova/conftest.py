"""
Shared fixtures for ANOVA tests.
"""

import numpy as np
import pytest


@pytest.fixture
def textbook_groups():
    """Means 2, 5, 8 with unit within-group variance: F = 27 on (2, 6) df."""
    return {'A': [1, 2, 3], 'B': [4, 5, 6], 'C': [7, 8, 9]}


@pytest.fixture
def oneway_balanced():
    """3 regions (n=10 each), clear differences in satisfaction."""
    rng = np.random.default_rng(42)
    return {
        'north': rng.normal(6.0, 1.0, 10),
        'south': rng.normal(7.5, 1.0, 10),
        'west': rng.normal(9.0, 1.0, 10),
    }


@pytest.fixture
def oneway_no_effect():
    """3 groups drawn from the same distribution."""
    rng = np.random.default_rng(99)
    y = rng.normal(7.0, 1.5, 45)
    return {'A': y[:15], 'B': y[15:30], 'C': y[30:]}


@pytest.fixture
def oneway_two_groups():
    """2-group design (F should equal the pooled t statistic squared)."""
    rng = np.random.default_rng(77)
    return {
        'control': rng.normal(10.0, 3.0, 20),
        'treatment': rng.normal(14.0, 3.0, 20),
    }
