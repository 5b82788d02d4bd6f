"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def ratings():
    """Ten 1-10 ratings with one extreme answer."""
    return np.array([7.0, 8.0, 6.0, 9.0, 7.0, 8.0, 7.0, 5.0, 8.0, 30.0])


@pytest.fixture
def survey_answers():
    """Raw answers as a response store returns them."""
    return {
        'q_nps': [9, 10, '8', 7, None, 'n/a', 10, 6],
        'q_effort': [2, 3, 3, 4, 2, 5, 1, 3],
        'q_channel': ['Email', 'Chat', 'Email', ['Phone', 'Email'], '', None, 'Chat', 'Email'],
        'q_comment': ['great service', 'too slow', '', 'ok', None, 'great', 'slow', 'fine'],
    }


class FakeRepository:
    """In-memory ResponseRepository."""

    def __init__(self, data):
        self.data = data
        self.calls = []

    def fetch_responses(self, survey_id):
        self.calls.append(survey_id)
        return self.data[survey_id]


@pytest.fixture
def repository(survey_answers):
    return FakeRepository({'survey-1': survey_answers})
