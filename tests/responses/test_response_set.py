"""
Tests for ResponseSet and load_responses().
"""

import logging

import numpy as np
import pytest

from surveystats.core.exceptions import MismatchedLengthError, ValidationError
from surveystats.responses import ResponseSet, load_responses


class TestLoad:

    def test_fetches_once(self, repository):
        responses = load_responses(repository, 'survey-1')
        assert repository.calls == ['survey-1']
        assert responses.survey_id == 'survey-1'
        assert responses.question_ids == ('q_nps', 'q_effort', 'q_channel', 'q_comment')
        assert responses.n_answers == 32

    def test_logs(self, repository, caplog):
        with caplog.at_level(logging.INFO, logger="surveystats.responses.response_set"):
            load_responses(repository, 'survey-1')
        assert "survey=survey-1" in caplog.text

    def test_rejects_non_repository(self):
        with pytest.raises(ValidationError, match="fetch_responses"):
            load_responses(object(), 'survey-1')

    def test_rejects_non_mapping(self):
        with pytest.raises(ValidationError):
            ResponseSet.from_mapping('s', [1, 2, 3])

    def test_rejects_string_answers(self):
        with pytest.raises(ValidationError, match="q1"):
            ResponseSet.from_mapping('s', {'q1': "5,4,3"})

    def test_none_answers_become_empty(self):
        responses = ResponseSet.from_mapping('s', {'q1': None})
        assert responses.answers('q1') == ()


class TestNumeric:

    def test_parses_and_drops(self, repository):
        responses = load_responses(repository, 'survey-1')
        np.testing.assert_array_equal(
            responses.numeric('q_nps'), [9.0, 10.0, 8.0, 7.0, 10.0, 6.0]
        )

    def test_drops_booleans_and_non_finite(self):
        responses = ResponseSet.from_mapping('s', {'q': [True, 3, 'nan', float('inf'), ' 4 ', '2,5']})
        np.testing.assert_array_equal(responses.numeric('q'), [3.0, 4.0, 2.5])

    def test_rating_mappings(self):
        responses = ResponseSet.from_mapping('s', {'q': [{'answer_rating': 4}, {'rating': '5'}, {'text': 'x'}]})
        np.testing.assert_array_equal(responses.numeric('q'), [4.0, 5.0])

    def test_may_be_empty(self):
        responses = ResponseSet.from_mapping('s', {'q': ['a', None]})
        assert responses.numeric('q').size == 0

    def test_unknown_question(self, repository):
        responses = load_responses(repository, 'survey-1')
        with pytest.raises(ValidationError, match="q_missing"):
            responses.numeric('q_missing')

    def test_contains(self, repository):
        responses = load_responses(repository, 'survey-1')
        assert 'q_nps' in responses
        assert 'q_missing' not in responses


class TestPairedNumeric:

    def test_keeps_respondents_with_every_answer(self, survey_answers):
        responses = ResponseSet.from_mapping('s', survey_answers)
        paired = responses.paired_numeric(['q_nps', 'q_effort'])
        np.testing.assert_array_equal(paired['q_nps'], [9, 10, 8, 7, 10, 6])
        np.testing.assert_array_equal(paired['q_effort'], [2, 3, 3, 4, 1, 3])

    def test_rows_stay_aligned(self):
        responses = ResponseSet.from_mapping('s', {
            'a': [1, None, 2, 3],
            'b': [3, 1, None, 1],
        })
        paired = responses.paired_numeric(['a', 'b'])
        np.testing.assert_array_equal(paired['a'], [1, 3])
        np.testing.assert_array_equal(paired['b'], [3, 1])

    def test_unequal_answer_counts(self):
        responses = ResponseSet.from_mapping('s', {'a': [1, 2, 3], 'b': [1, 2]})
        with pytest.raises(MismatchedLengthError) as exc_info:
            responses.paired_numeric(['a', 'b'])
        assert exc_info.value.lengths == {'a': 3, 'b': 2}

    def test_unknown_question(self, survey_answers):
        responses = ResponseSet.from_mapping('s', survey_answers)
        with pytest.raises(ValidationError, match="q_missing"):
            responses.paired_numeric(['q_nps', 'q_missing'])


class TestChoicesAndSentiment:

    def test_choices(self, repository):
        responses = load_responses(repository, 'survey-1')
        stats = responses.choices('q_channel')
        assert stats.frequencies == {'Email': 4, 'Chat': 2, 'Phone': 1}
        assert stats.most_frequent == 'Email'
        assert stats.least_frequent == 'Phone'
        assert stats.total == 7

    def test_choices_with_options(self, repository):
        responses = load_responses(repository, 'survey-1')
        stats = responses.choices('q_channel', "Email\nChat\nSMS")
        assert stats.frequencies == {'Email': 4, 'Chat': 2, 'SMS': 0}
        assert stats.unique_count == 2
        assert stats.least_frequent == 'SMS'

    def test_sentiment(self, repository):
        responses = load_responses(repository, 'survey-1')

        def classify(text):
            return 'positive' if 'great' in text or text in ('ok', 'fine') else 'negative'

        stats = responses.sentiment('q_comment', classify)
        assert stats.frequencies == {'positive': 4, 'negative': 2}

    def test_sentiment_requires_callable(self, repository):
        responses = load_responses(repository, 'survey-1')
        with pytest.raises(ValidationError, match="classifier"):
            responses.sentiment('q_comment', 'positive')
