"""
ResponseSet: raw answers of one survey, keyed by question id.

This is the adapter between the response store and the engines. Raw
answers are parsed into numeric samples or choice tallies on demand.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import logging
import math
import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray

from surveystats.core.exceptions import MismatchedLengthError, ValidationError
from surveystats.core.protocols import ResponseRepository, SentimentClassifier
from surveystats.responses.categorical import CategoricalStats, tally_choices

logger = logging.getLogger(__name__)

_NUMERIC_KEYS = ('rating', 'answer_rating', 'value')


def _as_number(answer: Any) -> float | None:
    """Finite float for a numeric answer, else None."""
    if isinstance(answer, Mapping):
        for key in _NUMERIC_KEYS:
            if answer.get(key) is not None:
                return _as_number(answer[key])
        return None
    if isinstance(answer, (bool, np.bool_)):
        return None
    if isinstance(answer, numbers.Real):
        v = float(answer)
    elif isinstance(answer, str):
        try:
            v = float(answer.strip().replace(',', '.'))
        except ValueError:
            return None
    else:
        return None
    return v if math.isfinite(v) else None


@dataclass(frozen=True)
class ResponseSet:
    """
    Immutable snapshot of a survey's answers.

    Construction:
        ResponseSet.from_mapping('survey-1', {'q1': [5, 4, '3'], ...})
        load_responses(repository, 'survey-1')
    """
    survey_id: str
    _answers: Mapping[str, tuple[Any, ...]]

    @classmethod
    def from_mapping(cls, survey_id: str, answers: Mapping[str, Any]) -> ResponseSet:
        if not isinstance(answers, Mapping):
            raise ValidationError(
                f"responses: expected a mapping of question id to answers, "
                f"got {type(answers).__name__}"
            )
        frozen: dict[str, tuple[Any, ...]] = {}
        for qid, values in answers.items():
            if values is None:
                values = ()
            elif isinstance(values, (str, bytes, Mapping)) or not hasattr(values, '__iter__'):
                raise ValidationError(
                    f"responses[{qid!r}]: expected a sequence of answers, "
                    f"got {type(values).__name__}"
                )
            frozen[str(qid)] = tuple(values)
        return cls(survey_id=str(survey_id), _answers=frozen)

    @property
    def question_ids(self) -> tuple[str, ...]:
        return tuple(self._answers)

    @property
    def n_answers(self) -> int:
        """Raw answers across all questions."""
        return sum(len(v) for v in self._answers.values())

    def __len__(self) -> int:
        return len(self._answers)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._answers

    def answers(self, question_id: str) -> tuple[Any, ...]:
        """Raw answers of one question."""
        try:
            return self._answers[question_id]
        except KeyError:
            raise ValidationError(
                f"question {question_id!r} not in survey {self.survey_id!r}; "
                f"known: {list(self._answers)}"
            ) from None

    def numeric(self, question_id: str) -> NDArray[np.floating[Any]]:
        """
        Numeric sample of one question, in answer order.

        Numbers and numeric strings are kept; booleans, blanks, non-numeric
        text and non-finite values are dropped. The result may be empty;
        the engines raise EmptySampleError on it.
        """
        raw = self.answers(question_id)
        values = [v for v in map(_as_number, raw) if v is not None]
        if len(values) < len(raw):
            logger.debug(
                "Question %s | dropped %d non-numeric answer(s) of %d",
                question_id, len(raw) - len(values), len(raw),
            )
        return np.array(values, dtype=np.float64)

    def paired_numeric(
        self,
        question_ids: Sequence[str],
    ) -> dict[str, NDArray[np.floating[Any]]]:
        """
        Numeric samples of several questions, paired by respondent.

        Answer lists are respondent-ordered, so position i of every
        question belongs to the same respondent. Only respondents with a
        numeric answer to every question are kept; all returned arrays
        have the same length.

        Raises:
            ValidationError: a question id is not in the survey
            MismatchedLengthError: the questions have different numbers of
                raw answers, so respondents cannot be lined up
        """
        qids = [str(q) for q in question_ids]
        raw = {qid: self.answers(qid) for qid in qids}
        lengths = {qid: len(answers) for qid, answers in raw.items()}
        if len(set(lengths.values())) > 1:
            details = ", ".join(f"{qid}={n}" for qid, n in lengths.items())
            raise MismatchedLengthError(
                f"cannot pair answers by respondent, answer counts differ: {details}",
                lengths=lengths,
            )

        parsed = {qid: [_as_number(a) for a in answers] for qid, answers in raw.items()}
        n_rows = next(iter(lengths.values()), 0)
        keep = [
            i for i in range(n_rows)
            if all(parsed[qid][i] is not None for qid in qids)
        ]
        if len(keep) < n_rows:
            logger.debug(
                "Questions %s | kept %d of %d respondent(s) with every answer numeric",
                qids, len(keep), n_rows,
            )
        return {
            qid: np.array([parsed[qid][i] for i in keep], dtype=np.float64)
            for qid in qids
        }

    def choices(self, question_id: str, options: Any = None) -> CategoricalStats:
        """Frequency table of a choice question."""
        return tally_choices(self.answers(question_id), options)

    def sentiment(self, question_id: str, classifier: SentimentClassifier) -> CategoricalStats:
        """
        Tally the labels a sentiment classifier assigns to text answers.

        Blank and non-text answers are skipped.
        """
        if not isinstance(classifier, SentimentClassifier):
            raise ValidationError(
                f"classifier: expected a callable text -> label, got {type(classifier).__name__}"
            )
        texts = [a.strip() for a in self.answers(question_id) if isinstance(a, str) and a.strip()]
        return tally_choices(classifier(t) for t in texts)

    def __repr__(self) -> str:
        return f"ResponseSet(survey_id={self.survey_id!r}, questions={len(self._answers)})"


def load_responses(repository: ResponseRepository, survey_id: str) -> ResponseSet:
    """
    Fetch a survey's answers from the response store.

    Raises:
        ValidationError: repository does not implement fetch_responses, or
            returns something other than a mapping of sequences
    """
    if not isinstance(repository, ResponseRepository):
        raise ValidationError(
            f"repository: expected an object with fetch_responses(survey_id), "
            f"got {type(repository).__name__}"
        )
    raw = repository.fetch_responses(survey_id)
    responses = ResponseSet.from_mapping(survey_id, raw)
    logger.info(
        "Responses loaded | survey=%s | questions=%d | answers=%d",
        survey_id, len(responses), responses.n_answers,
    )
    return responses
