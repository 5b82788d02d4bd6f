"""
Adapters from stored survey answers to engine inputs.

Public API:
    load_responses(repository, survey_id) -> ResponseSet
    ResponseSet.numeric(question_id) -> 1D float64 sample
    ResponseSet.paired_numeric(question_ids) -> {question_id: sample}, by respondent
    ResponseSet.choices(question_id, options) -> CategoricalStats
    normalize_options(options) -> list[str]
"""

from surveystats.responses.categorical import CategoricalStats, tally_choices
from surveystats.responses.options import normalize_options
from surveystats.responses.response_set import ResponseSet, load_responses

__all__ = [
    "ResponseSet",
    "load_responses",
    "CategoricalStats",
    "tally_choices",
    "normalize_options",
]
