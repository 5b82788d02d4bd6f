"""
Core protocols for surveystats.

These define the structural interfaces of the collaborators that live
outside this library: the response store and the sentiment service.
We use Protocol (structural typing) rather than ABC (nominal typing) so
any client object with the right methods can be passed in.

Design Principles:
    - Minimal contracts: prescribe only what the engines consume
    - Opaque collaborators: no knowledge of auth, tenancy or storage
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResponseRepository(Protocol):
    """
    Read access to stored survey responses.

    Authentication and tenant scoping are the implementer's concern; by the
    time fetch_responses() is called the caller is already authorized for
    the survey.
    """

    def fetch_responses(self, survey_id: str) -> Mapping[str, Sequence[Any]]:
        """
        Return every raw answer for a survey, keyed by question id.

        Numeric and rating questions yield numbers (or numeric strings);
        choice questions yield option labels. Unanswered questions may
        yield None entries.
        """
        ...


@runtime_checkable
class SentimentClassifier(Protocol):
    """
    Opaque text-in / label-out sentiment service.

    The label vocabulary depends on the plan tier and is never interpreted
    by the statistics engines; labels are tallied like choice answers.
    """

    def __call__(self, text: str) -> str:
        ...
