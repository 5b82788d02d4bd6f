"""
Frequency tables for choice answers.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging
from typing import Any

from surveystats.responses.options import choice_label, normalize_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoricalStats:
    """
    Counts per label.

    frequencies keeps first-seen order, or option order when options were
    given. most_frequent / least_frequent are None when nothing was
    tallied; ties go to the label listed first.
    """
    frequencies: dict[str, int] = field(default_factory=dict)
    percentages: dict[str, float] = field(default_factory=dict)
    most_frequent: str | None = None
    least_frequent: str | None = None
    unique_count: int = 0
    total: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            'frequencies': dict(self.frequencies),
            'percentages': dict(self.percentages),
            'mostFrequent': self.most_frequent,
            'leastFrequent': self.least_frequent,
            'uniqueCount': self.unique_count,
        }


def _labels(answer: Any) -> list[str]:
    # multi-select answers are lists of choices
    if isinstance(answer, (list, tuple)):
        out = []
        for item in answer:
            label = choice_label(item)
            if label is not None:
                out.append(label)
        return out
    label = choice_label(answer)
    return [] if label is None else [label]


def tally_choices(answers: Iterable[Any], options: Any = None) -> CategoricalStats:
    """
    Tally choice answers.

    Each answer is a label, an option mapping, or a list of either
    (multi-select). When options are given, every option appears in the
    table (possibly with 0) and labels outside them are ignored.
    """
    allowed = normalize_options(options)
    counts: dict[str, int] = {label: 0 for label in allowed}
    ignored = 0

    for answer in answers:
        for label in _labels(answer):
            if allowed and label not in counts:
                ignored += 1
                continue
            counts[label] = counts.get(label, 0) + 1

    if ignored:
        logger.debug("Ignored %d label(s) outside the option list", ignored)

    total = sum(counts.values())
    if not counts:
        return CategoricalStats()

    percentages = {
        label: (n / total * 100.0) if total else 0.0 for label, n in counts.items()
    }
    ranked = sorted(counts.items(), key=lambda kv: -kv[1])
    return CategoricalStats(
        frequencies=counts,
        percentages=percentages,
        most_frequent=ranked[0][0] if total else None,
        least_frequent=ranked[-1][0] if total else None,
        unique_count=sum(1 for n in counts.values() if n > 0),
        total=total,
    )
