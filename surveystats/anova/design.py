"""
ANOVA design object.

Wraps validated groups for a one-way comparison. Groups keep their input
order; that order only affects how summaries are listed, never the
statistics.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from surveystats.core.exceptions import (
    EmptyGroupError,
    EmptySampleError,
    InsufficientGroupsError,
    ValidationError,
)
from surveystats.core.validation import check_unique_names, finite_sample


@dataclass(frozen=True)
class Group:
    """One named group of numeric answers (e.g. ratings from one region)."""
    name: str
    values: ArrayLike


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated data container for one-way ANOVA.

    Created via from_groups(), not directly.
    """
    names: tuple[str, ...]
    samples: tuple[NDArray[np.floating[Any]], ...]
    n_dropped: dict[str, int]

    @property
    def k(self) -> int:
        """Number of groups."""
        return len(self.names)

    @property
    def n(self) -> int:
        """Total number of finite observations."""
        return int(sum(s.size for s in self.samples))

    @staticmethod
    def from_groups(groups: Any) -> 'AnovaDesign':
        """
        Create design for one-way ANOVA.

        Args:
            groups: Mapping {name: values}, or a sequence whose items are
                Group objects, (name, values) pairs, or mappings with
                'name' and 'values' keys.

        Returns:
            AnovaDesign

        Raises:
            InsufficientGroupsError: fewer than 2 groups
            EmptyGroupError: a group has no finite values
            ValidationError: duplicate names or malformed items
        """
        pairs = _as_pairs(groups)

        if len(pairs) < 2:
            raise InsufficientGroupsError(
                f"groups: need at least 2 groups, got {len(pairs)}",
                n_groups=len(pairs),
            )

        names = check_unique_names((name for name, _ in pairs), "groups")

        samples: list[NDArray] = []
        dropped: dict[str, int] = {}
        for name, values in zip(names, (v for _, v in pairs)):
            try:
                sample, n_dropped = finite_sample(values, name)
            except EmptySampleError as e:
                raise EmptyGroupError(
                    f"group {name!r} has no finite values", group=name
                ) from e
            sample.setflags(write=False)
            samples.append(sample)
            dropped[name] = n_dropped

        return AnovaDesign(
            names=names,
            samples=tuple(samples),
            n_dropped=dropped,
        )


def _as_pairs(groups: Any) -> list[tuple[str, Any]]:
    """Normalize the accepted group shapes to (name, values) pairs."""
    if isinstance(groups, Mapping):
        return [(str(name), values) for name, values in groups.items()]

    if isinstance(groups, (str, bytes)) or not hasattr(groups, '__iter__'):
        raise ValidationError(
            f"groups: expected a mapping or sequence of groups, got {type(groups).__name__}"
        )

    pairs: list[tuple[str, Any]] = []
    for i, item in enumerate(groups):
        if isinstance(item, Group):
            pairs.append((str(item.name), item.values))
        elif isinstance(item, Mapping):
            if 'name' not in item or 'values' not in item:
                raise ValidationError(
                    f"groups[{i}]: mapping must have 'name' and 'values' keys"
                )
            pairs.append((str(item['name']), item['values']))
        elif isinstance(item, tuple) and len(item) == 2:
            pairs.append((str(item[0]), item[1]))
        else:
            raise ValidationError(
                f"groups[{i}]: expected Group, (name, values) or mapping, "
                f"got {type(item).__name__}"
            )
    return pairs
