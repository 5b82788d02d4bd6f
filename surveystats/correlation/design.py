"""
CorrelationDesign: paired observations for the correlation engine.

Unlike single-sample statistics, non-finite values are not dropped here:
removing one would break the pairing between variables, so they are
rejected instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from surveystats.core.exceptions import EmptySampleError, ValidationError
from surveystats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_unique_names,
)


@dataclass(frozen=True)
class Variable:
    """One named column of paired observations."""
    name: str
    values: ArrayLike


@dataclass(frozen=True)
class CorrelationDesign:
    """
    Validated (n x p) matrix of paired observations.

    Construction:
        CorrelationDesign.from_variables({'price': [...], 'service': [...]})
    """
    _data: NDArray[np.floating[Any]]
    _variables: tuple[str, ...]

    @classmethod
    def from_variables(cls, variables: Any) -> CorrelationDesign:
        """
        Build from a mapping {name: values} or a sequence of Variable /
        (name, values) / {'name', 'values'} items.

        Raises
        ------
        ValidationError
            No variables, duplicate names or non-finite values.
        MismatchedLengthError
            Value arrays differ in length.
        EmptySampleError
            Variables have no observations.
        """
        pairs = _as_pairs(variables)
        if not pairs:
            raise ValidationError("variables: need at least 1 variable, got 0")

        names = check_unique_names((name for name, _ in pairs), "variables")

        columns: list[NDArray] = []
        for name, values in zip(names, (v for _, v in pairs)):
            arr = check_array(values, name)
            check_1d(arr, name)
            columns.append(arr)

        check_consistent_length(*columns, names=names)
        for name, arr in zip(names, columns):
            check_finite(arr, name)

        n = columns[0].shape[0]
        if n == 0:
            raise EmptySampleError("variables: no paired observations", name=names[0])

        data = np.column_stack(columns)
        data.setflags(write=False)
        return cls(_data=data, _variables=names)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Observation matrix (n x p), read-only."""
        return self._data

    @property
    def variables(self) -> tuple[str, ...]:
        return self._variables

    @property
    def n(self) -> int:
        return int(self._data.shape[0])

    @property
    def p(self) -> int:
        return int(self._data.shape[1])

    def __repr__(self) -> str:
        return f"CorrelationDesign(n={self.n}, p={self.p})"


def _as_pairs(variables: Any) -> list[tuple[str, Any]]:
    if isinstance(variables, Mapping):
        return [(str(name), values) for name, values in variables.items()]

    if isinstance(variables, (str, bytes)) or not hasattr(variables, '__iter__'):
        raise ValidationError(
            f"variables: expected a mapping or sequence, got {type(variables).__name__}"
        )

    pairs: list[tuple[str, Any]] = []
    for i, item in enumerate(variables):
        if isinstance(item, Variable):
            pairs.append((str(item.name), item.values))
        elif isinstance(item, Mapping):
            if 'name' not in item or 'values' not in item:
                raise ValidationError(
                    f"variables[{i}]: mapping must have 'name' and 'values' keys"
                )
            pairs.append((str(item['name']), item['values']))
        elif isinstance(item, tuple) and len(item) == 2:
            pairs.append((str(item[0]), item[1]))
        else:
            raise ValidationError(
                f"variables[{i}]: expected Variable, (name, values) or mapping, "
                f"got {type(item).__name__}"
            )
    return pairs
