"""
Input validation utilities for surveystats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent. The one deliberate exception is
finite_sample(), which drops non-finite survey answers (skipped or
unparseable questions arrive as NaN) and reports how many it dropped.

Design principles:
    - No silent type coercion (except float conversion of array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from surveystats.core.exceptions import (
    DimensionError,
    EmptySampleError,
    MismatchedLengthError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like of numbers. None entries become NaN, which is how
    a missing answer is represented downstream.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a copy)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    if isinstance(array, (str, bytes)):
        raise ValidationError(f"{name}: expected a sequence of numbers, got {type(array).__name__}")

    try:
        result = np.array(array, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to numeric array: {e}") from e

    return result


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def finite_sample(
    values: ArrayLike,
    name: str,
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Build a Sample: a 1D float64 array with non-finite entries removed.

    Args:
        values: Array-like of numbers (None, NaN and +/-inf are discarded)
        name: Sample name for error messages

    Returns:
        (sample, n_dropped) where sample is a new array in input order

    Raises:
        ValidationError: If values are not numeric
        DimensionError: If values are not 1D
        EmptySampleError: If no finite values remain
    """
    arr = check_array(values, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)

    mask = np.isfinite(arr)
    n_dropped = int(arr.size - np.count_nonzero(mask))
    sample = arr[mask]

    if sample.size == 0:
        raise EmptySampleError(
            f"{name}: no finite values "
            f"({n_dropped} non-finite value(s) discarded)",
            name=name,
            n_dropped=n_dropped,
        )

    return sample, n_dropped


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        MismatchedLengthError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = {name: int(arr.shape[0]) for name, arr in zip(names, arrays)}
    if len(set(lengths.values())) > 1:
        details = ", ".join(f"{name}={length}" for name, length in lengths.items())
        raise MismatchedLengthError(f"Inconsistent lengths: {details}", lengths=lengths)


def check_unique_names(names: Iterable[str], what: str) -> tuple[str, ...]:
    """
    Verify a collection of names has no duplicates.

    Args:
        names: Names to check
        what: Description of the named things, for error messages

    Returns:
        The names as a tuple, in input order

    Raises:
        ValidationError: If any name appears more than once
    """
    names = tuple(str(n) for n in names)
    seen: set[str] = set()
    duplicates: list[str] = []
    for n in names:
        if n in seen and n not in duplicates:
            duplicates.append(n)
        seen.add(n)
    if duplicates:
        raise ValidationError(f"{what}: duplicate names {duplicates}")
    return names


def check_open_unit_interval(value: float, name: str) -> float:
    """
    Verify a value lies strictly between 0 and 1 (e.g. a significance level).

    Raises:
        ValidationError: If value is not a finite number in (0, 1)
    """
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {value!r}") from e
    if not (0.0 < v < 1.0):
        raise ValidationError(f"{name}: must be in (0, 1), got {v}")
    return v
