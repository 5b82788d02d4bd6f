"""
SampleDesign: data wrapper for single-sample statistics.

Wraps one question's numeric answers and records how many non-finite
entries were discarded. Follows the surveystats Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from surveystats.core.validation import finite_sample


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics and outlier detection.

    Holds a 1D sample of finite values in input order. Immutable after
    construction; the caller's array is never referenced.

    Construction:
        SampleDesign.from_array(values, name='q3_rating')
    """
    _data: NDArray[np.floating[Any]]
    _n_dropped: int
    _name: str

    @classmethod
    def from_array(cls, values: ArrayLike, *, name: str = 'sample') -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        values : array-like
            1D sequence of numbers. None, NaN and +/-inf are discarded.
        name : str
            Label used in error messages and chart payloads.

        Raises
        ------
        EmptySampleError
            If no finite values remain.
        """
        data, n_dropped = finite_sample(values, name)
        data.setflags(write=False)
        return cls(_data=data, _n_dropped=n_dropped, _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Finite values in input order (read-only)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of finite observations."""
        return int(self._data.size)

    @property
    def n_dropped(self) -> int:
        """Number of non-finite values discarded."""
        return self._n_dropped

    @property
    def name(self) -> str:
        return self._name

    def sorted(self) -> NDArray[np.floating[Any]]:
        """Ascending copy of the data."""
        return np.sort(self._data)

    def __repr__(self) -> str:
        dropped = f", dropped={self._n_dropped}" if self._n_dropped else ""
        return f"SampleDesign(name={self._name!r}, n={self.n}{dropped})"
