"""
Wall-clock timing for engine runs.

Every engine records how long it spent so a dashboard can spot slow
questions with very large response sets.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating wall-clock timer with named sections.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('sort'):
            ordered = np.sort(sample)

        with timer.section('moments'):
            mean = float(np.mean(sample))

        timer.stop()
        timer.result()
        # {'total_seconds': 0.0002, 'sort': 0.0001, 'moments': 0.00005}
    """

    def __init__(self) -> None:
        self._sections: dict[str, float] = {}
        self._t0: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Add the time spent in the block to section ``name``.

        A name used twice accumulates. Sections are not subtracted from
        the total.
        """
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """
        {'total_seconds': ..., <section>: ...}

        Raises:
            RuntimeError: stop() has not been called
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block.

    Usage:
        with timed() as timer:
            solution = describe(sample)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
