import time
from typing import Callable


class Stopwatch:
    """
    Scoped wall-clock timer.

    ``elapsed`` is set when the ``with`` block exits, however it exits.

        with Stopwatch() as sw:
            work()
        sw.elapsed  # seconds
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._start: float | None = None
        self.elapsed: float | None = None

    def __enter__(self) -> "Stopwatch":
        self.elapsed = None
        self._start = self._clock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = self._clock() - self._start
