import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordgrid")


def _ms(seconds: float) -> float:
    return round(seconds * 1000, 1)


class StageTimer:
    """Wall-clock timing for the stages of one solve, in milliseconds.

    Repeated stages accumulate. Once `stop()` is called the total is fixed,
    so a finished solve reports the same time however late it is read.
    """

    def __init__(self, label: str = "solve"):
        self.label = label
        self._elapsed: dict[str, float] = {}
        self._start = time.perf_counter()
        self._end: float | None = None

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._elapsed[name] = self._elapsed.get(name, 0.0) + time.perf_counter() - t0
            logger.debug("%s stage=%s elapsed=%.1fms", self.label, name, _ms(self._elapsed[name]))

    def stop(self) -> float:
        if self._end is None:
            self._end = time.perf_counter()
        return self.total_ms

    @property
    def timings(self) -> dict[str, float]:
        return {name: _ms(secs) for name, secs in self._elapsed.items()}

    @property
    def total_ms(self) -> float:
        end = self._end if self._end is not None else time.perf_counter()
        return _ms(end - self._start)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}
