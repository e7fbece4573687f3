import time
import logging
from typing import List, Tuple

log = logging.getLogger("timing")


class StepTimer:
    """Logs the time spent in each named step of a request."""

    def __init__(self, label: str):
        self.label = label
        self.steps: List[Tuple[str, float]] = []
        self._t0 = time.perf_counter()

    def mark(self, step: str) -> float:
        now = time.perf_counter()
        dt = (now - self._t0) * 1000
        self.steps.append((step, dt))
        log.info("[%s] %s: %.1f ms", self.label, step, dt)
        self._t0 = now
        return dt

    @property
    def total_ms(self) -> float:
        return sum(dt for _, dt in self.steps)
