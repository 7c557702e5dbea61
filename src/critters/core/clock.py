"""Frame clock feeding ``Simulation.step``."""

import time
from typing import Callable

from critters.constants import MAX_DELTA_TIME


class DeltaClock:
    """Seconds between frames, capped so a stalled window doesn't teleport creatures.

    ``now`` is injectable for tests; it defaults to ``time.perf_counter``.
    """

    def __init__(self, max_delta: float = MAX_DELTA_TIME,
                 now: Callable[[], float] = time.perf_counter):
        self.max_delta = max_delta
        self._now = now
        self._last_time = now()

    def get_delta(self) -> float:
        t = self._now()
        dt = min(max(t - self._last_time, 0.0), self.max_delta)
        self._last_time = t
        return dt

    def reset(self) -> None:
        """Restart timing from now, e.g. once the window is shown."""
        self._last_time = self._now()
