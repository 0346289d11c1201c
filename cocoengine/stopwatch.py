"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional


class Stopwatch:
    """Measures seconds elapsed since creation or the last restart."""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock if clock is not None else time.perf_counter
        self._last = self._clock()

    def elapsed(self) -> float:
        """Seconds since the last restart, without resetting."""
        return self._clock() - self._last

    def restart(self) -> float:
        """Return the seconds elapsed and start measuring again from now."""
        now = self._clock()
        elapsed = now - self._last
        self._last = now
        return elapsed