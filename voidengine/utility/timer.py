"""A stopwatch measuring elapsed seconds."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures the time between start and stop, or since start while running."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        now = clock()
        self._start = now
        self._end = now
        self._running = False

    def reset(self) -> None:
        """Restart measurement from now, keeping the running state."""
        now = self._clock()
        self._start = now
        self._end = now

    def start(self) -> None:
        """Start measuring from now."""
        self._start = self._clock()
        self._running = True

    def stop(self) -> None:
        """Stop measuring; elapsed then stays fixed."""
        self._end = self._clock()
        self._running = False

    def elapsed(self) -> float:
        """Seconds since start while running, or between start and stop."""
        end = self._clock() if self._running else self._end
        return float(end - self._start)

    def is_running(self) -> bool:
        """Whether the timer is measuring."""
        return self._running