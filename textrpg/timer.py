"""Fixed-rate frame timer."""

from __future__ import annotations

import time
from typing import Callable

FPS = 60


class Timer:
    """Decides when enough time has passed for the next frame."""

    def __init__(self, fps: int = FPS, clock: Callable[[], float] = time.perf_counter) -> None:
        self.fps = fps
        self.tick_interval_ms = 1000.0 / fps - 0.1
        self.time_scale = 1.0
        self._clock = clock
        self._previous: float | None = None
        self._delta = 0.0

    def start(self) -> None:
        self._previous = self._clock()

    def can_update(self) -> bool:
        """True, and the clock advances, once a tick interval has elapsed."""
        if self._previous is None:
            raise RuntimeError("timer has not been started")
        now = self._clock()
        elapsed = now - self._previous
        if self.tick_interval_ms * 0.001 > elapsed:
            return False
        self._delta = elapsed
        self._previous = now
        return True

    def delta_time(self) -> float:
        """Seconds covered by the last frame, scaled by ``time_scale``."""
        return self._delta * self.time_scale