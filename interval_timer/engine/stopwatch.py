from __future__ import annotations

import time
from typing import Callable, List, Optional


class Stopwatch:
    """Sub-second stopwatch with laps. Paused time is not counted."""

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._accumulated = 0.0
        self._started_at: Optional[float] = None
        self.laps: List[float] = []

    @property
    def running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> float:
        if self._started_at is None:
            return self._accumulated
        return self._accumulated + (self._now() - self._started_at)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._now()

    def stop(self) -> None:
        if self._started_at is not None:
            self._accumulated += self._now() - self._started_at
            self._started_at = None

    def reset(self) -> None:
        self._accumulated = 0.0
        self._started_at = None
        self.laps = []

    def lap(self) -> Optional[float]:
        if not self.running:
            return None
        t = self.elapsed
        self.laps.append(t)
        return t
