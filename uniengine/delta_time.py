"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable


class DeltaTime:
    """Measures the time between successive calls to :meth:`calculate`."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last: float | None = None
        self.delta = 0.0

    def calculate(self) -> float:
        """Return seconds since the previous call; the first call returns 0.0."""
        now = self._clock()
        if self._last is None:
            self._last = now
            return 0.0
        self.delta = now - self._last
        self._last = now
        return self.delta