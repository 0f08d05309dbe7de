"""Fixed-interval request gate used to stay under GitHub's rate limiter."""

from __future__ import annotations

import time
from typing import Callable, Optional


class RateGate:
    """Allow at most one call per ``interval_sec``, sleeping the remainder.

    The gate only looks at the time of the previous permitted call, so it is
    independent of how many declarations or labels a run iterates over. It does
    not adapt to ``X-RateLimit-*`` headers.
    """

    def __init__(
        self,
        interval_sec: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval_sec = max(0.0, float(interval_sec))
        self._clock = clock
        self._sleep = sleep
        self._last: Optional[float] = None

    def wait(self) -> float:
        """Block until the next call is permitted; return the seconds slept."""
        slept = 0.0
        if self.interval_sec > 0 and self._last is not None:
            remaining = self.interval_sec - (self._clock() - self._last)
            if remaining > 0:
                self._sleep(remaining)
                slept = remaining
        self._last = self._clock()
        return slept


__all__ = ["RateGate"]
