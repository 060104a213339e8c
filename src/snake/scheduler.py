# scheduler.py
from __future__ import annotations
from typing import Callable, Optional


class FixedTickScheduler:
    """
    Calls `callback` at a fixed logical rate, independent of how often the
    host loop pumps it. The host passes its own clock (ms), e.g.
    pygame.time.get_ticks(), so nothing here depends on a platform timer.
    """

    def __init__(self, rate: float, callback: Callable[[], None],
                 tolerance_ms: float = 0.1):
        if rate <= 0:
            raise ValueError(f"Tick rate must be positive, got {rate}")
        self.interval_ms = 1000.0 / rate
        self.callback = callback
        self.tolerance_ms = tolerance_ms
        self._then: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._then is not None

    def start(self, now_ms: float) -> None:
        self._then = now_ms

    def stop(self) -> None:
        self._then = None

    def pump(self, now_ms: float) -> int:
        """Fire the callback if a full interval has passed. Returns ticks fired (0 or 1)."""
        if self._then is None:
            return 0

        delta = now_ms - self._then
        if delta < self.interval_ms - self.tolerance_ms:
            return 0

        # Re-anchor on the tick grid; a tick fired early inside the tolerance
        # window moves the anchor a full interval forward
        if delta >= self.interval_ms:
            self._then = now_ms - (delta % self.interval_ms)
        else:
            self._then += self.interval_ms
        self.callback()
        return 1
