"""
Clock
=====
Time sources. All components read time through a Clock so tests can
drive it by hand.
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Supplies the current time in epoch milliseconds."""

    def now_ms(self) -> int:
        ...


class SystemClock:
    """Wall-clock time."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)


class ManualClock:
    """
    Clock that only moves when told to.

    For development and testing.
    """

    def __init__(self, start_ms: int = 0):
        self._now_ms = start_ms

    def now_ms(self) -> int:
        return self._now_ms

    def advance(self, seconds: float = 0, ms: int = 0) -> int:
        """Move forward and return the new time."""
        self._now_ms += int(seconds * 1000) + ms
        return self._now_ms

    def set(self, ms: int) -> None:
        self._now_ms = ms
