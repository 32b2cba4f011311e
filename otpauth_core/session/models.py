"""
Session Models
==============
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """An authenticated identity and when it logged in."""
    identity: str
    started_at_ms: int

    def elapsed_seconds(self, now_ms: int) -> int:
        """Whole seconds since the session started, never negative."""
        return max(0, (now_ms - self.started_at_ms) // 1000)
