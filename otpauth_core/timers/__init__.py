"""
Timers
======
Cancellable periodic tasks for the OTP countdown and session clock.
"""

from .cancellation import CancellationToken
from .periodic import PeriodicTask
from .slot import TimerSlot

__all__ = [
    "CancellationToken",
    "PeriodicTask",
    "TimerSlot",
]
