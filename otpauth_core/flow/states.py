"""
Flow States
===========
Immutable states of the login flow: email entry, OTP entry, logged in.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class EmailEntry:
    """Waiting for the user to submit an email address."""
    email: str = ""
    error_message: Optional[str] = None


@dataclass(frozen=True)
class OtpEntry:
    """An OTP was issued and the user is typing it in."""
    email: str
    remaining_seconds: int
    attempts_remaining: int
    otp: str = ""
    error_message: Optional[str] = None
    demo_code: Optional[str] = None  # Only set in demo mode


@dataclass(frozen=True)
class LoggedIn:
    """The identity is authenticated and its session clock is running."""
    email: str
    session_started_at_ms: int
    session_duration_seconds: int = 0


AuthState = Union[EmailEntry, OtpEntry, LoggedIn]
