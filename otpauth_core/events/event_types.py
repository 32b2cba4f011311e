"""
Event Types
===========
Lifecycle events emitted by the OTP policy and session tracker.
"""

from enum import Enum


class AuthEventType(str, Enum):
    """Authentication lifecycle events."""
    OTP_GENERATED = "otp.generated"
    OTP_VALIDATION_SUCCEEDED = "otp.validation_succeeded"
    OTP_VALIDATION_FAILED = "otp.validation_failed"
    LOGGED_OUT = "auth.logged_out"

    @property
    def is_failure(self) -> bool:
        return self is AuthEventType.OTP_VALIDATION_FAILED
