"""
Errors
======
Exception classes for misuse of the library.

OTP validation failures are never raised; they are returned as
ValidationOutcome values.
"""


class OTPAuthError(Exception):
    """Base class for otpauth-core errors."""
    pass


class ConfigurationError(OTPAuthError):
    """Raised when a configuration value is missing or out of range."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid configuration for '{field}': {message}")


class TimerStateError(OTPAuthError):
    """Raised when a periodic task is started twice or after cancellation."""
    pass
