"""
OTP Models
==========
Data models and validation outcomes for the OTP lifecycle.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar

from otpauth_core.errors import ConfigurationError

OTP_LENGTH = 6
OTP_MIN = 100_000
OTP_MAX = 999_999


@dataclass(frozen=True)
class OTPConfig:
    """Configuration for OTP expiry and attempt limits."""
    expiry_seconds: int = 60
    max_attempts: int = 3

    def __post_init__(self):
        if self.expiry_seconds <= 0:
            raise ConfigurationError("otp_expiry_seconds", "must be positive")
        if self.max_attempts < 1:
            raise ConfigurationError("max_attempts", "must be at least 1")

    @property
    def expiry_ms(self) -> int:
        return self.expiry_seconds * 1000


@dataclass(frozen=True)
class OTPRecord:
    """A live OTP for one identity."""
    code: str
    issued_at_ms: int
    attempts: int = 0

    def with_attempt(self) -> "OTPRecord":
        """Copy of this record with one more failed attempt."""
        return replace(self, attempts=self.attempts + 1)

    def age_ms(self, now_ms: int) -> int:
        return now_ms - self.issued_at_ms


class ValidationStatus(str, Enum):
    """Discriminator for validation outcomes."""
    SUCCESS = "success"
    EXPIRED = "expired"
    INVALID_CODE = "invalid_code"
    ATTEMPTS_EXHAUSTED = "attempts_exhausted"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ValidationOutcome:
    """Base of the validation result variants."""
    status: ClassVar[ValidationStatus]

    @property
    def is_success(self) -> bool:
        return self.status is ValidationStatus.SUCCESS


@dataclass(frozen=True)
class Success(ValidationOutcome):
    status: ClassVar[ValidationStatus] = ValidationStatus.SUCCESS


@dataclass(frozen=True)
class Expired(ValidationOutcome):
    status: ClassVar[ValidationStatus] = ValidationStatus.EXPIRED


@dataclass(frozen=True)
class InvalidCode(ValidationOutcome):
    attempts_remaining: int
    status: ClassVar[ValidationStatus] = ValidationStatus.INVALID_CODE


@dataclass(frozen=True)
class AttemptsExhausted(ValidationOutcome):
    status: ClassVar[ValidationStatus] = ValidationStatus.ATTEMPTS_EXHAUSTED


@dataclass(frozen=True)
class NotFound(ValidationOutcome):
    status: ClassVar[ValidationStatus] = ValidationStatus.NOT_FOUND
