"""
OTP Lifecycle
=============
Numeric one-time passwords with expiry and attempt limits.
"""

from .models import (
    OTP_LENGTH,
    OTPConfig,
    OTPRecord,
    ValidationStatus,
    ValidationOutcome,
    Success,
    Expired,
    InvalidCode,
    AttemptsExhausted,
    NotFound,
)
from .codes import generate_otp, is_well_formed, codes_match
from .store import OTPStore
from .policy import OTPPolicy

__all__ = [
    # Models
    "OTP_LENGTH",
    "OTPConfig",
    "OTPRecord",
    "ValidationStatus",
    # Outcomes
    "ValidationOutcome",
    "Success",
    "Expired",
    "InvalidCode",
    "AttemptsExhausted",
    "NotFound",
    # Codes
    "generate_otp",
    "is_well_formed",
    "codes_match",
    # Store and policy
    "OTPStore",
    "OTPPolicy",
]
