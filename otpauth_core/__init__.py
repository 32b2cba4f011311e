"""
otpauth-core
============
Passwordless email + OTP login with session timing.
"""

__version__ = "0.1.0"

# Errors
from otpauth_core.errors import OTPAuthError, ConfigurationError, TimerStateError

# Clock
from otpauth_core.clock import Clock, SystemClock, ManualClock

# Config
from otpauth_core.config import AuthConfig

# OTP
from otpauth_core.otp import (
    OTP_LENGTH,
    OTPConfig,
    OTPRecord,
    OTPStore,
    OTPPolicy,
    ValidationStatus,
    ValidationOutcome,
    Success,
    Expired,
    InvalidCode,
    AttemptsExhausted,
    NotFound,
    generate_otp,
)

# Sessions
from otpauth_core.session import Session, SessionTracker

# Events
from otpauth_core.events import (
    AuthEventType,
    AuthEvent,
    EventSink,
    NullEventSink,
    LoggingEventSink,
    RecordingEventSink,
    CompositeEventSink,
    PrometheusEventSink,
    mask_email,
)

# Timers
from otpauth_core.timers import CancellationToken, PeriodicTask, TimerSlot

# Flow
from otpauth_core.flow import (
    AuthFlow,
    AuthState,
    EmailEntry,
    OtpEntry,
    LoggedIn,
    CodeDelivery,
    InMemoryOutbox,
)

# Logging
from otpauth_core.logging_config import setup_logging, setup_logging_from_config

__all__ = [
    # Errors
    "OTPAuthError",
    "ConfigurationError",
    "TimerStateError",
    # Clock
    "Clock",
    "SystemClock",
    "ManualClock",
    # Config
    "AuthConfig",
    # OTP
    "OTP_LENGTH",
    "OTPConfig",
    "OTPRecord",
    "OTPStore",
    "OTPPolicy",
    "ValidationStatus",
    "ValidationOutcome",
    "Success",
    "Expired",
    "InvalidCode",
    "AttemptsExhausted",
    "NotFound",
    "generate_otp",
    # Sessions
    "Session",
    "SessionTracker",
    # Events
    "AuthEventType",
    "AuthEvent",
    "EventSink",
    "NullEventSink",
    "LoggingEventSink",
    "RecordingEventSink",
    "CompositeEventSink",
    "PrometheusEventSink",
    "mask_email",
    # Timers
    "CancellationToken",
    "PeriodicTask",
    "TimerSlot",
    # Flow
    "AuthFlow",
    "AuthState",
    "EmailEntry",
    "OtpEntry",
    "LoggedIn",
    "CodeDelivery",
    "InMemoryOutbox",
    # Logging
    "setup_logging",
    "setup_logging_from_config",
]
