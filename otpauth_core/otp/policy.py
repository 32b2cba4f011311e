"""
OTP Policy
==========
Generates, validates and expires OTPs for email identities.
"""

from typing import Callable, Optional
import structlog

from otpauth_core.clock import Clock, SystemClock
from otpauth_core.events import AuthEventType, EventSink, NullEventSink, mask_email

from .codes import codes_match, generate_otp
from .models import (
    OTPConfig,
    OTPRecord,
    ValidationOutcome,
    Success,
    Expired,
    InvalidCode,
    AttemptsExhausted,
    NotFound,
)
from .store import OTPStore

logger = structlog.get_logger(__name__)


class OTPPolicy:
    """
    OTP lifecycle policy over an OTPStore.

    Validation checks run in a fixed order: existence, expiry, attempt
    limit, then code match. Failures are returned as outcomes, never
    raised.
    """

    def __init__(
        self,
        store: Optional[OTPStore] = None,
        config: Optional[OTPConfig] = None,
        clock: Optional[Clock] = None,
        events: Optional[EventSink] = None,
        code_factory: Callable[[], str] = generate_otp,
    ):
        self.store = store if store is not None else OTPStore()
        self.config = config or OTPConfig()
        self.clock = clock or SystemClock()
        self.events = events or NullEventSink()
        self._code_factory = code_factory

    def generate(self, identity: str) -> str:
        """
        Issue a fresh OTP for an identity.

        Any previous record is replaced and the attempt count resets.

        Args:
            identity: Email address

        Returns:
            The plain 6-digit code
        """
        code = self._code_factory()
        self.store.put(identity, OTPRecord(code=code, issued_at_ms=self.clock.now_ms()))

        logger.debug(
            "OTP issued",
            identity=mask_email(identity),
            expires_in=self.config.expiry_seconds,
        )
        self.events.record(AuthEventType.OTP_GENERATED, identity)
        return code

    def validate(self, identity: str, submitted_code: str) -> ValidationOutcome:
        """
        Check a submitted code.

        Args:
            identity: Email address
            submitted_code: User-provided code

        Returns:
            Success, Expired, InvalidCode, AttemptsExhausted or NotFound
        """
        outcome = self._check(identity, submitted_code)

        if outcome.is_success:
            self.events.record(AuthEventType.OTP_VALIDATION_SUCCEEDED, identity)
        else:
            self.events.record(
                AuthEventType.OTP_VALIDATION_FAILED,
                identity,
                outcome.status.value,
            )
        return outcome

    def _check(self, identity: str, submitted_code: str) -> ValidationOutcome:
        record = self.store.get(identity)
        if record is None:
            return NotFound()

        # Expired records stay in the store until replaced or cleared
        if record.age_ms(self.clock.now_ms()) > self.config.expiry_ms:
            return Expired()

        if record.attempts >= self.config.max_attempts:
            return AttemptsExhausted()

        if codes_match(submitted_code, record.code):
            self.store.delete(identity)
            return Success()

        record = record.with_attempt()
        self.store.put(identity, record)

        if record.attempts >= self.config.max_attempts:
            return AttemptsExhausted()
        return InvalidCode(attempts_remaining=self.config.max_attempts - record.attempts)

    def remaining_time_ms(self, identity: str) -> int:
        """Milliseconds until the identity's OTP expires, 0 if none."""
        record = self.store.get(identity)
        if record is None:
            return 0
        remaining = self.config.expiry_ms - record.age_ms(self.clock.now_ms())
        return max(0, remaining)

    def remaining_attempts(self, identity: str) -> int:
        """Validation attempts left for the identity's OTP, 0 if none."""
        record = self.store.get(identity)
        if record is None:
            return 0
        return max(0, self.config.max_attempts - record.attempts)

    def has_active(self, identity: str) -> bool:
        """True if an unexpired OTP with attempts left exists."""
        record = self.store.get(identity)
        if record is None:
            return False
        return (
            record.age_ms(self.clock.now_ms()) <= self.config.expiry_ms
            and record.attempts < self.config.max_attempts
        )

    def clear(self, identity: str) -> None:
        """Drop the identity's OTP, if any."""
        self.store.delete(identity)
