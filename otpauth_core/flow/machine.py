"""
Auth Flow
=========
Passwordless login state machine: email entry -> OTP entry -> logged in.

Coordinates the OTP policy, session tracker and the two timers
(OTP countdown, session clock). Timers run on the asyncio event loop,
so operations that start one must be called from a running loop.
"""

import asyncio
import math
import string
from dataclasses import replace
from typing import Awaitable, Callable, List, Optional
import structlog

from otpauth_core.clock import Clock, SystemClock
from otpauth_core.config import AuthConfig
from otpauth_core.events import EventSink, NullEventSink, mask_email
from otpauth_core.otp import (
    OTP_LENGTH,
    OTPPolicy,
    ValidationOutcome,
    Success,
    Expired,
    InvalidCode,
    AttemptsExhausted,
    NotFound,
)
from otpauth_core.session import Session, SessionTracker
from otpauth_core.timers import PeriodicTask, TimerSlot

from .delivery import CodeDelivery, InMemoryOutbox
from .states import AuthState, EmailEntry, LoggedIn, OtpEntry

logger = structlog.get_logger(__name__)

Listener = Callable[[AuthState], None]

INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
INVALID_LENGTH_MESSAGE = "Please enter a 6-digit OTP"
EXPIRED_MESSAGE = "OTP has expired. Please request a new one."
EXHAUSTED_MESSAGE = "Maximum attempts exceeded. Please request a new OTP."
NOT_FOUND_MESSAGE = "No OTP found. Please request a new one."


def is_valid_email(email: str) -> bool:
    """Basic shape check: something before and after a single '@'."""
    at_index = email.find("@")
    return bool(email.strip()) and 0 < at_index < len(email) - 1


def invalid_code_message(attempts_remaining: int) -> str:
    return f"Incorrect OTP. {attempts_remaining} attempts remaining."


class AuthFlow:
    """
    Drives one user through the login flow.

    Every operation is ignored unless the flow is in the state it
    belongs to. Listeners registered with subscribe() see each new state.
    """

    def __init__(
        self,
        config: Optional[AuthConfig] = None,
        clock: Optional[Clock] = None,
        events: Optional[EventSink] = None,
        delivery: Optional[CodeDelivery] = None,
        policy: Optional[OTPPolicy] = None,
        sessions: Optional[SessionTracker] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.config = config or AuthConfig()
        self.clock = clock or SystemClock()
        events = events or NullEventSink()

        self.policy = policy or OTPPolicy(config=self.config.otp, clock=self.clock, events=events)
        self.sessions = sessions or SessionTracker(clock=self.clock, events=events)
        self.delivery = delivery or InMemoryOutbox()

        self._sleep = sleep
        self._state: AuthState = EmailEntry()
        self._listeners: List[Listener] = []
        self._session: Optional[Session] = None

        self.countdown = TimerSlot("otp_countdown")
        self.session_timer = TimerSlot("session")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def session(self) -> Optional[Session]:
        return self._session

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a state listener.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: AuthState) -> None:
        previous = self._state
        self._state = state
        if type(previous) is not type(state):
            logger.debug(
                "Auth state changed",
                from_state=type(previous).__name__,
                to_state=type(state).__name__,
            )
        for listener in list(self._listeners):
            listener(state)

    # ------------------------------------------------------------------
    # Email entry
    # ------------------------------------------------------------------

    def change_email(self, email: str) -> None:
        state = self._state
        if isinstance(state, EmailEntry):
            self._set_state(replace(state, email=email, error_message=None))

    def send_otp(self) -> bool:
        """
        Issue an OTP for the entered email and move to OTP entry.

        Returns:
            True if an OTP was issued
        """
        state = self._state
        if not isinstance(state, EmailEntry):
            return False

        email = state.email.strip()
        if not is_valid_email(email):
            self._set_state(replace(state, error_message=INVALID_EMAIL_MESSAGE))
            return False

        self._issue(email)
        return True

    # ------------------------------------------------------------------
    # OTP entry
    # ------------------------------------------------------------------

    def change_otp(self, value: str) -> None:
        """Update the typed code, keeping at most six ASCII digits."""
        state = self._state
        if isinstance(state, OtpEntry):
            digits = "".join(ch for ch in value if ch in string.digits)[:OTP_LENGTH]
            self._set_state(replace(state, otp=digits, error_message=None))

    def submit_otp(self) -> Optional[ValidationOutcome]:
        """
        Validate the typed code.

        Returns:
            The validation outcome, or None if nothing was validated
        """
        state = self._state
        if not isinstance(state, OtpEntry):
            return None

        if len(state.otp) != OTP_LENGTH:
            self._set_state(replace(state, error_message=INVALID_LENGTH_MESSAGE))
            return None

        outcome = self.policy.validate(state.email, state.otp)

        if isinstance(outcome, Success):
            self.countdown.cancel()
            self._log_in(state.email)
        elif isinstance(outcome, InvalidCode):
            self._set_state(replace(
                state,
                otp="",
                attempts_remaining=outcome.attempts_remaining,
                error_message=invalid_code_message(outcome.attempts_remaining),
            ))
        elif isinstance(outcome, Expired):
            self._set_state(replace(
                state,
                otp="",
                remaining_seconds=0,
                error_message=EXPIRED_MESSAGE,
            ))
        elif isinstance(outcome, AttemptsExhausted):
            self.countdown.cancel()
            self._set_state(replace(
                state,
                otp="",
                attempts_remaining=0,
                error_message=EXHAUSTED_MESSAGE,
            ))
        elif isinstance(outcome, NotFound):
            self._set_state(replace(state, error_message=NOT_FOUND_MESSAGE))

        return outcome

    def resend_otp(self) -> bool:
        """Replace the current OTP with a fresh one and restart the countdown."""
        state = self._state
        if not isinstance(state, OtpEntry):
            return False

        self.countdown.cancel()
        self._issue(state.email)
        return True

    def back_to_email(self) -> None:
        """Abandon the OTP and return to email entry, keeping the email."""
        state = self._state
        if isinstance(state, OtpEntry):
            self.countdown.cancel()
            self.policy.clear(state.email)
            self._set_state(EmailEntry(email=state.email))

    # ------------------------------------------------------------------
    # Logged in
    # ------------------------------------------------------------------

    def logout(self) -> None:
        state = self._state
        if not isinstance(state, LoggedIn):
            return

        if self._session is not None:
            self.sessions.end(self._session)
        self.session_timer.cancel()
        self._session = None
        self._set_state(EmailEntry())

    def close(self) -> None:
        """Stop both timers. The flow keeps its current state."""
        self.countdown.cancel()
        self.session_timer.cancel()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _issue(self, email: str) -> None:
        code = self.policy.generate(email)
        self.delivery.deliver(email, code)

        self._set_state(OtpEntry(
            email=email,
            remaining_seconds=self._remaining_seconds(email),
            attempts_remaining=self.policy.remaining_attempts(email),
            demo_code=code if self.config.demo_mode else None,
        ))
        self._start_countdown(email)

    def _log_in(self, email: str) -> None:
        session = self.sessions.start(email)
        self._session = session
        self._set_state(LoggedIn(email=email, session_started_at_ms=session.started_at_ms))
        self._start_session_timer(session)
        logger.info("User logged in", identity=mask_email(email))

    def _remaining_seconds(self, email: str) -> int:
        return math.ceil(self.policy.remaining_time_ms(email) / 1000)

    def _start_countdown(self, email: str) -> None:
        def showing_otp_for_email() -> bool:
            state = self._state
            return isinstance(state, OtpEntry) and state.email == email

        def tick() -> bool:
            remaining = self._remaining_seconds(email)
            self._set_state(replace(self._state, remaining_seconds=remaining))
            return remaining > 0

        self.countdown.replace(PeriodicTask(
            tick,
            interval=self.config.tick_interval_seconds,
            should_continue=showing_otp_for_email,
            name="otp-countdown",
            sleep=self._sleep,
        ))

    def _start_session_timer(self, session: Session) -> None:
        def logged_in_as_session() -> bool:
            state = self._state
            return isinstance(state, LoggedIn) and state.email == session.identity

        def tick() -> None:
            elapsed = self.sessions.elapsed(session)
            self._set_state(replace(self._state, session_duration_seconds=elapsed))

        self.session_timer.replace(PeriodicTask(
            tick,
            interval=self.config.tick_interval_seconds,
            should_continue=logged_in_as_session,
            name="session-timer",
            sleep=self._sleep,
        ))
