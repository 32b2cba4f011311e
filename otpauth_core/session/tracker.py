"""
Session Tracker
===============
Tracks when authenticated identities started their session.
"""

from typing import Dict, Optional
import structlog

from otpauth_core.clock import Clock, SystemClock
from otpauth_core.events import AuthEventType, EventSink, NullEventSink, mask_email

from .models import Session

logger = structlog.get_logger(__name__)


class SessionTracker:
    """
    Manages sessions for identities that passed OTP validation.

    One session per identity; starting again replaces the old one.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        events: Optional[EventSink] = None,
    ):
        self.clock = clock or SystemClock()
        self.events = events or NullEventSink()
        self._sessions: Dict[str, Session] = {}

    def start(self, identity: str) -> Session:
        """Start a session at the current time."""
        session = Session(identity=identity, started_at_ms=self.clock.now_ms())
        self._sessions[identity] = session

        logger.debug("Session started", identity=mask_email(identity))
        return session

    def elapsed(self, session: Session, now_ms: Optional[int] = None) -> int:
        """Whole seconds the session has been running."""
        if now_ms is None:
            now_ms = self.clock.now_ms()
        return session.elapsed_seconds(now_ms)

    def end(self, session: Session) -> None:
        """
        Discard a session and record the logout.

        Ending a session that is no longer tracked does nothing.
        """
        if self._sessions.get(session.identity) != session:
            return

        del self._sessions[session.identity]
        self.events.record(AuthEventType.LOGGED_OUT, session.identity)

    def get(self, identity: str) -> Optional[Session]:
        return self._sessions.get(identity)

    def is_active(self, session: Session) -> bool:
        return self._sessions.get(session.identity) == session

    @property
    def active_count(self) -> int:
        return len(self._sessions)
