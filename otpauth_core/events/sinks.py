"""
Event Sinks
===========
Receivers for authentication lifecycle events.

Every sink masks the identity before it is logged, stored or counted.
"""

from typing import List, Optional, Protocol
import structlog

from .event_types import AuthEventType
from .masking import mask_email
from .models import AuthEvent

logger = structlog.get_logger(__name__)


class EventSink(Protocol):
    """Receives lifecycle events for observability."""

    def record(
        self,
        kind: AuthEventType,
        identity: str,
        detail: Optional[str] = None,
    ) -> None:
        ...


class NullEventSink:
    """Discards every event."""

    def record(
        self,
        kind: AuthEventType,
        identity: str,
        detail: Optional[str] = None,
    ) -> None:
        return None


class LoggingEventSink:
    """
    Writes events to structlog.

    Failures are logged at warning level, everything else at info.
    """

    _MESSAGES = {
        AuthEventType.OTP_GENERATED: "OTP generated",
        AuthEventType.OTP_VALIDATION_SUCCEEDED: "OTP validation succeeded",
        AuthEventType.OTP_VALIDATION_FAILED: "OTP validation failed",
        AuthEventType.LOGGED_OUT: "User logged out",
    }

    def __init__(self, log=None):
        self._log = log or logger

    def record(
        self,
        kind: AuthEventType,
        identity: str,
        detail: Optional[str] = None,
    ) -> None:
        kind = AuthEventType(kind)
        fields = {"event_kind": kind.value, "identity": mask_email(identity)}
        if detail is not None:
            fields["reason"] = detail

        message = self._MESSAGES[kind]
        if kind.is_failure:
            self._log.warning(message, **fields)
        else:
            self._log.info(message, **fields)


class RecordingEventSink:
    """
    Keeps events in memory.

    For development and testing; call flush() to drain the buffer.
    """

    def __init__(self):
        self._buffer: List[AuthEvent] = []

    def record(
        self,
        kind: AuthEventType,
        identity: str,
        detail: Optional[str] = None,
    ) -> None:
        self._buffer.append(AuthEvent.create(kind, identity, detail))

    @property
    def events(self) -> List[AuthEvent]:
        return list(self._buffer)

    def kinds(self) -> List[AuthEventType]:
        return [event.kind for event in self._buffer]

    def flush(self) -> List[AuthEvent]:
        """
        Get and clear buffered events.

        Returns:
            List of buffered events
        """
        events = self._buffer
        self._buffer = []
        return events


class CompositeEventSink:
    """Forwards each event to several sinks in order."""

    def __init__(self, *sinks: EventSink):
        self.sinks = list(sinks)

    def record(
        self,
        kind: AuthEventType,
        identity: str,
        detail: Optional[str] = None,
    ) -> None:
        for sink in self.sinks:
            sink.record(kind, identity, detail)
