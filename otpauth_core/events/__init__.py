"""
Lifecycle Events
================
Event kinds, identity masking and sinks for authentication events.
"""

from .event_types import AuthEventType
from .masking import mask_email
from .models import AuthEvent
from .sinks import (
    EventSink,
    NullEventSink,
    LoggingEventSink,
    RecordingEventSink,
    CompositeEventSink,
)
from .metrics import PrometheusEventSink

__all__ = [
    "AuthEventType",
    "mask_email",
    "AuthEvent",
    # Sinks
    "EventSink",
    "NullEventSink",
    "LoggingEventSink",
    "RecordingEventSink",
    "CompositeEventSink",
    "PrometheusEventSink",
]
