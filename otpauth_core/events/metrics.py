"""
Prometheus Event Sink
=====================
Counts lifecycle events in a Prometheus registry.
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Counter, generate_latest

from .event_types import AuthEventType


class PrometheusEventSink:
    """
    Counts events by kind and failure reason.

    Uses its own registry unless one is supplied, so several sinks can
    coexist in one process. Identities are never used as labels.
    """

    def __init__(
        self,
        registry: Optional[CollectorRegistry] = None,
        namespace: str = "otpauth",
    ):
        self.registry = registry or CollectorRegistry()
        self._events = Counter(
            name="events",
            documentation="Authentication lifecycle events",
            labelnames=["kind", "reason"],
            namespace=namespace,
            registry=self.registry,
        )
        self._metric_name = f"{namespace}_events_total"

    def record(
        self,
        kind: AuthEventType,
        identity: str,
        detail: Optional[str] = None,
    ) -> None:
        self._events.labels(kind=AuthEventType(kind).value, reason=detail or "").inc()

    def count(self, kind: AuthEventType, reason: str = "") -> float:
        """Current counter value for a kind/reason pair."""
        value = self.registry.get_sample_value(
            self._metric_name,
            {"kind": AuthEventType(kind).value, "reason": reason},
        )
        return value or 0.0

    def export(self) -> bytes:
        """Export metrics in Prometheus text format."""
        return generate_latest(self.registry)
