"""
Code Delivery
=============
Out-of-band delivery of issued OTP codes.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol
import structlog

from otpauth_core.events import mask_email

logger = structlog.get_logger(__name__)


class CodeDelivery(Protocol):
    """Sends an issued code to its identity (email, SMS, ...)."""

    def deliver(self, identity: str, code: str) -> None:
        ...


@dataclass(frozen=True)
class OutboxMessage:
    identity: str
    code: str
    sent_at: datetime


class InMemoryOutbox:
    """
    Keeps delivered codes in memory instead of sending them.

    For development and testing. A deployment plugs in a real email
    provider.
    """

    def __init__(self):
        self.messages: List[OutboxMessage] = []
        self._latest: Dict[str, str] = {}

    def deliver(self, identity: str, code: str) -> None:
        self.messages.append(
            OutboxMessage(identity=identity, code=code, sent_at=datetime.now(timezone.utc))
        )
        self._latest[identity] = code
        logger.info("OTP queued for delivery", identity=mask_email(identity))

    def last_code(self, identity: str) -> Optional[str]:
        """Most recent code delivered to an identity."""
        return self._latest.get(identity)
