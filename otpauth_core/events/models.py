"""
Event Models
============
Recorded lifecycle event entries.
"""

import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .event_types import AuthEventType
from .masking import mask_email


@dataclass(frozen=True)
class AuthEvent:
    """A lifecycle event. The identity is always stored masked."""
    id: str
    timestamp: datetime
    kind: AuthEventType
    identity: str
    detail: Optional[str] = None

    @classmethod
    def create(
        cls,
        kind: AuthEventType,
        identity: str,
        detail: Optional[str] = None,
    ) -> "AuthEvent":
        return cls(
            id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc),
            kind=AuthEventType(kind),
            identity=mask_email(identity),
            detail=detail,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        d = asdict(self)
        d["timestamp"] = self.timestamp.isoformat()
        d["kind"] = self.kind.value
        return d
