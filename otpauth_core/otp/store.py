"""
OTP Store
=========
In-memory mapping from identity to its live OTP record.
"""

from typing import Dict, Optional

from .models import OTPRecord


class OTPStore:
    """
    Holds at most one OTPRecord per identity.

    Not thread-safe: a store has a single writer, the OTPPolicy it is
    handed to. Create one per policy rather than sharing it globally.
    """

    def __init__(self):
        self._records: Dict[str, OTPRecord] = {}

    def get(self, identity: str) -> Optional[OTPRecord]:
        return self._records.get(identity)

    def put(self, identity: str, record: OTPRecord) -> None:
        """Store a record, replacing any previous one for the identity."""
        self._records[identity] = record

    def delete(self, identity: str) -> bool:
        """Remove the record. Returns True if one existed."""
        return self._records.pop(identity, None) is not None

    def clear(self) -> None:
        self._records.clear()

    def __contains__(self, identity: str) -> bool:
        return identity in self._records

    def __len__(self) -> int:
        return len(self._records)
