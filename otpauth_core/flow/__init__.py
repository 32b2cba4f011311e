"""
Login Flow
==========
"""

from .states import AuthState, EmailEntry, OtpEntry, LoggedIn
from .delivery import CodeDelivery, InMemoryOutbox, OutboxMessage
from .machine import AuthFlow, is_valid_email

__all__ = [
    # States
    "AuthState",
    "EmailEntry",
    "OtpEntry",
    "LoggedIn",
    # Delivery
    "CodeDelivery",
    "InMemoryOutbox",
    "OutboxMessage",
    # Flow
    "AuthFlow",
    "is_valid_email",
]
