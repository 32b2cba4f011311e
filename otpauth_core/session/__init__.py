"""
Sessions
========
"""

from .models import Session
from .tracker import SessionTracker

__all__ = [
    "Session",
    "SessionTracker",
]
