"""
Service layer for the hotel booking client.
"""

from .auth import CredentialGuard
from .booking import BookingSession, SessionStore

__all__ = [
    "CredentialGuard",
    "BookingSession",
    "SessionStore",
]
