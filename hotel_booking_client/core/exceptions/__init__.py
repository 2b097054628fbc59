"""
Custom exceptions for the hotel booking client.
"""

from .booking import BookingFlowError, SessionCancelledError, SessionNotFoundError
from .auth import CredentialStorageError

__all__ = [
    "BookingFlowError",
    "SessionCancelledError",
    "SessionNotFoundError",
    "CredentialStorageError",
]
