"""
Enums for the hotel booking client.
"""

from .booking import BookingStage, GuestField, Rejection, CardBrand
from .auth import TokenStatus

__all__ = [
    "BookingStage",
    "GuestField",
    "Rejection",
    "CardBrand",
    "TokenStatus",
]
