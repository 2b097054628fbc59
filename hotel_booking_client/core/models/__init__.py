"""
Core data models for the hotel booking client.
"""

from .booking import (
    DateRange,
    GuestCounts,
    PaymentCard,
    PriceQuote,
    SessionSnapshot,
    StepResult,
)

__all__ = [
    "DateRange",
    "GuestCounts",
    "PaymentCard",
    "PriceQuote",
    "SessionSnapshot",
    "StepResult",
]
