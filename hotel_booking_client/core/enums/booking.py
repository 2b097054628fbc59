"""
Booking-related enums.
"""

from enum import Enum


class BookingStage(str, Enum):
    """Enumeration of the reservation flow stages, in flow order."""

    DATE_SELECTION = "date_selection"
    GUEST_SELECTION = "guest_selection"
    PAYMENT_CONFIRMATION = "payment_confirmation"
    CARD_ENTRY = "card_entry"
    COMPLETED = "completed"


class GuestField(str, Enum):
    """Guest counter fields."""

    ADULTS = "adults"
    CHILDREN = "children"
    INFANTS = "infants"


class Rejection(str, Enum):
    """Why a stage transition was refused."""

    INVALID_RANGE = "invalid_range"
    INCOMPLETE_GUEST_SELECTION = "incomplete_guest_selection"
    INVALID_CARD_DETAILS = "invalid_card_details"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    OUT_OF_ORDER = "out_of_order"


class CardBrand(str, Enum):
    """Payment card brand."""

    VISA = "VISA"
    MASTERCARD = "MASTERCARD"
    AMEX = "AMEX"

    @classmethod
    def detect(cls, number: str) -> "CardBrand":
        """Detect the brand from the leading digit of a card number."""
        cleaned = "".join(number.split())
        if cleaned.startswith("4"):
            return cls.VISA
        if cleaned.startswith(("5", "2")):
            return cls.MASTERCARD
        if cleaned.startswith("3"):
            return cls.AMEX

        # Default fallback
        return cls.VISA
