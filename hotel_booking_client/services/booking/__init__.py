"""
Booking flow module.
"""

from .counter import BoundedCounter
from .date_picker import DateRangePicker
from .pricing import quote_stay
from .session import BookingSession
from .store import SessionStore

__all__ = [
    "BoundedCounter",
    "DateRangePicker",
    "quote_stay",
    "BookingSession",
    "SessionStore",
]
