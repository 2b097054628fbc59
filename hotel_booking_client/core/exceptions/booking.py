"""
Booking-related exceptions.
"""


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class SessionCancelledError(BookingFlowError):
    """Exception raised when a transition is invoked on a cancelled session."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Booking session {session_id} has been cancelled")
        self.session_id = session_id


class SessionNotFoundError(BookingFlowError):
    """Exception raised when a session id is not known to the session store."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"No booking session with id {session_id}")
        self.session_id = session_id
