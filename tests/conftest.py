"""
Pytest configuration and fixtures.
"""

from datetime import date

import pytest

from hotel_booking_client.config import Settings
from hotel_booking_client.services.auth import CredentialGuard, InMemoryCredentialStorage
from hotel_booking_client.services.booking import BookingSession, SessionStore

FIXED_TODAY = date(2026, 1, 5)


@pytest.fixture
def today():
    """Clock pinned to a fixed date."""
    return lambda: FIXED_TODAY


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the environment's .env and databases."""
    return Settings(
        _env_file=None,
        state_db_path=str(tmp_path / "booking_state.db"),
        credentials_db_path=str(tmp_path / "credentials.db"),
        timezone="Asia/Ho_Chi_Minh",
        guest_count_ceiling=None,
    )


@pytest.fixture
def session(settings, today):
    """Fresh booking session at date selection."""
    return BookingSession(settings=settings, today=today)


@pytest.fixture
def session_at_payment(session):
    """Session that has dates and guests and waits for payment."""
    session.select_dates(date(2026, 1, 10), date(2026, 1, 15))
    session.set_guest_counts(2, 1, 0)
    return session


@pytest.fixture
def store(settings, today):
    """Session store on a temporary SQLite file."""
    return SessionStore(settings=settings, today=today)


@pytest.fixture
def guard():
    return CredentialGuard()


@pytest.fixture
def credentials():
    """In-memory storage holding a full credential set and an unrelated key."""
    return InMemoryCredentialStorage(
        {
            "accessToken": "header.payload.signature",
            "refreshToken": "refresh-token",
            "userId": "42",
            "theme": "dark",
        }
    )
