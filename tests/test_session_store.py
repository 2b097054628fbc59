"""
Tests for the SQLite session store.
"""

from datetime import date

import pytest

from hotel_booking_client.core.enums import BookingStage, GuestField
from hotel_booking_client.core.exceptions import SessionNotFoundError
from hotel_booking_client.services.booking import SessionStore


def test_create_persists(store):
    session = store.create()
    assert store.exists(session.session_id)
    assert store.get(session.session_id).current_stage() == BookingStage.DATE_SELECTION


def test_resume_across_steps(store):
    session = store.create()
    session.select_dates(date(2026, 1, 10), date(2026, 1, 15))
    store.save(session)

    # Next screen resolves the id rather than receiving dates as parameters
    guests_step = store.get(session.session_id)
    assert guests_step.date_range.nights == 5
    guests_step.adjust_guests(GuestField.ADULTS, 1)
    guests_step.adjust_guests(GuestField.ADULTS, 1)
    guests_step.confirm_guests()
    store.save(guests_step)

    payment_step = store.get(session.session_id)
    payment_step.attach_card("8976546798870098", "Jane Doe", "122026", "123")
    store.save(payment_step)

    done = store.get(session.session_id)
    assert done.is_completed()
    assert done.guest_counts.adults == 2
    assert done.payment_card.last4 == "0098"


def test_unknown_id(store):
    with pytest.raises(SessionNotFoundError):
        store.get("missing")


def test_discard(store):
    session = store.create()
    store.discard(session.session_id)
    assert not store.exists(session.session_id)
    store.discard(session.session_id)


def test_cancel_removes_session(store):
    session = store.create()
    cancelled = store.cancel(session.session_id)
    assert cancelled.session_id == session.session_id
    assert cancelled.cancelled
    assert not store.exists(session.session_id)


def test_cancel_unknown_id(store):
    with pytest.raises(SessionNotFoundError):
        store.cancel("missing")


def test_resume_with_price_quote(store):
    session = store.create()
    session.select_dates(date(2026, 1, 10), date(2026, 1, 15))
    session.set_guest_counts(2)
    session.confirm_payment(100, balance=600)
    store.save(session)

    restored = store.get(session.session_id)
    assert restored.current_stage() == BookingStage.CARD_ENTRY
    assert restored.price_quote == session.price_quote


def test_sessions_are_isolated(store):
    first = store.create()
    second = store.create()
    first.select_dates(date(2026, 1, 10), date(2026, 1, 15))
    store.save(first)
    assert store.get(second.session_id).date_range is None


def test_explicit_db_path(tmp_path, settings, today):
    path = tmp_path / "other.db"
    other = SessionStore(str(path), settings=settings, today=today)
    session = other.create()
    assert path.exists()
    assert other.exists(session.session_id)
