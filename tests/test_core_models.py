"""
Tests for core models.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from hotel_booking_client.core.enums import BookingStage, CardBrand, Rejection
from hotel_booking_client.core.models.booking import (
    DateRange,
    GuestCounts,
    PaymentCard,
    SessionSnapshot,
    StepResult,
)


class TestDateRange:
    """Test DateRange model."""

    def test_nights(self):
        """Test nights counts days between check-in and check-out."""
        assert DateRange(start=date(2026, 1, 10), end=date(2026, 1, 15)).nights == 5

    def test_same_day_allowed(self):
        """Test a zero-night range is valid."""
        assert DateRange(start=date(2026, 1, 10), end=date(2026, 1, 10)).nights == 0

    def test_reversed_range_rejected(self):
        """Test start after end cannot be constructed."""
        with pytest.raises(ValidationError):
            DateRange(start=date(2026, 1, 15), end=date(2026, 1, 10))


class TestGuestCounts:
    """Test GuestCounts model."""

    def test_defaults_are_zero(self):
        counts = GuestCounts()
        assert (counts.adults, counts.children, counts.infants) == (0, 0, 0)
        assert counts.is_complete() is False

    def test_total_excludes_infants(self):
        assert GuestCounts(adults=2, children=1, infants=1).total == 3

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            GuestCounts(adults=-1)

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            GuestCounts(adults=1, pets=2)


class TestSessionSnapshot:
    """Test SessionSnapshot serialization."""

    def test_json_round_trip_keeps_card_expiry_tuple(self):
        snapshot = SessionSnapshot(
            session_id="abc",
            stage=BookingStage.COMPLETED,
            date_range=DateRange(start=date(2026, 1, 10), end=date(2026, 1, 15)),
            guest_counts=GuestCounts(adults=2),
            payment_card=PaymentCard(
                number_masked="**** 0098",
                holder_name="Jane Doe",
                expiry=(12, 2026),
                cvv_provided=True,
                brand=CardBrand.VISA,
                last4="0098",
            ),
        )
        loaded = SessionSnapshot.model_validate_json(snapshot.model_dump_json())
        assert loaded == snapshot
        assert loaded.payment_card.expiry == (12, 2026)


class TestStepResult:
    """Test StepResult helpers."""

    def test_ok(self):
        result = StepResult.ok(BookingStage.GUEST_SELECTION)
        assert result.accepted is True
        assert result.rejection is None
        assert result.duplicate is False

    def test_rejected(self):
        result = StepResult.rejected(
            BookingStage.DATE_SELECTION, Rejection.INVALID_RANGE, "bad range"
        )
        assert result.accepted is False
        assert result.rejection == Rejection.INVALID_RANGE
        assert result.reason == "bad range"
