"""
Tests for settings loading and logger setup.
"""

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from hotel_booking_client.config import Settings, get_settings
from hotel_booking_client.utils import configure_logging, get_logger


class TestSettings:
    """Test settings defaults and validation."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.tax_rate == Decimal("0.10")
        assert settings.guest_count_ceiling is None

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="loud")

    def test_ceiling_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, guest_count_ceiling=0)

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TAX_RATE", "0.08")
        assert get_settings().tax_rate == Decimal("0.08")


class TestLogging:
    """Test the hotel logger namespace."""

    def test_names_are_prefixed(self):
        assert get_logger("booking").name == "hotel.booking"
        assert get_logger("hotel.auth").name == "hotel.auth"
        assert get_logger("hotel").name == "hotel"

    def test_bad_level_in_environment_does_not_break_loggers(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")
        assert get_logger("booking").name == "hotel.booking"
        with pytest.raises(ValidationError):
            get_settings()

    def test_configure_sets_level_and_one_handler(self):
        root = logging.getLogger("hotel")
        previous = root.level
        try:
            configure_logging("WARNING")
            configure_logging("warning")
            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
        finally:
            root.setLevel(previous)
