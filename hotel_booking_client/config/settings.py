"""
Application settings and configuration.
"""

from decimal import Decimal
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Hotel Booking Client"
    app_version: str = "1.0.0"
    debug: bool = False

    # Storage
    state_db_path: str = "booking_state.db"
    credentials_db_path: str = "credentials.db"

    # Booking flow
    guest_count_ceiling: Optional[int] = Field(default=None, ge=1)
    tax_rate: Decimal = Decimal("0.10")

    # Timezone used for "today" and the current card-expiry year
    timezone: str = "Asia/Ho_Chi_Minh"

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
