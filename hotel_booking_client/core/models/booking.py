"""
Booking-related data models.
"""

from datetime import date
from decimal import Decimal
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..enums import BookingStage, CardBrand, Rejection


class DateRange(BaseModel):
    """Check-in / check-out pair. Start never falls after end."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError(f"start {self.start} is after end {self.end}")
        return self

    @property
    def nights(self) -> int:
        return (self.end - self.start).days


class GuestCounts(BaseModel):
    """Number of guests per category."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    adults: int = Field(default=0, ge=0)
    children: int = Field(default=0, ge=0)
    infants: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        """Guests occupying a bed; infants are not counted."""
        return self.adults + self.children

    def is_complete(self) -> bool:
        """A reservation needs at least one adult."""
        return self.adults >= 1


class PaymentCard(BaseModel):
    """Card attached to a reservation. The full number and CVV are never kept."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    number_masked: str
    holder_name: str
    expiry: Tuple[int, int]  # (month, year)
    cvv_provided: bool
    brand: CardBrand = CardBrand.VISA
    last4: str = ""


class PriceQuote(BaseModel):
    """Price breakdown for a stay."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    nights: int
    subtotal: Decimal
    discount: Decimal
    taxes: Decimal
    total: Decimal


class SessionSnapshot(BaseModel):
    """Read-only view of a booking session, also used for persistence."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    session_id: str
    stage: BookingStage
    date_range: Optional[DateRange] = None
    guest_counts: GuestCounts = Field(default_factory=GuestCounts)
    payment_card: Optional[PaymentCard] = None
    price_quote: Optional[PriceQuote] = None
    cancelled: bool = False


class StepResult(BaseModel):
    """Outcome of a stage transition."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    accepted: bool
    stage: BookingStage
    rejection: Optional[Rejection] = None
    reason: Optional[str] = None
    duplicate: bool = False
    shortfall: Optional[Decimal] = None

    @classmethod
    def ok(cls, stage: BookingStage, *, duplicate: bool = False) -> "StepResult":
        return cls(accepted=True, stage=stage, duplicate=duplicate)

    @classmethod
    def rejected(
        cls,
        stage: BookingStage,
        rejection: Rejection,
        reason: str,
        *,
        shortfall: Optional[Decimal] = None,
    ) -> "StepResult":
        return cls(
            accepted=False,
            stage=stage,
            rejection=rejection,
            reason=reason,
            shortfall=shortfall,
        )
