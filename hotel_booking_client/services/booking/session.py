"""
Reservation flow state machine.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Dict, Optional, Tuple, Union
from uuid import uuid4

import pytz

from ...config import Settings, get_settings
from ...core.enums import BookingStage, CardBrand, GuestField, Rejection
from ...core.exceptions import BookingFlowError, SessionCancelledError
from ...core.models.booking import (
    DateRange,
    GuestCounts,
    PaymentCard,
    PriceQuote,
    SessionSnapshot,
    StepResult,
)
from ...utils.card import CardFormatter
from ...utils.logging import configure_logging, get_logger
from .counter import BoundedCounter
from .pricing import Number, money, quote_stay

logger = get_logger("hotel.booking")


def local_today(settings: Settings) -> Callable[[], date]:
    """Return a clock giving today's date in the configured timezone."""
    tz = pytz.timezone(settings.timezone)
    return lambda: datetime.now(tz).date()


class BookingSession:
    """Hold an in-progress reservation and move it forward one step at a time.

    Every transition returns a :class:`StepResult`. A failed precondition
    leaves the stage where it was and names the rejection so the caller can
    re-prompt. Repeating a transition the session has already passed is a
    no-op reported as a duplicate.
    """

    _TRANSITIONS: Dict[BookingStage, BookingStage] = {
        BookingStage.DATE_SELECTION: BookingStage.GUEST_SELECTION,
        BookingStage.GUEST_SELECTION: BookingStage.PAYMENT_CONFIRMATION,
        BookingStage.PAYMENT_CONFIRMATION: BookingStage.CARD_ENTRY,
        BookingStage.CARD_ENTRY: BookingStage.COMPLETED,
    }

    _STAGE_ORDER = list(BookingStage)

    def __init__(
        self,
        session_id: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.settings = settings or get_settings()
        configure_logging(self.settings.log_level)
        self.session_id = session_id or uuid4().hex
        self._today = today or local_today(self.settings)

        self._stage = BookingStage.DATE_SELECTION
        self._date_range: Optional[DateRange] = None
        self._guests: Dict[GuestField, BoundedCounter] = {
            field: self._new_counter(0) for field in GuestField
        }
        self._card: Optional[PaymentCard] = None
        self._quote: Optional[PriceQuote] = None
        self._cancelled = False

    @classmethod
    def from_snapshot(
        cls,
        snapshot: SessionSnapshot,
        *,
        settings: Optional[Settings] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> "BookingSession":
        """Rebuild a session from a snapshot taken with :meth:`snapshot`."""
        session = cls(snapshot.session_id, settings=settings, today=today)
        session._stage = snapshot.stage
        session._date_range = snapshot.date_range
        session._card = snapshot.payment_card
        session._quote = snapshot.price_quote
        session._cancelled = snapshot.cancelled
        counts = snapshot.guest_counts
        session._guests = {
            GuestField.ADULTS: session._new_counter(counts.adults),
            GuestField.CHILDREN: session._new_counter(counts.children),
            GuestField.INFANTS: session._new_counter(counts.infants),
        }
        return session

    def _new_counter(self, value: int) -> BoundedCounter:
        ceiling = self.settings.guest_count_ceiling
        # A stored count above a since-lowered ceiling is kept as is
        if ceiling is not None and value > ceiling:
            ceiling = value
        return BoundedCounter(value, minimum=0, maximum=ceiling)

    # Read-only accessors

    def current_stage(self) -> BookingStage:
        return self._stage

    @property
    def stage(self) -> BookingStage:
        return self._stage

    @property
    def date_range(self) -> Optional[DateRange]:
        return self._date_range

    @property
    def guest_counts(self) -> GuestCounts:
        return GuestCounts(
            adults=self._guests[GuestField.ADULTS].value,
            children=self._guests[GuestField.CHILDREN].value,
            infants=self._guests[GuestField.INFANTS].value,
        )

    @property
    def payment_card(self) -> Optional[PaymentCard]:
        return self._card

    @property
    def price_quote(self) -> Optional[PriceQuote]:
        return self._quote

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def nights(self) -> int:
        return self._date_range.nights if self._date_range else 0

    @property
    def total_guests(self) -> int:
        return self.guest_counts.total

    def is_completed(self) -> bool:
        return self._stage == BookingStage.COMPLETED

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.session_id,
            stage=self._stage,
            date_range=self._date_range,
            guest_counts=self.guest_counts,
            payment_card=self._card,
            price_quote=self._quote,
            cancelled=self._cancelled,
        )

    def quote(self, price_per_night: Number, discount_price: Optional[Number] = None) -> PriceQuote:
        """Price the selected dates at the given nightly rate."""
        return quote_stay(
            price_per_night,
            self.nights,
            discount_price=discount_price,
            tax_rate=self.settings.tax_rate,
        )

    # Transitions

    def select_dates(self, start: date, end: date) -> StepResult:
        """Set check-in and check-out, then move on to guest selection."""
        early = self._check_stage(BookingStage.DATE_SELECTION, "select_dates")
        if early is not None:
            return early

        if start > end:
            return self._reject(
                Rejection.INVALID_RANGE,
                f"check-in {start.isoformat()} is after check-out {end.isoformat()}",
            )

        self._date_range = DateRange(start=start, end=end)
        self._advance(BookingStage.GUEST_SELECTION)
        return StepResult.ok(self._stage)

    def adjust_guests(self, field: Union[GuestField, str], delta: int) -> bool:
        """Step a guest counter. Refused adjustments are silent no-ops."""
        self._ensure_active()
        field = GuestField(field)

        if self._stage != BookingStage.GUEST_SELECTION:
            logger.debug(
                f"{self.session_id}: ignoring {field.value} {delta:+d} at {self._stage.value}"
            )
            return False

        return self._guests[field].adjust(delta)

    def set_guest_counts(self, adults: int, children: int = 0, infants: int = 0) -> StepResult:
        """Set all guest counts at once, then confirm the selection."""
        early = self._check_stage(BookingStage.GUEST_SELECTION, "set_guest_counts")
        if early is not None:
            return early

        requested = {
            GuestField.ADULTS: adults,
            GuestField.CHILDREN: children,
            GuestField.INFANTS: infants,
        }
        out_of_bounds = [
            field.value
            for field, value in requested.items()
            if not self._guests[field].accepts(value)
        ]
        if out_of_bounds:
            return self._reject(
                Rejection.INCOMPLETE_GUEST_SELECTION,
                f"guest counts out of range: {', '.join(out_of_bounds)}",
            )

        for field, value in requested.items():
            self._guests[field].set(value)

        return self.confirm_guests()

    def confirm_guests(self) -> StepResult:
        """Leave guest selection with the current counts."""
        early = self._check_stage(BookingStage.GUEST_SELECTION, "confirm_guests")
        if early is not None:
            return early

        if not self.guest_counts.is_complete():
            return self._reject(
                Rejection.INCOMPLETE_GUEST_SELECTION,
                "at least one adult is required",
            )

        self._advance(BookingStage.PAYMENT_CONFIRMATION)
        return StepResult.ok(self._stage)

    def open_card_entry(self) -> StepResult:
        """Move from payment confirmation to entering a card."""
        early = self._check_stage(BookingStage.PAYMENT_CONFIRMATION, "open_card_entry")
        if early is not None:
            return early

        self._advance(BookingStage.CARD_ENTRY)
        return StepResult.ok(self._stage)

    def confirm_payment(
        self,
        price_per_night: Number,
        *,
        balance: Number,
        discount_price: Optional[Number] = None,
    ) -> StepResult:
        """Pay from an account balance and move on to card entry.

        The stay is priced at the given nightly rate. A balance below the
        total is rejected with the missing amount and the session stays at
        payment confirmation. The accepted quote is kept on the session.
        """
        early = self._check_stage(BookingStage.PAYMENT_CONFIRMATION, "confirm_payment")
        if early is not None:
            return early

        quote = self.quote(price_per_night, discount_price)
        available = money(balance)
        if available < quote.total:
            return self._reject(
                Rejection.INSUFFICIENT_BALANCE,
                f"balance {available} does not cover total {quote.total}",
                shortfall=quote.total - available,
            )

        self._quote = quote
        self._advance(BookingStage.CARD_ENTRY)
        return StepResult.ok(self._stage)

    def attach_card(
        self,
        number_raw: str,
        holder_name: str,
        expiry_raw: str,
        cvv_raw: str,
    ) -> StepResult:
        """Normalize and validate card input, then complete the reservation.

        Accepted from card entry, or straight from payment confirmation, in
        which case the session passes through card entry.
        """
        self._ensure_active()
        expected = (
            BookingStage.PAYMENT_CONFIRMATION
            if self._stage == BookingStage.PAYMENT_CONFIRMATION
            else BookingStage.CARD_ENTRY
        )
        early = self._check_stage(expected, "attach_card")
        if early is not None:
            return early

        card, error = self._build_card(number_raw, holder_name, expiry_raw, cvv_raw)
        if card is None:
            return self._reject(Rejection.INVALID_CARD_DETAILS, error)

        if self._stage == BookingStage.PAYMENT_CONFIRMATION:
            self._advance(BookingStage.CARD_ENTRY)
        self._card = card
        self._advance(BookingStage.COMPLETED)
        return StepResult.ok(self._stage)

    def cancel(self) -> None:
        """Discard the reservation. Terminal; repeating it is harmless."""
        if self._cancelled:
            return
        self._cancelled = True
        self._date_range = None
        self._card = None
        self._quote = None
        for counter in self._guests.values():
            counter.set(0)
        logger.info(f"{self.session_id}: cancelled at {self._stage.value}")

    # Internals

    def _build_card(
        self,
        number_raw: str,
        holder_name: str,
        expiry_raw: str,
        cvv_raw: str,
    ) -> Tuple[Optional[PaymentCard], Optional[str]]:
        number = CardFormatter.format_number(number_raw)
        if not number:
            return None, "card number is required"

        expiry_text = CardFormatter.format_expiry(expiry_raw)
        expiry = CardFormatter.parse_expiry(expiry_text, self._today().year)
        if expiry is None:
            return None, f"expiry '{expiry_text}' is not a valid month and year"

        cvv = CardFormatter.format_cvv(cvv_raw)
        compact = number.replace(" ", "")

        card = PaymentCard(
            number_masked=CardFormatter.mask_number(number),
            holder_name=(holder_name or "").strip(),
            expiry=expiry,
            cvv_provided=bool(cvv),
            brand=CardBrand.detect(compact),
            last4=compact[-4:],
        )
        return card, None

    def _ensure_active(self) -> None:
        if self._cancelled:
            raise SessionCancelledError(self.session_id)

    def _position(self, stage: BookingStage) -> int:
        return self._STAGE_ORDER.index(stage)

    def _check_stage(self, expected: BookingStage, operation: str) -> Optional[StepResult]:
        """Return an early result unless the session sits at ``expected``."""
        self._ensure_active()
        if self._stage == expected:
            return None

        if self._position(self._stage) > self._position(expected):
            logger.info(
                f"{self.session_id}: duplicate {operation} ignored at {self._stage.value}"
            )
            return StepResult.ok(self._stage, duplicate=True)

        return self._reject(
            Rejection.OUT_OF_ORDER,
            f"{operation} needs stage {expected.value}, session is at {self._stage.value}",
        )

    def _reject(
        self,
        rejection: Rejection,
        reason: str,
        *,
        shortfall: Optional[Decimal] = None,
    ) -> StepResult:
        logger.info(f"{self.session_id}: rejected {rejection.value}: {reason}")
        return StepResult.rejected(self._stage, rejection, reason, shortfall=shortfall)

    def _advance(self, target: BookingStage) -> None:
        if self._TRANSITIONS.get(self._stage) != target:
            raise BookingFlowError(
                f"Illegal transition {self._stage.value} -> {target.value}"
            )
        previous = self._stage
        self._stage = target
        logger.info(f"{self.session_id}: {previous.value} -> {target.value}")
