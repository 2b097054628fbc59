"""
Card input normalization and validation utilities.
"""

import re
from typing import Optional, Tuple

_NON_DIGITS = re.compile(r"\D")
_WHITESPACE = re.compile(r"\s")

CARD_BLOCK_SIZE = 4
CVV_MAX_LENGTH = 3


class CardFormatter:
    """Normalize raw card form input the way the card form displays it."""

    @staticmethod
    def format_number(raw: str) -> str:
        """
        Strip whitespace and regroup the card number into blocks of four.

        Characters other than whitespace are kept as typed, so a partially
        masked number like ``8976 5467 XX87 0098`` survives unchanged.

        Args:
            raw: Card number as typed

        Returns:
            Number grouped as ``XXXX XXXX ...``
        """
        if not raw:
            return ""

        cleaned = _WHITESPACE.sub("", raw)
        blocks = [
            cleaned[i:i + CARD_BLOCK_SIZE]
            for i in range(0, len(cleaned), CARD_BLOCK_SIZE)
        ]
        return " ".join(blocks)

    @staticmethod
    def format_expiry(raw: str) -> str:
        """
        Normalize expiry input to ``MM/YYYY``.

        Non-digits are dropped. Once two digits are present a separator is
        inserted after the month; the year part is capped at four digits.

        Args:
            raw: Expiry as typed, e.g. ``122026`` or ``12/26``

        Returns:
            Formatted expiry, or the bare digits when fewer than two
        """
        if not raw:
            return ""

        cleaned = _NON_DIGITS.sub("", raw)
        if len(cleaned) >= 2:
            return f"{cleaned[:2]}/{cleaned[2:6]}"
        return cleaned

    @staticmethod
    def format_cvv(raw: str) -> str:
        """Keep digits only, truncated to three."""
        if not raw:
            return ""
        return _NON_DIGITS.sub("", raw)[:CVV_MAX_LENGTH]

    @staticmethod
    def parse_expiry(formatted: str, current_year: int) -> Optional[Tuple[int, int]]:
        """
        Parse a formatted expiry into ``(month, year)``.

        Two-digit years are read as 20YY.

        Args:
            formatted: Output of :meth:`format_expiry`
            current_year: Earliest acceptable year

        Returns:
            ``(month, year)`` or None if the expiry is incomplete or out of range
        """
        if not formatted or "/" not in formatted:
            return None

        month_part, year_part = formatted.split("/", 1)
        if len(month_part) != 2 or len(year_part) not in (2, 4):
            return None

        month = int(month_part)
        year = int(year_part)
        if len(year_part) == 2:
            year += 2000

        if month < 1 or month > 12:
            return None
        if year < current_year:
            return None

        return month, year

    @staticmethod
    def mask_number(formatted: str) -> str:
        """Replace every block but the last with ``****``."""
        blocks = formatted.split()
        if not blocks:
            return ""
        return " ".join(["****"] * (len(blocks) - 1) + [blocks[-1]])
