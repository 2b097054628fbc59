"""
Calendar tap handling for the date selection step.
"""

from datetime import date
from typing import Callable, Optional

from ...core.models.booking import DateRange


class DateRangePicker:
    """Turn successive calendar taps into a check-in / check-out range.

    The first tap picks the start. A later tap on or after the start picks
    the end; a tap before the start restarts from that date. Tapping again
    once both ends are set starts a new range. Past dates are ignored.
    """

    def __init__(self, today: Callable[[], date]) -> None:
        self._today = today
        self.start: Optional[date] = None
        self.end: Optional[date] = None

    def is_disabled(self, day: date) -> bool:
        return day < self._today()

    def press(self, day: date) -> bool:
        """Handle a tap on ``day``. Return False when the tap was ignored."""
        if self.is_disabled(day):
            return False

        if self.start is None or self.end is not None:
            self.start, self.end = day, None
        elif day < self.start:
            self.start = day
        else:
            self.end = day
        return True

    def is_selected(self, day: date) -> bool:
        return day == self.start or day == self.end

    def is_in_range(self, day: date) -> bool:
        if self.start is None or self.end is None:
            return False
        return self.start <= day <= self.end

    def range(self) -> Optional[DateRange]:
        if self.start is None or self.end is None:
            return None
        return DateRange(start=self.start, end=self.end)

    def clear(self) -> None:
        self.start = None
        self.end = None
