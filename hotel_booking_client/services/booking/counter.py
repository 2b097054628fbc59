"""
Guarded integer counter used by the guest steppers.
"""

from typing import Optional


class BoundedCounter:
    """Integer that only moves through bounded increments and decrements.

    An adjustment that would cross the floor or the ceiling is refused
    silently: the value stays put and :meth:`adjust` returns False.
    """

    def __init__(self, value: int = 0, *, minimum: int = 0, maximum: Optional[int] = None) -> None:
        if maximum is not None and maximum < minimum:
            raise ValueError(f"maximum {maximum} is below minimum {minimum}")
        if not self._in_bounds(value, minimum, maximum):
            raise ValueError(f"initial value {value} outside [{minimum}, {maximum}]")
        self.minimum = minimum
        self.maximum = maximum
        self._value = value

    @staticmethod
    def _in_bounds(value: int, minimum: int, maximum: Optional[int]) -> bool:
        if value < minimum:
            return False
        return maximum is None or value <= maximum

    @property
    def value(self) -> int:
        return self._value

    def accepts(self, value: int) -> bool:
        return self._in_bounds(value, self.minimum, self.maximum)

    def can_adjust(self, delta: int) -> bool:
        return self.accepts(self._value + delta)

    def adjust(self, delta: int) -> bool:
        """Apply delta if the result stays within bounds. Return whether it applied."""
        if not self.can_adjust(delta):
            return False
        self._value += delta
        return True

    def increment(self) -> bool:
        return self.adjust(1)

    def decrement(self) -> bool:
        return self.adjust(-1)

    def set(self, value: int) -> bool:
        """Set an absolute value if it is within bounds."""
        if not self.accepts(value):
            return False
        self._value = value
        return True

    def __repr__(self) -> str:
        return f"BoundedCounter(value={self._value}, minimum={self.minimum}, maximum={self.maximum})"
