"""
Authentication-related enums.
"""

from enum import Enum


class TokenStatus(str, Enum):
    """Structural status of a persisted access token."""

    VALID = "valid"
    INVALID = "invalid"
    ABSENT = "absent"
