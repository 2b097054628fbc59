"""
Utility modules for the hotel booking client.
"""

from .card import CardFormatter
from .logging import configure_logging, get_logger

__all__ = [
    "CardFormatter",
    "configure_logging",
    "get_logger",
]
