"""
Logger factory for the hotel booking client.
"""

import logging
from typing import Optional

_ROOT_LOGGER = "hotel"
_handler: Optional[logging.Handler] = None


def configure_logging(level: str) -> None:
    """Attach a console handler to the ``hotel`` logger once and set its level."""
    global _handler
    root = logging.getLogger(_ROOT_LOGGER)
    root.setLevel(level.upper())
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        root.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``hotel`` namespace."""
    if name != _ROOT_LOGGER and not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
