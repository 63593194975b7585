"""Minimal logging utilities for Hornbook.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from hornbook.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering page")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "hornbook." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'hornbook.mymodule'
    """
    if not (name == "hornbook" or name.startswith("hornbook.")):
        name = f"hornbook.{name}"
    return logging.getLogger(name)
