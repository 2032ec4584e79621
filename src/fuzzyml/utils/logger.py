"""Minimal logging utilities for fuzzyml.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from fuzzyml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Saw tag 'a'")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "fuzzyml." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("crawler")
        >>> logger.name
        'fuzzyml.crawler'
    """
    if not (name == "fuzzyml" or name.startswith("fuzzyml.")):
        name = f"fuzzyml.{name}"
    return logging.getLogger(name)
