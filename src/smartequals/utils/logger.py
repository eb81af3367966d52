"""Minimal logging utilities for smartequals.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from smartequals.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Resolving trigger key")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "smartequals." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'smartequals.mymodule'
    """
    if not (name == "smartequals" or name.startswith("smartequals.")):
        name = f"smartequals.{name}"
    return logging.getLogger(name)
