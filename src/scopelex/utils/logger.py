"""Minimal logging utilities for scopelex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from scopelex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Splitting %d lines", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "scopelex." prefix.
    No handlers are attached; the host application decides where records go.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'scopelex.mymodule'
    """
    if not (name == "scopelex" or name.startswith("scopelex.")):
        name = f"scopelex.{name}"
    return logging.getLogger(name)
