"""Minimal logging utilities for pipemark.

Provides a get_logger function that wraps the standard library logging
and keeps every logger under the "pipemark" namespace.

Example:
    >>> from pipemark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("opened Math region at %s", "1:1")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("lexer.core").name
        'pipemark.lexer.core'
    """
    if not (name == "pipemark" or name.startswith("pipemark.")):
        name = f"pipemark.{name}"
    return logging.getLogger(name)
