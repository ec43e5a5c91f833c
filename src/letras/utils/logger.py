"""Minimal logging utilities for letras.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from letras.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing %d characters", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "letras." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'letras.mymodule'
    """
    if not (name == "letras" or name.startswith("letras.")):
        name = f"letras.{name}"
    return logging.getLogger(name)
