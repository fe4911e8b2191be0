"""Minimal logging utilities for string_builder.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from string_builder.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Buffer grown")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "string_builder"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "string_builder." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'string_builder.mymodule'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
