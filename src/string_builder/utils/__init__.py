"""Utility modules for string_builder.

Provides:
- logger: get_logger for logging
"""

from string_builder.utils.logger import get_logger

__all__ = [
    "get_logger",
]
