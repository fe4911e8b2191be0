"""
string_builder: Growable byte buffer that builds UTF-8 strings

Accumulates text, single characters, single bytes and raw byte slices in
one buffer, then validates the whole thing as UTF-8 once at the end.
Zero runtime dependencies.

Quick Start:
    >>> from string_builder import Builder
    >>> b = Builder()
    >>> b.append("hello").append(0x2C).append(b" world")
    Builder(len=12, capacity=1024)
    >>> b.build()
    'hello, world'

Characters and Bytes:
    >>> from string_builder import Builder, Byte, Char
    >>> Builder(0).extend([Char.from_code_point(0xC6), "nima", Byte(0x21)]).build()
    'Ænima!'

Configuration:
    >>> from string_builder import BuilderConfig, builder_config_context
    >>> with builder_config_context(BuilderConfig(max_capacity=4)):
    ...     Builder().append("toolong")
    Traceback (most recent call last):
        ...
    string_builder.errors.WriteError: Buffer cannot grow to 7 bytes (max capacity 4)

Installation:
    pip install string-builder
"""

from string_builder.appendable import Appendable, Byte, Char, to_bytes
from string_builder.builder import Builder
from string_builder.config import (
    DEFAULT_CAPACITY,
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from string_builder.errors import (
    BuilderSpentError,
    InvalidEncodingError,
    InvalidValueError,
    StringBuilderError,
    WriteError,
)
from string_builder.utils.logger import get_logger

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CAPACITY",
    "Appendable",
    "Builder",
    "BuilderConfig",
    "BuilderSpentError",
    "Byte",
    "Char",
    "InvalidEncodingError",
    "InvalidValueError",
    "StringBuilderError",
    "WriteError",
    "__version__",
    "builder_config_context",
    "get_builder_config",
    "get_logger",
    "reset_builder_config",
    "set_builder_config",
    "to_bytes",
]
