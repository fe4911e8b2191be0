"""Conversion of appendable values to bytes.

The set of values a Builder accepts is closed:

- ``str``: its UTF-8 encoding (a one-character str is a single code point)
- ``Char``: one Unicode scalar value, 1 to 4 UTF-8 bytes
- ``Byte`` or a plain ``int`` in 0-255: exactly that byte
- ``bytes``, ``bytearray``, ``memoryview``: the raw bytes, unchanged

Example:
    >>> to_bytes("hé")
    b'h\\xc3\\xa9'
    >>> to_bytes(Char.from_code_point(0x2018))
    b'\\xe2\\x80\\x98'
    >>> to_bytes(Byte(0x2C))
    b','
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from string_builder.errors import InvalidValueError

MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF
MAX_BYTE = 0xFF


def _check_scalar_value(code_point: int) -> None:
    if not 0 <= code_point <= MAX_CODE_POINT:
        msg = f"Code point {code_point:#x} is outside the Unicode range"
        raise InvalidValueError(msg)
    if SURROGATE_MIN <= code_point <= SURROGATE_MAX:
        msg = f"Code point {code_point:#x} is a surrogate, not a scalar value"
        raise InvalidValueError(msg)


def _check_byte(value: int) -> None:
    if not 0 <= value <= MAX_BYTE:
        msg = f"Byte value {value} is outside 0-255"
        raise InvalidValueError(msg)


@dataclass(frozen=True, slots=True)
class Byte:
    """A single raw byte.

    Plain ints are accepted by Builder.append as well; Byte makes the
    intent explicit where an int could be misread as a code point.

    Attributes:
        value: Byte value in 0-255
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            msg = f"Byte value must be int, got {type(self.value).__name__}"
            raise TypeError(msg)
        _check_byte(self.value)

    def to_bytes(self) -> bytes:
        return bytes((self.value,))


@dataclass(frozen=True, slots=True)
class Char:
    """A single Unicode scalar value.

    Attributes:
        value: One-character string holding the code point
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = f"Char value must be str, got {type(self.value).__name__}"
            raise TypeError(msg)
        if len(self.value) != 1:
            msg = f"Char needs exactly one code point, got {len(self.value)}"
            raise InvalidValueError(msg)
        _check_scalar_value(ord(self.value))

    @classmethod
    def from_code_point(cls, code_point: int) -> Char:
        """Create a Char from an integer code point.

        Raises:
            InvalidValueError: If code_point is a surrogate or above U+10FFFF
        """
        _check_scalar_value(code_point)
        return cls(chr(code_point))

    @property
    def code_point(self) -> int:
        return ord(self.value)

    def to_bytes(self) -> bytes:
        return self.value.encode("utf-8")


Appendable: TypeAlias = str | Char | Byte | int | bytes | bytearray | memoryview


def to_bytes(value: Appendable) -> bytes:
    """Convert an appendable value to the bytes a Builder writes.

    Args:
        value: Any member of the appendable set

    Returns:
        The value's byte representation, unchanged in order

    Raises:
        InvalidValueError: If the value has no byte representation
            (byte out of range, text with lone surrogates)
        TypeError: If the value is not appendable

    """
    match value:
        case str():
            try:
                return value.encode("utf-8")
            except UnicodeEncodeError as e:
                msg = f"Text has no UTF-8 encoding at index {e.start}: {e.reason}"
                raise InvalidValueError(msg) from e
        case Char() | Byte():
            return value.to_bytes()
        case bool():
            msg = "bool is not an appendable byte value"
            raise TypeError(msg)
        case int():
            _check_byte(value)
            return bytes((value,))
        case bytes():
            return value
        case bytearray():
            return bytes(value)
        case memoryview():
            return value.tobytes()
        case _:
            msg = f"Cannot append value of type {type(value).__name__}"
            raise TypeError(msg)


__all__ = [
    "Appendable",
    "Byte",
    "Char",
    "to_bytes",
]
