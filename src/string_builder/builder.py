"""Builder for accumulating bytes into a UTF-8 string.

Values are converted to bytes as they are appended and written into a
single pre-sized bytearray, which doubles when it fills up. build()
validates the whole buffer as UTF-8 once, at the end.

Thread Safety:
    A Builder has a single owner. Appends and build() mutate it without
    locking; share it across threads only with external synchronization.

Lifecycle:
    build() hands the buffer over to its result. The builder is then
    spent and every further call raises BuilderSpentError.

"""

from __future__ import annotations

from collections.abc import Iterable

from string_builder.appendable import Appendable, to_bytes
from string_builder.config import get_builder_config
from string_builder.errors import BuilderSpentError, InvalidEncodingError, WriteError
from string_builder.utils.logger import get_logger

logger = get_logger(__name__)

# Smallest growth step, so a zero-capacity builder does not resize on every append
MIN_GROWTH = 64


class Builder:
    """Growable byte buffer that finalizes into a str.

    Usage:
            >>> b = Builder()
            >>> b.append("hello").append(0x2C).append(b" ").append("world")
            Builder(len=12, capacity=1024)
            >>> len(b)
            12
            >>> b.build()
            'hello, world'

    Args:
        capacity: Bytes to reserve up front. Defaults to the active
            BuilderConfig.default_capacity. Only a performance hint; it
            never bounds growth or changes results.

    Raises:
        TypeError: If capacity is not an int
        ValueError: If capacity is negative

    """

    __slots__ = ("_buf", "_max_capacity", "_size")

    def __init__(self, capacity: int | None = None) -> None:
        config = get_builder_config()
        if capacity is None:
            capacity = config.default_capacity
        elif isinstance(capacity, bool) or not isinstance(capacity, int):
            msg = f"capacity must be int, got {type(capacity).__name__}"
            raise TypeError(msg)
        elif capacity < 0:
            msg = f"capacity must be non-negative, got {capacity}"
            raise ValueError(msg)

        self._max_capacity = config.max_capacity
        if self._max_capacity is not None:
            capacity = min(capacity, self._max_capacity)

        self._buf: bytearray | None = bytearray(capacity)
        self._size = 0

    def _open_buffer(self) -> bytearray:
        if self._buf is None:
            msg = "Builder was already consumed by build()"
            raise BuilderSpentError(msg)
        return self._buf

    def _grow(self, buf: bytearray, required: int) -> None:
        limit = self._max_capacity
        if limit is not None and required > limit:
            logger.warning(
                "Append needs %d bytes, over the %d byte max capacity",
                required,
                limit,
            )
            msg = f"Buffer cannot grow to {required} bytes (max capacity {limit})"
            raise WriteError(msg, requested=required, limit=limit)

        new_capacity = max(required, 2 * len(buf), MIN_GROWTH)
        if limit is not None:
            new_capacity = min(new_capacity, limit)

        try:
            buf.extend(bytes(new_capacity - len(buf)))
        except MemoryError as e:
            msg = f"Buffer cannot grow to {new_capacity} bytes"
            raise WriteError(msg, requested=required, limit=limit) from e

        logger.debug("Buffer grown to %d bytes", new_capacity)

    def append(self, value: Appendable) -> Builder:
        """Append a value's bytes to the end of the buffer.

        Either every byte of the value is written or none is.

        Args:
            value: str, Char, Byte, int in 0-255, bytes, bytearray or memoryview

        Returns:
            self for method chaining

        Raises:
            WriteError: If the buffer cannot grow to hold the bytes
            InvalidValueError: If the value has no byte representation
            TypeError: If the value is not appendable
            BuilderSpentError: If build() was already called

        Example:
            >>> b = Builder()
            >>> b.append("some string")
            Builder(len=11, capacity=1024)
        """
        buf = self._open_buffer()
        data = to_bytes(value)
        end = self._size + len(data)
        if end > len(buf):
            self._grow(buf, end)
        buf[self._size : end] = data
        self._size = end
        return self

    def extend(self, values: Iterable[Appendable]) -> Builder:
        """Append multiple values in order.

        Each value is appended on its own; a failure part way leaves the
        earlier values in place.

        Returns:
            self for method chaining
        """
        for value in values:
            self.append(value)
        return self

    def build(self) -> str:
        """Return the accumulated bytes as a str, consuming the builder.

        Returns:
            The decoded text, byte for byte

        Raises:
            InvalidEncodingError: If the bytes are not well-formed UTF-8.
                The error keeps the raw bytes and the first invalid index.
            BuilderSpentError: If build() was already called

        Example:
            >>> b = Builder()
            >>> b.extend(["i am building", " ", "a string"]).build()
            'i am building a string'
        """
        buf = self._open_buffer()
        self._buf = None
        del buf[self._size :]
        try:
            return buf.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug(
                "Rejected %d accumulated bytes: %s at index %d",
                len(buf),
                e.reason,
                e.start,
            )
            raise InvalidEncodingError.from_decode_error(bytes(buf), e) from e

    @property
    def capacity(self) -> int:
        """Bytes currently reserved, including unused space."""
        return len(self._open_buffer())

    @property
    def spent(self) -> bool:
        """True once build() has consumed the builder."""
        return self._buf is None

    def __len__(self) -> int:
        """Return number of accumulated bytes (not characters)."""
        self._open_buffer()
        return self._size

    def __repr__(self) -> str:
        if self._buf is None:
            return "Builder(spent)"
        return f"Builder(len={self._size}, capacity={len(self._buf)})"


__all__ = [
    "MIN_GROWTH",
    "Builder",
]
