"""Exception classes for string_builder.

Provides standardized exceptions for error handling throughout string_builder.
"""

from __future__ import annotations


class StringBuilderError(Exception):
    """Base exception for all string_builder errors.

    Subclass this for specific error categories.
    """

    pass


class WriteError(StringBuilderError):
    """Error when the buffer cannot grow to hold an append.

    Raised when the configured maximum capacity would be exceeded or the
    allocation itself fails. Nothing from the failing append is written.
    """

    def __init__(
        self,
        message: str,
        requested: int | None = None,
        limit: int | None = None,
    ) -> None:
        """Initialize write error.

        Args:
            message: Error description
            requested: Total buffer size in bytes the append needed
            limit: Maximum capacity in effect (None when unbounded)
        """
        self.requested = requested
        self.limit = limit
        super().__init__(message)


class InvalidEncodingError(StringBuilderError, ValueError):
    """Error when accumulated bytes are not well-formed UTF-8.

    Raised by Builder.build(). The accumulated bytes are kept on the
    error so callers can inspect what was written.
    """

    def __init__(
        self,
        raw: bytes,
        valid_up_to: int,
        error_len: int | None,
        reason: str,
    ) -> None:
        """Initialize invalid encoding error.

        Args:
            raw: Every byte the builder accumulated
            valid_up_to: Index of the first byte that is not valid UTF-8
            error_len: Length of the invalid sequence, or None when the
                bytes end in the middle of a sequence
            reason: Decoder description (e.g., "invalid start byte")
        """
        self.raw = raw
        self.valid_up_to = valid_up_to
        self.error_len = error_len
        self.reason = reason

        if error_len is None:
            detail = f"incomplete utf-8 byte sequence from index {valid_up_to}"
        else:
            detail = (
                f"invalid utf-8 sequence of {error_len} bytes from index {valid_up_to}"
            )
        super().__init__(f"{detail} ({reason})")

    @classmethod
    def from_decode_error(cls, raw: bytes, exc: UnicodeDecodeError) -> InvalidEncodingError:
        """Build from the UnicodeDecodeError raised while decoding raw.

        The decoder reports "unexpected end of data" only when the bytes
        stop mid-sequence; that case has no error length.
        """
        if exc.reason == "unexpected end of data":
            error_len = None
        else:
            error_len = exc.end - exc.start
        return cls(raw, exc.start, error_len, exc.reason)


class InvalidValueError(StringBuilderError, ValueError):
    """Error when a value is outside its appendable variant's domain.

    Raised for bytes above 255, surrogate or out-of-range code points,
    and text containing lone surrogates.
    """

    pass


class BuilderSpentError(StringBuilderError, RuntimeError):
    """Error when a builder is used after build().

    build() hands the buffer to its result, so any later call is a
    programming error.
    """

    pass
