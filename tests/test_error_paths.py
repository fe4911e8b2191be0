"""Error-path tests.

Exercises exception construction, formatting and hierarchy, and the
paths in Builder that raise them.
"""

import pytest

from string_builder import (
    Builder,
    BuilderConfig,
    BuilderSpentError,
    InvalidEncodingError,
    InvalidValueError,
    StringBuilderError,
    WriteError,
    builder_config_context,
)

# =========================================================================
# InvalidEncodingError construction and formatting
# =========================================================================


class TestInvalidEncodingErrorFormatting:
    """Verify InvalidEncodingError produces well-formatted messages."""

    def test_invalid_sequence(self) -> None:
        err = InvalidEncodingError(b"ab\x80", 2, 1, "invalid start byte")
        assert str(err) == "invalid utf-8 sequence of 1 bytes from index 2 (invalid start byte)"

    def test_incomplete_sequence(self) -> None:
        err = InvalidEncodingError(b"\xe2\x80", 0, None, "unexpected end of data")
        assert "incomplete utf-8 byte sequence from index 0" in str(err)

    def test_from_decode_error(self) -> None:
        raw = b"ok\xe2\x28\xa1"
        with pytest.raises(UnicodeDecodeError) as exc_info:
            raw.decode("utf-8")
        err = InvalidEncodingError.from_decode_error(raw, exc_info.value)
        assert err.valid_up_to == 2
        assert err.error_len == 1
        assert err.reason == "invalid continuation byte"
        assert err.raw is raw

    def test_from_decode_error_at_end(self) -> None:
        raw = b"\xf0\x90"
        with pytest.raises(UnicodeDecodeError) as exc_info:
            raw.decode("utf-8")
        err = InvalidEncodingError.from_decode_error(raw, exc_info.value)
        assert err.error_len is None

    def test_hierarchy(self) -> None:
        err = InvalidEncodingError(b"", 0, 1, "x")
        assert isinstance(err, StringBuilderError)
        assert isinstance(err, ValueError)


# =========================================================================
# WriteError
# =========================================================================


class TestWriteError:
    """Verify WriteError attributes and the max capacity path."""

    def test_attributes(self) -> None:
        err = WriteError("full", requested=10, limit=8)
        assert str(err) == "full"
        assert err.requested == 10
        assert err.limit == 8
        assert isinstance(err, StringBuilderError)

    def test_max_capacity_exceeded(self) -> None:
        with builder_config_context(BuilderConfig(max_capacity=8)):
            b = Builder()
        b.append("1234")
        with pytest.raises(WriteError) as exc_info:
            b.append("56789")
        assert exc_info.value.requested == 9
        assert exc_info.value.limit == 8

    def test_failed_append_writes_nothing(self) -> None:
        with builder_config_context(BuilderConfig(max_capacity=8)):
            b = Builder(0)
        b.append("1234")
        with pytest.raises(WriteError):
            b.append("56789")
        assert len(b) == 4
        assert b.append("5678").build() == "12345678"

    def test_capacity_hint_clamped_to_max(self) -> None:
        with builder_config_context(BuilderConfig(max_capacity=8)):
            b = Builder(100)
        assert b.capacity == 8

    def test_growth_stops_at_max(self) -> None:
        with builder_config_context(BuilderConfig(max_capacity=100)):
            b = Builder(60)
        b.append(b"a" * 61)
        assert b.capacity == 100

    def test_exceeding_max_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with builder_config_context(BuilderConfig(max_capacity=2)):
            b = Builder()
        with caplog.at_level("WARNING", logger="string_builder"):
            with pytest.raises(WriteError):
                b.append("abc")
        assert "over the 2 byte max capacity" in caplog.text

    def test_memory_error_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import string_builder.builder as builder_module

        def fail(size: int) -> bytes:
            raise MemoryError

        b = Builder(0)
        monkeypatch.setattr(builder_module, "bytes", fail, raising=False)
        with pytest.raises(WriteError) as exc_info:
            b.append("x")
        assert isinstance(exc_info.value.__cause__, MemoryError)
        monkeypatch.undo()
        assert len(b) == 0


# =========================================================================
# InvalidValueError and BuilderSpentError
# =========================================================================


class TestOtherErrors:
    """Hierarchy of the remaining error classes."""

    def test_invalid_value_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Builder().append(300)
        assert issubclass(InvalidValueError, StringBuilderError)

    def test_spent_is_runtime_error(self) -> None:
        b = Builder()
        b.build()
        with pytest.raises(RuntimeError):
            b.build()
        assert issubclass(BuilderSpentError, StringBuilderError)

    def test_catch_all(self) -> None:
        """Every builder failure can be caught as StringBuilderError."""
        with builder_config_context(BuilderConfig(max_capacity=1)):
            b = Builder()
        for action in (
            lambda: b.append(256),
            lambda: b.append("ab"),
        ):
            with pytest.raises(StringBuilderError):
                action()
