"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def mixed_fragments() -> list:
    """Text, characters, bytes and byte slices, ~100KB in total."""
    from string_builder import Byte, Char

    fragments: list = []
    for i in range(2000):
        fragments.append(f"Section {i}: ")
        fragments.append(Char("‘"))
        fragments.append("some text with a ünïcode word")
        fragments.append(Char("’"))
        fragments.append(Byte(0x2C))
        fragments.append(b" raw bytes\n")
    return fragments


@pytest.fixture
def encoded_fragments(mixed_fragments: list) -> list[bytes]:
    """mixed_fragments converted to bytes up front, for the baselines."""
    from string_builder import to_bytes

    return [to_bytes(f) for f in mixed_fragments]
