"""Benchmark Builder against bytes concatenation and io.BytesIO.

Run with:
    pytest benchmarks/benchmark_vs_concat.py -v --benchmark-only
"""

import io

import pytest

from string_builder import Builder


@pytest.mark.benchmark(group="mixed-fragments")
def test_benchmark_builder(benchmark, mixed_fragments):
    """Builder with the default capacity."""

    def build_all():
        return Builder().extend(mixed_fragments).build()

    result = benchmark(build_all)
    assert result.endswith(" raw bytes\n")


@pytest.mark.benchmark(group="mixed-fragments")
def test_benchmark_builder_presized(benchmark, mixed_fragments, encoded_fragments):
    """Builder reserving the exact final size."""
    size = sum(len(f) for f in encoded_fragments)

    def build_all():
        return Builder(size).extend(mixed_fragments).build()

    benchmark(build_all)


@pytest.mark.benchmark(group="pre-encoded")
def test_benchmark_builder_bytes(benchmark, encoded_fragments):
    """Builder fed only raw bytes."""

    def build_all():
        b = Builder(0)
        for fragment in encoded_fragments:
            b.append(fragment)
        return b.build()

    benchmark(build_all)


@pytest.mark.benchmark(group="pre-encoded")
def test_benchmark_bytes_concat(benchmark, encoded_fragments):
    """Repeated bytes concatenation."""

    def build_all():
        out = b""
        for fragment in encoded_fragments:
            out += fragment
        return out.decode("utf-8")

    benchmark(build_all)


@pytest.mark.benchmark(group="pre-encoded")
def test_benchmark_bytesio(benchmark, encoded_fragments):
    """io.BytesIO writes."""

    def build_all():
        buf = io.BytesIO()
        for fragment in encoded_fragments:
            buf.write(fragment)
        return buf.getvalue().decode("utf-8")

    benchmark(build_all)
