"""Shared test fixtures and configuration for bencomp tests."""

import pytest
from pathlib import Path
import tempfile

from bencomp.algorithms.base import BenchmarkResult
from bencomp.core.random_source import RandomSource


class ForbiddenRandomSource(RandomSource):
    """Random source that fails the test if anything draws from it."""

    def randrange(self, start, stop):
        raise AssertionError(f"random source used for [{start}, {stop})")

    def randrange_many(self, start, stop, count):
        raise AssertionError(f"random source used for {count} draws from [{start}, {stop})")


class StaticBenchmarker:
    """Benchmarker returning canned results, one per call."""

    def __init__(self, name, results=None):
        self.name = name
        self.results = list(results or [])
        self.inputs = []

    def run_benchmark(self, data):
        self.inputs.append(data)
        if self.results:
            return self.results.pop(0)
        return make_result(self.name, compressed_size=len(data) // 2, ratio=0.5)


def make_result(name="codec", compress_time=0.0, decompress_time=0.0, compressed_size=0, ratio=0.0):
    return BenchmarkResult(
        name=name,
        compress_time=compress_time,
        decompress_time=decompress_time,
        compressed_size=compressed_size,
        ratio=ratio,
    )


@pytest.fixture(name="make_result")
def make_result_fixture():
    """Factory for BenchmarkResult records."""
    return make_result


@pytest.fixture
def static_benchmarker():
    """Factory for StaticBenchmarker instances."""
    return StaticBenchmarker


@pytest.fixture
def tmp_path():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng():
    """Seeded random source."""
    return RandomSource(seed=1234)


@pytest.fixture
def no_random():
    return ForbiddenRandomSource()


@pytest.fixture
def dictionary_file(tmp_path):
    """Dictionary with blank lines mixed in."""
    path = tmp_path / "words.txt"
    path.write_text(
        "alpha\n"
        "\n"
        "be\n"
        "gamma-delta\n"
        "\n"
        "x\n"
    )
    return path


@pytest.fixture
def input_file(tmp_path):
    """Small compressible file."""
    path = tmp_path / "input.txt"
    path.write_text("the quick brown fox jumps over the lazy dog\n" * 50)
    return path


# Test configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
