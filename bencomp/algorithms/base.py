"""Benchmark result record and the shared compress/decompress timing harness."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    """Measurements of one algorithm on one input.

    Attributes:
        name: Algorithm label shown in reports
        compress_time: Seconds spent compressing
        decompress_time: Seconds spent decompressing
        compressed_size: Compressed payload size in bytes
        ratio: Compressed size divided by original size
    """

    name: str
    compress_time: float
    decompress_time: float
    compressed_size: int
    ratio: float

    @property
    def total_time(self) -> float:
        return self.compress_time + self.decompress_time


# Aggregated results share the record shape; each field is a per-metric median.
AggregatedResult = BenchmarkResult


@runtime_checkable
class Benchmarker(Protocol):
    name: str

    def run_benchmark(self, data: bytes) -> BenchmarkResult:
        ...


class CompressionRunner(ABC):
    """Times one compress/decompress round trip of a codec.

    Subclasses implement ``compress`` and ``decompress``; ``run_benchmark``
    measures both with ``time.perf_counter`` and checks that the round trip
    reproduces the input.
    """

    name: str = "codec"

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        raise NotImplementedError

    def run_benchmark(self, data: bytes) -> BenchmarkResult:
        start = time.perf_counter()
        compressed = self.compress(data)
        compress_time = time.perf_counter() - start

        start = time.perf_counter()
        restored = self.decompress(compressed)
        decompress_time = time.perf_counter() - start

        if restored != data:
            raise RuntimeError(f"{self.name}: decompressed output does not match input")

        result = BenchmarkResult(
            name=self.name,
            compress_time=compress_time,
            decompress_time=decompress_time,
            compressed_size=len(compressed),
            ratio=len(compressed) / len(data) if data else 0.0,
        )
        logger.debug(
            f"{self.name}: {len(data)} -> {result.compressed_size} bytes "
            f"(c={compress_time:.6f}s, d={decompress_time:.6f}s)"
        )
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
