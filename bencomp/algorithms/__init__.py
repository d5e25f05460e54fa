import zlib
from typing import List

from bencomp.algorithms.base import (
    AggregatedResult,
    Benchmarker,
    BenchmarkResult,
    CompressionRunner,
)
from bencomp.algorithms.gzip_runner import GzipRunner
from bencomp.algorithms.zlib_runner import ZlibRunner
from bencomp.algorithms.zstd_runner import ZstdRunner


def default_benchmarkers() -> List[Benchmarker]:
    """The fixed, ordered set of codecs benchmarked by default."""
    return [
        GzipRunner(),
        ZlibRunner(zlib.Z_DEFAULT_COMPRESSION),
        ZlibRunner(zlib.Z_BEST_COMPRESSION),
        ZlibRunner(zlib.Z_BEST_SPEED),
        ZstdRunner(),
    ]


__all__ = [
    "AggregatedResult",
    "Benchmarker",
    "BenchmarkResult",
    "CompressionRunner",
    "GzipRunner",
    "ZlibRunner",
    "ZstdRunner",
    "default_benchmarkers",
]
