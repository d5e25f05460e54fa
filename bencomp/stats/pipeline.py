"""
Batch time estimate for a compress -> transmit -> decompress pipeline.

With the three stages overlapped, steady-state throughput is gated by the
slowest stage, which runs once per payload; the other two stages only add
their fill and drain latency. For ``n`` payloads::

    total = bottleneck * n + (sum of the other two stages)

This is an approximation that assumes every payload takes the same time in
each stage.
"""

from enum import Enum
from typing import List, Tuple

from bencomp.algorithms.base import BenchmarkResult


class PipelineStage(str, Enum):
    COMPRESS = "compress"
    NETWORK = "network"
    DECOMPRESS = "decompress"


def stage_durations(result: BenchmarkResult, bandwidth: int) -> List[Tuple[PipelineStage, float]]:
    """Per-payload stage durations in seconds, in pipeline order."""
    network_time = result.compressed_size / bandwidth if bandwidth else 0.0
    return [
        (PipelineStage.COMPRESS, result.compress_time),
        (PipelineStage.NETWORK, network_time),
        (PipelineStage.DECOMPRESS, result.decompress_time),
    ]


def bottleneck_stage(result: BenchmarkResult, bandwidth: int) -> PipelineStage:
    """Slowest stage; on ties the earliest stage in pipeline order wins."""
    stages = stage_durations(result, bandwidth)
    slowest = 0
    for i in range(1, len(stages)):
        if stages[i][1] > stages[slowest][1]:
            slowest = i
    return stages[slowest][0]


def batch_time(result: BenchmarkResult, n: int, bandwidth: int) -> float:
    """Estimated seconds to push ``n`` payloads through the pipeline.

    Args:
        result: Per-payload measurements (usually an aggregated result)
        n: Number of payloads
        bandwidth: Network bandwidth in bytes per second; 0 means the
            network is not modeled and the estimate is 0

    Returns:
        Estimated wall-clock time in seconds
    """
    if n < 0:
        raise ValueError(f"number of payloads must be 0 or greater, got {n}")
    if bandwidth == 0:
        return 0.0

    slowest = bottleneck_stage(result, bandwidth)
    total = 0.0
    for stage, duration in stage_durations(result, bandwidth):
        total += duration * n if stage == slowest else duration
    return total
