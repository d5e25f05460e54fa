"""
Reduction of repeated benchmark trials to one result per algorithm.

Each metric is reduced to its median independently of the others, so an
aggregated result is a composite: its timings and size need not come from
the same trial.
"""

from typing import List, Sequence

import numpy as np

from bencomp.algorithms.base import AggregatedResult, BenchmarkResult


def median(values: Sequence[float]) -> float:
    """Median; the mean of the two middle values for even-length input."""
    if len(values) == 0:
        raise ValueError("median of an empty sequence")
    return float(np.median(np.asarray(values, dtype=float)))


def aggregate_results(
    trials: Sequence[Sequence[BenchmarkResult]],
) -> List[AggregatedResult]:
    """Collapse N trials of M algorithms into M median results.

    Args:
        trials: One list of results per trial. Every trial must list the
            algorithms in the same order as the first one; results are
            matched by position, not by name.

    Returns:
        One aggregated result per algorithm, in the first trial's order.
        Empty when there are no trials.

    Raises:
        ValueError: If a trial has a different number of results than the first
    """
    if not trials:
        return []

    width = len(trials[0])
    for index, trial in enumerate(trials):
        if len(trial) != width:
            raise ValueError(
                f"trial {index} has {len(trial)} results, expected {width}"
            )
    if width == 0:
        return []

    aggregated = []
    for i, result in enumerate(trials[0]):
        column = [trial[i] for trial in trials]
        aggregated.append(
            AggregatedResult(
                name=result.name,
                compress_time=median([r.compress_time for r in column]),
                decompress_time=median([r.decompress_time for r in column]),
                # Sizes stay integral: an even-length median is floored.
                compressed_size=int(np.floor(median([r.compressed_size for r in column]))),
                ratio=median([r.ratio for r in column]),
            )
        )
    return aggregated
