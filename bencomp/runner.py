"""
Trial orchestration: acquire input, run every codec, aggregate medians.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from bencomp.algorithms import default_benchmarkers
from bencomp.algorithms.base import AggregatedResult, Benchmarker, BenchmarkResult
from bencomp.core.config import ShapeConfig, validate_trial_count
from bencomp.core.errors import InputError
from bencomp.core.io import read_input_file, serialize_tree
from bencomp.core.random_source import RandomSource
from bencomp.generation.strings import StringProvider, build_string_provider
from bencomp.generation.tree import TreeGenerator
from bencomp.stats.aggregate import aggregate_results

logger = logging.getLogger(__name__)


class InputSource(ABC):
    """Supplies the bytes handed to every codec in a trial."""

    def setup(self) -> None:
        """One-time preparation before the first trial."""

    @abstractmethod
    def read(self) -> bytes:
        raise NotImplementedError


class FileInput(InputSource):
    """Literal file contents, re-read for every trial."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> bytes:
        return read_input_file(self.path)


class GeneratedInput(InputSource):
    """A freshly generated tree, serialized as JSON, for every trial.

    The string provider is built once in ``setup`` and shared by all trials,
    so a dictionary file is read only once per run.
    """

    def __init__(self, config: ShapeConfig, rng: Optional[RandomSource] = None):
        self.config = config.validate()
        self.rng = rng or RandomSource()
        self.provider: Optional[StringProvider] = None

    def setup(self) -> None:
        if self.provider is None:
            self.provider = build_string_provider(self.config, self.rng)

    def read(self) -> bytes:
        self.setup()
        tree = TreeGenerator(self.config, self.provider, self.rng).generate()
        return serialize_tree(tree)


@dataclass
class BenchmarkRun:
    """Outcome of a full run.

    Attributes:
        results: One aggregated result per codec
        trials: Raw per-trial results
        input_data: Input used by the last trial
    """

    results: List[AggregatedResult]
    trials: List[List[BenchmarkResult]] = field(default_factory=list)
    input_data: bytes = b""


class BenchmarkRunner:
    """Runs ``count`` sequential trials of every benchmarker on one input source."""

    def __init__(
        self,
        source: InputSource,
        benchmarkers: Optional[Sequence[Benchmarker]] = None,
        count: int = 1,
    ):
        self.count = validate_trial_count(count)
        self.source = source
        self.benchmarkers = list(benchmarkers) if benchmarkers is not None else default_benchmarkers()

    def run_trial(self, data: bytes) -> List[BenchmarkResult]:
        return [benchmarker.run_benchmark(data) for benchmarker in self.benchmarkers]

    def run(self) -> BenchmarkRun:
        """Run every trial, then aggregate.

        Any error aborts the whole run; no partial aggregate is produced.

        Raises:
            GenerationError: If generated input cannot be produced
            InputError: If a trial's input is empty or unreadable
        """
        self.source.setup()

        trials: List[List[BenchmarkResult]] = []
        data = b""
        for trial in range(self.count):
            data = self.source.read()
            if not data:
                raise InputError("there is nothing to compress")

            logger.info(f"Trial {trial + 1}/{self.count}: {len(data)} bytes, {len(self.benchmarkers)} codecs")
            trials.append(self.run_trial(data))

        return BenchmarkRun(results=aggregate_results(trials), trials=trials, input_data=data)


def run_benchmark(
    source: InputSource,
    count: int = 1,
    benchmarkers: Optional[Sequence[Benchmarker]] = None,
) -> BenchmarkRun:
    """Convenience wrapper around :class:`BenchmarkRunner`."""
    return BenchmarkRunner(source, benchmarkers=benchmarkers, count=count).run()
