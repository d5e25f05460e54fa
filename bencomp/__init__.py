__version__ = "0.1.0"

from bencomp.algorithms import (
    AggregatedResult,
    Benchmarker,
    BenchmarkResult,
    GzipRunner,
    ZlibRunner,
    ZstdRunner,
    default_benchmarkers,
)
from bencomp.core.config import ReportOptions, ShapeConfig, StringSource, StringSourceKind
from bencomp.core.errors import BencompError, ConfigurationError, GenerationError, InputError
from bencomp.core.io import load_config, read_input_file, save_config, serialize_tree
from bencomp.core.random_source import RandomSource
from bencomp.core.ranges import IntRange, parse_bandwidth, parse_range
from bencomp.generation.strings import (
    FileDictionary,
    GeneratedDictionary,
    RandomStrings,
    StringProvider,
    build_string_provider,
)
from bencomp.generation.tree import TreeGenerator, TreeNode, generate_tree
from bencomp.runner import BenchmarkRunner, FileInput, GeneratedInput, run_benchmark
from bencomp.stats.aggregate import aggregate_results
from bencomp.stats.pipeline import batch_time

__all__ = [
    # Generation
    "ShapeConfig",
    "StringSource",
    "StringSourceKind",
    "IntRange",
    "RandomSource",
    "StringProvider",
    "RandomStrings",
    "GeneratedDictionary",
    "FileDictionary",
    "build_string_provider",
    "TreeNode",
    "TreeGenerator",
    "generate_tree",
    # Benchmarking
    "Benchmarker",
    "BenchmarkResult",
    "AggregatedResult",
    "GzipRunner",
    "ZlibRunner",
    "ZstdRunner",
    "default_benchmarkers",
    "BenchmarkRunner",
    "FileInput",
    "GeneratedInput",
    "run_benchmark",
    # Statistics
    "aggregate_results",
    "batch_time",
    # Configuration & I/O
    "ReportOptions",
    "parse_range",
    "parse_bandwidth",
    "read_input_file",
    "serialize_tree",
    "save_config",
    "load_config",
    # Errors
    "BencompError",
    "ConfigurationError",
    "GenerationError",
    "InputError",
    # Metadata
    "__version__",
]
