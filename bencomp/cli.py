"""bencomp command-line interface."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from bencomp.core.config import (
    DEFAULT_MAX_DEPTH,
    resolve_report_options,
    resolve_shape_config,
    validate_trial_count,
)
from bencomp.core.errors import BencompError, ConfigurationError
from bencomp.core.io import load_config, save_config
from bencomp.core.random_source import RandomSource
from bencomp.runner import BenchmarkRunner, FileInput, GeneratedInput, InputSource
from bencomp.visualization.report import ResultReport

app = typer.Typer(
    name="bencomp",
    help="Utility for comparing compression performance",
    add_completion=False,
)
console = Console()


@app.command()
def bench(
    rand_gen: bool = typer.Option(False, "--rand-gen", "-r", help="Randomly generate JSON input for benchmarking"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="File to be used for compression benchmarking"),
    num_fields: Optional[int] = typer.Option(None, "--json-num-fields", help="Fixed number of fields in each JSON node"),
    num_fields_range: Optional[str] = typer.Option(None, "--json-num-fields-range", help="Min and max number of fields in each JSON node, e.g. 2-5"),
    max_depth: int = typer.Option(DEFAULT_MAX_DEPTH, "--json-max-depth", help="Maximum depth of the JSON tree"),
    degree: Optional[int] = typer.Option(None, "--json-degree", help="Fixed number of children of each JSON node"),
    degree_range: Optional[str] = typer.Option(None, "--json-degree-range", help="Min and max number of children of each JSON node"),
    str_len: Optional[int] = typer.Option(None, "--json-str-len", help="Fixed number of characters in each JSON string [default: 16]"),
    str_len_range: Optional[str] = typer.Option(None, "--json-str-len-range", help="Min and max number of characters in JSON strings"),
    dict_file: Optional[Path] = typer.Option(None, "--json-dict-file", help="File of words (one per line) to use as JSON strings"),
    dict_size: Optional[int] = typer.Option(None, "--json-dict-size", help="Number of random words to generate as a dictionary"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Load the JSON shape (and seed) from a saved config"),
    save_config_file: Optional[Path] = typer.Option(None, "--save-config", help="Save the resolved JSON shape and seed"),
    show_input: bool = typer.Option(False, "--show-input", help="Print the input used for benchmarking"),
    network_bandwidth: Optional[str] = typer.Option(None, "--network-bandwidth", help="Bytes (not bits) per second on the wire, e.g. 128KB"),
    network_payloads: Optional[int] = typer.Option(None, "--network-payloads", help="Number of payloads in the system performance estimate"),
    show_compress_time: bool = typer.Option(False, "--show-compress-time", help="Display compression time in a separate column"),
    show_decompress_time: bool = typer.Option(False, "--show-decompress-time", help="Display decompression time in a separate column"),
    count: int = typer.Option(1, "--count", "-c", help="Repeat the benchmark and report median values"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible input generation"),
    verbose: bool = typer.Option(False, "--verbose", help="Log progress"),
):
    """Run gzip, three zlib levels and zstd, then report performance statistics.

    Benchmark either a specific file or a randomly generated JSON tree.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        validate_trial_count(count)
        options = resolve_report_options(
            network_bandwidth=network_bandwidth,
            network_payloads=network_payloads,
            show_input=show_input,
            show_compress_time=show_compress_time,
            show_decompress_time=show_decompress_time,
        )
        source = _resolve_source(
            rand_gen=rand_gen,
            file=file,
            config_file=config_file,
            save_config_file=save_config_file,
            seed=seed,
            num_fields=num_fields,
            num_fields_range=num_fields_range,
            max_depth=max_depth,
            degree=degree,
            degree_range=degree_range,
            str_len=str_len,
            str_len_range=str_len_range,
            dict_file=dict_file,
            dict_size=dict_size,
        )
        run = BenchmarkRunner(source, count=count).run()
    except BencompError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    ResultReport(console).render(run.results, len(run.input_data), options, input_data=run.input_data)


def _resolve_source(
    rand_gen: bool,
    file: Optional[Path],
    config_file: Optional[Path],
    save_config_file: Optional[Path],
    seed: Optional[int],
    **shape_options,
) -> InputSource:
    if rand_gen and file is not None:
        raise ConfigurationError("options --rand-gen and --file are mutually exclusive")
    if not rand_gen and file is None:
        raise ConfigurationError("one of --rand-gen or --file is required")

    if file is not None:
        return FileInput(file)

    if config_file is not None:
        config, saved_seed = load_config(config_file)
        if seed is None:
            seed = saved_seed
    else:
        config = resolve_shape_config(**shape_options)

    if seed is not None and seed < 0:
        raise ConfigurationError("value for --seed must be 0 or greater")

    if save_config_file is not None:
        save_config(config, save_config_file, seed=seed)
        console.print(f"[bold green]✓[/bold green] Config saved to {save_config_file}")

    return GeneratedInput(config, RandomSource(seed))


def main():
    app()


if __name__ == "__main__":
    main()
