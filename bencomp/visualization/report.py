from typing import Callable, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from bencomp.algorithms.base import AggregatedResult
from bencomp.core.config import ReportOptions
from bencomp.stats.pipeline import batch_time

BYTE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_bytes(size: float) -> str:
    """Human-readable size with decimal (1000-based) units."""
    unit = 0
    value = float(size)
    while value >= 1000 and unit < len(BYTE_UNITS) - 1:
        value /= 1000
        unit += 1
    return f"{value:.4f} {BYTE_UNITS[unit]}"


def format_ratio(ratio: float) -> str:
    return f"{ratio * 100.0:.2f}%"


def format_duration(seconds: float) -> str:
    if seconds == 0:
        return "0s"
    magnitude = abs(seconds)
    if magnitude >= 1:
        return f"{seconds:.3f}s"
    if magnitude >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    if magnitude >= 1e-6:
        return f"{seconds * 1e6:.3f}µs"
    return f"{seconds * 1e9:.0f}ns"


Column = Tuple[str, Callable[[AggregatedResult], str]]


class ResultReport:
    """Prints aggregated benchmark results as a table."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def columns(self, options: ReportOptions) -> List[Column]:
        cols: List[Column] = [("Compression-Library", lambda r: r.name)]
        if options.show_compress_time:
            cols.append(("Compression-Time", lambda r: format_duration(r.compress_time)))
        if options.show_decompress_time:
            cols.append(("Decompression-Time", lambda r: format_duration(r.decompress_time)))
        cols.append(("Total-Time", lambda r: format_duration(r.total_time)))
        cols.append(("Compressed-Size", lambda r: format_bytes(r.compressed_size)))
        cols.append(("Ratio", lambda r: format_ratio(r.ratio)))
        if options.network_bandwidth:
            n = options.network_payloads
            bandwidth = options.network_bandwidth
            cols.append((
                f"{n}-Payloads",
                lambda r: format_duration(batch_time(r, n, bandwidth)),
            ))
        return cols

    def build_table(self, results: Sequence[AggregatedResult], options: ReportOptions) -> Table:
        cols = self.columns(options)
        table = Table(show_header=True, box=None, pad_edge=False)
        for i, (title, _) in enumerate(cols):
            table.add_column(title, style="green" if i == 0 else None, justify="left" if i == 0 else "right")

        for result in results:
            table.add_row(*(render(result) for _, render in cols))
        return table

    def render(
        self,
        results: Sequence[AggregatedResult],
        input_size: int,
        options: Optional[ReportOptions] = None,
        input_data: Optional[bytes] = None,
    ) -> None:
        options = options or ReportOptions()

        if options.show_input and input_data is not None:
            self.console.print("[bold cyan]Input data:[/bold cyan]")
            self.console.print(input_data.decode("utf-8", errors="replace"), markup=False, highlight=False, soft_wrap=True)

        self.console.print(f"Original data size: {format_bytes(input_size)}")
        self.console.print(self.build_table(results, options))
