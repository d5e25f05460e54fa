"""Tests for result reporting."""

from rich.console import Console

from bencomp.core.config import ReportOptions
from bencomp.visualization.report import ResultReport, format_bytes, format_duration, format_ratio


def _render(results, options, input_size=2048, input_data=None):
    console = Console(record=True, width=200)
    ResultReport(console).render(results, input_size, options, input_data=input_data)
    return console.export_text()


def test_format_helpers():
    assert format_bytes(999) == "999.0000 B"
    assert format_bytes(128_000) == "128.0000 KB"
    assert format_bytes(2_500_000_000) == "2.5000 GB"
    assert format_ratio(0.1234) == "12.34%"
    assert format_duration(0) == "0s"
    assert format_duration(1.5) == "1.500s"
    assert format_duration(0.0025) == "2.500ms"
    assert format_duration(0.0000031) == "3.100µs"
    assert format_duration(2e-8) == "20ns"


def test_default_columns(make_result):
    results = [make_result("gzip", 0.001, 0.002, 512, 0.25), make_result("zstd", 0.001, 0.001, 480, 0.2)]

    text = _render(results, ReportOptions())

    assert "Original data size: 2.0480 KB" in text
    for header in ("Compression-Library", "Total-Time", "Compressed-Size", "Ratio"):
        assert header in text
    assert "Compression-Time" not in text
    assert "Payloads" not in text
    assert "gzip" in text and "zstd" in text
    assert "25.00%" in text
    assert "3.000ms" in text


def test_optional_columns(make_result):
    results = [make_result("gzip", compress_time=2.0, decompress_time=1.0, compressed_size=1000, ratio=0.5)]
    options = ReportOptions(
        show_compress_time=True,
        show_decompress_time=True,
        network_bandwidth=1000,
        network_payloads=10,
    )

    text = _render(results, options)

    assert "Compression-Time" in text
    assert "Decompression-Time" in text
    assert "10-Payloads" in text
    # compress is the bottleneck: 2 * 10 + 1 + 1
    assert "22.000s" in text


def test_show_input(make_result):
    text = _render([make_result("gzip")], ReportOptions(show_input=True), input_size=9, input_data=b'{"a":"[b]"}')

    assert "Input data:" in text
    assert '{"a":"[b]"}' in text


def test_report_creates_console_when_none_given():
    assert isinstance(ResultReport().console, Console)
    assert isinstance(ResultReport(None).console, Console)
