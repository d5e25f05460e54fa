"""Unit tests for the pipeline batch time estimate."""

import pytest

from bencomp.stats.pipeline import PipelineStage, batch_time, bottleneck_stage, stage_durations


@pytest.mark.parametrize(
    "name,size,c_time,d_time,n,speed,expected",
    [
        ("all times are equal", 10000, 100, 100, 100, 100, 100 + 100 + 100 * 100),
        ("compression is slowest", 10000, 250, 100, 100, 100, 100 + 100 + 250 * 100),
        ("network is slowest", 10000, 100, 100, 100, 10, 100 + 100 + 1000 * 100),
        ("decompression is slowest", 10000, 100, 400, 100, 100, 100 + 100 + 400 * 100),
    ],
)
def test_batch_time(make_result, name, size, c_time, d_time, n, speed, expected):
    result = make_result(compress_time=c_time, decompress_time=d_time, compressed_size=size)

    assert batch_time(result, n, speed) == expected


def test_zero_bandwidth_disables_estimate(make_result):
    result = make_result(compress_time=5, decompress_time=5, compressed_size=1000)

    assert batch_time(result, 10, 0) == 0.0


def test_ties_go_to_earliest_stage(make_result):
    equal = make_result(compress_time=100, decompress_time=100, compressed_size=10000)
    network_decompress_tie = make_result(compress_time=1, decompress_time=100, compressed_size=10000)

    assert bottleneck_stage(equal, 100) == PipelineStage.COMPRESS
    assert bottleneck_stage(network_decompress_tie, 100) == PipelineStage.NETWORK


def test_tie_break_changes_scaled_stage(make_result):
    # Network and decompress tie at 100; network must be the one scaled by n.
    result = make_result(compress_time=1, decompress_time=100, compressed_size=10000)

    assert batch_time(result, 10, 100) == 1 + 100 * 10 + 100


def test_stage_durations(make_result):
    result = make_result(compress_time=0.5, decompress_time=0.25, compressed_size=64_000)

    assert stage_durations(result, 128_000) == [
        (PipelineStage.COMPRESS, 0.5),
        (PipelineStage.NETWORK, 0.5),
        (PipelineStage.DECOMPRESS, 0.25),
    ]


def test_small_batches(make_result):
    result = make_result(compress_time=3, decompress_time=2, compressed_size=100)

    assert batch_time(result, 1, 100) == 3 + 1 + 2
    assert batch_time(result, 0, 100) == 1 + 2

    with pytest.raises(ValueError):
        batch_time(result, -1, 100)
