"""Unit tests for trial aggregation."""

import pytest

from bencomp.stats.aggregate import aggregate_results, median


def test_median_odd_and_even():
    assert median([3, 1, 2]) == 2
    assert median([4, 1, 3, 2]) == 2.5
    assert median([7]) == 7

    with pytest.raises(ValueError):
        median([])


def test_independent_per_metric_medians(make_result):
    trials = [
        [make_result("gzip", compress_time=10, decompress_time=20)],
        [make_result("gzip", compress_time=30, decompress_time=0)],
        [make_result("gzip", compress_time=20, decompress_time=10)],
    ]

    (result,) = aggregate_results(trials)

    assert result.compress_time == 20
    assert result.decompress_time == 10


def test_result_is_a_composite(make_result):
    trials = [
        [make_result("zstd", compress_time=1, decompress_time=9, compressed_size=50, ratio=0.5)],
        [make_result("zstd", compress_time=5, decompress_time=1, compressed_size=10, ratio=0.1)],
        [make_result("zstd", compress_time=9, decompress_time=5, compressed_size=30, ratio=0.9)],
    ]

    (result,) = aggregate_results(trials)

    assert (result.compress_time, result.decompress_time, result.compressed_size, result.ratio) == (5, 5, 30, 0.5)
    assert all(result != trial[0] for trial in trials)


def test_even_trial_count_averages_middle_values(make_result):
    trials = [
        [make_result("a", compress_time=1.0, compressed_size=10, ratio=0.2)],
        [make_result("a", compress_time=4.0, compressed_size=11, ratio=0.4)],
    ]

    (result,) = aggregate_results(trials)

    assert result.compress_time == 2.5
    assert result.ratio == pytest.approx(0.3)
    # Sizes stay integral; the half is floored.
    assert result.compressed_size == 10
    assert isinstance(result.compressed_size, int)


def test_order_and_names_follow_first_trial(make_result):
    trials = [
        [make_result("gzip", compress_time=1), make_result("zstd", compress_time=2)],
        # Positional alignment is trusted; names in later trials are ignored.
        [make_result("other", compress_time=3), make_result("names", compress_time=4)],
    ]

    results = aggregate_results(trials)

    assert [r.name for r in results] == ["gzip", "zstd"]
    assert [r.compress_time for r in results] == [2.0, 3.0]


def test_empty_trials_yield_no_results(make_result):
    assert aggregate_results([]) == []
    assert aggregate_results([[], []]) == []


def test_mismatched_trial_lengths(make_result):
    trials = [[make_result("a"), make_result("b")], [make_result("a")]]

    with pytest.raises(ValueError, match="trial 1"):
        aggregate_results(trials)


def test_single_trial_is_returned_as_is(make_result):
    original = make_result("gzip", compress_time=0.25, decompress_time=0.5, compressed_size=123, ratio=0.4)

    assert aggregate_results([[original]]) == [original]


def test_every_metric_goes_through_median(make_result, monkeypatch):
    seen = []

    def recording_median(values):
        seen.append(list(values))
        return median(values)

    monkeypatch.setattr("bencomp.stats.aggregate.median", recording_median)
    trials = [
        [make_result("a", compress_time=1.0, decompress_time=2.0, compressed_size=10, ratio=0.1)],
        [make_result("a", compress_time=3.0, decompress_time=4.0, compressed_size=11, ratio=0.3)],
    ]

    [result] = aggregate_results(trials)

    assert seen == [[1.0, 3.0], [2.0, 4.0], [10, 11], [0.1, 0.3]]
    assert result.compressed_size == 10
    assert result.compress_time == 2.0
