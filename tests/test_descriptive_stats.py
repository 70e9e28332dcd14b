import pytest

from flashfreq.descriptive_stats import compute_stats, round_half_up


def test_empty_input():
    assert compute_stats([]) is None


def test_median_even_length():
    assert compute_stats([1, 2, 3, 4]).median == 2.5


def test_median_odd_length():
    assert compute_stats([1, 2, 3]).median == 2


def test_median_unsorted_input():
    assert compute_stats([9, 1, 5]).median == 5


def test_mean():
    assert compute_stats([1, 1, 1, 2]).mean == 1.25


def test_mean_rounded_to_two_places():
    assert compute_stats([10, 20, 25]).mean == 18.33


def test_min_max():
    stats = compute_stats([3.5, -2, 10, 0])
    assert stats.min == -2
    assert stats.max == 10


def test_single_value():
    stats = compute_stats([7])
    assert (stats.min, stats.max, stats.mean, stats.median) == (7, 7, 7, 7)


def test_caller_sequence_not_mutated():
    values = [3.0, 1.0, 2.0]
    compute_stats(values)
    assert values == [3.0, 1.0, 2.0]


@pytest.mark.parametrize("value, expected", [
    (1.005, 1.01),
    (2.345, 2.35),
    (-2.345, -2.35),
    (0.125, 0.13),
    (1.25, 1.25),
    (1.0049, 1.0),
    (3, 3.0),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_round_half_up_places():
    assert round_half_up(2.5, 0) == 3.0
    assert round_half_up(1.2345, 3) == 1.235


def test_mean_and_median_use_half_up_rounding():
    stats = compute_stats([1.005])
    assert stats.mean == 1.01
    assert stats.median == 1.01
    # extrema are not rounded
    assert stats.min == 1.005
