import pytest

from algosolve.numbers import (
    Statistics,
    primes_between,
    self_numbers,
    statistics,
    trimmed_mean,
)


def test_trimmed_mean_no_opinions():
    assert trimmed_mean([]) == 0


def test_trimmed_mean_constant():
    assert trimmed_mean([13] * 9) == 13


def test_trimmed_mean_rounds_trim_half_up():
    # 30 values: 15% is 4.5, which must round up to 5 per side.
    opinions = [1] * 5 + [10] * 20 + [30] * 5
    assert trimmed_mean(opinions) == 10


def test_trimmed_mean_order_independent():
    opinions = [1, 5, 5, 7, 8, 30, 2]
    assert trimmed_mean(opinions) == trimmed_mean(sorted(opinions, reverse=True))


def test_statistics_single_value():
    assert statistics([-4]) == Statistics(mean=-4, median=-4, mode=-4, spread=0)


def test_statistics_second_smallest_mode():
    assert statistics([4, 4, 2, 2, 9]).mode == 4


def test_statistics_median_and_spread():
    result = statistics([8, -2, 3, 1, 2])
    assert result.median == 2
    assert result.spread == 8 - (-2)


def test_statistics_empty():
    with pytest.raises(ValueError):
        statistics([])


def test_primes_small_range():
    assert primes_between(1, 10) == [2, 3, 5, 7]


def test_primes_are_prime_and_complete():
    found = primes_between(50, 200)
    for n in range(50, 201):
        is_prime = all(n % d for d in range(2, n))
        assert (n in found) == is_prime


def test_primes_empty_ranges():
    assert primes_between(0, 1) == []
    assert primes_between(20, 10) == []


def test_self_numbers_start():
    assert self_numbers(20) == [1, 3, 5, 7, 9, 20]


def test_generated_numbers_excluded():
    found = set(self_numbers(300))
    for n in range(1, 200):
        assert n + sum(map(int, str(n))) not in found


def test_self_numbers_prefix_stable():
    big = self_numbers(10000)
    assert [n for n in big if n <= 500] == self_numbers(500)