import statistics
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from codekata.optimize import (
    can_make_bouquets,
    find_maximized_capital,
    find_median_sorted_arrays,
    max_profit_assignment,
    max_satisfied,
    min_days,
    min_patches,
    number_of_subarrays,
    three_sum,
)

ints = st.integers(min_value=-1000, max_value=1000)


@given(st.lists(ints, min_size=1, max_size=20), st.lists(ints, max_size=20))
def test_median_matches_statistics(first, second):
    expected = statistics.median(first + second)
    assert find_median_sorted_arrays(sorted(first), sorted(second)) == expected
    assert find_median_sorted_arrays(sorted(second), sorted(first)) == expected


def test_median_of_nothing():
    assert find_median_sorted_arrays([], []) == 0.0


def test_min_patches_example():
    assert min_patches([1, 3], 6) == 1


@given(st.integers(min_value=0, max_value=30))
def test_min_patches_from_nothing_needs_powers_of_two(bits):
    assert min_patches([], 2**bits - 1) == bits


@given(st.integers(min_value=0, max_value=50))
def test_min_patches_ones_cover_everything(n):
    assert min_patches([1] * n, n) == 0


def test_find_maximized_capital_example():
    assert find_maximized_capital(2, 0, [1, 2, 3], [0, 1, 1]) == 4


@given(st.integers(min_value=0, max_value=100), st.lists(st.integers(0, 50), max_size=10))
def test_no_projects_run_keeps_capital(w, profits):
    assert find_maximized_capital(0, w, profits, [0] * len(profits)) == w


@given(st.lists(st.integers(0, 50), min_size=1, max_size=10))
def test_unaffordable_projects_keep_capital(profits):
    assert find_maximized_capital(5, 3, profits, [4] * len(profits)) == 3


@given(st.lists(st.integers(0, 50), max_size=10), st.integers(min_value=0, max_value=100))
def test_all_affordable_projects_are_run(profits, w):
    capital = [0] * len(profits)
    assert find_maximized_capital(len(profits), w, profits, capital) == w + sum(profits)


@given(st.lists(st.integers(min_value=-10, max_value=10), max_size=25))
def test_three_sum_invariants(nums):
    result = three_sum(nums)
    available = Counter(nums)
    assert len({tuple(t) for t in result}) == len(result)
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
        assert not Counter(triplet) - available


def test_three_sum_finds_symmetric_triplet():
    assert [-1, 0, 1] in three_sum([1, 0, -1, 2, -4])


@pytest.mark.parametrize("nums", [[], [0], [0, 0]])
def test_three_sum_short_input(nums):
    assert three_sum(nums) == []


def test_three_sum_zeros_once():
    assert three_sum([0, 0, 0, 0]) == [[0, 0, 0]]


def test_three_sum_leaves_input_alone():
    nums = [3, -3, 0]
    three_sum(nums)
    assert nums == [3, -3, 0]


def test_max_profit_assignment_example():
    assert (
        max_profit_assignment([2, 4, 6, 8, 10], [10, 20, 30, 40, 50], [4, 5, 6, 7])
        == 100
    )


def test_max_profit_assignment_needs_workers():
    with pytest.raises(ValueError):
        max_profit_assignment([1], [1], [])


@given(st.lists(st.integers(1, 50), min_size=1, max_size=10))
def test_weak_workers_earn_nothing(profits):
    difficulty = [10] * len(profits)
    assert max_profit_assignment(difficulty, profits, [1, 5, 9]) == 0


@given(
    st.lists(st.tuples(st.integers(1, 20), st.integers(0, 50)), min_size=1, max_size=10),
    st.integers(min_value=1, max_value=6),
)
def test_strong_workers_take_the_best_job(jobs, headcount):
    difficulty = [d for d, _ in jobs]
    profit = [p for _, p in jobs]
    workers = [100] * headcount
    assert max_profit_assignment(difficulty, profit, workers) == headcount * max(profit)


shop = st.lists(st.tuples(st.integers(0, 100), st.integers(0, 1)), max_size=20)


@given(shop, st.integers(min_value=0, max_value=25))
def test_max_satisfied_bounds(day, minutes):
    customers = [c for c, _ in day]
    grumpy = [g for _, g in day]
    base = sum(c for c, g in day if not g)
    result = max_satisfied(customers, grumpy, minutes)
    assert base <= result <= sum(customers)


@given(shop)
def test_max_satisfied_whole_day_window(day):
    customers = [c for c, _ in day]
    grumpy = [g for _, g in day]
    assert max_satisfied(customers, grumpy, len(day)) == sum(customers)


@given(shop)
def test_max_satisfied_empty_window(day):
    customers = [c for c, _ in day]
    grumpy = [g for _, g in day]
    assert max_satisfied(customers, grumpy, 0) == sum(c for c, g in day if not g)


def test_max_satisfied_mismatched_lengths():
    with pytest.raises(ValueError):
        max_satisfied([1, 2], [0], 1)


@given(st.integers(min_value=1, max_value=30))
def test_all_odd_single_subarrays(n):
    assert number_of_subarrays([1] * n, 1) == n


@given(st.integers(min_value=1, max_value=30))
def test_all_odd_whole_array(n):
    assert number_of_subarrays([3] * n, n) == 1


@given(st.lists(st.integers(0, 50).map(lambda v: 2 * v), max_size=20))
def test_all_even_has_no_subarrays(nums):
    assert number_of_subarrays(nums, 1) == 0


def test_number_of_subarrays_rejects_zero_k():
    with pytest.raises(ValueError):
        number_of_subarrays([1, 2], 0)


@given(st.lists(st.integers(1, 100), min_size=1, max_size=20))
def test_bouquets_after_all_blooms(bloom_day):
    assert can_make_bouquets(bloom_day, max(bloom_day), len(bloom_day), 1) is True


@given(st.lists(st.integers(1, 100), min_size=1, max_size=20))
def test_no_bouquets_before_any_bloom(bloom_day):
    assert can_make_bouquets(bloom_day, min(bloom_day) - 1, 1, 1) is False


def test_min_days_not_enough_flowers():
    assert min_days([1, 2, 3], 2, 2) == -1


@given(
    st.lists(st.integers(1, 50), min_size=9, max_size=25),
    st.integers(min_value=1, max_value=3),
    st.integers(min_value=1, max_value=3),
)
def test_min_days_is_earliest_possible(bloom_day, m, k):
    day = min_days(bloom_day, m, k)
    assert can_make_bouquets(bloom_day, day, m, k) is True
    assert can_make_bouquets(bloom_day, day - 1, m, k) is False