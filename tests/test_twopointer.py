from itertools import combinations

from hypothesis import given
from hypothesis import strategies as st

from psalgos.twopointer import count_pairs_with_sum, count_subarrays_with_sum


def test_count_subarrays_example():
    assert count_subarrays_with_sum([1, 1, 1, 1], 2) == 3


def test_count_subarrays_empty():
    assert count_subarrays_with_sum([], 5) == 0


@given(
    st.lists(st.integers(min_value=1, max_value=10), max_size=15),
    st.integers(min_value=1, max_value=30),
)
def test_count_subarrays_matches_all_slices(values, target):
    slices = sum(
        1
        for i in range(len(values))
        for j in range(i + 1, len(values) + 1)
        if sum(values[i:j]) == target
    )
    assert count_subarrays_with_sum(values, target) == slices


@given(
    st.lists(st.integers(min_value=1, max_value=10), min_size=1, max_size=15)
)
def test_count_subarrays_whole_sum_found_from_start(values):
    assert count_subarrays_with_sum(values, sum(values)) >= 1


@given(
    st.sets(st.integers(min_value=1, max_value=50), max_size=12),
    st.integers(min_value=2, max_value=100),
)
def test_count_pairs_matches_combinations(values, target):
    expected = sum(1 for a, b in combinations(values, 2) if a + b == target)
    assert count_pairs_with_sum(list(values), target) == expected


@given(st.sets(st.integers(min_value=1, max_value=50), max_size=12))
def test_count_pairs_order_does_not_matter(values):
    items = list(values)
    assert count_pairs_with_sum(items, 30) == count_pairs_with_sum(items[::-1], 30)


def test_count_pairs_single_value():
    assert count_pairs_with_sum([5], 10) == 0