import pytest
from hypothesis import given
from hypothesis import strategies as st

from psalgos.dp import count_sum_ways, knapsack, min_operations_to_one, padovan

items_strategy = st.lists(
    st.tuples(st.integers(min_value=1, max_value=10), st.integers(min_value=1, max_value=20)),
    max_size=6,
)


def test_knapsack_worked_example():
    assert knapsack([(6, 13), (4, 8), (3, 6), (5, 12)], 7) == 14


@given(items_strategy)
def test_knapsack_takes_everything_when_it_fits(items):
    capacity = sum(weight for weight, _ in items)
    assert knapsack(items, capacity) == sum(value for _, value in items)


@given(items_strategy, st.integers(min_value=0, max_value=30))
def test_knapsack_monotone_in_capacity(items, capacity):
    assert knapsack(items, capacity) <= knapsack(items, capacity + 1)


@given(items_strategy, st.integers(min_value=0, max_value=30))
def test_knapsack_extra_item_never_hurts(items, capacity):
    assert knapsack(items, capacity) <= knapsack(items + [(1, 1)], capacity)


@given(items_strategy)
def test_knapsack_zero_capacity(items):
    assert knapsack(items, 0) == 0


def test_knapsack_rejects_bad_input():
    with pytest.raises(ValueError):
        knapsack([(1, 1)], -1)
    with pytest.raises(ValueError):
        knapsack([(-2, 1)], 5)


def test_min_operations_examples():
    assert min_operations_to_one(1) == 0
    assert min_operations_to_one(10) == 3


@given(st.integers(min_value=2, max_value=2000))
def test_min_operations_bounded_by_each_move(n):
    result = min_operations_to_one(n)
    assert result <= min_operations_to_one(n - 1) + 1
    if n % 2 == 0:
        assert result <= min_operations_to_one(n // 2) + 1
    if n % 3 == 0:
        assert result <= min_operations_to_one(n // 3) + 1


@given(st.integers(min_value=0, max_value=8))
def test_min_operations_powers_of_three(k):
    assert min_operations_to_one(3**k) <= k


def test_min_operations_rejects_zero():
    with pytest.raises(ValueError):
        min_operations_to_one(0)


def test_count_sum_ways_bases_and_example():
    assert [count_sum_ways(n) for n in (1, 2, 3)] == [1, 2, 4]
    assert count_sum_ways(7) == 44


@given(st.integers(min_value=4, max_value=60))
def test_count_sum_ways_recurrence(n):
    assert count_sum_ways(n) == sum(count_sum_ways(n - k) for k in (1, 2, 3))


def test_padovan_bases():
    assert [padovan(n) for n in (1, 2, 3)] == [1, 1, 1]


@given(st.integers(min_value=4, max_value=100))
def test_padovan_recurrence(n):
    assert padovan(n) == padovan(n - 2) + padovan(n - 3)


@pytest.mark.parametrize("func", [count_sum_ways, padovan])
def test_sequences_reject_non_positive(func):
    with pytest.raises(ValueError):
        func(0)