import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from psalgos.brackets import (
    balloon_order,
    bracket_value,
    is_balanced,
    outfit_combinations,
)

well_formed = st.recursive(
    st.sampled_from(["()", "[]"]),
    lambda inner: st.one_of(
        st.builds(lambda s: f"({s})", inner),
        st.builds(lambda s: f"[{s}]", inner),
        st.builds(operator.add, inner, inner),
    ),
    max_leaves=8,
)

parens = st.recursive(
    st.just("()"),
    lambda inner: st.one_of(
        st.builds(lambda s: f"({s})", inner),
        st.builds(operator.add, inner, inner),
    ),
    max_leaves=8,
)


def test_bracket_value_example():
    assert bracket_value("(()[[]])([])") == 28


def test_bracket_value_malformed_is_zero():
    assert not bracket_value("[][]((])")
    assert not bracket_value("(()")
    assert not bracket_value(")(")


@given(well_formed)
def test_bracket_value_wrapping(text):
    inner = bracket_value(text)
    assert inner > 0
    assert bracket_value(f"({text})") == 2 * inner
    assert bracket_value(f"[{text}]") == 3 * inner


@given(well_formed, well_formed)
def test_bracket_value_concatenation(left, right):
    assert bracket_value(left + right) == bracket_value(left) + bracket_value(right)


def test_bracket_value_rejects_other_characters():
    with pytest.raises(ValueError):
        bracket_value("(a)")


@given(parens)
def test_is_balanced_accepts_well_formed(text):
    assert is_balanced(text) is True
    assert is_balanced(text + ")") is False
    assert is_balanced("(" + text) is False


def test_is_balanced_rejects_other_characters():
    with pytest.raises(ValueError):
        is_balanced("(x)")


def test_outfit_example():
    items = [("hat", "headgear"), ("sunglasses", "eyewear"), ("turban", "headgear")]
    assert outfit_combinations(items) == 5


@given(st.integers(min_value=0, max_value=10))
def test_outfit_distinct_categories(n):
    items = [(f"item{k}", f"kind{k}") for k in range(n)]
    assert outfit_combinations(items) == 2**n - 1


@given(st.integers(min_value=0, max_value=10))
def test_outfit_single_category(n):
    items = [(f"item{k}", "face") for k in range(n)]
    assert outfit_combinations(items) == n


def test_balloon_example():
    assert balloon_order([3, 2, 1, -3, -1]) == [1, 4, 5, 3, 2]


@given(
    st.lists(
        st.integers(min_value=-10, max_value=10).filter(bool), min_size=1, max_size=15
    )
)
def test_balloon_order_is_permutation(numbers):
    order = balloon_order(numbers)
    assert order[0] == 1
    assert sorted(order) == list(range(1, len(numbers) + 1))