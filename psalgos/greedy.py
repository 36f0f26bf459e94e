"""Greedy exercises."""

import re
from collections import Counter
from collections.abc import Iterable
from itertools import groupby
from math import isqrt


def largest_multiple_of_30(digits: str) -> str | None:
    """Return the largest multiple of 30 made from all the digits, or None."""
    if not digits or not digits.isdigit():
        raise ValueError("digits must be a non-empty string of decimal digits")
    ordered = sorted(digits, reverse=True)
    if "0" not in ordered or sum(map(int, ordered)) % 3:
        return None
    return "".join(ordered)


def min_total_wait(times: Iterable[int]) -> int:
    """Return the smallest possible sum of everyone's waiting time in one queue."""
    ordered = sorted(times)
    count = len(ordered)
    return sum(time * (count - position) for position, time in enumerate(ordered))


def max_stock_profit(prices: Iterable[int]) -> int:
    """Return the best profit when each day one share may be bought or all sold."""
    best_ahead = 0
    profit = 0
    for price in reversed(list(prices)):
        if price > best_ahead:
            best_ahead = price
        else:
            profit += best_ahead - price
    return profit


def make_palindrome(text: str) -> str | None:
    """Return the alphabetically first palindrome using every letter, or None."""
    counts = Counter(text)
    odd = [char for char, count in counts.items() if count % 2]
    if len(odd) > 1:
        return None
    half = "".join(char * (counts[char] // 2) for char in sorted(counts))
    middle = odd[0] if odd else ""
    return half + middle + half[::-1]


def cover_with_polyominoes(board: str) -> str | None:
    """Cover every run of cells between dots with AAAA and BB pieces, or return None."""
    covered: list[str] = []
    for segment in board.split("."):
        length = len(segment)
        if length % 2:
            return None
        covered.append("AAAA" * (length // 4) + "BB" * (length % 4 // 2))
    return ".".join(covered)


def min_flips(bits: str) -> int:
    """Return the fewest run flips that make a binary string uniform."""
    if not bits:
        raise ValueError("bits must not be empty")
    runs = Counter(char == "0" for char, _ in groupby(bits))
    return min(runs[True], runs[False])


def min_tapes(leaks: Iterable[int], length: int) -> int:
    """Return the fewest tapes of the given length that cover every leak."""
    if length < 1:
        raise ValueError("tape length must be positive")
    tapes = 0
    covered_to: float | None = None
    for position in sorted(leaks):
        if covered_to is None or position > covered_to:
            covered_to = position - 0.5 + length
            tapes += 1
    return tapes


def _number(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid number {token!r} in expression") from None


def min_expression_value(expression: str) -> int:
    """Return the smallest value reachable by parenthesising a +/- expression."""
    head, minus, tail = expression.partition("-")
    result = sum(_number(token) for token in head.split("+"))
    if minus:
        result -= sum(_number(token) for token in re.split(r"[+-]", tail))
    return result


def max_distinct_count(total: int) -> int:
    """Return the most distinct positive integers that can sum to total."""
    if total < 0:
        raise ValueError("total must be non-negative")
    return (isqrt(1 + 8 * total) - 1) // 2


def min_sugar_bags(weight: int) -> int | None:
    """Return the fewest 5 kg and 3 kg bags holding exactly weight, or None."""
    if weight < 0:
        raise ValueError("weight must be non-negative")
    for large in range(weight // 5, -1, -1):
        rest = weight - 5 * large
        if rest % 3 == 0:
            return large + rest // 3
    return None


def chocolate_cuts(k: int) -> tuple[int, int]:
    """Return the bar size to buy and the number of halvings to get k squares."""
    if k < 1:
        raise ValueError("k must be at least 1")
    size = 1
    while size < k:
        size *= 2
    piece = size
    cuts = 0
    while k % piece:
        piece //= 2
        cuts += 1
    return size, cuts