"""Bracket, combination and circular-deque exercises."""

from collections import Counter, deque
from collections.abc import Iterable
from math import prod

_WEIGHTS = {"(": 2, "[": 3}
_OPENERS = {")": "(", "]": "["}


def bracket_value(text: str) -> int:
    """Return the value of a bracket string, or 0 when it is not well formed."""
    stack: list[str] = []
    multiplier = 1
    total = 0
    previous = ""
    for char in text:
        if char in _WEIGHTS:
            multiplier *= _WEIGHTS[char]
            stack.append(char)
        elif char in _OPENERS:
            opener = _OPENERS[char]
            if not stack or stack[-1] != opener:
                return 0
            if previous == opener:
                total += multiplier
            stack.pop()
            multiplier //= _WEIGHTS[opener]
        else:
            raise ValueError(f"unexpected character {char!r}")
        previous = char
    return 0 if stack else total


def is_balanced(text: str) -> bool:
    """Return whether a string of parentheses is properly nested."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return False
            depth -= 1
        else:
            raise ValueError(f"unexpected character {char!r}")
    return depth == 0


def outfit_combinations(items: Iterable[tuple[str, str]]) -> int:
    """Count non-empty outfits from (name, category) pairs, one item per category."""
    per_category = Counter(category for _, category in items)
    return prod(count + 1 for count in per_category.values()) - 1


def balloon_order(numbers: Iterable[int]) -> list[int]:
    """Return the 1-based order in which the balloons in a circle are popped."""
    balloons = deque((number, index) for index, number in enumerate(numbers, start=1))
    order: list[int] = []
    while balloons:
        step, index = balloons.popleft()
        order.append(index)
        if step > 0:
            balloons.rotate(1 - step)
        else:
            balloons.rotate(-step)
    return order