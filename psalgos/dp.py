"""Dynamic-programming exercises."""

from collections.abc import Iterable


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the best total value of (weight, value) items within capacity."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("weights must be non-negative")
        best = [
            best[j] if j == 0 or weight > j else max(best[j], best[j - weight] + value)
            for j in range(capacity + 1)
        ]
    return best[capacity]


def min_operations_to_one(n: int) -> int:
    """Return the fewest steps (/3, /2, -1) that bring n down to 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0, 0]
    for i in range(2, n + 1):
        best = steps[i - 1] + 1
        if i % 2 == 0:
            best = min(best, steps[i // 2] + 1)
        if i % 3 == 0:
            best = min(best, steps[i // 3] + 1)
        steps.append(best)
    return steps[n]


def count_sum_ways(n: int) -> int:
    """Return the number of ordered ways to write n as a sum of 1, 2 and 3."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ways = [1, 2, 4]
    while len(ways) < n:
        ways.append(sum(ways[-3:]))
    return ways[n - 1]


def padovan(n: int) -> int:
    """Return the n-th term (1-based) of the Padovan sequence 1, 1, 1, 2, 2, ..."""
    if n < 1:
        raise ValueError("n must be at least 1")
    terms = [1, 1, 1]
    while len(terms) < n:
        terms.append(terms[-3] + terms[-2])
    return terms[n - 1]