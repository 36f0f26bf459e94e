"""Two-pointer counting exercises."""

from collections.abc import Sequence
from itertools import accumulate


def count_subarrays_with_sum(values: Sequence[int], target: int) -> int:
    """Count start positions whose running sum reaches target at some point."""
    return sum(
        target in accumulate(values[start:]) for start in range(len(values))
    )


def count_pairs_with_sum(values: Sequence[int], target: int) -> int:
    """Count disjoint pairs found by closing two pointers on the sorted values."""
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    pairs = 0
    while left < right:
        total = ordered[left] + ordered[right]
        if total == target:
            pairs += 1
            left += 1
            right -= 1
        elif total > target:
            right -= 1
        else:
            left += 1
    return pairs