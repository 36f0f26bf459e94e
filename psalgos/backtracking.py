"""Enumeration of integer sequences by backtracking."""

from collections.abc import Iterator


def _validate(n: int, m: int) -> None:
    if n < 0 or m < 0:
        raise ValueError("n and m must be non-negative")


def permutations(n: int, m: int) -> Iterator[tuple[int, ...]]:
    """Yield every sequence of m distinct numbers from 1..n in lexicographic order."""
    _validate(n, m)
    chosen: list[int] = []
    used: set[int] = set()

    def extend() -> Iterator[tuple[int, ...]]:
        if len(chosen) == m:
            yield tuple(chosen)
            return
        for value in range(1, n + 1):
            if value in used:
                continue
            used.add(value)
            chosen.append(value)
            yield from extend()
            chosen.pop()
            used.discard(value)

    return extend()


def increasing_sequences(n: int, m: int) -> Iterator[tuple[int, ...]]:
    """Yield every strictly increasing sequence of m numbers from 1..n."""
    _validate(n, m)
    chosen: list[int] = []

    def extend(start: int) -> Iterator[tuple[int, ...]]:
        if len(chosen) == m:
            yield tuple(chosen)
            return
        for value in range(start, n + 1):
            chosen.append(value)
            yield from extend(value + 1)
            chosen.pop()

    return extend(1)


def sequences_with_repetition(n: int, m: int) -> Iterator[tuple[int, ...]]:
    """Yield every sequence of m numbers from 1..n, repetition allowed."""
    _validate(n, m)
    chosen: list[int] = []

    def extend() -> Iterator[tuple[int, ...]]:
        if len(chosen) == m:
            yield tuple(chosen)
            return
        for value in range(1, n + 1):
            chosen.append(value)
            yield from extend()
            chosen.pop()

    return extend()