"""Stack, queue and lookup exercises."""

from collections import Counter, deque
from collections.abc import Iterable

DEFAULT_CAPACITY = 10001


class Stack:
    """A bounded LIFO stack of integers."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items


class Queue:
    """A FIFO queue of integers."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def front(self) -> int:
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def back(self) -> int:
        if not self._items:
            raise IndexError("back of empty queue")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items


class Pokedex:
    """Two-way lookup between names and their 1-based positions."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = list(names)
        self._numbers: dict[str, int] = {}
        for number, name in enumerate(self._names, start=1):
            self._numbers.setdefault(name, number)

    def __len__(self) -> int:
        return len(self._names)

    def lookup(self, query: str) -> str | int:
        """Return the name for a numeric query, or the number for a name."""
        if query[:1].isdigit():
            number = int(query)
            if not 1 <= number <= len(self._names):
                raise IndexError(f"no entry numbered {number}")
            return self._names[number - 1]
        try:
            return self._numbers[query]
        except KeyError:
            raise KeyError(f"unknown name {query!r}") from None


def _parse(command: str) -> tuple[str, list[str]]:
    name, *args = command.split()
    return name, args


def _push_argument(args: list[str]) -> int:
    if len(args) != 1:
        raise ValueError("push takes exactly one integer")
    return int(args[0])


def run_stack_commands(commands: Iterable[str]) -> list[int]:
    """Run stack commands and return what the reporting ones produce."""
    stack = Stack()
    output: list[int] = []
    for command in commands:
        name, args = _parse(command)
        match name:
            case "push":
                value = _push_argument(args)
                try:
                    stack.push(value)
                except OverflowError:
                    pass
            case "pop":
                output.append(stack.pop() if not stack.empty() else -1)
            case "size":
                output.append(len(stack))
            case "empty":
                output.append(int(stack.empty()))
            case "top":
                output.append(stack.top() if not stack.empty() else -1)
    return output


def run_queue_commands(commands: Iterable[str]) -> list[int]:
    """Run queue commands and return what the reporting ones produce."""
    queue = Queue()
    output: list[int] = []
    for command in commands:
        name, args = _parse(command)
        match name:
            case "push":
                queue.push(_push_argument(args))
            case "pop":
                output.append(queue.pop() if not queue.empty() else -1)
            case "size":
                output.append(len(queue))
            case "empty":
                output.append(int(queue.empty()))
            case "front":
                output.append(queue.front() if not queue.empty() else -1)
            case "back":
                output.append(queue.back() if not queue.empty() else -1)
    return output


def sum_after_erasures(numbers: Iterable[int]) -> int:
    """Sum the numbers, where each 0 erases the most recent surviving number."""
    kept: list[int] = []
    for number in numbers:
        if number != 0:
            kept.append(number)
        elif kept:
            kept.pop()
        else:
            raise IndexError("nothing to erase")
    return sum(kept)


def count_occurrences(cards: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Return how many times each query appears among the cards."""
    counts = Counter(cards)
    return [counts[query] for query in queries]