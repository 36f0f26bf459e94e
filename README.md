# psalgos

Small, self-contained solutions to classic algorithm problems. Each one is
a plain Python function or class. The package has no third-party
dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

### `psalgos.backtracking`

- `permutations(n, m)` yields every tuple of `m` distinct numbers from
  `1..n`.
- `increasing_sequences(n, m)` yields every strictly increasing tuple of
  `m` numbers from `1..n`.
- `sequences_with_repetition(n, m)` yields every tuple of `m` numbers from
  `1..n`, with repetition allowed.

All three are generators and yield in lexicographic order. A negative `n`
or `m` raises `ValueError`.

### `psalgos.dp`

- `knapsack(items, capacity)` returns the best total value of
  `(weight, value)` items that fit within `capacity`. Each item can be used
  at most once.
- `min_operations_to_one(n)` returns the fewest steps needed to bring `n`
  down to 1. Each step is divide by 3, divide by 2, or subtract 1.
- `count_sum_ways(n)` returns the number of ordered ways to write `n` as a
  sum of 1, 2 and 3.
- `padovan(n)` returns the `n`-th term (1-based) of the sequence
  1, 1, 1, 2, 2, 3, 4, 5, ...

Out-of-range arguments raise `ValueError`.

### `psalgos.structures`

- `Stack` is a LIFO stack with a capacity that defaults to 10001. It has
  `push`, `pop`, `top`, `empty` and `len()`. Pushing onto a full stack
  raises `OverflowError`. Calling `pop` or `top` on an empty stack raises
  `IndexError`.
- `Queue` is a FIFO queue. It has `push`, `pop`, `front`, `back`, `empty`
  and `len()`. Calling `pop`, `front` or `back` on an empty queue raises
  `IndexError`.
- `Pokedex(names)` is a two-way lookup between names and their 1-based
  positions. `lookup(query)` returns the name when the query starts with a
  digit, and the number otherwise. An unknown number raises `IndexError`.
  An unknown name raises `KeyError`.
- `run_stack_commands(commands)` and `run_queue_commands(commands)` take
  command lines such as `"push 3"`, `"pop"`, `"size"`, `"empty"`, `"top"`,
  `"front"` and `"back"`. They return the list of numbers that the
  reporting commands produce. These commands report `-1` on an empty
  structure, and `empty` reports `1` or `0`. A push onto a full stack is
  ignored.
- `sum_after_erasures(numbers)` sums the numbers. Each `0` erases the most
  recent number that is still kept. A `0` with nothing left to erase raises
  `IndexError`.
- `count_occurrences(cards, queries)` returns how often each query appears
  among the cards.

### `psalgos.brackets`

- `bracket_value(text)` returns the value of a string of `()` and `[]`.
  `()` is worth 2 and `[]` is worth 3. Nesting multiplies and
  juxtaposition adds. A string that is not well formed gives 0.
- `is_balanced(text)` tells whether a string of parentheses is properly
  nested.
- `outfit_combinations(items)` counts the non-empty outfits that can be
  made from `(name, category)` pairs, wearing at most one item per
  category.
- `balloon_order(numbers)` returns the 1-based order in which balloons
  standing in a circle are popped. Each popped balloon's number says how
  far to move, and in which direction, to reach the next one.

Characters other than brackets raise `ValueError`.

### `psalgos.greedy`

- `largest_multiple_of_30(digits)` returns the largest multiple of 30 that
  uses all the digits, as a string, or `None`.
- `min_total_wait(times)` returns the smallest possible sum of everyone's
  waiting time in a single queue.
- `max_stock_profit(prices)` returns the best profit when each day you may
  either buy one share or sell all the shares you hold.
- `make_palindrome(text)` returns the alphabetically first palindrome that
  uses every letter, or `None`.
- `cover_with_polyominoes(board)` covers each run of `X` cells between dots
  with `AAAA` and `BB` pieces and returns the result. It returns `None` when
  a run has odd length.
- `min_flips(bits)` returns the fewest run flips that make a binary string
  uniform.
- `min_tapes(leaks, length)` returns the fewest tapes of the given length
  that cover every leak position.
- `min_expression_value(expression)` returns the smallest value that a
  `+`/`-` expression can take once parentheses are added.
- `max_distinct_count(total)` returns the largest number of distinct
  positive integers that can sum to `total`.
- `min_sugar_bags(weight)` returns the fewest 5 kg and 3 kg bags that hold
  exactly `weight`, or `None`.
- `chocolate_cuts(k)` returns `(size, cuts)`. `size` is the smallest power
  of two that is at least `k`. `cuts` is the number of halvings needed to
  get exactly `k` squares.

### `psalgos.twopointer`

- `count_subarrays_with_sum(values, target)` counts the start positions
  whose running sum reaches `target`. For positive values this is the
  number of contiguous runs that sum to `target`.
- `count_pairs_with_sum(values, target)` counts the disjoint pairs that sum
  to `target`. It finds them by closing two pointers over the sorted
  values.

### `psalgos.graph`

- `prim_mst_cost(node_count, edges, start)` returns the weight of the
  minimum spanning tree grown from `start` with Prim's algorithm. The
  edges are undirected `(u, v, weight)` triples on nodes
  `0..node_count-1`.
- `max_savings(node_count, edges)` returns the total edge weight minus the
  weight of the spanning tree grown from node 0.
- `dijkstra(vertex_count, edges, start)` returns a dict of shortest
  distances from `start` to vertices `1..vertex_count`. The edges are
  directed `(u, v, weight)` triples. Unreachable vertices map to
  `math.inf`.

A vertex outside the allowed range raises `ValueError`.

## Example

```python
from psalgos.backtracking import increasing_sequences
from psalgos.dp import knapsack
from psalgos.graph import dijkstra

list(increasing_sequences(4, 2))
# [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)]

knapsack([(6, 13), (4, 8), (3, 6), (5, 12)], 7)
# 14

dijkstra(5, [(5, 1, 1), (1, 2, 2), (1, 3, 3), (2, 3, 4), (2, 4, 5), (3, 4, 6)], 1)
# {1: 0, 2: 2, 3: 3, 4: 7, 5: inf}
```

## What it does not do

There is no command-line program. The package does not read problem input
from standard input or print answers. You call the functions with Python
values and get Python values back.

## Running the tests

```
pip install ".[test]"
pytest
```