# algobox

Classic algorithms, data structures, text patterns and a few small utilities,
written in plain Python with no runtime dependencies.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `algobox.searching`

- `can_place_cows(positions, cows, distance)`: whether `cows` cows fit into the
  sorted stall `positions` at least `distance` apart.
- `aggressive_cows(positions, cows)`: the largest minimum distance at which the
  cows fit; the positions are sorted first. Raises `ValueError` when no
  distance works.
- `total_fruit(fruits)`: length of the longest run holding at most two kinds.

### `algobox.sorting`

- `bubble_sort(values)` and `quicksort(values)` return a new ascending list.
  `quicksort` takes the last element of each range as its pivot.

### `algobox.dynamic`

- `knapsack(prices, weights, capacity)`: best total price for a 0/1 knapsack,
  memoised.
- `knapsack_table(prices, weights, capacity)`: the full bottom-up table; the
  answer is its last cell.
- `lcs_length(first, second)` and `lcs_length_table(first, second)`: length of
  the longest common subsequence, top-down and bottom-up.

Mismatched price and weight lists or a negative capacity raise `ValueError`.

### `algobox.graphs`

- `Graph(vertex_count)` with `add_edge(source, target)` and `bfs(start)`, which
  returns the breadth-first order. Out-of-range vertices raise `IndexError`.
- `Edge(source, target, weight)`: a directed weighted edge.
- `bellman_ford(vertex_count, edges, source)`: shortest distances, `inf` for
  unreachable vertices. Edges may be `Edge` objects or plain tuples. Raises
  `NegativeCycleError` when a negative cycle is reachable.
- `dijkstra(matrix, source)`: shortest distances over a square adjacency
  matrix, where `0` means no edge. Negative weights raise `ValueError`.

### `algobox.patterns`

`double_sided_arrow(n)`, `ganesha(n)`, `hourglass(n)` and `hollow_diamond(n)`
return the figure as a string. Sizes below 1 raise `ValueError`.

### `algobox.numbers`

- `greetings(times=5)`: the line `"Hello World! "` repeated.
- `count_to(limit=5)`: `[1, ..., limit]`.
- `sum_of_naturals(n)`: `1 + ... + n`, zero for `n` below 1.
- `factorial(n)`: raises `ValueError` for negative `n`.
- `average(values)`: the mean of 1 to 100 numbers; any other count raises
  `ValueError`.

### `algobox.calculator`

`add`, `difference` (absolute), `subtract`, `multiply`, and `divide`, which
returns a `DivisionResult` with `numerator`, `denominator`, `value` and a
`fractional` flag, and raises `ZeroDivisionError` for a zero divisor.
`str()` of a `DivisionResult` gives the text the calculator prints.

### `algobox.geometry`

`classify_triangle(first, second, third)` takes three `(x, y)` points and
returns a `TriangleReport` with the side lengths and the flags `is_triangle`,
`right_angled`, `equilateral`, `isosceles` and `scalene`. Its `messages()`
method gives the result as readable lines.

### `algobox.keywords`

- `KEYWORDS`: the 32 C keywords.
- `write_keywords(path)`: writes one keyword per line and returns the count.
- `count_lines(path)`: the number of newline characters in a file.

### `algobox.linked`

- `ListNode` and `LinkedList` with `push_front`, `append`, `insert_after`,
  `nodes()`, iteration over values and `len()`.
- `has_cycle(head)`: whether following `next` revisits a node.
- `BoundedQueue(capacity=10)`: an array queue whose slots are only reused once
  it has been emptied; raises `QueueFullError` when full.
- `LinkedQueue`: an unbounded queue of linked nodes.

Both queues have `enqueue`, `dequeue`, `front`, `is_empty` and `len()`, and
raise `QueueEmptyError` when read or emptied while empty.

### `algobox.hashing`

- `bucket_index(text)`: the sum of the UTF-8 bytes of `text`, modulo 10.
- `ChainedHashTable(values=())`: ten chained buckets of strings, duplicates
  kept, with `insert` (returns the bucket index), `find` and `remove` (both
  raise `KeyError` for a missing value), `buckets()`, `in`, iteration and
  `len()`.

## Examples

```python
from algobox.searching import aggressive_cows
from algobox.dynamic import lcs_length
from algobox.graphs import Graph

aggressive_cows([1, 2, 8, 4, 9], 3)   # 3
lcs_length("AGGTAB", "GXTXAYB")       # 4

g = Graph(4)
for a, b in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(a, b)
g.bfs(2)                              # [2, 0, 3, 1]
```

## Calculator command

An interactive menu-driven calculator is installed as a command:

    algobox-calc

It reads two numbers from standard input, then lets you add, take the
difference, subtract, multiply or divide them, enter new numbers, or exit.
It stops at the end of input.

## What it does not do

There are no binary tree or binary search tree utilities. Apart from the
calculator, the package has no command-line interface: everything else is
used from Python.