# fanalgo

A small library of classic algorithms and data structures in plain Python,
with no dependencies outside the standard library.

## Contents

### Sorting and selection

Every sort rearranges a mutable sequence in place and compares items with `<`.

- `fanalgo.elementary`
  - `insertion_sort(items)`
  - `insertion_sort_range(items, lo, hi)`: sorts `items[lo:hi + 1]` (`hi` is
    inclusive); raises `IndexError` if the range lies outside the sequence.
  - `selection_sort(items)`
  - `shell_sort(items)`: h-sorting passes with the gaps in `SHELL_GAPS`
    (`7, 3, 1`).
  - `shuffle(items)`: a uniformly random permutation, in place.
- `fanalgo.mergesort`: `merge_sort(items)` (top-down, insertion sort below
  four items, skips the merge when the halves are already in order) and
  `bottom_up_merge_sort(items)`. Both are stable.
- `fanalgo.quicksort`
  - `quick_sort(items)`: shuffles, then partitions, with insertion sort for
    short ranges.
  - `quick_sort_three_way(items)`: shuffles, then three-way partitions, which
    suits inputs with many equal keys.
  - `select(items, k)`: returns the item of rank `k` (0-based) and leaves
    `items` rearranged; raises `IndexError` if `k` is out of range.
- `fanalgo.heapsort`: `heap_sort(items)` treats the list as a one-based heap.
  It sorts `items[1:]` and leaves `items[0]` untouched, so put a placeholder
  in front of the data.

### Geometry

`fanalgo.geometry` has the frozen dataclass `Point2D(x, y)` and
`ccw(a, b, c)`, which returns `1` for a counterclockwise turn, `-1` for a
clockwise turn and `0` when the three points are collinear.

### Queues

`fanalgo.queues` holds four FIFO queues, each with `enqueue`, `dequeue` and
`is_empty`:

- `ArrayQueueOfStrings`: a simple queue; supports `len()`.
- `ArrayQueue`: a resizing array that doubles when full and halves when a
  quarter full; supports `len()`.
- `ArrayQueueOfStringsV2`: the same resizing array, for strings.
- `LinkedQueueOfStrings`: a singly linked list; iterating it yields the items
  from front to back.

`dequeue` on an empty queue raises `IndexError`.

### Stacks and expression evaluation

`fanalgo.stacks` has `ArrayStack` (a resizing array; supports `len()`) and
`LinkedStackOfStrings` (a linked list; iterating yields items from the top
down), both with `push`, `pop` and `is_empty`. `pop` on an empty stack raises
`IndexError`.

`fanalgo.evaluate.evaluate(tokens)` evaluates a fully parenthesised
expression of `+` and `*` given as a sequence of tokens, with two stacks. Each
closing parenthesis applies the most recent operator. It returns a `float`,
raises `ValueError` for a token that is not a number and `IndexError` for a
malformed expression.

### Priority queue

`fanalgo.priority_queue` has:

- `MinPQ(capacity)`: a minimum priority queue on a fixed-size binary heap,
  with `insert`, `delete` (removes and returns the smallest item),
  `is_empty`, `len()` and iteration in heap order. `insert` on a full queue
  and `delete` on an empty one raise `IndexError`; a negative capacity raises
  `ValueError`.
- `Transaction(name, date, amount)`: a frozen record ordered by `amount`
  alone, with `compare_to(other)` returning `-1`, `0` or `1`.

### Union-find and percolation

- `fanalgo.unionfind`: `QuickFindUF(size)` and weighted `QuickUnionUF(size)`
  with path compression, each with `connected(p, q)` and `union(p, q)`. An
  index outside `0..size - 1` raises `IndexError`.
- `fanalgo.percolation`: `Percolator(n)` models an `n`-by-`n` grid. Sites
  `1..n*n` are the grid, row by row; site `0` is a virtual top and site
  `n*n + 1` a virtual bottom, both open from the start. It exposes `n`,
  `sites` (a list of `Site(parent, is_open)`) and `sizes`, and offers
  `root(i)`, `connected(i, j)`, `union(i, j)` and `open(i)`. `open` returns
  `False` if the site was already open, otherwise opens it, joins it to its
  open neighbours and returns `True`. The grid percolates once
  `connected(0, n * n + 1)` is true.

## Installation

```
pip install .
```

## Examples

Sorting in place:

```python
from fanalgo.mergesort import merge_sort

data = [18, 32, 78, 69, 6, 9, 8, 5]
merge_sort(data)
# data is now [5, 6, 8, 9, 18, 32, 69, 78]
```

Heap sort with its placeholder slot:

```python
from fanalgo.heapsort import heap_sort

data = [None, 18, 3, 29]
heap_sort(data)
# data is now [None, 3, 18, 29]
```

Finding the k-th smallest element:

```python
from fanalgo.quicksort import select

select([18, 29, 32, 3, 6], 0)  # 3
```

Evaluating an expression:

```python
from fanalgo.evaluate import evaluate

evaluate(["(", "1", "+", "(", "2", "*", "3", ")", ")"])  # 7.0
```

Stacks and queues:

```python
from fanalgo.stacks import ArrayStack
from fanalgo.queues import ArrayQueue

stack = ArrayStack()
stack.push(1)
stack.push(2)
stack.pop()  # 2

queue = ArrayQueue()
queue.enqueue("a")
queue.enqueue("b")
queue.dequeue()  # "a"
```

Keeping the ten largest transactions with a bounded min-priority queue:

```python
import datetime as dt
from fanalgo.priority_queue import MinPQ, Transaction

pq = MinPQ(11)
for amount in [5.0, 120.5, 42.0]:
    pq.insert(Transaction("Alice", dt.date(2024, 1, 2), amount))
    if len(pq) > 10:
        pq.delete()
```

Union-find:

```python
from fanalgo.unionfind import QuickUnionUF

uf = QuickUnionUF(10)
uf.union(1, 2)
uf.connected(1, 2)  # True
```

Estimating a percolation threshold:

```python
import random
from fanalgo.percolation import Percolator

n = 20
grid = Percolator(n)
opened = 0
while not grid.connected(0, n * n + 1):
    if grid.open(random.randint(1, n * n)):
        opened += 1
print(opened / (n * n))
```

## What is not included

The package is a library only: it has no command-line program, and it does
not read transactions or other data from files. Loading input and running
experiments such as the percolation estimate above are left to the caller.

## Running the tests

```
pip install .[test]
pytest
```