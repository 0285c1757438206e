# dskit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Everything is a library: import the module you need and call it.

## Modules

### `dskit.linked`

`LinkedList(values=())` is a singly linked list of `Node` cells. It supports
`len()`, iteration, and `str()`, which gives `1 -> 2 -> NULL`.

- `append(value)`: add at the end.
- `copy()`: a new list of new nodes with the same values.
- `absorb(other)`: move all of `other`'s nodes onto the end; `other` is left
  empty. A list cannot absorb itself (`ValueError`).
- `front_back_split()`: return `(front, back)`; the front gets the extra node
  when the length is odd, and the original list is left empty.
- `reverse()`: reverse in place.
- `remove_duplicates()`: keep only the first occurrence of each value.
- `sorted_insert(value)`: insert before the first element not smaller than it.
- `insertion_sort()`: sort ascending by relinking nodes.

### `dskit.dlist`

`DoublyLinkedList(values=())` supports `len()`, iteration, `reversed()`, and
`str()` (`DLL: 1 <-> 2 <-> NULL`, or `DLL: Empty`).

- `insert_at_beginning(value)`, `insert_at_end(value)`.
- `insert_after(key, value)`: after the first node holding `key`; raises
  `ValueError` if there is none.
- `delete_from_beginning()`, `delete_from_end()`: return the removed value;
  raise `IndexError` on an empty list.
- `delete_value(value)`: remove the first match and return it; raises
  `ValueError` if not found.
- `bubble_sort()`: sort ascending by swapping values.

Module functions join lists by relinking their nodes:

- `append_start(first, second)`: `first` followed by `second`; returns `first`
  and empties `second`.
- `append_end(first, second)`: `second` followed by `first`; returns `second`
  and empties `first`.
- `merge_sorted(first, second)`: merge two sorted lists into a new list (ties
  take from `first`); both inputs are left empty.

### `dskit.stackqueue`

- `Stack`: `push`, `pop`, `len()`, iteration from top to bottom. Popping an
  empty stack raises `StackEmptyError` (an `IndexError`).
- `Queue`: `enqueue`, `dequeue`, `len()`, iteration from front to rear.
  Dequeuing an empty queue raises `QueueUnderflowError` (an `IndexError`).

### `dskit.bignum`

Numbers held as lists of decimal digits, most significant first.

- `parse_digits(text)`: the digits in `text`, ignoring other characters.
- `format_digits(digits)`: text without leading zeros (all zeros give `"0"`).
- `compare_digits(a, b)`: `1`, `0` or `-1`.
- `add_digits(a, b)`, `multiply_digits(a, b)`.
- `subtract_digits(a, b)`: keeps as many digits as `a`; raises
  `NegativeResultError` (a `ValueError`) if `b > a`.
- `divide(num1, num2)`: `(quotient, remainder)` truncating toward zero. Text
  arguments are read as their leading integer (zero if none). Raises
  `ZeroDivisionError` for a zero divisor.

### `dskit.traversal`

`Graph(vertices)` is an undirected graph on vertices `0 .. vertices-1`.
`add_edge(src, dest)` puts each endpoint at the front of the other's list, so
`neighbors(vertex)` and the traversals visit the most recently added neighbour
first. `bfs(start)` and `dfs(start)` return the visiting order as a list.
Out-of-range vertices raise `ValueError`.

### `dskit.weighted`

`WeightedGraph(vertices)` keeps an undirected weighted graph both as a matrix
and as adjacency lists. `add_edge(u, v, weight)`, `weight(u, v)` (0 means no
edge) and `adjacent(u)` (a list of `(vertex, weight)` pairs, newest first).
`letter_to_index("a")` gives `0`; `index_to_letter(0)` gives `"A"`.

### `dskit.shortest`

`dijkstra_matrix(graph, start)` and `dijkstra_list(graph, start)` take a
`WeightedGraph` and return `ShortestPaths` with `start`, `distances`
(`math.inf` where unreachable) and `parents`. `path_to(dest)` returns the list
of vertices from `start` to `dest`, or raises `ValueError` when there is no
path.

### `dskit.mst`

All functions return a `SpanningTree`: a sequence of `MstEdge(u, v, weight)`
in the order chosen, with a `weight` property for the total.

- `kruskal_edges(vertices, edges)`: from a sequence of `(u, v, weight)`
  triples; weights of 999 or more are never chosen. A disconnected graph gives
  a spanning forest.
- `kruskal_matrix(matrix)`: from a square matrix where 99 or more means no
  edge. The input is not modified.
- `prim_matrix(graph)`, `prim_list(graph)`: from a `WeightedGraph`, starting
  at vertex 0; raise `ValueError` if the graph is not connected.

### `dskit.expressions`

`infix_to_postfix(infix)` and `infix_to_prefix(infix)` convert expressions of
single-character operands with `+ - * /` and parentheses.
`precedence(op)` gives 2 for `* /`, 1 for `+ -`, 0 otherwise.

### `dskit.polynomial`

`Polynomial(terms=())` takes `(coeff, power)` pairs and combines like powers.
`add_term(coeff, power)`, `terms()` (highest power first), `+`, `*`, `==`, and
`str()` such as `3x^2 + 1x^0`.

## Examples

```python
from dskit.linked import LinkedList

items = LinkedList([3, 1, 2])
items.insertion_sort()
print(list(items))                 # [1, 2, 3]
```

```python
from dskit.expressions import infix_to_postfix, infix_to_prefix

print(infix_to_postfix("a+b*c"))   # abc*+
print(infix_to_prefix("a+b*c"))    # +a*bc
```

```python
from dskit.bignum import parse_digits, add_digits, format_digits

total = add_digits(parse_digits("999"), parse_digits("1"))
print(format_digits(total))        # 1000
```

```python
from dskit.weighted import WeightedGraph, letter_to_index
from dskit.shortest import dijkstra_matrix

graph = WeightedGraph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
graph.add_edge(0, 2, 7)
paths = dijkstra_matrix(graph, letter_to_index("A"))
print(paths.path_to(2))            # [0, 1, 2]
```

```python
from dskit.polynomial import Polynomial

p = Polynomial([(1, 1), (1, 0)])
print(p * p)                       # 1x^2 + 2x^1 + 1x^0
```

## What it does not do

There is no command-line program and no interactive menu: nothing reads
values from the terminal or prints results on its own. Build the structures
in your own code and print or inspect what the functions return.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```