# algokit

Classic algorithms and data structures in plain Python, with no third-party
dependencies.

## Contents

- **Sorting** (`algokit.sorting`). Each function returns a new list.
  - `counting_sort(values, k)`: a stable counting sort for integers in `0..k`.
  - `counting_sort_unstable(values, k)`: builds the output from the counts.
  - `insertion_sort`, `merge_sort`, `quick_sort` (the last element of each
    range is the pivot) and `selection_sort`.
  - `radix_sort(values, digits)`: an LSD sort on the lowest `digits` decimal
    digits of non-negative integers.

  The counting sorts raise `ValueError` for values outside `0..k`.
  `radix_sort` raises `ValueError` for negative values.
- **Numeric** (`algokit.numeric`).
  - `binary_search(key, values)`: returns an index into the sorted `values`,
    or `None`.
  - `gcd`, `gcd_recursive`: Euclid's algorithm.
  - `extended_gcd(a, b)`: returns `(g, x, y)` with `a*x + b*y == g`.
  - `fibonacci(n)`, `fibonacci_recursive(n)`: positions start at 1, so
    `fibonacci(1) == 0` and `fibonacci(2) == 1`.
- **Tower of Hanoi** (`algokit.hanoi`).
  - `Peg(capacity)`: a bounded stack of discs.
  - `move(source, dest)`.
  - `hanoi(n, source, dest, aux)`: returns the number of moves.
  - `format_pegs(source, dest, aux)`: shows the pegs as columns.
- **Linear structures**.
  - `SinglyLinkedList` (`algokit.singly_linked_list`) has `push_front`,
    `remove`, `search`, `copy`, `clear`, `count_occurrences`,
    `delete_occurrences` and `format`.
  - `DoublyLinkedList` (`algokit.doubly_linked_list`) can also be iterated in
    reverse.
  - `Stack` (`algokit.stack`).
  - `Queue` (`algokit.fifo`).
  - `PriorityQueue` (`algokit.priority_queue`): an ordered list with
    `enqueue`, `dequeue`, `min` and `decrease_priority`.
- **Trees**.
  - `BinarySearchTree` (`algokit.binary_search_tree`) has `insert`, `search`,
    `delete` and `format`, and is iterated as in-order `(key, value)` pairs.
  - `BinaryTreeNode` (`algokit.binary_tree`) has `insert_left` and
    `insert_right`.
  - `TreeNode` (`algokit.tree`) is a first-child / next-sibling tree with
    `insert_child`, `insert_sibling`, `children`, `serialize`, `height` and
    `size`.
- **Graphs** (`algokit.graph`).
  - `Graph(dim)` has nodes `1..dim` and provides `add_arc`, `add_edge` and
    `neighbors`.
  - `build_graph(stream, directed, weighted)` reads a graph from text.
  - `reachable`, `is_connected`, `connected_components`, `spanning_tree`,
    `dijkstra` and `prim`. The tree functions return `{node: parent}`
    mappings.
  - `format_adjacency`, `format_parents`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library usage

```python
from algokit.sorting import merge_sort
from algokit.numeric import gcd, extended_gcd, fibonacci
from algokit.stack import Stack
from algokit.graph import Graph, dijkstra, format_parents

print(merge_sort([33, 21, 7, 48, 28, 13, 65, 17]))

print(gcd(48, 18))
print(extended_gcd(240, 46))
print(fibonacci(10))

stack = Stack()
for value in (10, 20, 30):
    stack.push(value)
print(stack.pop())      # 30
print(stack.format())   # "20 10 "

graph = Graph(4)
graph.add_edge(1, 2, 1.0)
graph.add_edge(2, 3, 2.0)
graph.add_edge(1, 3, 5.0)
graph.add_edge(3, 4, 1.0)
print(format_parents(dijkstra(graph, 1)), end="")
```

## Command-line tools

Four programs are installed with the package. The prompts and messages of the
interactive ones are in Italian.

### `algokit-hanoi [DISCS]`

Solves the Tower of Hanoi and prints the pegs before and after. `DISCS`
defaults to 5.

### `algokit-list`

Reads tokens from standard input in this order:

1. A list size.
2. That many words, each pushed at the head of the list.
3. A word to delete.

It prints the list, the number of occurrences of the word, and the list with
those occurrences removed.

### `algokit-bst [--delete KEY]`

Reads `key value continue` triples from standard input until `continue` is
`0`, inserting each pair into a binary search tree. It prints the tree in key
order, deletes `KEY` (default 12) if present, and prints the tree again.

### `algokit-graph GRAPH_FILE DIRECTED WEIGHTED`

`DIRECTED` and `WEIGHTED` are `0` or `1`. The file starts with the number of
nodes, followed by `src dest` pairs, or `src dest weight` triples when the
graph is weighted.

The menu, read from standard input, has these options:

1. Build the graph from the file. This can be done only once, because the file
   is closed afterwards.
2. Show the adjacency lists.
3. Show the connected components.
4. Check connectivity.
5. Show a breadth-first spanning tree.
6. Show the shortest-path tree with Dijkstra.
7. Show the minimum spanning tree with Prim.
8. Exit.

Options 2 to 7 need the graph to be built first. If the file cannot be opened,
the program exits with status 2.

## Limits

- Every structure lives in memory only. Nothing is saved between runs.
- `BinaryTreeNode` offers only linking of children. It has no traversal or
  search of its own.