# algokit

Small, readable implementations of classic algorithms and data structures:
searching, sorting, binary search trees, hash maps, linked lists, buffers,
stacks, queues, multidimensional arrays, graph traversal and a flood-fill
maze solver.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.searching` | `linear_search`, `binary_search` (both return an index or `None`), `some_product` |
| `algokit.sorting` | in-place `selection_sort`, `selection_sort_min`, `insertion_sort`, `insertion_sort_two_steps`, `bubble_sort`, `bubble_sort_recursive`, `quick_sort`, `heap_sort`; `heapify(items, parent, size)`; `merge_sort` (returns a new list); `is_sorted` |
| `algokit.bst` | `BinarySearchTree` (`add`, `find`), `Node`, `build_tree`, the recursive helpers `find_in_subtree` and `add_into_subtree`, and the list-backed `IndexedTree` (`add`, `find`, `children`) with `IndexedNode` |
| `algokit.associative` | `ChainedHashMap` (`add_or_get`, item access, `in`, `len`), `LinearProbingMap` (`add`, `get`, item access, `in`, `len`), `first_letter_hash` |
| `algokit.linked_lists` | `LinkedList` and `ListNode`; `DoublyLinkedList` (`append`, `pop_front`, `pop_back`, `remove`, forward and reversed iteration) and `DoublyNode` |
| `algokit.containers` | `FixedBuffer`, `DynamicArray`, `ArrayStack`, `LinkedStack`, `LinkedQueue`, `RingBufferQueue`, `collect_until_sentinel`, `format_elements` |
| `algokit.multiarray` | `IliffeArray` (nested lists filled 0, 1, 2, ...), `LinearArray` (flat storage, row- or column-major), `compute_total_size`, `iterate_indices` |
| `algokit.graphs` | `GraphNode`, `SearchAlgorithm`, `iter_dfs`, `iter_bfs`, `dfs`, `bfs`, `search`, `find_value`, `neighbors_of_neighbors`, `create_sample_graph`, `create_search_graph` |
| `algokit.maze` | `Grid`, `parse_grid`, `format_grid`, `flood`, `backtrack`, `main` |
| `algokit.waves_levels` | `parse_flat_map`, `escape_path` |

Bounded containers raise `OverflowError` when full and `IndexError` when
read or popped past their contents. `LinearProbingMap.add` always takes the
next free slot and does not replace an existing entry with the same key.

## Examples

Searching a sorted list:

```python
from algokit.searching import binary_search

binary_search([1, 5, 7, 10, 15, 32, 89], 10)   # 3
binary_search([1, 5, 7, 10, 15, 32, 89], 0)    # None
```

Sorting:

```python
from algokit.sorting import quick_sort, merge_sort

data = [5, 4, 3, 9, 1, 10, 1, 8, 12]
quick_sort(data)              # sorts in place
merge_sort([11, 5, 8, 15])    # returns a new sorted list
```

A binary search tree:

```python
from algokit.bst import build_tree

tree = build_tree([5, 7, 2, 6, 9, 10, 8])
node = tree.find(9)           # node.left.value == 8, node.right.value == 10
```

Hash maps with a pluggable hash function:

```python
from algokit.associative import ChainedHashMap, first_letter_hash

table = ChainedHashMap(first_letter_hash, 64)
table["abc"] = 1
table["abc"]                        # 1
table.add_or_get("c", 4)            # (4, True)
table.add_or_get("c")               # (4, False)
```

Queues and stacks:

```python
from algokit.containers import RingBufferQueue

queue = RingBufferQueue(5)
for value in (1, 2, 3, 4, 5):
    queue.enqueue(value)
queue.dequeue()               # 1
```

Multidimensional arrays:

```python
from algokit.multiarray import IliffeArray, LinearArray

IliffeArray([3, 4, 5])[1, 0, 4]     # 24
LinearArray([3, 4, 5]).linear_index((1, 0, 4))
```

Graph searches:

```python
from algokit.graphs import create_search_graph, find_value, SearchAlgorithm

root = create_search_graph()
find_value(root, 5, SearchAlgorithm.BFS)
```

## Maze solver

A maze is text where `#` is a wall, `w` a water source and a space an
empty cell. The first line sets the width; shorter lines are padded with
empty cells and longer ones are rejected. Water spreads from the sources
one step at a time until it reaches the edge of the grid; the route it
took is then traced back and returned as a list of cell indices.

```python
from algokit.maze import parse_grid, flood

grid = parse_grid("####\n# ##\n#w #\n#   \n####")
flood(grid)       # path from the source to the border, or None
```

`algokit.waves_levels` does the same level by level on a map given as one
string without line breaks (`B` wall, `W` water, space empty) and a row
width, via `parse_flat_map` and `escape_path`.

The solver is also available as a command that reads a maze file
(`maze.maze` in the current directory when no path is given), prints the
grid and then the escape path, or a message that the maze has no exit:

```
algokit-maze maze.maze
```

It exits with status 1 if the file cannot be read or is not a valid maze.

## What it does not do

Everything here runs in memory. There is no interactive prompt for typing
numbers into the containers, and the maze command is the only command the
package installs.