# algokit

Classic algorithms and data structures in plain Python. The package uses
only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.arrays`

- `max_area(heights)`: the largest water area held between two walls.
- `find_duplicates(nums)`: for values in `1..len(nums)`, the values that
  repeat. A value is reported each time it completes a pair. Any value outside
  that range raises `ValueError`.
- `max_product_subarray(values)`, `max_subarray_sum(values)`: the largest
  product or sum of a contiguous, non-empty slice.
- `missing_number(values)`: the one number of `1..len(values)+1` that is absent.
- `or_adjacent(values)`: each element ORed with the next. The last element is kept.
- `lower_bound(values, value)` / `upper_bound(values, value)`: in a sorted
  sequence, the largest element not above `value` and the smallest element not
  below it. If there is none, `value` itself is returned.
- `largest_element(values)`, `is_palindromic_array(values)`,
  `remove_duplicates(values)` (keeps first occurrences in order),
  `rotate(values, k)` (rotates right by `k`).

Functions that need at least one element raise `ValueError` on an empty sequence.

### `algokit.bits`

- `binomial_coefficient(n, k)`: C(n, k), built from Pascal's triangle.
- `count_set_bits(n)`: the number of one bits in `n`, taken as an unsigned
  32-bit value.
- `xor_swap(a, b)`: returns `(b, a)`.

### `algokit.searching`

`jump_search`, `binary_search`, `binary_search_recursive` and `linear_search`.
Each takes `(values, target)` and returns the index of the target, or `None`
when it is not there. All but `linear_search` expect sorted input.

### `algokit.greedy`

- `min_refills(distance, mileage, stops)`: the fewest refuelling stops needed
  to cover `distance`, starting with a full tank. It raises `UnreachableError`,
  a `ValueError`, when some gap between stations is longer than `mileage`.
- `coin_change(amount)`: the fewest coins worth 10, 5 and 1 that make `amount`.
- `lottery_bills(amount)`: the fewest bills worth 100, 20, 10, 5 and 1 that
  make `amount`.

### `algokit.matrix`

- `matrix_sum(a, b)`
- `matrix_multiply(a, b)`

Both work on lists of lists. They raise `ValueError` when the shapes do not fit
or when the rows of a matrix differ in length.

### `algokit.sorting`

`heap_sort`, `insertion_sort`, `bubble_sort`, `counting_sort`, `cycle_sort`,
`merge_sort`, `quick_sort` and `selection_sort`. Each returns a new sorted
list and leaves its input unchanged. `counting_sort` accepts only
non-negative integers.

### `algokit.graph`

- `UndirectedGraph(vertex_count)`: `add_edge(u, v)`, `neighbours(vertex)`,
  `bfs(start)` and `dfs(start)`. The two traversals return the list of visited
  vertices. `str()` gives the adjacency list.
- `WeightedGraph(vertex_count)`: `add_edge(u, v, weight)` takes non-negative
  weights only. `shortest_distances(start)` runs Dijkstra's algorithm and gives
  `math.inf` for vertices that cannot be reached.
- `Edge(src, dest, weight)`: a frozen dataclass.
- `DisjointSet(size)`: union-find with `find(i)` and `union(x, y)`. `union`
  returns `False` when the two were already joined.
- `kruskal_mst(vertex_count, edges)`: the edges of a minimum spanning forest,
  lightest first.

### `algokit.maze`

`solve_maze(maze)` finds a path from the top-left cell to the bottom-right cell
of a grid, where open cells hold 1. The path moves only down or right, and
tries down first. It returns a grid with the path cells marked 1, or `None`
when there is no path.

### `algokit.expressions`

- `are_brackets_balanced(expression)`: any character other than an opening
  bracket, met while no bracket is open, counts as unbalanced.
- `is_valid_parentheses(text)`: ignores characters that are not brackets.
- `evaluate(expression)`: evaluates integer `+ - * /` with parentheses.
  Division truncates towards zero.
- `infix_to_postfix(expression)`: converts an expression with single-character
  operands and the operators `^ * / + -`.

### `algokit.bounded_queue`

`ArrayQueue(capacity)` is a FIFO queue with these methods:

- `enqueue(item)` raises `QueueFullError` when the queue is at capacity.
- `dequeue()` and `front()` raise `QueueEmptyError` when the queue is empty.

The queue supports `len()` and iteration.

### `algokit.stacks`

- `next_greater_elements(values)`, `next_greater_frequency(values)`: positions
  with no answer hold `None`.
- `reverse_words(text)`: reverses the letters of each space-separated word.
- `sort_stack(stack)`, `reverse_stack(stack)`: stacks are given and returned as
  lists, bottom first.

### `algokit.hanoi`

`hanoi_moves(disk_count)` solves the Tower of Hanoi iteratively. It returns the
list of `Move(disk, source, target)` that carries the disks from peg `S` to
peg `D`, using `A` as the spare. `str(move)` reads like
`Move the disk 1 from S to D`.

### `algokit.trees`

- `Node(data, left, right)`: a tree node.
- `BinaryTree(values=())`: fills each level from left to right. It has these
  methods:
  - `insert` and `delete`. `delete` moves the deepest value into the deleted
    place and returns `False` when the key is absent.
  - `height`, `maximum`, `minimum`, `left_view`, `right_view`.
  - `mirror`, `lowest_common_ancestor`.
  - `to_sum_tree`, which returns the sum of the original values.
  - `to_linked_list`, which empties the tree and returns the head of an
    in-order doubly linked list.
  - `preorder` and `inorder`.
- `BinarySearchTree(keys=())`: `insert` and `inorder`. Equal keys go left.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.searching import binary_search
from algokit.expressions import evaluate, infix_to_postfix
from algokit.graph import Edge, WeightedGraph, kruskal_mst

merge_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 10, 40], 10)     # 3
evaluate("100 * ( 2 + 12 ) / 14")        # 100
infix_to_postfix("a+b*c")                # 'abc*+'

graph = WeightedGraph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
graph.shortest_distances(0)              # [0, 4, 5]

edges = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]
kruskal_mst(4, edges)
# [Edge(src=2, dest=3, weight=4), Edge(src=0, dest=3, weight=5), Edge(src=0, dest=1, weight=10)]
```

```python
from algokit.trees import BinaryTree
from algokit.maze import solve_maze

tree = BinaryTree([10, 11, 9, 7, 12, 15, 8])
tree.left_view()                         # [10, 11, 7]
tree.delete(11)                          # True
tree.inorder()                           # [7, 8, 12, 10, 15, 9]

solve_maze([[1, 0, 0, 0],
            [1, 1, 0, 1],
            [0, 1, 0, 0],
            [1, 1, 1, 1]])
# [[1, 0, 0, 0], [1, 1, 0, 0], [0, 1, 0, 0], [0, 1, 1, 1]]
```

## What it does not do

The package is a library of functions and classes only. It has no
command-line programs. It does not read input from the terminal, and it does
not print results.