# algodrills

A collection of classic algorithm exercises as plain Python functions and
classes. It covers backtracking, binary search, dynamic programming, graph
traversal, heaps, binary search trees and a bitwise trie. Every solution takes
ordinary Python values and returns a result. Invalid input, such as a negative
size, an out-of-range node or an empty list where one is needed, raises
`ValueError`.

The package has no dependencies beyond the standard library.

## Modules

| Module | What it holds |
| --- | --- |
| `algodrills.backtracking` | `interleavings`, `n_queens` |
| `algodrills.search` | `integer_cube_root` |
| `algodrills.dp_counting` | counting problems, most reduced modulo `MOD` (1 000 000 007): `domino_arrangements_easy`, `domino_arrangements_hard`, `binary_strings_without_adjacent_ones`, `factorial_mod`, `count_subsets_with_sum`, `has_subset_sum`, `decode_ways`, `dice_roll_sequences`, `matrix_paths`, `binomial_mod` |
| `algodrills.dp_optimization` | best-value problems: `max_apples`, `max_sum_no_double_skip`, `min_job_time`, `knapsack`, `longest_increasing_subsequence`, `min_cost_dice_rolls`, `min_painting_cost`, `max_wrapping_path`, `max_problem_points` |
| `algodrills.heaps` | `running_medians`, `kth_smallest`, `min_rod_connection_cost` |
| `algodrills.graphs` | `is_forest`, `has_undirected_cycle`, `has_directed_cycle`, `count_unreachable_pairs`, `count_components`, `knight_distance`, `count_islands`, `is_path` |
| `algodrills.bst` | `Node` and `BinarySearchTree`: insertion, deletion, membership, traversals, height, trimming, lowest common ancestor, completeness and fullness checks |
| `algodrills.tree_views` | `level_order`, `left_view`, `right_view`, `top_view`, `vertical_order`, `diagonal_order` |
| `algodrills.tree_metrics` | `diameter`, `max_alternating_sum` |
| `algodrills.xor_trie` | `XorTrie` and `max_pair_xor` |

## Examples

```python
from algodrills.backtracking import interleavings, n_queens
from algodrills.search import integer_cube_root
from algodrills.dp_counting import decode_ways, binomial_mod
from algodrills.heaps import kth_smallest, min_rod_connection_cost

interleavings("ab", "c")                  # ['abc', 'acb', 'cab']
n_queens(4)                               # [(1, 3, 0, 2), (2, 0, 3, 1)]
integer_cube_root(27)                     # 3
integer_cube_root(-8)                     # -2
decode_ways("121")                        # 3
binomial_mod(5, 2)                        # 10
kth_smallest([7, 10, 4, 3, 20, 15], 3)    # 7
min_rod_connection_cost([4, 3, 2, 6])     # 29
```

`n_queens` gives each solution as the queen's column for every row.
`decode_ways` reads two digits together only when they start with `1`, or
with `2` followed by a digit below `6`.

Most graph functions take the number of vertices, numbered from 1, and a list
of edges given as pairs (`has_directed_cycle` numbers vertices from 0 to `n`):

```python
from algodrills.graphs import count_components, is_path, knight_distance

edges = [(1, 2), (2, 3), (4, 5)]
count_components(5, edges)                # 2
is_path(5, edges, 1, 3)                   # True
is_path(5, edges, 1, 5)                   # False
```

`knight_distance(rows, cols, start, target)` numbers squares from 1 and
returns `None` when the target is off the board or cannot be reached.

Binary search trees are built from an iterable of values, and the tree
functions work on them. Equal values go right unless the tree is made with
`duplicates_left=True`:

```python
from algodrills.bst import BinarySearchTree
from algodrills.tree_views import level_order
from algodrills.tree_metrics import diameter

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
40 in tree                                # True
tree.delete(30)                           # True
tree.inorder()                            # [20, 40, 50, 60, 70, 80]
level_order(tree)                         # [[50], [40, 70], [20, 60, 80]]
tree.height()                             # 2
diameter(tree)                            # 5
```

`BinarySearchTree.insert` returns the depth at which the value was placed, and
`trim(low, high)` drops every value outside that range in place.

The XOR trie finds the largest XOR of any two values:

```python
from algodrills.xor_trie import max_pair_xor

max_pair_xor([3, 10, 5, 25, 2, 8])        # 28
```

## What it does not do

This is a library only. There is no command-line program: nothing reads test
cases from standard input or prints answers. Call the functions from your own
code and format their results as you need.