# algokit

Classic algorithms and data structures written in plain Python, using only
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `selection_sort_passes`, quicksort variants (`quicksort_first_pivot`, `quicksort_random_pivot`, `quicksort_hoare`, `quicksort_lomuto`, `quicksort_comparisons`), `heap_sort`, `merge_sort`, `bucket_sort`, `dutch_flag_sort` |
| `algokit.searching` | `linear_search`, `prefix_function`, `kmp_search`, `rabin_karp_search` |
| `algokit.nqueens` | `is_queen_safe`, `n_queens_solutions` |
| `algokit.stacks` | `ArrayStack` (bounded), `LinkedStack`, `StackEmptyError`, `StackFullError` |
| `algokit.queues` | `LinearQueue`, `CircularQueue`, `TwoStackQueue`, `QueueEmptyError`, `QueueFullError` |
| `algokit.strings` | `camel_case_words`, `common_child_length` (longest common subsequence), `permutations`, `precedence`, `infix_to_postfix` |
| `algokit.linked_list` | `ListNode`, `SinglyLinkedList`, `has_cycle` (Floyd), `reverse_list` |
| `algokit.trees` | `TreeNode`, `ArrayBinarySearchTree`, `bst_insert`, `inorder`, `preorder`, `build_tree`, `is_bst`, `tree_size`, `largest_bst_size`, `lowest_common_ancestor` |
| `algokit.medians` | `median_of_sorted`, `median_equal_length`, `median_merged` |
| `algokit.subarrays` | `kadane`, `max_subarray_sum`, `longest_increasing_subsequence`, `max_profit` |
| `algokit.binomial_heap` | `BinomialHeap` with insert, minimum, extract, decrease-key and delete |
| `algokit.range_queries` | `FenwickTree`, `SegmentTree`, `prefix_sums`, `prefix_sums_2d`, `range_sum`, `range_sum_2d` |
| `algokit.disjoint_set` | `DisjointSet` with path compression and union by size |
| `algokit.number_theory` | `mod_pow`, `power`, `gcd`, `is_prime`, `count_primes`, `sieve`, `smallest_prime_factors`, `prime_factors`, `chinese_remainder`, `fibonacci`, `is_leap_year`, `nth_ugly_number`, `is_palindrome_number`, `collatz_sequence`, `to_roman` |
| `algokit.graph_traversal` | `undirected_adjacency`, `bfs_order`, `count_reachable`, `bfs_all`, `dfs`, `dfs_recursive_all`, `dfs_stack_all`, `is_bipartite`, `transitive_closure`, `GridMap` |
| `algokit.flood_fill` | `flood_fill` (eight-way, breadth-first) |
| `algokit.topological` | `topological_order`, `lexicographic_topological_order`, `has_cycle`, `CycleError` |
| `algokit.shortest_paths` | `dijkstra`, `bellman_ford`, `floyd_warshall`, `NegativeCycleError` |
| `algokit.spanning_trees` | `kruskal`, `prim` |
| `algokit.array_problems` | `atm_order`, `min_max_pages`, `min_chocolate_difference`, `majority_element`, `merge_sorted`, `minimize_height_difference`, `trapped_water`, `swap_with_next_but_one` |

The sorting functions take any iterable and return a new sorted list; the
input is left alone.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.searching import kmp_search
from algokit.number_theory import to_roman, mod_pow
from algokit.stacks import ArrayStack

merge_sort([5, 2, 9, 1])              # [1, 2, 5, 9]
kmp_search("ababdcbabdbdac", "abd")   # [2, 7]
to_roman(1994)                        # 'MCMXCIV'
mod_pow(2, 10, 1_000_000_007)         # 1024

stack = ArrayStack(10)
stack.push(3)
stack.push(4)
stack.pop()                           # 4
```

Traversal functions take adjacency lists, which `undirected_adjacency` builds
from an edge list:

```python
from algokit.graph_traversal import undirected_adjacency, bfs_order

graph = undirected_adjacency(4, [(0, 1), (0, 2), (2, 3)])
bfs_order(graph, 0)
```

Shortest-path and spanning-tree functions take a vertex count and
`(u, v, weight)` triples. Shortest distances to unreachable vertices are
`None`; `kruskal` and `prim` return the total cost and the chosen edges.

## Errors

Operations that cannot succeed raise exceptions: popping from an empty stack
raises `StackEmptyError`, adding to a full queue raises `QueueFullError`,
ordering a cyclic graph raises `CycleError`, and a reachable negative cycle
raises `NegativeCycleError`. Invalid arguments such as negative sizes or
out-of-range vertices raise `ValueError` or `IndexError`. Lookups that may
simply find nothing, such as `linear_search` and `SinglyLinkedList.find`,
return `-1`, and `majority_element` returns `None`.

## What it does not do

algokit is a library only. It has no command-line program and no interactive
menus; it reads no input and prints nothing. Call its functions and classes
from your own code.