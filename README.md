# algosolve

A library of classic algorithm solutions, written as plain Python functions
and a few small classes. It has no runtime dependencies and needs Python 3.10
or later.

## Modules

- `algosolve.linkedlist`: `ListNode` (a dataclass that iterates over its
  values), `from_iterable`, `to_list`, `add_two_numbers`, `delete_node` and
  `odd_even_list`.
- `algosolve.trees`: `TreeNode`, `tree_from_level_order`,
  `tree_to_level_order`, `count_nodes`, `invert_tree`, `sum_numbers`,
  `search_bst`, `bst_from_preorder`, `is_cousins` and `kth_smallest`.
- `algosolve.containers`: `RandomizedSet`, `WeightedPicker`, `Trie` and
  `StockSpanner`.
- `algosolve.dp`: `maximal_square`, `change`, `num_squares`, `num_trees`,
  `largest_divisible_subset`, `count_squares`, `max_uncrossed_lines`,
  `min_distance` and `count_bits`.
- `algosolve.strings`: `get_permutation`, `is_subsequence`,
  `valid_ip_address`, `num_jewels_in_stones`, `can_construct`,
  `check_inclusion`, `find_anagrams`, `first_uniq_char`, `frequency_sort` and
  `remove_k_digits`.
- `algosolve.arithmetic`: `is_power_of_two`, `find_complement`,
  `is_perfect_square` and `check_straight_line`.
- `algosolve.arrays`: `find_duplicate`, `h_index`, `search_insert`,
  `single_number`, `sort_colors`, `reconstruct_queue`, `reverse_string`,
  `two_city_sched_cost`, `find_max_length`, `majority_element`,
  `max_subarray_sum_circular`, `single_non_duplicate`,
  `interval_intersection`, `k_closest` and `first_bad_version`.
- `algosolve.graphs`: `capture_regions`, `can_finish`, `find_judge`,
  `flood_fill` and `possible_bipartition`.

## Examples

```python
from algosolve.linkedlist import from_iterable, to_list, add_two_numbers
from algosolve.trees import tree_from_level_order, tree_to_level_order, invert_tree
from algosolve.dp import change, min_distance
from algosolve.strings import valid_ip_address
from algosolve.containers import Trie

total = add_two_numbers(from_iterable([2, 4, 3]), from_iterable([5, 6, 4]))
print(to_list(total))                        # [7, 0, 8]

root = tree_from_level_order([4, 2, 7, 1, 3, 6, 9])
print(tree_to_level_order(invert_tree(root)))  # [4, 7, 2, 9, 6, 3, 1]

print(change(5, [1, 2, 5]))                  # 4
print(min_distance("horse", "ros"))          # 3
print(valid_ip_address("172.16.254.1"))      # IPv4

trie = Trie()
trie.insert("apple")
print(trie.search("app"), trie.starts_with("app"))  # False True
```

Trees are built from and turned back into level-order lists in which `None`
marks a missing child; linked lists are built with `from_iterable` and read
back with `to_list`.

## Randomness

`RandomizedSet` and `WeightedPicker` take an optional `random.Random`
instance as `rng`; pass a seeded one for repeatable results. Without it each
object makes its own generator.

## In-place changes

Some functions change their argument rather than return a copy:
`sort_colors`, `reverse_string`, `capture_regions`, `delete_node`,
`invert_tree` and `odd_even_list`. `flood_fill` recolours the image in place
and also returns it.

## Errors

Inputs outside what a function can handle raise exceptions rather than
returning a marker value. For example, `kth_smallest` raises `IndexError` when
the tree has no k-th element, `get_permutation` and `remove_k_digits` raise
`ValueError` for an out-of-range `k`, `delete_node` raises `ValueError` for a
tail node, and `RandomizedSet.get_random` raises `IndexError` on an empty set.
A few functions keep a documented sentinel: `first_uniq_char`, `find_judge`
and `first_bad_version` return `-1` when there is no answer.

## Scope

This is a library only. It has no command-line tool and reads no input files.

## Running the tests

```
pip install -e ".[test]"
pytest
```