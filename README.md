# algobox

A collection of self-contained algorithm routines written as plain functions. It has no runtime dependencies and needs Python 3.10 or later.

Each function takes ordinary Python values, such as lists, strings and integers, and returns a result. Input the function cannot work with raises `ValueError`. `algobox.peaks.count_of_peaks` raises `IndexError` for a position outside the array.

## Modules

### `algobox.graphs`

Routines for trees and grids:

- `find_min_height_trees(n, edges)`: the one or two roots that give a tree its smallest height.
- `sum_of_distances_in_tree(n, edges)`: for each node, the sum of its distances to all the other nodes.
- `maximum_value_sum(nums, k, edges)`: the largest node sum you can reach by XOR-ing both ends of edges with `k`.
- `minimum_diameter_after_merge(edges1, edges2)`: the smallest diameter you can get by joining two trees with one edge.
- `open_lock(deadends, target)`: the fewest wheel turns from `"0000"` to `target`, or -1.
- `min_time_to_reach(move_time)`: the earliest arrival at the bottom-right cell when moves alternately take one and two seconds.
- `min_operations(n, m)`: the least total of the values visited while turning `n` into `m` one digit at a time without passing through a prime. Values must be below 10,000. Returns -1 when `m` cannot be reached.
- `minimum_sum_of_areas(grid)`: the smallest total area of three rectangles that together cover every 1 in the grid.

### `algobox.peaks`

- `count_of_peaks(nums, queries)`: answers queries against an array that changes as the queries run. A query `(1, left, right)` counts the peaks strictly inside the range. A query `(2, index, value)` sets an element.

### `algobox.strings`

- `min_anagram_length`, `get_smallest_string`, `num_steps`, `compare_version`, `maximum_gain`.
- `min_valid_strings(words, target)`: the fewest word prefixes that concatenate to `target`, using an Aho–Corasick style automaton.
- `min_starting_index(s, pattern)`: the first window of `s` that differs from `pattern` in at most one place.
- `count_of_substrings(word, k)`: the number of substrings that contain every vowel and exactly `k` consonants.
- `find_palindromic_subtrees(parent, s)`: for each node, whether its post-order string is a palindrome.

### `algobox.dynamic`

`maximum_total_damage`, `minimum_cutting_cost`, `min_changes`, `max_score_words`, `count_monotonic_pairs`, `maximum_rook_sum`, `max_score_distinct_rows`, `maximal_rectangle`, `find_rotate_steps`, `min_distance` (edit distance), `max_removals` and `find_permutation`.

### `algobox.subarray_and`

- `count_subarrays_with_and(nums, k)`: the number of subarrays whose bitwise AND equals `k`.

### `algobox.bitwise`

- `closest_to_target(arr, target)`: the smallest `|AND(subarray) - target|` over all subarrays.

### `algobox.arrays`

`count_days`, `count_almost_equal_pairs`, `get_final_state`, `k_nearest_obstacles`, `max_possible_score`, `min_number_of_seconds`, `find_x_sum`, `count_bits`, `check_subarray_sum`, `least_interval`, `kth_smallest_prime_fraction`, `is_n_straight_hand`, `mincost_to_hire_workers` and `deck_revealed_increasing`.

## Example

```python
from algobox.dynamic import min_distance
from algobox.arrays import count_bits
from algobox.strings import compare_version

print(min_distance("horse", "ros"))        # 3
print(count_bits(5))                       # [0, 1, 1, 2, 1, 2]
print(compare_version("1.01", "1.001"))    # 0
```

## What it does not do

algobox is a library of functions only. It has no command-line tool. It has no runner that reads cases from files and writes the results.

## Running the tests

```
pip install -e ".[test]"
pytest
```