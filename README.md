# algokit

A collection of classic algorithms over lists, strings, matrices and binary
trees, written as small, plain Python functions. It has no dependencies
outside the standard library.

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

- `algokit.sums`: `two_sum`, `three_sum`, `four_sum`, `subarray_sum`,
  `max_subarray`, `max_product`, `max_profit`
- `algokit.counting`: `longest_consecutive`, `single_number`,
  `majority_element`, `majority_elements`, `max_consecutive_ones`
- `algokit.searching`: `binary_search`, `search_insert`, `search_range`,
  `search_rotated`, `search_rotated_with_duplicates`, `find_min_rotated`,
  `single_non_duplicate`, `missing_number`
- `algokit.answer_search`: binary search over the answer space, with
  `ship_within_days`, `smallest_divisor`, `min_days`, `find_kth_positive`,
  `int_sqrt` and `min_eating_speed`
- `algokit.inplace`: `rotate`, `remove_duplicates`, `move_zeroes`,
  `next_permutation`, `sort_colors` and `merge_sorted` change the list they
  are given; `rearrange_by_sign` returns a new list and
  `is_sorted_and_rotated` only inspects its argument
- `algokit.monotonic`: monotonic-stack algorithms, with
  `next_greater_element`, `next_greater_elements_circular`,
  `largest_rectangle_area`, `sum_subarray_mins` (modulo `MODULUS`,
  10**9 + 7), `sum_subarray_ranges` and `trap`
- `algokit.stacks`: `is_valid_parentheses`, `remove_outer_parentheses`,
  `remove_k_digits`, `asteroid_collision`
- `algokit.text`: `longest_common_prefix`, `reverse_words`,
  `largest_odd_number`, `is_isomorphic`, `is_anagram`, `rotate_string`
- `algokit.intervals`: `merge_intervals`
- `algokit.matrix`: `pascals_triangle`, and `rotate_image` and `set_zeroes`,
  which change the matrix in place
- `algokit.trees`: `TreeNode` (compared by identity), `from_level_order`,
  `is_symmetric`, `vertical_traversal`, `zigzag_level_order`,
  `right_side_view`, `lowest_common_ancestor`, `binary_tree_paths`

## Examples

```python
from algokit.sums import two_sum, three_sum
from algokit.searching import search_range, search_rotated
from algokit.trees import from_level_order, zigzag_level_order, binary_tree_paths

two_sum([2, 7, 11, 15], 9)                 # (0, 1)
three_sum([-1, 0, 1, 2, -1, -4])           # [[-1, -1, 2], [-1, 0, 1]]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)   # 4
search_range([5, 7, 7, 8, 8, 10], 8)       # (3, 4)

root = from_level_order([3, 9, 20, None, None, 15, 7])
zigzag_level_order(root)                   # [[3], [20, 9], [15, 7]]
binary_tree_paths(root)                    # ['3->9', '3->20->15', '3->20->7']
```

## Errors

Where an answer cannot exist, functions raise `ValueError` rather than return
a sentinel: for example `two_sum` when no pair adds up to the target,
`max_subarray`, `max_product`, `majority_element`, `find_min_rotated` and
`single_non_duplicate` on empty input, `int_sqrt` on a negative number,
`remove_k_digits` when asked to remove more digits than there are, and
`next_greater_element` when a value of the first sequence is missing from the
second. The searches that report "not found" (`binary_search`,
`search_rotated`, `search_range`) return -1, and `min_days` returns -1 when
there are too few flowers.