# algosolve

Well-known algorithms and small data structures as plain Python functions
and classes. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and use pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `algosolve.linked_list`

`ListNode(val=0, next=None)` is a singly linked list node; iterating over a
node yields the values from it to the end of the list. `build_list(values)`
makes a list (or `None` for no values) and `list_values(head)` reads it back.

Operations: `detect_cycle`, `get_intersection_node`, `remove_nth_from_end`,
`add_two_numbers`, `reverse_list`, `merge_two_lists`, `delete_middle`,
`delete_node`, `odd_even_list`, `middle_node`. Most of them relink the given
nodes in place. `remove_nth_from_end` raises `ValueError` for a position
outside the list, and `delete_node` raises `ValueError` for the last node.

### `algosolve.structures`

- `MinStack`: `push`, `pop`, `top`, `get_min`, and `len()`. `pop` on an
  empty stack does nothing; `top` and `get_min` raise `IndexError`.
- `QueueStack`: a stack kept in one queue; `push`, `pop`, `top`, `empty`.
- `StackQueue`: a queue kept in two stacks; `push`, `pop`, `peek`, `empty`.
- `Twitter`: `post_tweet`, `follow`, `unfollow`, and `get_news_feed`, which
  returns up to ten tweet ids from the user and whom they follow, newest
  first.

Popping or peeking at an empty `QueueStack` or `StackQueue` raises
`IndexError`.

### `algosolve.parentheses`

`remove_outer_parentheses`, `max_depth`, `is_valid` (round, curly and square
brackets) and `check_valid_string` (`*` may stand for `(`, `)` or nothing).

### `algosolve.text`

`roman_to_int`, `longest_common_prefix`, `reverse_words`, `beauty_sum`,
`largest_odd_number`, `is_isomorphic`, `shortest_palindrome`, `is_anagram`,
`frequency_sort`, `longest_palindrome`, `zigzag_convert`, `min_distance`
(edit distance), `my_atoi` (clamped to 32-bit range), `rotate_string`,
`remove_k_digits`, `to_binary` and `convert_date_to_binary` (for
`YYYY-MM-DD` dates).

### `algosolve.windows`

`subarrays_with_k_distinct`, `longest_ones`, `length_of_longest_substring`
and `min_window`.

### `algosolve.searching`

`ship_within_days`, `find_peak_element`, `search_rotated`, `search_insert`,
`find_median_sorted_arrays` and `my_sqrt` (integer square root, rounded
down).

### `algosolve.numeric`

`single_number`, `is_power_of_two`, `min_bit_flips` (over the low 32 bits)
and `my_pow` (integer powers by repeated squaring).

### `algosolve.sequences`

`max_area`, `calculate_minimum_hp`, `find_kth_largest`, `sub_array_ranges`,
`trap`, `next_greater_element`, `asteroid_collision` and `subsets`.

### `algosolve.greedy`

`find_content_children`, `least_interval`, `is_n_straight_hand` and
`lemonade_change`.

## Examples

```python
from algosolve.linked_list import build_list, list_values, reverse_list
from algosolve.text import roman_to_int, min_distance
from algosolve.structures import MinStack

print(list_values(reverse_list(build_list([1, 2, 3]))))  # [3, 2, 1]
print(roman_to_int("MCMXCIV"))                          # 1994
print(min_distance("horse", "ros"))                     # 3

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
print(stack.get_min())  # -3
stack.pop()
print(stack.get_min())  # -2
```

## What it does not do

This is a library only: there is no command-line program, and nothing is
read from or saved to files. The `Twitter` feed lives in memory for as long
as its object does.