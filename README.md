# codekata

Small, self-contained solutions to well-known algorithm exercises. They are
grouped by theme into plain Python modules and use nothing outside the
standard library.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `codekata.arrays` | `two_sum`, `remove_duplicates`, `remove_element`, `search_insert`, `running_sum`, `maximum_wealth` |
| `codekata.text` | `roman_to_int`, `longest_common_prefix`, `brackets_match`, `is_valid`, `str_str`, `length_of_last_word`, `add_binary`, `can_construct`, `fizz_buzz` |
| `codekata.integers` | `is_palindrome`, `plus_one`, `my_sqrt`, `number_of_steps`, `distribute_candies`, `reverse`, `my_atoi`, `judge_square_sum` |
| `codekata.substrings` | `length_of_longest_substring`, `longest_palindrome`, `convert` |
| `codekata.linked_list` | `ListNode`, `merge_two_lists`, `middle_node`, `add_two_numbers` |
| `codekata.optimize` | `find_median_sorted_arrays`, `min_patches`, `find_maximized_capital`, `three_sum`, `max_profit_assignment`, `max_satisfied`, `number_of_subarrays`, `can_make_bouquets`, `min_days` |

## Examples

```python
from codekata.arrays import two_sum
from codekata.text import roman_to_int, is_valid
from codekata.integers import my_atoi
from codekata.linked_list import ListNode, add_two_numbers

two_sum([2, 7, 11, 15], 9)      # [1, 0]  (later index first)
roman_to_int("MCMXCIV")         # 1994
is_valid("()[]{}")              # True
my_atoi("   -42")               # -42

total = add_two_numbers(ListNode.from_values([2, 4, 3]),
                        ListNode.from_values([5, 6, 4]))
total.to_list()                 # [7, 0, 8]
```

## Notes on behaviour

- `remove_duplicates` and `remove_element` change the list they are given in
  place and return its new length; `remove_element` also sorts the list.
- `two_sum` returns `[]` when no pair adds up to the target.
- `my_atoi` and `reverse` keep to the signed 32-bit range: `my_atoi` clamps,
  `reverse` returns 0 when the result would not fit.
- `ListNode` is a dataclass with `val` and `next`. `ListNode.from_values`
  builds a list (or `None` for no values), iterating a node yields its values,
  `to_list` collects them, `reversed` returns a reversed copy, and `+` adds two
  numbers stored least significant digit first. `add_two_numbers` returns
  `None` when either operand is `None`.
- `find_median_sorted_arrays` returns `0.0` when both arrays are empty;
  `min_days` returns `-1` when the bouquets cannot be made.
- Some functions raise `ValueError` on input they cannot handle:
  `longest_common_prefix` with no strings, `plus_one` with no digits,
  `number_of_steps` with a negative number, `longest_palindrome` with an empty
  string, `convert` with fewer than one row, `max_profit_assignment` with no
  workers, `max_satisfied` with a negative window and `number_of_subarrays`
  with `k` below 1.

## What it does not do

This is a library of functions only. It has no command-line program; call the
functions from your own Python code.