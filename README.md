# puzzlekit

Solutions to classic algorithm puzzles, written as plain functions over Python
lists, strings and integers. It needs nothing beyond the standard library and
supports Python 3.10 and later.

## Modules

### `puzzlekit.numbers`

- `int_to_roman(num)`: Roman numeral with subtractive notation (`1994` gives `"MCMXCIV"`).
- `convert_to_title(column_number)`: spreadsheet column title (`28` gives `"AB"`);
  raises `ValueError` for a negative number.
- `is_power_of_two(n)`, `is_power_of_four(n)`: whether `n` is a positive power of two or four.
- `is_power_of_three(n)`: whether `n` is a power of three that divides `3**19`, the
  largest power of three in the signed 32-bit range.
- `num_squares(n)`: least number of perfect squares summing to `n`; raises
  `ValueError` for a negative `n`.
- `smallest_good_base(n)`: takes and returns a decimal string; the smallest base
  `k >= 2` in which `n` is written with ones only. `n` must be between 1 and
  `2**64 - 1`, otherwise `ValueError` is raised.
- `my_atoi(s)`: skips leading spaces, reads an optional sign and the digits that
  follow, and clamps the result to the signed 32-bit range. Anything else at the
  start gives `0`.

### `puzzlekit.arrays`

- `max_area(height)`: two-pointer container scan; raises `ValueError` on an empty list.
- `max_points(points)`: most of the given distinct points on one line; raises
  `ValueError` if two points coincide.
- `rob(nums)`: largest sum of values with no two adjacent.
- `change(amount, coins)`: number of coin combinations making `amount`.
- `min_pair_sum(nums)`: the minimised largest pair sum.
- `is_covered(ranges, left, right)`: whether the ranges, in order, cover `[left, right]`.
- `merge_triplets(triplets, target)`: whether element-wise maxima of some triplets reach `target`.
- `build_array(nums)`: `[nums[n] for n in nums]`.
- `can_be_increasing(nums)`: whether removing at most one value leaves the list
  strictly increasing.
- `peak_index_in_mountain_array(arr)`: index of the peak of a mountain array.

### `puzzlekit.prefix_sums`

- `two_sum(nums, target)`: indices of the first pair adding up to `target`;
  raises `ValueError` if there is none.
- `subarray_sum(nums, k)`: number of contiguous subarrays summing to `k`.
- `num_submatrix_sum_target(matrix, target)`: number of submatrices summing to
  `target`; the matrix must be non-empty and rectangular.
- `check_subarray_sum(nums, k)`: whether a subarray of length two or more sums to
  a multiple of `k`.
- `find_max_length(nums)`: longest subarray with as many zeros as ones; the list
  may only hold `0` and `1`.
- `can_eat(candies_count, queries)`: for each `[type, day, daily_cap]` query,
  whether that candy type can be eaten on that day.
- `count_pairs(deliciousness)`: number of pairs whose sum is a power of two,
  modulo `1_000_000_007`; values must be non-negative and the list non-empty.

### `puzzlekit.linked_list`

- `ListNode(val, next=None)`: a dataclass node; iterating over a node yields the
  values from it to the end of the list.
- `from_values(values)`: builds a list, or returns `None` for no values.
- `to_values(head)`: the values of a list as a Python list (`[]` for `None`).
- `remove_elements(head, val)`: unlinks every node holding `val` and returns the new head.

### `puzzlekit.strings`

- `max_length(arr)`: length of the longest concatenation of words without a
  repeated character, found by a greedy recursion.
- `display_table(orders)`: turns `[customer, table, food]` orders into a table of
  counts, tables sorted numerically and foods alphabetically.
- `longest_palindrome(s)`: longest palindromic substring, earliest on ties.
- `count_good_substrings(s)`: number of length-three substrings with three different characters.
- `is_sum_equal(first_word, second_word, target_word)`: letters `a` to `j` stand
  for the digits 0 to 9; other letters raise `ValueError`.
- `max_value(n, x)`: inserts digit `x` into the number string `n` to make it largest.
- `remove_occurrences(s, part)`: removes the leftmost `part` until none is left.
- `make_equal(words)`: whether the letters can be shared out to make all words
  equal; only lower-case letters are accepted.
- `maximum_removals(s, p, removable)`: largest `k` such that `p` is still a
  subsequence of `s` after removing the first `k` indices in `removable`.

## Example

```python
from puzzlekit.numbers import int_to_roman, my_atoi
from puzzlekit.arrays import rob
from puzzlekit.prefix_sums import two_sum
from puzzlekit.linked_list import from_values, to_values, remove_elements
from puzzlekit.strings import longest_palindrome

int_to_roman(1994)              # "MCMXCIV"
my_atoi("   -42")               # -42
rob([2, 7, 9, 3, 1])            # 12
two_sum([3, 2, 4], 6)           # [1, 2]
longest_palindrome("cbbd")      # "bb"

head = from_values([1, 2, 6, 3, 4, 5, 6])
to_values(remove_elements(head, 6))   # [1, 2, 3, 4, 5]
```

## What it does not do

The package is a library of functions only: it has no command-line program and
reads no input of its own.

## Tests

The tests use pytest, which the `test` extra installs.