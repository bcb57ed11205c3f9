# drills

Small, classic algorithms over Python lists, dictionaries and integers:
array exercises, dictionary-based counting, recursion and sorting.

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

### `drills.arrays`

- `array_sum(values)`, `contains(values, element)`, `index_of(values, element)`
  (first index or `-1`)
- `min_element(values)`, `smallest_two(values)` (smallest and second smallest
  distinct value; the second is `None` when all values are equal)
- `split_even_odd(values)` returns `(evens, odds)` in input order
- `element_frequencies(values)` pairs every element, in input order, with its count
- `insert_at(values, position, value)` inserts at a 1-based position
  (`IndexError` outside `1..len(values) + 1`)
- `is_sorted(values)`, `median(values)` (of an already sorted sequence, as a float)
- `move_zeroes(nums)` and `reverse_in_place(values)` change the list in place
- `rotate_left(values, k)` returns a new list rotated `k` places left
- `subarrays(values)` yields every contiguous subarray
- `two_sum_sorted(numbers, target)` returns 1-based indexes, or `(-1, -1)`

Functions that need at least one element raise `ValueError` on an empty sequence.

### `drills.hashing`

- `map_demo()` returns the lines of a walk through basic dictionary operations
- `group_anagrams(strs)` groups words by their sorted letters
- `sorted_frequencies(values)` returns `(value, count)` pairs by ascending value
- `subarray_sum_count(nums, k)` counts contiguous subarrays summing to `k`
- `subarrays_divisible_by(nums, k)` counts contiguous subarrays whose sum is
  divisible by `k` (`ValueError` for `k == 0`)

### `drills.recursion`

`repeat_line`, `countdown`, `max_element`, `occurrences`, `power`,
`recursive_sum`, `digit_sum`, `multiplication_table`, `fibonacci` (where
`fibonacci(1) == 0`) and `walk` (a generator over the elements).

### `drills.sorting`

- `merge_sort`, `quick_sort`, `bubble_sort`, `insertion_sort` and
  `selection_sort` sort a list in place and return `None`
- `partition(values, low, high)` partitions a range around its last element
  and returns the pivot's final index
- `largest_number(nums)` arranges non-negative integers into the largest number
- `sorted_squares(nums)` squares a sorted sequence and returns the squares in order

## Example

```python
from drills.arrays import rotate_left, median
from drills.hashing import subarray_sum_count
from drills.sorting import largest_number, quick_sort

rotate_left([10, 20, 30, 40, 50], 3)   # [40, 50, 10, 20, 30]
median([1, 2, 3, 4])                   # 2.5
subarray_sum_count([1, 1, 1], 2)       # 2
largest_number([3, 30, 34, 5, 9])      # "9534330"

values = [2, 5, 7, 45, 3, 1, 16, 15]
quick_sort(values)                     # sorts the list in place
```

## Command line

Installing the package provides a `drills` command with four subcommands:

```
drills reverse 1 2 3          # 3 2 1
drills rotate 3 10 20 30 40   # 40 10 20 30
drills power 2 10             # 1024
drills fibonacci 7            # 8
```

Invalid input, such as a negative exponent, is reported as a usage error.
`drills --help` lists the subcommands.

## Limitations

The command line covers only the four subcommands above; every other routine
is available from Python only. Nothing reads numbers interactively from
standard input.