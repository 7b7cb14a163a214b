# arraykit

A small library of well-known array algorithms that work on plain Python
lists: pair and quadruple sums, inversion counting, majority votes, interval
merging, permutation stepping, Pascal's triangle, grid path counts, matrix
rotation, search and zeroing, three-way partitioning and the best single
stock trade. It has no runtime dependencies.

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

| Module | Functions |
| --- | --- |
| `arraykit.sums` | `two_sum`, `four_sum` |
| `arraykit.counting` | `count_inversions`, `find_duplicate`, `longest_consecutive`, `majority_element`, `majority_elements`, `find_error_nums` |
| `arraykit.intervals` | `merge_intervals` |
| `arraykit.permutations` | `next_permutation` |
| `arraykit.combinatorics` | `pascal_triangle`, `unique_paths` |
| `arraykit.matrix` | `rotate`, `search_matrix`, `set_zeroes` |
| `arraykit.sorting` | `sort_colors` |
| `arraykit.stocks` | `max_profit` |

### In place or not

`next_permutation`, `rotate`, `set_zeroes` and `sort_colors` change the list
you pass in and return `None`, the way `list.sort` and `list.reverse` do.
Every other function leaves its input untouched and returns a new value;
`four_sum` and `merge_intervals` work on sorted copies.

### Errors and edge cases

- `two_sum` raises `ValueError` when no two values add up to the target.
- `find_duplicate` raises `ValueError` on an empty sequence. It expects
  `n + 1` integers drawn from `1..n`.
- `find_error_nums` returns `(duplicated, missing)`, with `-1` for a part
  that does not exist, and raises `ValueError` for values outside
  `0..len(nums)`.
- `majority_element` returns the Boyer-Moore voting candidate, which is the
  majority element whenever one occurs more than half the time; an empty
  input gives `0`.
- `majority_elements` returns, sorted, the values that occur more than
  `len(nums) // 3` times.
- `rotate` raises `ValueError` if the matrix is not square.
- `search_matrix` expects each row sorted and starting after the previous row
  ends; an empty matrix gives `False`.
- `sort_colors` treats any value other than `0` or `1` as `2`.
- `pascal_triangle` returns an empty list for a non-positive row count.
- `unique_paths` is exact for any grid size; a grid with a side of one cell
  or less has a single path.
- `max_profit` accepts any iterable of prices and returns `0` when no
  profitable trade exists, including for an empty series.

## Examples

```python
from arraykit.sums import two_sum, four_sum
from arraykit.intervals import merge_intervals
from arraykit.permutations import next_permutation
from arraykit.combinatorics import pascal_triangle, unique_paths
from arraykit.matrix import rotate, search_matrix
from arraykit.stocks import max_profit

two_sum([2, 7, 11, 15], 9)            # (0, 1)
four_sum([1, 0, -1, 0, -2, 2], 0)     # [[-2, -1, 1, 2], [-2, 0, 0, 2], [-1, 0, 0, 1]]
merge_intervals([[1, 3], [2, 6], [8, 10]])   # [[1, 6], [8, 10]]

nums = [1, 2, 3]
next_permutation(nums)                # nums is now [1, 3, 2]

pascal_triangle(3)                    # [[1], [1, 1], [1, 2, 1]]
unique_paths(3, 7)                    # 28

grid = [[1, 2], [3, 4]]
rotate(grid)                          # grid is now [[3, 1], [4, 2]]
search_matrix([[1, 3, 5], [7, 9, 11]], 9)    # True

max_profit([7, 1, 5, 3, 6, 4])        # 5
```

## What it does not do

arraykit is a library only: it has no command-line tool. Import the
functions from their modules as shown above.