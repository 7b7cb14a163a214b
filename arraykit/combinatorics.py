"""Binomial-coefficient helpers: Pascal's triangle and lattice path counts."""

from __future__ import annotations

from itertools import pairwise
from math import comb


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle.

    A non-positive ``num_rows`` gives an empty list.
    """
    rows: list[list[int]] = []
    for _ in range(max(num_rows, 0)):
        if not rows:
            rows.append([1])
        else:
            inner = [a + b for a, b in pairwise(rows[-1])]
            rows.append([1, *inner, 1])
    return rows


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an ``m`` by ``n`` grid.

    The count is ``C(m + n - 2, min(m, n) - 1)``. A grid with a side of one
    cell or less has a single path.
    """
    shorter = min(m, n) - 1
    if shorter <= 0:
        return 1
    return comb(m + n - 2, shorter)