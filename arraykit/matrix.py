"""In-place transformations and searches over rectangular integer matrices."""

from __future__ import annotations

from collections.abc import Sequence


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square ``matrix`` 90 degrees clockwise, in place.

    The row lists themselves are reused. Raises ``ValueError`` if the matrix
    is not square.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate() needs a square matrix")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Report whether ``target`` occurs in a matrix sorted in row-major order.

    Every row must be sorted and start after the previous row ends; the
    search is a binary search over the flattened cells.
    """
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    low, high = 0, len(matrix) * width - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, width)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0