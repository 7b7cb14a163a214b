import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraykit.matrix import rotate, search_matrix, set_zeroes

square_matrices = st.integers(min_value=1, max_value=6).flatmap(
    lambda n: st.lists(
        st.lists(st.integers(-50, 50), min_size=n, max_size=n), min_size=n, max_size=n
    )
)

rectangular_matrices = st.tuples(
    st.integers(min_value=1, max_value=6), st.integers(min_value=1, max_value=6)
).flatmap(
    lambda dims: st.lists(
        st.lists(st.integers(-3, 3), min_size=dims[1], max_size=dims[1]),
        min_size=dims[0],
        max_size=dims[0],
    )
)


def test_rotate_two_by_two():
    matrix = [[1, 2], [3, 4]]
    rotate(matrix)
    assert matrix == [[3, 1], [4, 2]]


@given(square_matrices)
def test_rotate_moves_cells_clockwise(matrix):
    original = copy.deepcopy(matrix)
    rotate(matrix)
    size = len(original)
    for i in range(size):
        for j in range(size):
            assert matrix[j][size - 1 - i] == original[i][j]


@given(square_matrices)
def test_four_rotations_restore(matrix):
    original = copy.deepcopy(matrix)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


def test_rotate_keeps_row_objects():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rows = [id(row) for row in matrix]
    rotate(matrix)
    assert [id(row) for row in matrix] == rows


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate([[1, 2, 3], [4, 5, 6]])


@given(
    st.lists(st.integers(-100, 100), min_size=1, max_size=40, unique=True),
    st.integers(min_value=1, max_value=5),
    st.integers(-110, 110),
)
def test_search_matches_membership(values, width, target):
    values = sorted(values)
    usable = len(values) - len(values) % width or len(values)
    values = values[:usable]
    if len(values) % width:
        width = 1
    matrix = [values[k:k + width] for k in range(0, len(values), width)]
    assert search_matrix(matrix, target) is (target in values)


@pytest.mark.parametrize("matrix", [[], [[]]])
def test_search_empty_matrix(matrix):
    assert search_matrix(matrix, 1) is False


def test_set_zeroes_example():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    set_zeroes(matrix)
    assert matrix == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]


@given(rectangular_matrices)
def test_set_zeroes_invariant(matrix):
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    for i, row in enumerate(original):
        for j, value in enumerate(row):
            crossed = 0 in row or any(r[j] == 0 for r in original)
            assert matrix[i][j] == (0 if crossed else value)