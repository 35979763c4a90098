"""Tests for cell addressing on N x N boards."""

import math

import pytest

from tictactoe.errors import OutOfBounds
from tictactoe.geometry import (
    anti_diagonal,
    col,
    column_set,
    index_of,
    main_diagonal,
    on_anti_diagonal,
    on_main_diagonal,
    row,
    row_range,
)

SIZES = list(range(3, 31))


@pytest.mark.parametrize("n", SIZES)
def test_row_col_round_trip_every_cell(n):
    for i in range(1, n * n + 1):
        r, c = row(n, i), col(n, i)
        assert 1 <= r <= n
        assert 1 <= c <= n
        assert (r - 1) * n + c == i
        assert r == math.ceil(i / n)
        assert index_of(n, r, c) == i


@pytest.mark.parametrize("n", [3, 4, 7])
def test_column_set_is_symmetric(n):
    cells = range(1, n * n + 1)
    for i in cells:
        members = set(column_set(n, i))
        assert len(members) == n
        assert all(col(n, j) == col(n, i) for j in members)
        for j in cells:
            assert (j in members) == (i in set(column_set(n, j)))


def test_column_set_matches_modulo_definition():
    n = 5
    for i in range(1, 26):
        expected = {j for j in range(1, 26) if (j - i) % n == 0}
        assert set(column_set(n, i)) == expected


def test_row_range_3x3():
    assert list(row_range(3, 1)) == [1, 2, 3]
    assert list(row_range(3, 5)) == [4, 5, 6]
    assert list(row_range(3, 9)) == [7, 8, 9]


@pytest.mark.parametrize("n", SIZES)
def test_row_range_is_contiguous_row(n):
    for i in (1, n, n + 1, n * n):
        rr = row_range(n, i)
        assert len(rr) == n
        assert i in rr
        assert {row(n, j) for j in rr} == {row(n, i)}


def test_diagonals_3x3():
    assert list(main_diagonal(3)) == [1, 5, 9]
    assert list(anti_diagonal(3)) == [3, 5, 7]


def test_diagonals_4x4():
    assert list(main_diagonal(4)) == [1, 6, 11, 16]
    assert list(anti_diagonal(4)) == [4, 7, 10, 13]


@pytest.mark.parametrize("n", SIZES)
def test_diagonals_have_n_cells_on_the_right_squares(n):
    main = list(main_diagonal(n))
    anti = list(anti_diagonal(n))
    assert len(main) == n
    assert len(anti) == n
    assert all(row(n, i) == col(n, i) for i in main)
    assert all(row(n, i) + col(n, i) == n + 1 for i in anti)
    assert sum(on_main_diagonal(n, i) for i in range(1, n * n + 1)) == n
    assert sum(on_anti_diagonal(n, i) for i in range(1, n * n + 1)) == n


@pytest.mark.parametrize("fn", [row, col, row_range, column_set, on_main_diagonal, on_anti_diagonal])
@pytest.mark.parametrize("i", [0, -1, 10])
def test_out_of_bounds(fn, i):
    with pytest.raises(OutOfBounds):
        fn(3, i)


def test_index_of_rejects_outside_grid():
    with pytest.raises(OutOfBounds):
        index_of(3, 4, 1)
    with pytest.raises(OutOfBounds):
        index_of(3, 1, 0)
