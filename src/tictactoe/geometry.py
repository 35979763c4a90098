"""
Board geometry for an N x N board.

Cells are addressed by a 1-based row-major index in [1, N*N]:

     1 |  2 |  3
    ---+----+---
     4 |  5 |  6
    ---+----+---
     7 |  8 |  9

Rows and columns are 1-based as well. Lines are returned as ``range``
objects of cell indices.
"""

from .errors import OutOfBounds


def _check(n: int, i: int):
    if not 1 <= i <= n * n:
        raise OutOfBounds(i, n * n)


def row(n: int, i: int) -> int:
    """Row of cell i, ceil(i / n)."""
    _check(n, i)
    return (i - 1) // n + 1


def col(n: int, i: int) -> int:
    """Column of cell i, ((i - 1) mod n) + 1."""
    _check(n, i)
    return (i - 1) % n + 1


def index_of(n: int, r: int, c: int) -> int:
    """Convert (row, col) to cell index."""
    if not (1 <= r <= n and 1 <= c <= n):
        raise OutOfBounds((r - 1) * n + c, n * n)
    return (r - 1) * n + c


def row_range(n: int, i: int) -> range:
    """Contiguous indices of the row containing cell i."""
    r = row(n, i)
    return range((r - 1) * n + 1, r * n + 1)


def column_set(n: int, i: int) -> range:
    """Every index congruent to i modulo n, clipped to the board."""
    return range(col(n, i), n * n + 1, n)


def main_diagonal(n: int) -> range:
    """1, n+2, 2n+3, ... (step n+1)."""
    return range(1, n * n + 1, n + 1)


def anti_diagonal(n: int) -> range:
    """n, 2n-1, 3n-2, ... (step n-1), ending at n*n - n + 1."""
    return range(n, n * n - n + 2, n - 1)


def on_main_diagonal(n: int, i: int) -> bool:
    """True if cell i lies on the main diagonal."""
    return row(n, i) == col(n, i)


def on_anti_diagonal(n: int, i: int) -> bool:
    """True if cell i lies on the anti-diagonal."""
    return row(n, i) + col(n, i) == n + 1
