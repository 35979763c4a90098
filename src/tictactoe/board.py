"""
N x N board state.

Board representation: numpy int8 array of length N*N
  - 0: empty
  - +1: X
  - -1: O

Cell index i (1-based, row-major) lives in slot i - 1.
"""

from typing import Iterable

import numpy as np

from .config import MIN_SIZE, MAX_SIZE
from .errors import InvalidMove, OutOfBounds

EMPTY = 0
X = +1
O = -1

SYMBOLS = {X: "X", O: "O"}


def opponent(mark: int) -> int:
    """Return the other player's mark."""
    return -mark


def check_mark(mark: int):
    """Raise ValueError unless mark is X or O."""
    if mark not in SYMBOLS:
        raise ValueError(f"mark must be X (+1) or O (-1), got {mark!r}")


class Board:
    """
    Cells of one round.

    Only apply_move() writes to the cells; an occupied cell is never
    overwritten.
    """

    def __init__(self, size: int):
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(f"board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}")
        self.size = size
        self.cell_count = size * size
        self.cells = np.zeros(self.cell_count, dtype=np.int8)
        self.pad = len(str(self.cell_count))

    def __repr__(self) -> str:
        return f"Board(size={self.size}, filled={self.filled()})"

    def _slot(self, cell: int) -> int:
        if not 1 <= cell <= self.cell_count:
            raise OutOfBounds(cell, self.cell_count)
        return cell - 1

    def get(self, cell: int) -> int:
        """Mark at cell, or EMPTY."""
        return int(self.cells[self._slot(cell)])

    def is_empty(self, cell: int) -> bool:
        """True if nobody has played cell."""
        return self.get(cell) == EMPTY

    def apply_move(self, cell: int, mark: int):
        """
        Record mark at cell.

        Raises:
            InvalidMove: cell outside the board, already occupied, or an
                unknown mark. The board is left untouched.
        """
        if mark not in SYMBOLS:
            raise InvalidMove(cell, f"unknown mark {mark!r}")
        if not 1 <= cell <= self.cell_count:
            raise InvalidMove(cell, f"outside 1..{self.cell_count}")
        if self.cells[cell - 1] != EMPTY:
            raise InvalidMove(cell, f"occupied by {SYMBOLS[int(self.cells[cell - 1])]}")
        self.cells[cell - 1] = mark

    def marks_at(self, cells: Iterable[int]) -> np.ndarray:
        """Marks at the given 1-based cell indices."""
        idx = np.fromiter(cells, dtype=np.intp)
        if idx.size and (idx.min() < 1 or idx.max() > self.cell_count):
            bad = int(idx[(idx < 1) | (idx > self.cell_count)][0])
            raise OutOfBounds(bad, self.cell_count)
        return self.cells[idx - 1]

    def all_marked(self, cells: Iterable[int], mark: int) -> bool:
        """True if every listed cell holds mark."""
        return bool(np.all(self.marks_at(cells) == mark))

    def filled(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self.cells))

    def render(self, cell: int) -> str:
        """Occupant symbol, or the cell index zero-padded to the width of cell_count."""
        mark = self.get(cell)
        if mark == EMPTY:
            return str(cell).zfill(self.pad)
        return SYMBOLS[mark].center(self.pad)
