"""Exceptions raised by the board, the evaluator and the console loop."""


class TicTacToeError(Exception):
    """Base class for game errors."""


class OutOfBounds(TicTacToeError, IndexError):
    """A cell index outside [1, cell_count]."""

    def __init__(self, cell: int, cell_count: int):
        super().__init__(f"cell {cell} is outside 1..{cell_count}")
        self.cell = cell
        self.cell_count = cell_count


class InvalidMove(TicTacToeError, ValueError):
    """A move that cannot be applied to the board."""

    def __init__(self, cell: int, reason: str):
        super().__init__(f"invalid move at cell {cell}: {reason}")
        self.cell = cell
        self.reason = reason


class InputExhausted(TicTacToeError, EOFError):
    """Input closed while the game was waiting for a line."""
