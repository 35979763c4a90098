"""
Round state and move application.

X always moves first and the players alternate. A round ends on the first win or when the board fills up.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .board import Board, X, opponent
from .errors import InvalidMove
from .rules import Line, check_draw, winning_line


class Outcome(str, Enum):
    ONGOING = "ongoing"
    X_WINS = "x-wins"
    O_WINS = "o-wins"
    DRAW = "draw"


@dataclass(frozen=True)
class Move:
    cell: int
    mark: int


@dataclass
class GameRound:
    """One round, from an empty board to a win or a draw."""
    board: Board
    moves_played: int = 0
    outcome: Outcome = Outcome.ONGOING
    winning_line: Optional[Line] = None
    history: List[Move] = field(default_factory=list)
    relevant_diagonals: bool = False

    @classmethod
    def new(cls, size: int, relevant_diagonals: bool = False) -> "GameRound":
        """Fresh round on an empty size x size board."""
        return cls(board=Board(size), relevant_diagonals=relevant_diagonals)

    @property
    def to_move(self) -> int:
        """Side to move (X plays first)."""
        if not self.history:
            return X
        return opponent(self.history[-1].mark)

    @property
    def is_over(self) -> bool:
        """True once the round has a winner or is drawn."""
        return self.outcome != Outcome.ONGOING

    def play(self, cell: int) -> Outcome:
        """
        Apply the side to move's mark at cell and evaluate the result.

        Raises:
            InvalidMove: the round is over, or the board rejects the cell.
                The round is unchanged.
        """
        if self.is_over:
            raise InvalidMove(cell, "round is over")

        mark = self.to_move
        self.board.apply_move(cell, mark)
        self.moves_played += 1
        self.history.append(Move(cell, mark))

        line = winning_line(self.board, cell, mark, relevant_only=self.relevant_diagonals)
        if line is not None:
            self.winning_line = line
            self.outcome = Outcome.X_WINS if mark == X else Outcome.O_WINS
        elif check_draw(self.moves_played, self.board.cell_count):
            self.outcome = Outcome.DRAW
        return self.outcome
