"""
Console game loop.

States:
    AWAITING_BOARD_SIZE -> AWAITING_MOVE (X <-> O) -> ROUND_OVER
    ROUND_OVER -> AWAITING_BOARD_SIZE ("y") | TERMINATED ("n")

Usage:
    tictactoe                 # ask for the board size every round
    tictactoe --size 5        # play every round on a 5x5 board
"""

import argparse
from enum import Enum
from typing import Callable, Optional

from .board import SYMBOLS
from .config import GameConfig, parse_board_size, parse_int
from .errors import InputExhausted, InvalidMove
from .game import GameRound, Outcome
from .render import game_division, render_board


class State(Enum):
    AWAITING_BOARD_SIZE = "awaiting-board-size"
    AWAITING_MOVE = "awaiting-move"
    ROUND_OVER = "round-over"
    TERMINATED = "terminated"


class ConsoleGame:
    """
    Two local players sharing one terminal.

    read() returns one line of input and raises EOFError when input is
    closed; write() prints one block of text.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.config = config or GameConfig()
        if self.config.fixed_size is not None and not self.config.is_valid_size(self.config.fixed_size):
            raise ValueError(f"fixed board size {self.config.fixed_size} is outside "
                             f"{self.config.min_size}..{self.config.max_size}")
        self.read = read
        self.write = write
        self.state = State.AWAITING_BOARD_SIZE
        self.round: Optional[GameRound] = None

    def _read_line(self) -> str:
        try:
            return self.read()
        except EOFError:
            raise InputExhausted(f"input closed while {self.state.value}") from None

    def run(self):
        """Play rounds until the players decline a new one."""
        handlers = {
            State.AWAITING_BOARD_SIZE: self.start_round,
            State.AWAITING_MOVE: self.take_turn,
            State.ROUND_OVER: self.ask_replay,
        }
        while self.state != State.TERMINATED:
            handlers[self.state]()

    def choose_size(self) -> int:
        if self.config.fixed_size is not None:
            return self.config.fixed_size

        self.write(f"Choose the size of the board (between {self.config.min_size} "
                   f"and {self.config.max_size}).")
        size, accepted = parse_board_size(self._read_line(), self.config)
        if accepted:
            self.write(f"Starting a {size}X{size} game...")
        else:
            self.write("Invalid size. Starting a default game...")
        return size

    def start_round(self):
        size = self.choose_size()
        self.round = GameRound.new(size, relevant_diagonals=self.config.relevant_diagonals)
        self.write(render_board(self.round.board))
        self.state = State.AWAITING_MOVE

    def play_move(self) -> Outcome:
        """Prompt until the side to move names an empty cell on the board, then play it."""
        self.write(f"Choose spot for '{SYMBOLS[self.round.to_move]}'")
        while True:
            cell = parse_int(self._read_line())
            if cell is not None:
                try:
                    return self.round.play(cell)
                except InvalidMove:
                    pass
            self.write("Invalid spot. Try again.")

    def take_turn(self):
        outcome = self.play_move()

        self.write(game_division(self.round.board))
        self.write(render_board(self.round.board))

        if outcome == Outcome.ONGOING:
            return
        if outcome == Outcome.DRAW:
            self.write("Draw.")
        else:
            self.write(f"{self.round.winning_line.label} detected.")
            self.write(f"{SYMBOLS[self.round.history[-1].mark]} wins.")
        self.state = State.ROUND_OVER

    def ask_replay(self):
        self.write("Start new game? (y/n)")
        while True:
            answer = self._read_line().strip()
            if answer == "y":
                self.state = State.AWAITING_BOARD_SIZE
                return
            if answer == "n":
                self.state = State.TERMINATED
                return
            self.write("Invalid answer.")


def build_parser() -> argparse.ArgumentParser:
    """Command-line options."""
    parser = argparse.ArgumentParser(description="Play N x N TicTacToe in the terminal")
    parser.add_argument("--size", type=int, default=None,
                        help="Board size for every round (3-30); prompt each round if omitted")
    parser.add_argument("--relevant-diagonals", action="store_true",
                        help="Only scan a diagonal when the last move lies on it")
    return parser


def build_config(args: argparse.Namespace) -> GameConfig:
    """GameConfig from parsed command-line options."""
    return GameConfig(fixed_size=args.size, relevant_diagonals=args.relevant_diagonals)


def main(argv=None, read: Callable[[], str] = input, write: Callable[[str], None] = print) -> int:
    """Run the console game; returns the process exit status."""
    args = build_parser().parse_args(argv)
    config = build_config(args)

    if config.fixed_size is not None and not config.is_valid_size(config.fixed_size):
        write("Invalid game size.")
        return 0

    game = ConsoleGame(config, read=read, write=write)
    try:
        game.run()
    except InputExhausted as e:
        write(f"Input closed: {e}")
        return 1
    except KeyboardInterrupt:
        write("\nGame aborted")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
