"""
Main script for TicTacToe in the terminal.

Two players share one terminal and take turns typing the cell
they want as "row, col" (each 0-2). The game ends when someone gets
three in a row or the board fills up.

Run this script to play:
    python main.py               # X moves first
    python main.py --start-player O
"""

import argparse
from typing import Callable, Optional, Tuple

from logic import __version__
from logic.config import GameConfig
from logic.game_state import GameState
from logic.mark import Mark, parse_mark
from logic.move_validator import MoveError


INVALID_INPUT_MESSAGE = (
    "Invalid input! Please enter the coordinates in the format x, y "
    "where both x and y are between 0 and 2."
)
OUT_OF_RANGE_MESSAGE = "Coordinates must be between 0 and 2. Please try again."
OCCUPIED_MESSAGE = "Invalid move! Spot already taken, please try again."


def parse_coordinates(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a "row, col" line typed by a player.

    Only checks the format, not whether the cell is on the board.

    Args:
        text: The raw input line.

    Returns:
        (row, col), or None if the line isn't two comma-separated integers.
    """
    parts = text.strip().split(GameConfig.COORDINATE_SEPARATOR)
    if len(parts) != 2:
        return None

    try:
        row, col = (int(part.strip()) for part in parts)
    except ValueError:
        return None

    return row, col


class ConsoleGame:
    """
    Runs one game of TicTacToe in the terminal.

    Game flow:
    1. Show the empty board
    2. Ask the current player for a cell
    3. Re-ask on bad input or an illegal move
    4. Show the board after every move
    5. Stop when someone wins or it's a draw
    """

    def __init__(
        self,
        starting_mark: Mark = GameConfig.DEFAULT_MARK,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        """
        Initialize the game.

        Args:
            starting_mark: Which mark moves first.
            input_fn: Reads one line from the player.
            output_fn: Shows one message to the players.
        """
        self.game_state = GameState.start(starting_mark)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def start(self) -> GameState:
        """Play until the game is over or input runs out."""
        self.output_fn("Starting the game!")
        self.output_fn(self.game_state.render())

        try:
            self._game_loop()
        except (EOFError, KeyboardInterrupt):
            self.output_fn("\nGame interrupted.")

        return self.game_state

    def _game_loop(self):
        """Main game loop."""
        while not self.game_state.is_game_over:
            self.output_fn(
                f"Player {self.game_state.current_player}'s turn. "
                "Enter x, y coordinates for your move (0-2, 0-2):"
            )

            if self._process_turn(self.input_fn()):
                self.output_fn(self.game_state.render())

        self._show_game_result()

    def _process_turn(self, line: str) -> bool:
        """
        Handle one line of player input.

        Returns:
            True if a mark was placed.
        """
        coords = parse_coordinates(line)
        if coords is None:
            self.output_fn(INVALID_INPUT_MESSAGE)
            return False

        result = self.game_state.try_move(*coords)
        if result.error is MoveError.OUT_OF_RANGE:
            self.output_fn(OUT_OF_RANGE_MESSAGE)
        elif result.error is MoveError.OCCUPIED:
            self.output_fn(OCCUPIED_MESSAGE)

        return result.is_valid

    def _show_game_result(self):
        """Show the final game result."""
        winner = self.game_state.winner()
        if winner is not None:
            self.output_fn(f"Player {winner} wins!")
        else:
            self.output_fn("It's a draw!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe Command Line Game")
    parser.add_argument(
        "-s", "--start-player",
        default=GameConfig.DEFAULT_MARK.value,
        help="Player to start the game, X or O (default: X)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    starting_mark = parse_mark(args.start_player)
    if starting_mark is None:
        starting_mark = GameConfig.DEFAULT_MARK
        print(
            f"Warning: unknown player {args.start_player!r}, "
            f"{starting_mark} will start."
        )

    ConsoleGame(starting_mark).start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
