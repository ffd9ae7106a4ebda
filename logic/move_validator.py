"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, Tuple, List
from dataclasses import dataclass
from .config import GameConfig
from .win_checker import Board, GamePhase, WinChecker


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"
    GAME_OVER = "game_over"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board (0-2)
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(
        self,
        board: Board,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        # Check range first - negative indexes must not wrap around
        if not self.is_on_board(row, col):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_RANGE,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        # Check if game is over
        if self.win_checker.get_phase(board) is not GamePhase.IN_PROGRESS:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        # Check if cell is empty
        if board[row][col] is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {board[row][col]}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    @staticmethod
    def is_on_board(row: int, col: int) -> bool:
        """Check that (row, col) addresses a real cell."""
        size = GameConfig.BOARD_SIZE
        return 0 <= row < size and 0 <= col < size

    def get_valid_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions, row by row.
        """
        valid_moves = []

        if self.win_checker.get_phase(board) is not GamePhase.IN_PROGRESS:
            return valid_moves

        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                if board[row][col] is None:
                    valid_moves.append((row, col))

        return valid_moves
