"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, List, Tuple
from .mark import Mark


# The board is a 3x3 grid - None means empty
Board = List[List[Optional[Mark]]]


class GamePhase(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)

    Only looks at the board, so it works on any grid of marks,
    not just ones reached by legal play.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The game board.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None

        row, col = line[0]
        return board[row][col]

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Lines are checked rows first, then columns, then diagonals.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def _check_line(
        self,
        board: Board,
        line: List[Tuple[int, int]]
    ) -> Optional[Mark]:
        """Return the mark filling all 3 cells of the line, or None."""
        first, second, third = (board[row][col] for row, col in line)

        if first is None:
            return None  # Empty cell, no winner on this line

        if first == second == third:
            return first

        return None

    def is_full(self, board: Board) -> bool:
        """Check if every cell holds a mark."""
        return all(cell is not None for row in board for cell in row)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        return self.is_full(board) and self.check_winner(board) is None

    def get_phase(self, board: Board) -> GamePhase:
        """Work out the game phase from the board alone."""
        if self.check_winner(board) is not None:
            return GamePhase.WON
        if self.is_full(board):
            return GamePhase.DRAWN
        return GamePhase.IN_PROGRESS
