"""
Game state management for TicTacToe.
Tracks the board, current player, and move history.
"""

from typing import Optional, List, Tuple, Union
from dataclasses import dataclass, field
from .config import GameConfig
from .mark import Mark, parse_mark_or_default
from .move_validator import MoveValidator, ValidationResult
from .win_checker import Board, GamePhase, WinChecker


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


def _empty_board() -> Board:
    size = GameConfig.BOARD_SIZE
    return [[None for _ in range(size)] for _ in range(size)]


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (which mark is where)
    - Current player (the active mark)
    - Move history

    Game status (in progress, won, draw) is always worked out from the
    board, so it can never disagree with it.
    """

    # The 3x3 board - None means empty
    board: Board = field(default_factory=_empty_board)

    # Current player's turn
    current_player: Mark = GameConfig.DEFAULT_MARK

    # Move history
    moves: List[Move] = field(default_factory=list)

    win_checker: WinChecker = field(
        default_factory=WinChecker, repr=False, compare=False
    )
    validator: MoveValidator = field(
        default_factory=MoveValidator, repr=False, compare=False
    )

    @classmethod
    def start(cls, starting: Union[Mark, str, None] = None) -> "GameState":
        """
        Start a new game with an empty board.

        Args:
            starting: The mark that moves first, as a Mark or "X"/"O".
                Anything unrecognized (or None) falls back to
                GameConfig.DEFAULT_MARK instead of failing.

        Returns:
            A fresh GameState.
        """
        return cls(
            current_player=parse_mark_or_default(starting, GameConfig.DEFAULT_MARK)
        )

    def try_move(self, row: int, col: int) -> ValidationResult:
        """
        Place the current player's mark, reporting why a move failed.

        On success the mark is written, the move recorded, and the turn
        passes to the other player. On failure nothing changes.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            ValidationResult describing the outcome.
        """
        result = self.validator.validate_move(self.board, row, col)
        if not result.is_valid:
            return result

        # Place the mark
        self.board[row][col] = self.current_player

        # Record the move
        self.moves.append(Move(
            mark=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        # Switch turns
        self.current_player = self.current_player.opposite()

        return result

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move at the given position.

        Safe for any integers: off-board, occupied, and after-game-over
        moves are all refused with False and leave the state unchanged.

        Returns:
            True if move was successful, False otherwise.
        """
        return self.try_move(row, col).is_valid

    def winner(self) -> Optional[Mark]:
        """Get the winning mark, or None if nobody has three in a row."""
        return self.win_checker.check_winner(self.board)

    def is_full(self) -> bool:
        """Check if every cell has been marked."""
        return self.win_checker.is_full(self.board)

    @property
    def phase(self) -> GamePhase:
        return self.win_checker.get_phase(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.phase is not GamePhase.IN_PROGRESS

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for row, cells in enumerate(self.board):
            for col, cell in enumerate(cells):
                if cell is None:
                    empty.append((row, col))
        return empty

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=[[cell for cell in row] for row in self.board],
            current_player=self.current_player,
            moves=list(self.moves)
        )

    def render(self) -> str:
        """
        Draw the board as text.

        One line per row, cells separated by " | ", empty cells as a space:

            X | O |
              | X |
            O |   |
        """
        lines = []
        for row in self.board:
            symbols = [
                GameConfig.EMPTY_SYMBOL if cell is None else cell.value
                for cell in row
            ]
            lines.append(GameConfig.CELL_SEPARATOR.join(symbols))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
