"""
Logic module for TicTacToe.
Handles marks, game state, and rules.
"""

from .mark import Mark, parse_mark, parse_mark_or_default
from .config import GameConfig
from .game_state import GameState, Move
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker, GamePhase

__version__ = "1.0.0"
