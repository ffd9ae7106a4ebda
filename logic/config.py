"""
Game configuration for TicTacToe.
All the settings for the board, display, and terminal input.
"""

from .mark import Mark


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Who moves first when the player doesn't say (or says something invalid)
    DEFAULT_MARK = Mark.X

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_SYMBOL = " "       # How an empty cell is drawn
    CELL_SEPARATOR = " | "   # Between cells on a row

    # ==================== INPUT SETTINGS ====================
    # Players type "row, col"
    COORDINATE_SEPARATOR = ","
