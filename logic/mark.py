"""
Player marks for TicTacToe.
Defines the two marks and how to read them from user input.
"""

from enum import Enum
from typing import Optional, Union


class Mark(Enum):
    """The two marks in the game. The value is the display symbol."""
    X = "X"   # First player
    O = "O"   # Second player

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


def parse_mark(value: Union[Mark, str, None]) -> Optional[Mark]:
    """
    Read a mark designator.

    Accepts a Mark or a string like "X" / "o" (case and surrounding
    whitespace are ignored).

    Args:
        value: The designator to read.

    Returns:
        The matching Mark, or None if the value is not a known designator.
    """
    if isinstance(value, Mark):
        return value
    if not isinstance(value, str):
        return None

    symbol = value.strip().upper()
    for mark in Mark:
        if mark.value == symbol:
            return mark
    return None


def parse_mark_or_default(
    value: Union[Mark, str, None],
    default: Mark = Mark.X
) -> Mark:
    """
    Read a mark designator, falling back to a default.

    Unknown designators are not an error here: the default mark is
    returned instead. Use parse_mark() to detect bad input.
    """
    mark = parse_mark(value)
    return default if mark is None else mark
