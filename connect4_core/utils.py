"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

Coordinates throughout the package are (column, row) with row 0 at the top
of the board and row ``rows - 1`` at the bottom, where discs settle first.
"""

from enum import Enum, auto
from typing import Iterable, NamedTuple, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a row to win


class Player(Enum):
    """The two players. RED always moves first."""
    RED = 1
    YELLOW = 2

    def other(self) -> 'Player':
        return Player.YELLOW if self == Player.RED else Player.RED

    @property
    def symbol(self) -> str:
        return "R" if self == Player.RED else "Y"

    def __str__(self):
        return self.name


class Cell(NamedTuple):
    """A board coordinate."""
    column: int
    row: int


class MoveError(Enum):
    """Expected, recoverable move rejections. Returned as values, never raised."""
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_ALREADY_OVER = auto()

    def __str__(self):
        return self.name.replace("_", " ").capitalize()


class Axis(Enum):
    """The four lines that pass through a cell."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_UP = auto()    # "/" bottom-left to top-right
    DIAGONAL_DOWN = auto()  # "\" top-left to bottom-right


# Step vectors (d_column, d_row) for each axis; row grows downward
AXIS_VECTORS = {
    Axis.VERTICAL: (0, 1),
    Axis.HORIZONTAL: (1, 0),
    Axis.DIAGONAL_UP: (1, -1),
    Axis.DIAGONAL_DOWN: (1, 1),
}


def is_valid_position(column: int, row: int, cols: int = COLS, rows: int = ROWS) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= column < cols and 0 <= row < rows


def render_board_ascii(grid: np.ndarray,
                       highlight: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """
    Render a board state as ASCII art.

    Args:
        grid: Array of shape (rows, cols) holding 0 for empty or a Player value
        highlight: Optional (column, row) cells drawn lowercase, e.g. a winning line

    Returns:
        Multi-line string with column numbers underneath
    """
    rows, cols = grid.shape
    marked = set(highlight or ())
    symbols = {0: " ", Player.RED.value: "R", Player.YELLOW.value: "Y"}

    border = "|" + "-" * (cols * 2 - 1) + "|"
    lines = [border]
    for row in range(rows):
        cells = []
        for col in range(cols):
            symbol = symbols[int(grid[row, col])]
            if (col, row) in marked:
                symbol = symbol.lower()
            cells.append(symbol)
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(i % 10) for i in range(cols)) + "|")

    return "\n".join(lines)
