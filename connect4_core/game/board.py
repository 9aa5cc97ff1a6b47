"""
board.py - Board representation and gravity placement for Connect Four

The Board owns the grid and every Disc on it. Dropping into a column settles
the disc in the lowest empty row; failures come back as MoveError values and
leave the grid untouched.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np

from connect4_core.debug import debug
from connect4_core.utils import (ROWS, COLS, Player, Cell, MoveError,
                                 is_valid_position, render_board_ascii)


@dataclass(frozen=True)
class Disc:
    """A placed disc. Plain data; drawing it is the caller's business."""
    owner: Player


class Board:
    """
    A Connect Four grid of ``cols`` columns by ``rows`` rows.

    Cells hold either None or a Disc, indexed ``grid[row, column]``. Within
    any column the occupied cells are contiguous from the bottom row.
    """

    def __init__(self, cols: int = COLS, rows: int = ROWS):
        if cols < 1 or rows < 1:
            raise ValueError(f"Board dimensions must be positive, got {cols}x{rows}")

        self.cols = cols
        self.rows = rows
        debug.debug(f"Initializing new {cols}x{rows} Board", "board")
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.full((self.rows, self.cols), None, dtype=object)
        self.disc_count = 0

    def copy(self) -> 'Board':
        """Return an independent board with the same discs."""
        new_board = Board(self.cols, self.rows)
        new_board.grid = self.grid.copy()
        new_board.disc_count = self.disc_count
        return new_board

    @property
    def next_owner(self) -> Player:
        """The player whose disc comes next by turn parity."""
        return Player.RED if self.disc_count % 2 == 0 else Player.YELLOW

    def drop(self, column: int, owner: Optional[Player] = None) -> Union[Cell, MoveError]:
        """
        Drop a disc into a column.

        Args:
            column: The column to drop into (0-indexed)
            owner: Owner of the new disc; defaults to ``next_owner``. Passing
                it explicitly builds positions without turn sequencing.

        Returns:
            The landing Cell, or MoveError.INVALID_COLUMN / MoveError.COLUMN_FULL

        Raises:
            TypeError: If owner is given and is not a Player
        """
        if owner is not None and not isinstance(owner, Player):
            raise TypeError(f"Disc owner must be a Player, got {owner!r}")

        if isinstance(column, bool) or not isinstance(column, (int, np.integer)) \
                or not 0 <= column < self.cols:
            debug.debug(f"Rejected drop: column {column!r} out of range", "board")
            return MoveError.INVALID_COLUMN

        column = int(column)
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] is None:
                disc = Disc(owner if owner is not None else self.next_owner)
                self.grid[row, column] = disc
                self.disc_count += 1
                debug.trace(f"Placed {disc.owner} disc at ({column}, {row})", "board")
                return Cell(column, row)

        debug.debug(f"Rejected drop: column {column} is full", "board")
        return MoveError.COLUMN_FULL

    def occupant_at(self, cell: Cell) -> Optional[Disc]:
        """
        Look up the disc at a cell.

        Off-board coordinates return None just like empty cells, so line
        scans can run past the edges without bounds checks.
        """
        column, row = cell
        if not is_valid_position(column, row, self.cols, self.rows):
            return None
        return self.grid[row, column]

    def is_full(self) -> bool:
        return self.disc_count == self.rows * self.cols

    def column_height(self, column: int) -> int:
        """Number of discs in a column; 0 for columns off the board."""
        if not is_valid_position(column, 0, self.cols, self.rows):
            return 0
        for row in range(self.rows):
            if self.grid[row, column] is not None:
                return self.rows - row
        return 0

    def valid_moves(self) -> List[int]:
        """Columns that can still take a disc."""
        return [col for col in range(self.cols) if self.grid[0, col] is None]

    def get_state(self) -> np.ndarray:
        """
        Get the board as an int8 array of shape (rows, cols).

        Empty cells are 0; occupied cells hold the owner's Player value.
        """
        state = np.zeros((self.rows, self.cols), dtype=np.int8)
        for (row, col), disc in np.ndenumerate(self.grid):
            if disc is not None:
                state[row, col] = disc.owner.value
        return state

    def render(self, highlight: Optional[List[Cell]] = None) -> str:
        return render_board_ascii(self.get_state(), highlight)

    def __str__(self) -> str:
        return self.render()
