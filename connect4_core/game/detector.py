"""
detector.py - Win detection around a freshly placed disc

Only the four lines through the new disc can have changed, so each check
looks at one window per axis (CONNECT_N - 1 cells either side of the disc)
instead of rescanning the whole board.
"""

from typing import List

from connect4_core.debug import debug
from connect4_core.game.board import Board
from connect4_core.utils import CONNECT_N, AXIS_VECTORS, Axis, Cell, Player


def axis_window(cell: Cell, axis: Axis, reach: int = CONNECT_N - 1) -> List[Cell]:
    """
    Cells at offsets -reach..+reach from ``cell`` along ``axis``.

    The window is not clipped to the board; off-board cells read as empty.
    """
    d_col, d_row = AXIS_VECTORS[axis]
    column, row = cell
    return [Cell(column + k * d_col, row + k * d_row) for k in range(-reach, reach + 1)]


def _first_run(board: Board, window: List[Cell], player: Player,
               connect_n: int) -> List[Cell]:
    run: List[Cell] = []
    for pt in window:
        disc = board.occupant_at(pt)
        if disc is not None and disc.owner == player:
            run.append(pt)
        else:
            if len(run) >= connect_n:
                return run
            run = []
    return run if len(run) >= connect_n else []


class WinDetector:
    """Stateless win evaluation. Declaring the winner is up to the caller."""

    @staticmethod
    def check(board: Board, cell: Cell, player: Player,
              connect_n: int = CONNECT_N) -> bool:
        """
        Check whether ``player`` has ``connect_n`` in a row through ``cell``.

        A run resets on any empty, opposing or off-board cell. The first
        axis that yields a full run ends the check.
        """
        for axis in Axis:
            chain = 0
            for pt in axis_window(cell, axis, connect_n - 1):
                disc = board.occupant_at(pt)
                if disc is not None and disc.owner == player:
                    chain += 1
                    if chain == connect_n:
                        debug.debug(f"{player} connects {connect_n} on {axis.name} "
                                    f"through {tuple(cell)}", "detector")
                        return True
                else:
                    chain = 0
        return False

    @staticmethod
    def winning_line(board: Board, cell: Cell, player: Player,
                     connect_n: int = CONNECT_N) -> List[Cell]:
        """
        Return the cells of the winning run through ``cell``, or [] if none.

        The run includes every consecutive matching cell in the window, so a
        five-in-a-row comes back whole.
        """
        for axis in Axis:
            run = _first_run(board, axis_window(cell, axis, connect_n - 1),
                             player, connect_n)
            if run:
                return run
        return []


check = WinDetector.check
winning_line = WinDetector.winning_line
