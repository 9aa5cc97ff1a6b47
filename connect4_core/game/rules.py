"""
rules.py - Turn sequencing and game state for Connect Four

GameState is a two-state machine: IN_PROGRESS until a move wins, then
FINISHED for good. Every rejected move comes back as a MoveError value and
leaves both the board and the turn untouched.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple, Union

from connect4_core.debug import debug
from connect4_core.game.board import Board
from connect4_core.game.detector import WinDetector
from connect4_core.utils import ROWS, COLS, CONNECT_N, Cell, MoveError, Player


class GameStatus(Enum):
    IN_PROGRESS = auto()
    FINISHED = auto()


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of an accepted move.

    Exactly one of ``continued_as`` (the player now to move) and ``won_by``
    is set.
    """
    landing_cell: Cell
    continued_as: Optional[Player] = None
    won_by: Optional[Player] = None

    @property
    def is_win(self) -> bool:
        return self.won_by is not None


class GameState:
    """
    Owns the turn order for one game on one Board.

    Attributes:
        board: The board this game plays on
        current_player: Player to move; RED starts
        status: IN_PROGRESS or FINISHED
        winner: The winning player once FINISHED
    """

    def __init__(self, board: Board, connect_n: int = CONNECT_N):
        debug.debug("Initializing GameState", "game")
        self.board = board
        self.connect_n = connect_n
        self._start()

    def _start(self):
        self.current_player = Player.RED
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.winning_line: List[Cell] = []
        self.last_move: Optional[Cell] = None
        self.move_count = 0

    def reset(self):
        """Clear the board and start over with RED to move."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self._start()

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.FINISHED

    def apply_move(self, column: int) -> Union[MoveOutcome, MoveError]:
        """
        Drop a disc for the current player.

        Args:
            column: Column to play (0-indexed)

        Returns:
            A MoveOutcome, or MoveError.GAME_ALREADY_OVER once the game is
            finished, or the board's INVALID_COLUMN / COLUMN_FULL
        """
        if self.is_over:
            debug.debug(f"Rejected move {column!r}: game already won by {self.winner}", "game")
            return MoveError.GAME_ALREADY_OVER

        player = self.current_player
        landing = self.board.drop(column, player)
        if isinstance(landing, MoveError):
            debug.debug(f"Rejected move {column!r} for {player}: {landing}", "game")
            return landing

        self.last_move = landing
        self.move_count += 1

        debug.start_timer("win_check")
        won = WinDetector.check(self.board, landing, player, self.connect_n)
        debug.end_timer("win_check", "game")

        if won:
            self.status = GameStatus.FINISHED
            self.winner = player
            self.winning_line = WinDetector.winning_line(self.board, landing, player,
                                                         self.connect_n)
            debug.info(f"{player} wins after move at {tuple(landing)}", "game")
            return MoveOutcome(landing_cell=landing, won_by=player)

        self.current_player = player.other()
        debug.trace(f"Switching to {self.current_player}", "game")
        return MoveOutcome(landing_cell=landing, continued_as=self.current_player)


def new_game(cols: int = COLS, rows: int = ROWS) -> Tuple[Board, GameState]:
    """Create an empty board and a game on it with RED to move."""
    board = Board(cols, rows)
    return board, GameState(board)
