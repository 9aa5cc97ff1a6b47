"""
connect4_core - Rules engine for Connect Four

Board state, gravity placement, win detection and turn sequencing, with a
Gymnasium environment and a small terminal driver on top.
"""

__version__ = '0.1.0'

from connect4_core.utils import Cell, MoveError, Player
from connect4_core.game import (Board, Disc, GameState, GameStatus,
                                MoveOutcome, WinDetector, new_game)

__all__ = ['Board', 'Cell', 'Disc', 'GameState', 'GameStatus', 'MoveError',
           'MoveOutcome', 'Player', 'WinDetector', 'new_game']
