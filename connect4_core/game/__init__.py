"""
connect4_core.game - Board, win detection and turn sequencing

The environment adapter lives in connect4_core.game.env and is imported
separately so the engine itself only needs numpy.
"""

from connect4_core.game.board import Board, Disc
from connect4_core.game.detector import WinDetector
from connect4_core.game.rules import GameState, GameStatus, MoveOutcome, new_game

__all__ = ['Board', 'Disc', 'WinDetector', 'GameState', 'GameStatus',
           'MoveOutcome', 'new_game']
