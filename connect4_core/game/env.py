"""
env.py - Gymnasium environment around a Connect Four game

The environment is one more caller of the engine: it drives GameState via
apply_move and reads the board back as a numpy observation.
"""

from typing import Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4_core.debug import debug
from connect4_core.game.rules import new_game
from connect4_core.utils import ROWS, COLS, MoveError, Player


class ConnectFourEnv(gym.Env):
    """
    Connect Four following the Gymnasium interface.

    Both players act through the same ``step``; rewards are from RED's side.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 cols: int = COLS, rows: int = ROWS):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.action_space = spaces.Discrete(cols)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(rows, cols), dtype=np.int8
        )

        self.board, self.game = new_game(cols, rows)
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.game.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play ``action`` for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        result = self.game.apply_move(action)

        if isinstance(result, MoveError):
            debug.warning(f"Invalid action {action}: {result}", "env")
            info = self._get_info()
            info['error'] = result.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if result.won_by is not None:
            reward = self.reward_win if result.won_by == Player.RED else self.reward_lose
            terminated = True
        elif self.board.is_full():
            debug.info("Game over: draw", "env")
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode is None:
            return None

        text = self.board.render(self.game.winning_line)
        if self.render_mode == "human":
            print(text)
            return None
        return text

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state()

    def _get_info(self) -> Dict:
        valid_moves = [] if self.game.is_over else self.board.valid_moves()
        return {
            'valid_moves': valid_moves,
            'current_player': self.game.current_player.value,
            'status': self.game.status.name,
            'winner': self.game.winner.value if self.game.winner else None,
            'winning_line': [tuple(c) for c in self.game.winning_line],
            'last_move': tuple(self.game.last_move) if self.game.last_move else None,
            'moves_made': self.game.move_count,
        }
