import numpy as np
import pytest

from connect4_core.game.env import ConnectFourEnv
from connect4_core.utils import Player


def test_reset_returns_empty_observation():
    env = ConnectFourEnv()
    obs, info = env.reset(seed=0)

    assert obs.shape == (6, 7)
    assert obs.dtype == np.int8
    assert np.count_nonzero(obs) == 0
    assert env.observation_space.contains(obs)
    assert info["valid_moves"] == list(range(7))
    assert info["current_player"] == Player.RED.value
    assert info["status"] == "IN_PROGRESS"


def test_step_places_disc_and_switches_player():
    env = ConnectFourEnv()
    env.reset()

    obs, reward, terminated, truncated, info = env.step(3)

    assert obs[5, 3] == Player.RED.value
    assert reward == env.reward_step
    assert not terminated
    assert not truncated
    assert info["current_player"] == Player.YELLOW.value
    assert info["last_move"] == (3, 5)


def test_invalid_action_truncates_without_changing_board():
    env = ConnectFourEnv()
    obs, _ = env.reset()

    next_obs, reward, terminated, truncated, info = env.step(9)

    assert reward == env.reward_invalid_move
    assert truncated
    assert not terminated
    assert info["error"] == "INVALID_COLUMN"
    assert np.array_equal(obs, next_obs)


def test_red_win_terminates_with_positive_reward():
    env = ConnectFourEnv()
    env.reset()
    for action in [0, 6, 1, 6, 2, 6]:
        env.step(action)

    _, reward, terminated, _, info = env.step(3)

    assert terminated
    assert reward == env.reward_win
    assert info["winner"] == Player.RED.value
    assert info["winning_line"] == [(0, 5), (1, 5), (2, 5), (3, 5)]
    assert info["valid_moves"] == []

    _, _, _, truncated, info = env.step(4)
    assert truncated
    assert info["error"] == "GAME_ALREADY_OVER"


def test_yellow_win_terminates_with_negative_reward():
    env = ConnectFourEnv()
    env.reset()
    for action in [0, 1, 0, 1, 0, 1, 6]:
        env.step(action)

    _, reward, terminated, _, _ = env.step(1)

    assert terminated
    assert reward == env.reward_lose


def test_full_board_is_a_draw():
    env = ConnectFourEnv(cols=2, rows=2)
    env.reset()
    for action in [0, 1, 0]:
        _, _, terminated, _, _ = env.step(action)
        assert not terminated

    _, reward, terminated, _, info = env.step(1)

    assert terminated
    assert reward == env.reward_draw
    assert info["winner"] is None


def test_ascii_render_returns_board_text():
    env = ConnectFourEnv(render_mode="ascii")
    env.reset()
    env.step(0)

    text = env.render()

    assert "R" in text
    assert text.splitlines()[-1] == "|0 1 2 3 4 5 6|"


def test_unknown_render_mode_is_rejected():
    with pytest.raises(ValueError):
        ConnectFourEnv(render_mode="rgb_array")


@pytest.mark.parametrize("action", [2.7, None, True, "3"])
def test_non_integer_action_is_invalid(action):
    env = ConnectFourEnv()
    obs, _ = env.reset()

    next_obs, reward, terminated, truncated, info = env.step(action)

    assert reward == env.reward_invalid_move
    assert truncated
    assert not terminated
    assert info["error"] == "INVALID_COLUMN"
    assert np.array_equal(obs, next_obs)
    assert info["current_player"] == Player.RED.value


def test_sampled_numpy_action_is_accepted():
    env = ConnectFourEnv()
    env.reset(seed=0)

    _, reward, _, truncated, info = env.step(np.int64(4))

    assert not truncated
    assert reward == env.reward_step
    assert info["last_move"] == (4, 5)
