"""
Unit tests for the gymnasium environment.
"""
import numpy as np
import pytest

from minefield import Board, BoardConfig, InvalidConfigurationError, MinefieldEnv


@pytest.fixture
def env() -> MinefieldEnv:
    """Default 9x9 environment."""
    return MinefieldEnv()


@pytest.fixture
def tiny_env() -> MinefieldEnv:
    """2x2 environment with a fixed mine at (0, 0)."""
    env = MinefieldEnv(BoardConfig(2, 1), render_mode="ansi")
    env.reset(seed=0)
    env.load_board(Board.from_mines(2, [(0, 0)]))
    return env


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_size(self, env: MinefieldEnv) -> None:
        assert env.action_space.n == 81

    def test_reset_observation(self, env: MinefieldEnv) -> None:
        """Reset should give an all-hidden observation inside the space."""
        obs, info = env.reset(seed=3)
        assert obs.shape == (9, 9)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "PLAYING"
        assert info["total_safe"] == 71

    def test_seeded_reset_is_reproducible(self, env: MinefieldEnv) -> None:
        """Equal seeds should deal equal boards."""
        env.reset(seed=11)
        first = env.engine.board.mine_positions()
        env.reset(seed=11)
        assert env.engine.board.mine_positions() == first

    def test_action_mask_starts_full(self, env: MinefieldEnv) -> None:
        env.reset(seed=0)
        mask = env.get_action_mask()
        assert mask.shape == (81,)
        assert mask.all()

    def test_action_position_conversion(self, env: MinefieldEnv) -> None:
        assert env.action_to_position(10) == (1, 1)
        assert env.position_to_action(1, 1) == 10


class TestStep:
    """Test rewards and termination."""

    def test_mine_gives_loss_reward(self, tiny_env: MinefieldEnv) -> None:
        obs, reward, terminated, truncated, info = tiny_env.step(0)
        assert reward == -10.0
        assert terminated is True
        assert truncated is False
        assert info["outcome"] == "LOSS"
        assert obs[0, 0] == 9

    def test_safe_then_win_rewards(self, tiny_env: MinefieldEnv) -> None:
        assert tiny_env.step(1)[1] == 1.0
        assert tiny_env.step(2)[1] == 1.0
        _, reward, terminated, _, info = tiny_env.step(3)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"

    def test_repeated_action_penalized(self, tiny_env: MinefieldEnv) -> None:
        tiny_env.step(1)
        _, reward, terminated, _, info = tiny_env.step(1)
        assert reward == -0.1
        assert terminated is False
        assert info["revealed"] == 1

    def test_mask_drops_revealed_cells(self, tiny_env: MinefieldEnv) -> None:
        tiny_env.step(1)
        assert tiny_env.get_action_mask().tolist() == [True, False, True, True]

    def test_render_ansi(self, tiny_env: MinefieldEnv) -> None:
        tiny_env.step(1)
        text = tiny_env.render()
        assert text.startswith(". 1\n. .")


class TestLoadBoard:
    """Test starting episodes on prepared boards."""

    def test_load_board_resets_episode(self, tiny_env: MinefieldEnv) -> None:
        """Loading a board should give a fresh, all-hidden episode."""
        tiny_env.step(1)
        obs, info = tiny_env.load_board(Board.from_mines(2, [(1, 1)]))
        assert np.all(obs == -1)
        assert info["steps"] == 0
        assert info["revealed"] == 0
        assert tiny_env.engine.board.mine_positions() == [(1, 1)]

    def test_mismatched_size_rejected(self, tiny_env: MinefieldEnv) -> None:
        """A board of another size would not fit the spaces."""
        board = tiny_env.engine.board
        with pytest.raises(InvalidConfigurationError, match="does not match"):
            tiny_env.load_board(Board.from_mines(3, [(0, 0)]))
        assert tiny_env.engine.board is board

    def test_total_safe_follows_loaded_board(self) -> None:
        """Info should count safe cells of the board in play."""
        env = MinefieldEnv(BoardConfig(3, 1))
        env.reset(seed=0)
        _, info = env.load_board(Board.from_mines(3, [(0, 0), (2, 2)]))
        assert info["total_safe"] == 7
