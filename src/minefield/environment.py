"""
Gymnasium environment wrapper for minefield.

Exposes the game engine through a standard RL interface so agents
can play it.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, DEFAULT_CONFIG, Position
from .cell import HIDDEN_CODE, MINE_CODE
from .engine import GameEngine, OutcomeKind
from .errors import InvalidConfigurationError
from .render import render_game


# ============================================================================
# Rewards
# ============================================================================

REWARDS = {
    OutcomeKind.SAFE_REVEAL: 1.0,
    OutcomeKind.WIN: 10.0,
    OutcomeKind.LOSS: -10.0,
    OutcomeKind.NO_EFFECT: -0.1,
}


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for minefield.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size size * size.
        Action i reveals the cell at (i // size, i % size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action with no effect (already revealed)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the minefield environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT_CONFIG
        self.engine = GameEngine(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=HIDDEN_CODE,
            high=MINE_CODE,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.engine.rng = random.Random(int(self.np_random.integers(2 ** 32)))
        self.engine.initialize()
        self._steps = 0

        return self.engine.get_observation(), self._get_info()

    def load_board(self, board: Board) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start the episode over on a prepared board.

        Args:
            board: Unplayed board matching the environment size.

        Returns:
            Tuple of (observation, info dict).

        Raises:
            InvalidConfigurationError: If the board size differs from the
                observation and action spaces.
        """
        if board.size != self.config.size:
            raise InvalidConfigurationError(
                f"Board size {board.size} does not match environment "
                f"size {self.config.size}"
            )
        self.engine.load(board)
        self._steps = 0
        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self.action_to_position(action)
        self._steps += 1

        outcome = self.engine.reveal(row, col)
        reward = REWARDS[outcome.kind]

        observation = self.engine.get_observation()
        terminated = self.engine.is_over
        info = self._get_info()
        info["outcome"] = outcome.kind.name

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, False, info

    def action_to_position(self, action: int) -> Position:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.size)

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.config.size + col

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.engine.revealed_count,
            "total_safe": self.engine.board.config.safe_cells,
            "game_state": self.engine.status.name,
            "valid_actions": len(self.engine.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_game(self.engine)
        if self.render_mode == "human":
            print(render_game(self.engine))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell that can be revealed.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.engine.get_valid_actions():
            mask[self.position_to_action(row, col)] = True
        return mask
