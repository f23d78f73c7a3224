"""
Random agent for minefield.

Serves as a baseline by clicking random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Agent that selects hidden cells uniformly at random.

    Expected win rate on a 9x9 board with 10 mines is low, since nothing
    stops it from clicking a mine on the first move.
    """

    def __init__(self, board_size: int = 9, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            board_size: Number of rows (and columns) in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_size)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index among valid actions, or 0 if none.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0

        return int(self.rng.choice(valid_indices))
