"""
Base agent interface for minefield players.

Defines the abstract interface that automated players implement.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from ..cell import HIDDEN_CODE


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for minefield agents.

    Agents choose which cell to reveal from an observation array.
    """

    def __init__(self, board_size: int) -> None:
        """
        Initialize the agent.

        Args:
            board_size: Number of rows (and columns) in the board.
        """
        self.board_size = board_size
        self.total_cells = board_size * board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * size + col).
        """

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Boolean mask of hidden cells in the observation."""
        return observation.flatten() == HIDDEN_CODE

    def reset(self) -> None:
        """Reset agent state for a new game."""
