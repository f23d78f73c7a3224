"""
Board module for minefield.

Implements the square grid of cells with randomized mine placement
and neighbor mine counting.
"""
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidConfigurationError


Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        size: Number of rows and columns (the board is square).
        num_mines: Total mines to place.
    """

    size: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values can produce a playable board."""
        if self.size < 1:
            raise InvalidConfigurationError("Board size must be positive")
        if self.num_mines <= 0:
            raise InvalidConfigurationError("Number of mines must be positive")
        if self.num_mines >= self.total_cells:
            raise InvalidConfigurationError(
                f"Too many mines (max {self.total_cells - 1})"
            )

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        """Number of non-mine cells a player must reveal to win."""
        return self.total_cells - self.num_mines


DEFAULT_CONFIG = BoardConfig()


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Square minesweeper grid.

    Owns only cell data; reveal rules and game state live in the engine.
    Build one with ``Board.generate`` (random mines) or
    ``Board.from_mines`` (explicit layout).
    """

    def __init__(self, config: BoardConfig) -> None:
        self.config = config
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(config.size)]
            for _ in range(config.size)
        ]

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def generate(
        cls,
        config: BoardConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a board with mines placed uniformly at random.

        Args:
            config: Board size and mine count.
            rng: Random source; a fresh unseeded one is used if omitted.

        Returns:
            Board with exactly config.num_mines mines and counts computed.
        """
        board = cls(config)
        board._place_mines(rng or random.Random())
        board._calculate_neighbor_mines()
        return board

    @classmethod
    def from_mines(cls, size: int, mines: Iterable[Position]) -> "Board":
        """
        Create a board with mines at the given positions.

        Args:
            size: Board dimension.
            mines: (row, col) positions of the mines.

        Raises:
            InvalidConfigurationError: If a position is out of bounds or
                the mine count is not in (0, size * size).
        """
        mine_set = set(mines)
        board = cls(BoardConfig(size, len(mine_set)))
        for row, col in mine_set:
            if not board.is_valid_position(row, col):
                raise InvalidConfigurationError(
                    f"Mine position {(row, col)} is outside a {size}x{size} board"
                )
            board._grid[row][col].is_mine = True
        board._calculate_neighbor_mines()
        return board

    def _place_mines(self, rng: random.Random) -> None:
        """Mark cells as mines by rejection sampling until enough are placed."""
        placed = 0
        while placed < self.config.num_mines:
            row = rng.randrange(self.config.size)
            col = rng.randrange(self.config.size)
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _calculate_neighbor_mines(self) -> None:
        """Calculate neighbor mine counts for all safe cells."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.neighbor_mines = self.count_neighbor_mines(row, col)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def count_neighbor_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for n_row, n_col in self.neighbors(row, col)
            if self._grid[n_row][n_col].is_mine
        )

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.config.size):
            for col in range(self.config.size):
                yield row, col

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def mine_positions(self) -> List[Position]:
        """Positions of every mine, in row-major order."""
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_mine
        ]

    def hidden_positions(self) -> List[Position]:
        """Positions of every cell not yet revealed."""
        return [
            (row, col) for row, col in self.positions()
            if not self._grid[row][col].is_revealed
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.config.size, self.config.size), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs
