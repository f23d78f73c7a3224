"""
Cell module for minefield.

Represents one grid position: whether it holds a mine, whether it has
been revealed, and how many mines surround it.
"""
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

HIDDEN_CODE = -1
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the player can see this cell.
        neighbor_mines: Count of mines in neighboring cells (0-8).
            Only meaningful when is_mine is False.
    """

    is_mine: bool = False
    is_revealed: bool = False
    neighbor_mines: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was hidden and is now revealed,
            False if it was already revealed.
        """
        if self.is_revealed:
            return False
        self.is_revealed = True
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return not self.is_revealed

    @property
    def is_safe(self) -> bool:
        return not self.is_mine

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine (only after a loss)
        """
        if not self.is_revealed:
            return HIDDEN_CODE
        if self.is_mine:
            return MINE_CODE
        return self.neighbor_mines
