"""
Unit tests for Cell class.

Tests cell state, revealing and observation values.
"""
from minefield import Cell


class TestCellInitialization:
    """Test cell creation and defaults."""

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden."""
        assert hidden_cell.is_hidden is True
        assert hidden_cell.is_revealed is False

    def test_default_cell_is_not_mine(self, hidden_cell: Cell) -> None:
        """New cell should not contain a mine."""
        assert hidden_cell.is_mine is False
        assert hidden_cell.is_safe is True

    def test_default_neighbor_count_is_zero(self, hidden_cell: Cell) -> None:
        """New cell should have zero neighbor mines."""
        assert hidden_cell.neighbor_mines == 0


class TestCellReveal:
    """Test cell revealing."""

    def test_reveal_hidden_cell_succeeds(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should return True."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_twice_fails(self, hidden_cell: Cell) -> None:
        """Second reveal should report nothing changed."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is True


class TestCellObservation:
    """Test observation values."""

    def test_hidden_cell_observation(self, hidden_cell: Cell) -> None:
        """Hidden cell should be -1."""
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_observation(self, mine_cell: Cell) -> None:
        """Hidden mine should look like any hidden cell."""
        assert mine_cell.to_observation() == -1

    def test_revealed_mine_observation(self, mine_cell: Cell) -> None:
        """Revealed mine should be 9."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9

    def test_numbered_cell_observation(self, numbered_cell: Cell) -> None:
        """Revealed safe cell should show its neighbor count."""
        assert numbered_cell.to_observation() == 3
