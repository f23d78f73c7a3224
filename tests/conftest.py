"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src and the repo root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, GameEngine


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def seeded_board() -> Board:
    """Create a default 9x9 board with 10 mines from a fixed seed."""
    return Board.generate(BoardConfig(9, 10), random.Random(1234))


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a column of mines down the middle.

    Columns 0 and 1 are cut off from columns 3 and 4.
    """
    return Board.from_mines(5, [(row, 2) for row in range(5)])


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with a single mine in the bottom-right corner."""
    return Board.from_mines(3, [(2, 2)])


@pytest.fixture
def tiny_board() -> Board:
    """2x2 board with one mine; every safe cell shows 1."""
    return Board.from_mines(2, [(0, 0)])


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine() -> GameEngine:
    """Create a default 9x9 engine with 10 mines and a seeded RNG."""
    return GameEngine(rng=random.Random(42))


@pytest.fixture
def wall_engine(wall_board: Board) -> GameEngine:
    """Engine playing on the wall board."""
    engine = GameEngine(rng=random.Random(0))
    engine.load(wall_board)
    return engine


@pytest.fixture
def corner_engine(corner_board: Board) -> GameEngine:
    """Engine playing on the corner board."""
    engine = GameEngine(rng=random.Random(0))
    engine.load(corner_board)
    return engine


@pytest.fixture
def tiny_engine(tiny_board: Board) -> GameEngine:
    """Engine playing on the 2x2 board."""
    engine = GameEngine(rng=random.Random(0))
    engine.load(tiny_board)
    return engine


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_mines=3)
    cell.reveal()
    return cell
