"""
Minefield game module.

Provides the minesweeper game engine, its board and cell model, a text
view and a gymnasium environment.
"""
from .cell import Cell
from .board import Board, BoardConfig, DEFAULT_CONFIG
from .engine import (
    GameEngine,
    GameState,
    GameStatus,
    NO_EFFECT,
    OutcomeKind,
    RevealedCell,
    RevealOutcome,
)
from .errors import InvalidConfigurationError, MinefieldError
from .environment import MinefieldEnv

__all__ = [
    "Cell",
    "Board",
    "BoardConfig",
    "DEFAULT_CONFIG",
    "GameEngine",
    "GameState",
    "GameStatus",
    "NO_EFFECT",
    "OutcomeKind",
    "RevealedCell",
    "RevealOutcome",
    "InvalidConfigurationError",
    "MinefieldError",
    "MinefieldEnv",
]

__version__ = "0.1.0"
