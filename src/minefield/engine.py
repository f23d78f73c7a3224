"""
Game engine for minefield.

Owns one board and the state of the game played on it, and applies
reveal actions: mine hits, flood-fill cascades and win detection.
The engine only emits data; drawing cells is left to the caller.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, DEFAULT_CONFIG, Position
from .cell import Cell
from .errors import InvalidConfigurationError
from .logging_config import get_logger


logger = get_logger(__name__)


# ============================================================================
# Game State
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class GameState:
    """
    Progress of a single game.

    Attributes:
        revealed_count: Safe cells revealed so far.
        status: Whether the game is running, won or lost.
    """

    revealed_count: int = 0
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.PLAYING


# ============================================================================
# Reveal Outcomes
# ============================================================================

class OutcomeKind(Enum):
    """Result category of a reveal action."""

    NO_EFFECT = auto()
    LOSS = auto()
    SAFE_REVEAL = auto()
    WIN = auto()


@dataclass(frozen=True)
class RevealedCell:
    """A safe cell uncovered by a reveal, with the digit to display."""

    row: int
    col: int
    neighbor_mines: int

    @property
    def position(self) -> Position:
        return self.row, self.col


@dataclass(frozen=True)
class RevealOutcome:
    """
    What a reveal did to the board.

    Attributes:
        kind: Result category.
        revealed: Newly revealed safe cells, in reveal order.
        mines: Every mine position, filled in only on a loss.
    """

    kind: OutcomeKind
    revealed: Tuple[RevealedCell, ...] = field(default_factory=tuple)
    mines: Tuple[Position, ...] = field(default_factory=tuple)

    @property
    def changed(self) -> bool:
        return self.kind != OutcomeKind.NO_EFFECT

    @property
    def is_terminal(self) -> bool:
        return self.kind in (OutcomeKind.LOSS, OutcomeKind.WIN)


NO_EFFECT = RevealOutcome(OutcomeKind.NO_EFFECT)


# ============================================================================
# Engine
# ============================================================================

class GameEngine:
    """
    Minesweeper game session.

    A new game is started on construction. Calling ``initialize`` again
    discards the board and state and starts over.
    """

    def __init__(
        self,
        config: BoardConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the engine and start a first game.

        Args:
            config: Default board size and mine count for new games.
            rng: Random source for mine placement (default: unseeded).
        """
        self.config = config
        self.rng = rng or random.Random()
        self._board: Board
        self._state: GameState
        self.initialize()

    # ========================================================================
    # Game Setup
    # ========================================================================

    def initialize(
        self,
        size: Optional[int] = None,
        num_mines: Optional[int] = None,
    ) -> Board:
        """
        Start a new game on a freshly generated board.

        Args:
            size: Board dimension (default: the engine's config).
            num_mines: Mines to place (default: the engine's config).

        Returns:
            The new board.

        Raises:
            InvalidConfigurationError: If num_mines is not in
                (0, size * size).
        """
        config = BoardConfig(
            size=self.config.size if size is None else size,
            num_mines=self.config.num_mines if num_mines is None else num_mines,
        )
        return self.load(Board.generate(config, self.rng))

    def load(self, board: Board) -> Board:
        """
        Start a new game on an already built board.

        Raises:
            InvalidConfigurationError: If any cell on the board is
                already revealed.
        """
        if len(board.hidden_positions()) != board.config.total_cells:
            raise InvalidConfigurationError(
                "Cannot start a game on a board with revealed cells"
            )
        self._board = board
        self._state = GameState()
        logger.info(
            "New game: %dx%d board with %d mines",
            board.size, board.size, board.num_mines,
        )
        return board

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal the cell at the given position.

        A mine ends the game and exposes every mine. A safe cell is
        revealed and, if it has no neighboring mines, the surrounding
        region is uncovered too.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The outcome; NO_EFFECT when the game is over, the position
            is off the board or the cell is already revealed.
        """
        if self._state.is_over:
            return NO_EFFECT
        cell = self._board.get_cell(row, col)
        if cell is None or cell.is_revealed:
            return NO_EFFECT

        if cell.is_mine:
            return self._lose(row, col)

        revealed = self._cascade(row, col)
        if self._state.revealed_count == self._board.config.safe_cells:
            self._state.status = GameStatus.WON
            logger.info("Game won after revealing %d cells",
                        self._state.revealed_count)
            return RevealOutcome(OutcomeKind.WIN, tuple(revealed))
        return RevealOutcome(OutcomeKind.SAFE_REVEAL, tuple(revealed))

    def _lose(self, row: int, col: int) -> RevealOutcome:
        """Expose all mines and end the game."""
        mines = self._board.mine_positions()
        for mine_row, mine_col in mines:
            self._board.get_cell(mine_row, mine_col).is_revealed = True
        self._state.status = GameStatus.LOST
        logger.info("Game lost: mine hit at (%d, %d)", row, col)
        return RevealOutcome(OutcomeKind.LOSS, mines=tuple(mines))

    def _cascade(self, row: int, col: int) -> List[RevealedCell]:
        """
        Flood-fill reveal starting from a safe cell.

        Uses an explicit stack; each position is queued at most once.
        Zero-count cells expand to their neighbors, numbered cells are
        revealed and stop there.
        """
        revealed: List[RevealedCell] = []
        stack = [(row, col)]
        queued = {(row, col)}

        while stack:
            cur_row, cur_col = stack.pop()
            cell = self._board.get_cell(cur_row, cur_col)
            if not cell.reveal():
                continue
            self._state.revealed_count += 1
            revealed.append(RevealedCell(cur_row, cur_col, cell.neighbor_mines))

            if cell.neighbor_mines > 0:
                continue
            for position in self._board.neighbors(cur_row, cur_col):
                neighbor = self._board.get_cell(*position)
                if position in queued or neighbor.is_revealed or neighbor.is_mine:
                    continue
                queued.add(position)
                stack.append(position)

        logger.debug("Reveal at (%d, %d) uncovered %d cells",
                     row, col, len(revealed))
        return revealed

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._state.status

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._state.is_over

    @property
    def revealed_count(self) -> int:
        return self._state.revealed_count

    @property
    def safe_cells_remaining(self) -> int:
        """Safe cells still hidden."""
        return self._board.config.safe_cells - self._state.revealed_count

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        return self._board.get_cell(row, col)

    def get_observation(self) -> np.ndarray:
        """Get board state as a numpy array (see Board.get_observation)."""
        return self._board.get_observation()

    def get_valid_actions(self) -> List[Position]:
        """
        Get cells that a reveal could still affect.

        Returns:
            Hidden (row, col) positions, or an empty list once the game
            is over.
        """
        if self._state.is_over:
            return []
        return self._board.hidden_positions()
