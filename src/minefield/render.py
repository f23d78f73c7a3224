"""
Text view for minefield.

Draws a board from engine data only: hidden cells as dots, revealed
zeros blank, digits 1-8, and mines as '*'. A won game is framed in a
'#' border.
"""
from typing import List

from .board import Board
from .engine import GameEngine, GameStatus


HIDDEN_GLYPH = "."
EMPTY_GLYPH = " "
MINE_GLYPH = "*"
WIN_BORDER = "#"

MESSAGES = {
    "start": "Click a square to start!",
    GameStatus.PLAYING: "Game in progress.",
    GameStatus.LOST: "Game Over! You hit a mine.",
    GameStatus.WON: "Congratulations! You cleared the board!",
}


def status_message(status: GameStatus, has_started: bool = True) -> str:
    """
    Get the status line shown under the board.

    Args:
        status: Current game status.
        has_started: Whether any cell has been revealed yet.
    """
    if status == GameStatus.PLAYING and not has_started:
        return MESSAGES["start"]
    return MESSAGES[status]


def cell_glyph(board: Board, row: int, col: int, reveal_all: bool = False) -> str:
    """Get the single character drawn for one cell."""
    cell = board.get_cell(row, col)
    if not (cell.is_revealed or reveal_all):
        return HIDDEN_GLYPH
    if cell.is_mine:
        return MINE_GLYPH
    if cell.neighbor_mines == 0:
        return EMPTY_GLYPH
    return str(cell.neighbor_mines)


def render_board(board: Board, reveal_all: bool = False) -> str:
    """
    Render board as text, one line per row.

    Args:
        board: Board to draw.
        reveal_all: Draw every cell as if revealed (for debugging).
    """
    lines = []
    for row in range(board.size):
        glyphs = [
            cell_glyph(board, row, col, reveal_all)
            for col in range(board.size)
        ]
        lines.append(" ".join(glyphs))
    return "\n".join(lines)


def render_game(engine: GameEngine, coordinates: bool = False) -> str:
    """
    Render the engine's board followed by its status message.

    Args:
        engine: Game to draw.
        coordinates: Prefix rows and columns with their indices.
    """
    grid = render_board(engine.board).split("\n")
    if coordinates:
        grid = _add_coordinates(grid, engine.board.size)
    if engine.status == GameStatus.WON:
        grid = _add_border(grid)

    message = status_message(engine.status, engine.revealed_count > 0)
    return "\n".join(grid + ["", message])


def _add_coordinates(grid: List[str], size: int) -> List[str]:
    width = len(str(size - 1))
    header = " " * (width + 1) + " ".join(str(col % 10) for col in range(size))
    rows = [f"{row:>{width}} {line}" for row, line in enumerate(grid)]
    return [header] + rows


def _add_border(grid: List[str]) -> List[str]:
    width = max(len(line) for line in grid)
    edge = WIN_BORDER * (width + 4)
    body = [f"{WIN_BORDER} {line:<{width}} {WIN_BORDER}" for line in grid]
    return [edge] + body + [edge]
