"""
Plain-text rendering of a Minesweeper board.
"""
from typing import Dict

from .board import Board
from .cell import OBS_CLOSED, OBS_FLAGGED, OBS_MINE
from .controller import Outcome


SYMBOLS: Dict[int, str] = {
    OBS_CLOSED: ".",
    OBS_FLAGGED: "F",
    OBS_MINE: "*",
    0: " ",
}

BANNERS: Dict[Outcome, str] = {
    Outcome.WON: "Game Clear",
    Outcome.LOST: "Game Over",
}


def cell_symbol(value: int) -> str:
    """Map an observation value to its display character."""
    return SYMBOLS.get(value, str(value))


def render_board(board: Board, with_index: bool = False) -> str:
    """
    Render board as ASCII string, one line per row.

    Args:
        board: Board to draw.
        with_index: Prefix each row with the flat index of its first cell.
    """
    obs = board.get_observation()
    width = len(str(board.total_cells - 1))
    lines = []
    for row in range(board.size):
        row_str = " ".join(cell_symbol(int(val)) for val in obs[row])
        if with_index:
            row_str = f"{row * board.size:>{width}} | {row_str}"
        lines.append(row_str)
    return "\n".join(lines)


def render_outcome(outcome: Outcome) -> str:
    """Banner for a finished game, empty while playing."""
    return BANNERS.get(outcome, "")
