"""
Minesweeper game module.

Provides the board model, the game controller and their adapters
(text rendering and a Gymnasium environment).
"""
from .cell import Cell, Closed, Content, Open
from .errors import IndexOutOfBoundsError, InvalidSizeError
from .board import Board, BoardConfig, MINE_RATIO
from .controller import Action, BoardChange, GameController, Outcome
from .render import render_board, render_outcome
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Closed",
    "Content",
    "Open",
    "IndexOutOfBoundsError",
    "InvalidSizeError",
    "Board",
    "BoardConfig",
    "MINE_RATIO",
    "Action",
    "BoardChange",
    "GameController",
    "Outcome",
    "render_board",
    "render_outcome",
    "MinesweeperEnv",
]
