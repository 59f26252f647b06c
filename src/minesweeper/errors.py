"""
Error types raised by the Minesweeper engine.

Only programmer errors are raised. Operations on a cell or game in the
wrong state (opening an open cell, flagging after the game ended) are
silent no-ops.
"""


class InvalidSizeError(ValueError):
    """Board size is not usable for a square Minesweeper grid."""


class IndexOutOfBoundsError(IndexError):
    """A flat cell index falls outside ``[0, size * size)``."""

    def __init__(self, index: int, total_cells: int) -> None:
        super().__init__(
            f"Cell index {index} out of range (board has {total_cells} cells)"
        )
        self.index = index
        self.total_cells = total_cells
