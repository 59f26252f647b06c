"""
Board module for Minesweeper game.

Implements the square board stored as a flat cell list: mine placement,
adjacency geometry and the reveal (flood fill) algorithm. The board knows
nothing about winning or losing; see ``controller`` for that.
"""
import logging
import math
import random
from dataclasses import InitVar, dataclass, field
from typing import List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from .cell import Cell, Closed, Open
from .errors import IndexOutOfBoundsError, InvalidSizeError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MINE_RATIO = 1.5
DEFAULT_SIZE = 5


@dataclass
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows and columns.
    """

    size: int = DEFAULT_SIZE

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure the size is a positive integer."""
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise InvalidSizeError(f"Board size must be an integer, got {self.size!r}")
        if self.size < 1:
            raise InvalidSizeError(f"Board size must be positive, got {self.size}")

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def num_mines(self) -> int:
        """Mines placed by random generation: floor(size * 1.5)."""
        return math.floor(self.size * MINE_RATIO)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells are addressed by flat index ``row * size + col``. A fresh random
    mine layout is generated on construction and on every ``reset``.
    """

    config: Union[BoardConfig, int] = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, compare=False, repr=False)
    layout: InitVar[Optional[Sequence[bool]]] = None
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)
    _mines: List[bool] = field(default_factory=list, init=False, repr=False)
    _mine_count: int = field(default=0, init=False, repr=False)

    def __post_init__(self, layout: Optional[Sequence[bool]]) -> None:
        """Generate the first layout after dataclass creation."""
        if not isinstance(self.config, BoardConfig):
            self.config = BoardConfig(self.config)
        if self.rng is None:
            self.rng = random.Random()
        if layout is None:
            self.reset()
        else:
            self._load_layout(layout)

    @classmethod
    def from_layout(
        cls, mines: Sequence[bool], rng: Optional[random.Random] = None
    ) -> "Board":
        """
        Build a board with an explicit mine layout.

        Args:
            mines: Flat sequence of length size * size, truthy for a mine.
            rng: Random source used by later resets.

        Returns:
            Board whose mine count is the number of mines in the layout.
        """
        mines = [bool(mine) for mine in mines]
        size = math.isqrt(len(mines))
        if size == 0 or size * size != len(mines):
            raise InvalidSizeError(
                f"Layout of {len(mines)} cells is not a non-empty square"
            )
        return cls(BoardConfig(size), rng=rng, layout=mines)

    # ========================================================================
    # Layout Generation (Low-level)
    # ========================================================================

    def reset(self) -> None:
        """Close every cell and place a fresh random mine layout."""
        total = self.config.total_cells
        num_mines = self.config.num_mines
        if not 0 < num_mines < total:
            raise InvalidSizeError(
                f"Size {self.size} cannot hold {num_mines} mines in {total} cells"
            )
        mines = [True] * num_mines + [False] * (total - num_mines)
        self.rng.shuffle(mines)
        self._mines = mines
        self._mine_count = num_mines
        self._cells = [Closed() for _ in range(total)]
        logger.debug("Generated %dx%d board with %d mines", self.size, self.size, num_mines)

    def _load_layout(self, mines: Sequence[bool]) -> None:
        """Install a fixed layout with every cell closed."""
        if len(mines) != self.config.total_cells:
            raise InvalidSizeError(
                f"Layout of {len(mines)} cells does not fit a {self.size}x{self.size} board"
            )
        self._mines = [bool(mine) for mine in mines]
        self._mine_count = sum(self._mines)
        self._cells = [Closed() for _ in range(len(self._mines))]
        logger.debug(
            "Loaded %dx%d layout with %d mines", self.size, self.size, self._mine_count
        )

    # ========================================================================
    # Index Utilities (Low-level)
    # ========================================================================

    def check_index(self, index: int) -> None:
        """Raise IndexOutOfBoundsError unless 0 <= index < size * size."""
        if not 0 <= index < self.total_cells:
            raise IndexOutOfBoundsError(index, self.total_cells)

    def position(self, index: int) -> Tuple[int, int]:
        """Convert flat index to (row, col)."""
        self.check_index(index)
        return divmod(index, self.size)

    def index_of(self, row: int, col: int) -> int:
        """Convert (row, col) to flat index."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexOutOfBoundsError(row * self.size + col, self.total_cells)
        return row * self.size + col

    def adjacent_indices(self, index: int) -> Set[int]:
        """
        Get in-bounds neighbour indices of a cell.

        The left column is skipped on the left edge and the right column
        on the right edge so neighbours never wrap onto another row; rows
        above and below the grid fall out in the bounds filter.

        Args:
            index: Flat index of the centre cell.

        Returns:
            Set of up to 8 neighbouring flat indices.
        """
        self.check_index(index)
        size = self.size
        candidates = [index - size, index + size]
        if index % size != 0:
            candidates += [index - size - 1, index - 1, index + size - 1]
        if (index + 1) % size != 0:
            candidates += [index - size + 1, index + 1, index + size + 1]
        return {idx for idx in candidates if 0 <= idx < self.total_cells}

    def count_adjacent_mines(self, index: int) -> int:
        """Count mines around a cell."""
        return sum(1 for idx in self.adjacent_indices(index) if self._mines[idx])

    # ========================================================================
    # Board Actions (Mid-level)
    # ========================================================================

    def open(self, index: int, expanding: bool = False) -> bool:
        """
        Reveal a cell, flooding outward from cells with no adjacent mines.

        Opening a cell that is already open does nothing. The flood uses an
        explicit stack and never reveals a mine; in expansion mode a mine
        target is left closed.

        Args:
            index: Flat index to reveal.
            expanding: True when called as part of a flood expansion.

        Returns:
            False if a mine was revealed, True otherwise.
        """
        self.check_index(index)
        if not isinstance(self._cells[index], Closed):
            return True

        if self._mines[index]:
            if expanding:
                return True
            self._cells[index] = Open.mine()
            logger.debug("Opened mine at %d", index)
            return False

        frontier = [index]
        opened = 0
        while frontier:
            current = frontier.pop()
            if not isinstance(self._cells[current], Closed) or self._mines[current]:
                continue
            neighbors = self.adjacent_indices(current)
            count = sum(1 for idx in neighbors if self._mines[idx])
            opened += 1
            if count == 0:
                self._cells[current] = Open.empty()
                frontier.extend(
                    idx for idx in neighbors if isinstance(self._cells[idx], Closed)
                )
            else:
                self._cells[current] = Open.numbered(count)

        logger.debug("Opened %d cell(s) starting at %d", opened, index)
        return True

    def toggle_flag(self, index: int) -> bool:
        """
        Toggle the flag on a closed cell.

        Returns:
            True if the flag flipped, False if the cell is open.
        """
        self.check_index(index)
        cell = self._cells[index]
        if not isinstance(cell, Closed):
            return False
        self._cells[index] = cell.toggled()
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def total_cells(self) -> int:
        return self.config.total_cells

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Snapshot of every cell in flat index order."""
        return tuple(self._cells)

    @property
    def mines(self) -> Tuple[bool, ...]:
        return tuple(self._mines)

    @property
    def unrevealed_count(self) -> int:
        """Number of closed cells, flagged or not."""
        return sum(1 for cell in self._cells if isinstance(cell, Closed))

    def cell(self, index: int) -> Cell:
        self.check_index(index)
        return self._cells[index]

    def is_mine(self, index: int) -> bool:
        self.check_index(index)
        return self._mines[index]

    def is_closed(self, index: int) -> bool:
        return isinstance(self.cell(index), Closed)

    def closed_indices(self) -> List[int]:
        """Flat indices of all closed cells."""
        return [i for i, cell in enumerate(self._cells) if isinstance(cell, Closed)]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            int8 array of shape (size, size) where:
                -1 = closed
                -2 = flagged
                0-8 = open with adjacent count
                9 = open mine
        """
        flat = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int8,
            count=self.total_cells,
        )
        return flat.reshape(self.size, self.size)
