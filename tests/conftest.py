"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Closed, GameController


def layout(size: int, *mines: int) -> list:
    """Flat mine layout of a size x size board with mines at given indices."""
    cells = [False] * (size * size)
    for index in mines:
        cells[index] = True
    return cells


@pytest.fixture
def make_layout():
    """Expose the layout helper to tests."""
    return layout


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 5x5 board with 7 mines."""
    return Board(BoardConfig(), rng=random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a 3x3 board with no mines for flood testing."""
    return Board.from_layout(layout(3))


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

    Opening index 0 opens every other cell; 18, 19 and 23 show 1.
    """
    return Board.from_layout(layout(5, 24))


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with column 2 entirely mined, splitting it in two."""
    return Board.from_layout(layout(5, 2, 7, 12, 17, 22))


@pytest.fixture
def single_mine_board() -> Board:
    """1x1 board whose only cell is a mine."""
    return Board.from_layout([True])


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def controller() -> GameController:
    """Controller over a seeded default board."""
    return GameController(Board(BoardConfig(), rng=random.Random(1234)))


@pytest.fixture
def corner_mine_game(corner_mine_board: Board) -> GameController:
    """Controller over the single corner mine board."""
    return GameController(corner_mine_board)


@pytest.fixture
def closed() -> Closed:
    """An unflagged closed cell."""
    return Closed()
