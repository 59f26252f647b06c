"""
Cell module for Minesweeper game.

A cell is a tagged variant: either ``Closed`` (optionally flagged by the
player) or ``Open`` with content fixed at the moment it was revealed.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


# ============================================================================
# Constants
# ============================================================================

class Content(Enum):
    """What an opened cell turned out to hold."""

    MINE = auto()
    EMPTY = auto()
    NUMBER = auto()


# Observation encoding shared with the environment and renderer
OBS_CLOSED = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell Variants
# ============================================================================

@dataclass(frozen=True)
class Closed:
    """
    A cell that has not been revealed yet.

    Attributes:
        flagged: Player marker, no effect on reveal logic.
    """

    flagged: bool = False

    def toggled(self) -> "Closed":
        """Return the same closed cell with the flag flipped."""
        return Closed(flagged=not self.flagged)

    def to_observation(self) -> int:
        return OBS_FLAGGED if self.flagged else OBS_CLOSED


@dataclass(frozen=True)
class Open:
    """
    A revealed cell.

    Attributes:
        content: Mine, empty or numbered.
        number: Adjacent mine count (1-8) for numbered cells, else 0.
    """

    content: Content
    number: int = 0

    def __post_init__(self) -> None:
        if self.content is Content.NUMBER:
            if not 1 <= self.number <= 8:
                raise ValueError(f"Numbered cell needs 1-8, got {self.number}")
        elif self.number != 0:
            raise ValueError(f"{self.content.name} cell cannot carry a number")

    @classmethod
    def mine(cls) -> "Open":
        return cls(Content.MINE)

    @classmethod
    def empty(cls) -> "Open":
        return cls(Content.EMPTY)

    @classmethod
    def numbered(cls, count: int) -> "Open":
        return cls(Content.NUMBER, count)

    @property
    def is_mine(self) -> bool:
        return self.content is Content.MINE

    def to_observation(self) -> int:
        """
        Convert to observation value.

        Returns:
            9 for a mine, otherwise the adjacent mine count (0 if empty).
        """
        if self.content is Content.MINE:
            return OBS_MINE
        return self.number


Cell = Union[Closed, Open]
