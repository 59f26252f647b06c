"""
Game controller for Minesweeper.

Turns player intents (open, flag, restart) into board operations, derives
the outcome from their results and notifies observers once per effective
mutation.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Tuple, Union

from .board import Board, BoardConfig
from .cell import Cell

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Outcome(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Action(Enum):
    """Player intents that can mutate the game."""

    OPEN = auto()
    FLAG = auto()
    RESTART = auto()


@dataclass(frozen=True)
class BoardChange:
    """
    Published after a mutating call has fully completed.

    Attributes:
        action: Intent that caused the change.
        indices: Flat indices whose cell state changed, ascending.
        outcome: Outcome after the change.
    """

    action: Action
    indices: Tuple[int, ...]
    outcome: Outcome


Listener = Callable[[BoardChange], None]


# ============================================================================
# Controller Class
# ============================================================================

class GameController:
    """
    Owns one board and the game outcome.

    The board object lives as long as the controller; ``restart`` resets it
    in place.
    """

    def __init__(self, board: Union[Board, BoardConfig, int, None] = None) -> None:
        """
        Initialize the controller.

        Args:
            board: Existing board, or a config/size to build one from
                (default: 5x5).
        """
        if not isinstance(board, Board):
            board = Board(board if board is not None else BoardConfig())
        self._board = board
        self._outcome = Outcome.PLAYING
        self._listeners: List[Listener] = []

    # ========================================================================
    # Observers
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, action: Action, before: Tuple[Cell, ...]) -> None:
        after = self._board.cells
        changed = tuple(
            i for i, (old, new) in enumerate(zip(before, after)) if old != new
        )
        if not changed and action is not Action.RESTART:
            return
        change = BoardChange(action, changed, self._outcome)
        for listener in list(self._listeners):
            listener(change)

    # ========================================================================
    # Player Intents
    # ========================================================================

    def open_cell(self, index: int) -> None:
        """
        Open a cell and update the outcome.

        Does nothing once the game is over or if the cell is already open.
        """
        if not self._board.is_closed(index) or self._outcome is not Outcome.PLAYING:
            return

        before = self._board.cells
        if not self._board.open(index):
            self._set_outcome(Outcome.LOST)
        elif self._board.unrevealed_count == self._board.mine_count:
            self._set_outcome(Outcome.WON)
        self._publish(Action.OPEN, before)

    def toggle_flag(self, index: int) -> None:
        """Toggle the flag on a closed cell while the game is running."""
        self._board.check_index(index)
        if self._outcome is not Outcome.PLAYING:
            return
        before = self._board.cells
        if self._board.toggle_flag(index):
            self._publish(Action.FLAG, before)

    def restart(self) -> None:
        """Regenerate the board in place and resume play."""
        before = self._board.cells
        self._board.reset()
        self._set_outcome(Outcome.PLAYING)
        self._publish(Action.RESTART, before)

    def _set_outcome(self, outcome: Outcome) -> None:
        if outcome is not self._outcome:
            level = logging.DEBUG if outcome is Outcome.PLAYING else logging.INFO
            logger.log(level, "Outcome %s -> %s", self._outcome.name, outcome.name)
        self._outcome = outcome

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_playing(self) -> bool:
        return self._outcome is Outcome.PLAYING

    @property
    def is_won(self) -> bool:
        return self._outcome is Outcome.WON

    @property
    def is_lost(self) -> bool:
        return self._outcome is Outcome.LOST
