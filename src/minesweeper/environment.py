"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the game controller.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import OBS_FLAGGED, OBS_MINE
from .controller import GameController
from .render import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = closed cell
        - -2 = flagged cell
        - 0-8 = open cell with adjacent mine count
        - 9 = open mine

    Actions:
        Discrete action space of size size * size; action i opens the
        cell at flat index i.

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already open)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 5x5).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self._rng = random.Random()
        self.controller = GameController(Board(self.config, rng=self._rng))
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    @property
    def board(self) -> Board:
        return self.controller.board

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for the mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng.seed(seed)
        self.controller.restart()
        self._steps = 0
        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Open one cell.

        Args:
            action: Flat cell index to open.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        reward = self._calculate_reward(int(action))

        observation = self.board.get_observation()
        terminated = not self.controller.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _calculate_reward(self, index: int) -> float:
        """Open the cell and score the result."""
        if not self.board.is_closed(index):
            return -0.1

        self.controller.open_cell(index)

        if self.controller.is_won:
            return 10.0
        if self.controller.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        closed = self.board.unrevealed_count
        return {
            "steps": self._steps,
            "revealed": self.board.total_cells - closed,
            "total_safe": self.board.total_cells - self.board.mine_count,
            "game_state": self.controller.outcome.name,
            "valid_actions": closed,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = closed cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        mask[self.board.closed_indices()] = True
        return mask
