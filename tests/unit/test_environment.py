"""
Unit tests for the Gymnasium environment and the agents that drive it.
"""
import numpy as np
import pytest
from minesweeper import Board, BoardConfig, GameController, MinesweeperEnv, Outcome

from agents import Evaluator, RandomAgent


@pytest.fixture
def env() -> MinesweeperEnv:
    """5x5 environment reset with a fixed seed."""
    environment = MinesweeperEnv(BoardConfig(5), render_mode="ansi")
    environment.reset(seed=42)
    return environment


@pytest.fixture
def wall_env(wall_board: Board) -> MinesweeperEnv:
    """Environment whose controller runs the wall layout."""
    environment = MinesweeperEnv(BoardConfig(5))
    environment.controller = GameController(wall_board)
    return environment


# ============================================================================
# Environment Tests
# ============================================================================

class TestMinesweeperEnv:
    """Test reset, step and rewards."""

    def test_spaces_match_board(self, env: MinesweeperEnv) -> None:
        """One action per cell, one observation entry per cell."""
        assert env.action_space.n == 25
        assert env.observation_space.shape == (5, 5)

    def test_reset_returns_closed_observation(self) -> None:
        """Reset gives a fresh all-closed board."""
        environment = MinesweeperEnv(BoardConfig(4))
        obs, info = environment.reset(seed=1)
        assert np.all(obs == -1)
        assert info["game_state"] == "PLAYING"
        assert info["valid_actions"] == 16

    def test_reset_seed_is_reproducible(self) -> None:
        """Equal seeds give equal layouts."""
        first = MinesweeperEnv(BoardConfig(5))
        second = MinesweeperEnv(BoardConfig(5))
        first.reset(seed=11)
        second.reset(seed=11)
        assert first.board.mines == second.board.mines

    def test_safe_step_rewards_one(self, wall_env: MinesweeperEnv) -> None:
        """A safe open that does not win scores +1."""
        obs, reward, terminated, truncated, info = wall_env.step(0)
        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert obs[0, 1] == 2
        assert info["revealed"] == 10

    def test_mine_step_rewards_minus_ten(self, wall_env: MinesweeperEnv) -> None:
        """Hitting a mine terminates with -10."""
        _, reward, terminated, _, info = wall_env.step(2)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_winning_step_rewards_ten(self, corner_mine_board: Board) -> None:
        """The winning open scores +10."""
        environment = MinesweeperEnv(BoardConfig(5))
        environment.controller = GameController(corner_mine_board)
        _, reward, terminated, _, _ = environment.step(0)
        assert reward == 10.0
        assert terminated is True
        assert environment.controller.outcome is Outcome.WON

    def test_invalid_step_penalised(self, wall_env: MinesweeperEnv) -> None:
        """Opening an open cell costs -0.1."""
        wall_env.step(1)
        _, reward, terminated, _, _ = wall_env.step(1)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_action_mask_tracks_closed_cells(
        self, wall_env: MinesweeperEnv
    ) -> None:
        """Only closed cells are valid actions."""
        wall_env.step(0)
        mask = wall_env.get_action_mask()
        assert mask.dtype == bool
        assert mask.sum() == 15
        assert not mask[0]
        assert mask[3]

    def test_render_ansi(self, env: MinesweeperEnv) -> None:
        """ANSI mode returns the text board."""
        assert env.render() == "\n".join([". . . . ."] * 5)


# ============================================================================
# Agent Tests
# ============================================================================

class TestRandomAgent:
    """Test random action selection."""

    def test_selects_only_valid_actions(self) -> None:
        """The chosen index is always allowed by the mask."""
        agent = RandomAgent(3, seed=0)
        mask = np.zeros(9, dtype=bool)
        mask[[2, 7]] = True
        for _ in range(50):
            assert agent.select_action(np.full((3, 3), -1), mask) in (2, 7)

    def test_uses_observation_without_mask(self) -> None:
        """Closed and flagged cells are derived from the observation."""
        agent = RandomAgent(2, seed=0)
        obs = np.array([[0, -2], [1, 1]], dtype=np.int8)
        assert agent.select_action(obs) == 1

    def test_returns_python_int(self) -> None:
        """Actions are plain ints usable as flat indices."""
        agent = RandomAgent(2, seed=3)
        action = agent.select_action(np.full((2, 2), -1))
        assert type(action) is int

    def test_no_valid_actions_returns_zero(self) -> None:
        """Fully open boards fall back to index 0."""
        agent = RandomAgent(2, seed=0)
        assert agent.select_action(np.zeros((2, 2), dtype=np.int8)) == 0

    def test_position_conversion(self) -> None:
        """Flat indices map to (row, col)."""
        agent = RandomAgent(4)
        assert agent.action_to_position(6) == (1, 2)
        assert agent.position_to_action(1, 2) == 6


class TestEvaluator:
    """Test full-game evaluation."""

    def test_every_game_finishes(self) -> None:
        """Random play always ends in a win or a loss."""
        evaluator = Evaluator(BoardConfig(4), num_episodes=20, seed=5)
        results = evaluator.evaluate(RandomAgent(4, seed=5))
        assert 0.0 <= results["win_rate"] <= 1.0
        assert 1.0 <= results["avg_steps"] <= 16.0
        assert set(results) == {"win_rate", "avg_reward", "avg_steps", "avg_revealed"}
