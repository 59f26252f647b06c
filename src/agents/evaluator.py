"""
Evaluation of Minesweeper agents.

Plays full games through the Gymnasium environment and aggregates
win rate and reward statistics.
"""
import logging
from typing import Dict, Optional

from minesweeper.board import BoardConfig
from minesweeper.environment import MinesweeperEnv

from .base_agent import BaseAgent

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluate agents on a fixed board size."""

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            seed: Seed for the first episode's mine layout.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Every episode runs to a win or a loss; each step opens one closed
        cell, so an episode takes at most size * size steps.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps, avg_revealed.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = None if self.seed is None or episode else self.seed
            observation, info = env.reset(seed=seed)
            agent.reset()
            terminated = False

            while not terminated:
                action = agent.select_action(observation, env.get_action_mask())
                observation, reward, terminated, _, info = env.step(action)
                total_reward += float(reward)

            if info["game_state"] == "WON":
                wins += 1
            total_steps += info["steps"]
            total_revealed += info["revealed"]
            logger.debug("Episode %d finished: %s", episode + 1, info["game_state"])

        episodes = max(self.num_episodes, 1)
        return {
            "win_rate": wins / episodes,
            "avg_reward": total_reward / episodes,
            "avg_steps": total_steps / episodes,
            "avg_revealed": total_revealed / episodes,
        }

