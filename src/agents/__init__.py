"""
Minesweeper agents module.

- BaseAgent: Interface shared by all agents
- RandomAgent: Baseline random selection
- Evaluator: Win-rate evaluation over many games
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluator import Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
]
