"""
Automated minefield players.

- RandomAgent: Baseline that clicks random hidden cells
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
