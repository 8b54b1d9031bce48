"""
Baseline opponents for testing the minimax bot.
"""
from .random_agent import RandomAgent

__all__ = ['RandomAgent']
