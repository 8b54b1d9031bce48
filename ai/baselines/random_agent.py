"""
Random Agent - selects random legal moves.
Used as performance floor baseline.
"""
import random
from typing import Optional

from game import Board
from ai.agent import MoveResult


class RandomAgent:
    """Agent that plays random legal moves."""

    def __init__(self, seed: Optional[int] = None):
        self.name = "Random"
        self.rng = random.Random(seed)

    def select_action(self, board: Board, player: Optional[int] = None, time_left: Optional[int] = None) -> MoveResult:
        """Select a random legal move.

        Args:
            board: Current board state
            player: Ignored (for API compatibility)
            time_left: Ignored (for API compatibility)
        """
        legal_moves = board.get_legal_moves()

        if not legal_moves:
            return MoveResult()

        return MoveResult(action=self.rng.choice(legal_moves), reason="random")
