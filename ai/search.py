"""
Minimax with alpha-beta pruning.

Features:
  - Scores always from a fixed side (`me`), max on my turn, min on the opponent's
  - Per-node depth cap from the branching factor
  - Single working board, make_move/undo_move with the saved macroboard kept
    in a per-ply arena (no clone per node)
"""
from typing import List, Optional, Tuple

from config import DepthConfig, SearchConfig
from game import Board
from game.rules import opponent_of
from .depth_policy import capped_depth
from .heuristic import relative_score

INF = float('inf')


class MinimaxSearch:
    """Depth-limited minimax from the point of view of player `me`."""

    def __init__(self, me: int, depth_config: DepthConfig = None, search_config: SearchConfig = None):
        self.me = me
        self.opponent = opponent_of(me)
        self.depth_config = depth_config or DepthConfig()
        self.search_config = search_config or SearchConfig()
        self.nodes = 0
        self._saved: List[List[int]] = [[0] * 9 for _ in range(self.search_config.max_ply)]

    def is_terminal(self, board: Board, legal_moves: List[int]) -> bool:
        return board.winner() is not None or not legal_moves

    def evaluate(self, board: Board) -> int:
        return relative_score(board.field, board.macroboard, self.me)

    def minimax(self, board: Board, depth: int, alpha: float, beta: float, to_move: int, ply: int = 0) -> float:
        self.nodes += 1

        if depth == 0:
            return self.evaluate(board)

        legal_moves = board.get_legal_moves()
        if self.is_terminal(board, legal_moves):
            return self.evaluate(board)

        depth = capped_depth(depth, len(legal_moves), self.depth_config)
        saved = self._saved_for(ply)
        saved[:] = board.macroboard

        if to_move == self.me:
            score = -INF
            for action in legal_moves:
                board.make_move(action, to_move, validate=False)
                try:
                    current = self.minimax(board, depth - 1, alpha, beta, self.opponent, ply + 1)
                finally:
                    board.undo_move(action, saved)

                if current > score:
                    score = current
                    alpha = max(alpha, score)
                    if alpha >= beta:
                        return score  # Beta cutoff
        else:
            score = INF
            for action in legal_moves:
                board.make_move(action, to_move, validate=False)
                try:
                    current = self.minimax(board, depth - 1, alpha, beta, self.me, ply + 1)
                finally:
                    board.undo_move(action, saved)

                if current < score:
                    score = current
                    beta = min(beta, score)
                    if alpha >= beta:
                        return score  # Alpha cutoff

        return score

    def search_root(self, board: Board, depth: int,
                    legal_moves: Optional[List[int]] = None) -> Tuple[Optional[int], float, List[Tuple[int, float]]]:
        """Try every legal move for `me` and keep the first strictly best one.

        Returns:
            (best_action, best_score, [(action, score), ...] in move order)
            Scores of moves that fail low against the running best are upper bounds.
        """
        self.nodes = 0
        if legal_moves is None:
            legal_moves = board.get_legal_moves()

        best_action = None
        best_score = -INF
        alpha = -INF
        beta = INF
        scored = []

        saved = self._saved_for(0)
        saved[:] = board.macroboard

        for action in legal_moves:
            board.make_move(action, self.me, validate=False)
            try:
                score = self.minimax(board, depth, alpha, beta, self.opponent, ply=1)
            finally:
                board.undo_move(action, saved)

            scored.append((action, score))
            if score > best_score:
                best_score = score
                best_action = action
            alpha = max(alpha, score)

        return best_action, best_score, scored

    def _saved_for(self, ply: int) -> List[int]:
        while ply >= len(self._saved):
            self._saved.append([0] * 9)
        return self._saved[ply]
