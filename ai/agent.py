"""
Move selection for the game-server bot.

Decision order, first match wins:
  1. first move of the session -> center of the board
  2. free choice of one empty square -> the cell sending the opponent back there
  3. two or more playable squares -> forced-win shortcut
  4. minimax search
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from config import Config
from game import Board
from game.rules import to_action, to_coord, opponent_of
from .depth_policy import DepthPolicy
from .forced_win import find_forced_win, has_multiple_playable
from .search import MinimaxSearch

logger = logging.getLogger(__name__)

CENTER = to_action(4, 4)


@dataclass
class MoveResult:
    action: Optional[int] = None
    score: Optional[float] = None
    reason: str = "no_legal_move"   # opening, free_choice, forced_win, search, no_legal_move
    depth: Optional[int] = None
    nodes: int = 0

    @property
    def found(self) -> bool:
        return self.action is not None

    @property
    def move(self) -> Optional[Tuple[int, int]]:
        """(x, y) field coordinate, as expected by the game server."""
        return to_coord(self.action) if self.action is not None else None


def free_choice_square(legal_moves: List[int]) -> Optional[int]:
    """Square index when the legal moves are exactly one whole empty square."""
    if len(legal_moves) != 9:
        return None
    start_x, start_y = to_coord(legal_moves[0])
    end_x, end_y = to_coord(legal_moves[8])
    if start_x % 3 or start_y % 3 or start_x + 2 != end_x or start_y + 2 != end_y:
        return None
    return (start_y // 3) * 3 + start_x // 3


class UltimateBot:
    """Agent playing as `bot_id` (the opponent is the other player)."""

    def __init__(self, bot_id: int = 1, config: Config = None):
        self.config = config or Config()
        self.name = f"UltimateBot-{self.config.depth.policy}"
        self.depth_policy = DepthPolicy(self.config.depth)
        self.bot_id = bot_id

    @property
    def bot_id(self) -> int:
        return self._bot_id

    @bot_id.setter
    def bot_id(self, value: int):
        self._bot_id = value
        self.opponent_id = opponent_of(value)

    def select_action(self, board: Board, player: Optional[int] = None,
                      time_left: Optional[int] = None, time_per_move: Optional[int] = None) -> MoveResult:
        """Pick a move for the current position.

        Args:
            board: Current board (not modified)
            player: Side to move, defaults to bot_id
            time_left: Time hint from the action request (ms), the remaining time bank
            time_per_move: Per-move allotment from the settings (ms)

        Returns:
            MoveResult; reason 'no_legal_move' when the game is already decided
        """
        if player is not None and player != self.bot_id:
            self.bot_id = player

        legal_moves = board.get_legal_moves()
        if not legal_moves or board.winner() is not None:
            logger.warning("No legal move: game already decided")
            return MoveResult()

        if board.move == 1 and CENTER in legal_moves:
            return MoveResult(action=CENTER, reason="opening")

        square = free_choice_square(legal_moves)
        if square is not None:
            sx, sy = square % 3, square // 3
            return MoveResult(action=to_action(4 * sx, 4 * sy), reason="free_choice")

        if self.config.search.use_forced_win and has_multiple_playable(board):
            action = find_forced_win(board, self.bot_id, legal_moves)
            if action is not None:
                logger.info("Forced win at %s", to_coord(action))
                return MoveResult(action=action, reason="forced_win")

        depth = self.depth_policy.root_depth(len(legal_moves), board.round, time_per_move)

        search = MinimaxSearch(self.bot_id, self.config.depth, self.config.search)
        action, score, scored = search.search_root(board.clone(), depth, legal_moves)

        if self.config.search.log_candidates:
            for a, s in scored:
                logger.debug("current: %d %d %s", *to_coord(a), s)
        logger.info("next: %d %d %s (depth %d, %d nodes)", *to_coord(action), score, depth, search.nodes)

        return MoveResult(action=action, score=score, reason="search", depth=depth, nodes=search.nodes)
