from .agent import UltimateBot, MoveResult, free_choice_square
from .depth_policy import DepthPolicy, branching_cap, capped_depth
from .forced_win import find_forced_win, has_multiple_playable
from .heuristic import evaluate, relative_score, line_product, cell_weights
from .search import MinimaxSearch

__all__ = [
    'UltimateBot', 'MoveResult', 'free_choice_square',
    'DepthPolicy', 'branching_cap', 'capped_depth',
    'find_forced_win', 'has_multiple_playable',
    'evaluate', 'relative_score', 'line_product', 'cell_weights',
    'MinimaxSearch',
]
