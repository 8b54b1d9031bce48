from .board import Board, GameSnapshot, IllegalMoveError
from .patterns import WIN_MASKS, construct_pattern, is_winner, count_overlap, missing_cell
from .rules import (
    EMPTY, PLAYABLE, CLOSED, PLAYERS,
    opponent_of, to_coord, to_action, square_of, square_cells, square_cell_action,
    square_is_draw, update_macroboard,
)

__all__ = [
    'Board', 'GameSnapshot', 'IllegalMoveError',
    'WIN_MASKS', 'construct_pattern', 'is_winner', 'count_overlap', 'missing_cell',
    'EMPTY', 'PLAYABLE', 'CLOSED', 'PLAYERS',
    'opponent_of', 'to_coord', 'to_action', 'square_of', 'square_cells', 'square_cell_action',
    'square_is_draw', 'update_macroboard',
]
