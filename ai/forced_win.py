"""
One-shot tactical check: a square that completes a meta line for us, and a cell
that completes a local line inside it, both reachable this turn.
"""
from typing import Iterable, Optional

from game import Board
from game.patterns import WIN_MASKS, construct_pattern, missing_cell
from game.rules import PLAYABLE, square_cell_action


def has_multiple_playable(board: Board) -> bool:
    """Guard used before trying the shortcut: at least two playable squares.

    Positions with a single playable square are skipped even if a forced win
    exists through it.
    """
    count = 0
    for state in board.macroboard:
        if state == PLAYABLE:
            count += 1
            if count >= 2:
                return True
    return False


def find_forced_win(board: Board, player: int, legal_moves: Optional[Iterable[int]] = None) -> Optional[int]:
    """Field index that wins the game for player right now, or None."""
    if legal_moves is None:
        legal_moves = board.get_legal_moves()
    legal = set(legal_moves)

    macro_pattern = construct_pattern(board.macroboard, player)

    for macro_mask in WIN_MASKS:
        square = missing_cell(macro_pattern, macro_mask)
        if square is None:
            continue

        local_pattern = construct_pattern(board.square(square), player)
        for local_mask in WIN_MASKS:
            cell = missing_cell(local_pattern, local_mask)
            if cell is None:
                continue

            action = square_cell_action(square, cell)
            if action in legal:
                return action

    return None
