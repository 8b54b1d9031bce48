"""
Send rule: how a move decides which squares the opponent may play in next.

Macroboard values follow the game server encoding:
  -1 playable, 0 closed, 1/2 won by that player.
"""
from typing import List, Sequence, Tuple

from .patterns import is_winner

EMPTY = 0
PLAYABLE = -1
CLOSED = 0
PLAYERS = (1, 2)


def opponent_of(player: int) -> int:
    return 2 if player == 1 else 1


def to_coord(action: int) -> Tuple[int, int]:
    """Field index -> (x, y), i.e. (column, row)."""
    return action % 9, action // 9


def to_action(x: int, y: int) -> int:
    return y * 9 + x


def square_of(action: int) -> int:
    """Index of the square owning a field index."""
    row, col = action // 9, action % 9
    return (row // 3) * 3 + col // 3


def square_cells(field: Sequence[int], square: int) -> List[int]:
    """The 9 cells of a square, row-major."""
    start_r, start_c = (square // 3) * 3, (square % 3) * 3
    return [field[r * 9 + c] for r in range(start_r, start_r + 3) for c in range(start_c, start_c + 3)]


def square_cell_action(square: int, cell: int) -> int:
    """Field index of cell (0-8) inside square (0-8)."""
    row = (square // 3) * 3 + cell // 3
    col = (square % 3) * 3 + cell % 3
    return row * 9 + col


def square_is_draw(cells: Sequence[int]) -> bool:
    """A square with no empty cell left."""
    return EMPTY not in cells


def is_won(state: int) -> bool:
    return state in PLAYERS


def is_undecided(field: Sequence[int], macroboard: Sequence[int], square: int) -> bool:
    return not is_won(macroboard[square]) and not square_is_draw(square_cells(field, square))


def update_macroboard(field: Sequence[int], macroboard: List[int], action: int, player: int):
    """Recompute the macroboard in place after player moved at action (already written to field)."""
    this_square = square_of(action)
    cells = square_cells(field, this_square)
    if is_winner(cells, player):
        macroboard[this_square] = player
    elif square_is_draw(cells):
        macroboard[this_square] = CLOSED

    row, col = action // 9, action % 9
    target = (row % 3) * 3 + col % 3

    if is_undecided(field, macroboard, target):
        for s in range(9):
            if not is_won(macroboard[s]):
                macroboard[s] = CLOSED
        macroboard[target] = PLAYABLE
    else:
        # Sent to a decided square: every open square is fair game
        for s in range(9):
            if is_won(macroboard[s]):
                continue
            macroboard[s] = CLOSED if square_is_draw(square_cells(field, s)) else PLAYABLE
