"""
Positional evaluation with the line-product formula.

Every 3x3 group (a square's cells, or the macroboard's square scores) is scored
as the sum over its 3 rows, 3 columns and 2 diagonals of the product of the
weights along the line. A single zero on a line kills that line.
"""
from typing import Sequence, Tuple

from game.patterns import is_winner
from game.rules import EMPTY, opponent_of, square_cells

MACRO_WIN_SCORE = 1000000
MICRO_WIN_SCORE = 1000

EMPTY_WEIGHT = 1
OWN_WEIGHT = 10
OPPONENT_WEIGHT = 0

LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # Rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # Cols
    (0, 4, 8), (2, 4, 6),             # Diags
)


def cell_weights(player: int) -> Tuple[Tuple[int, int], ...]:
    """(cell value, weight) pairs seen from player's side."""
    return (
        (EMPTY, EMPTY_WEIGHT),
        (player, OWN_WEIGHT),
        (opponent_of(player), OPPONENT_WEIGHT),
    )


def line_product(values: Sequence[int]) -> int:
    score = 0
    for a, b, c in LINES:
        score += values[a] * values[b] * values[c]
    return score


def evaluate_square(cells: Sequence[int], player: int) -> int:
    weights = dict(cell_weights(player))
    return line_product([weights[v] for v in cells])


def evaluate(field: Sequence[int], macroboard: Sequence[int], player: int) -> int:
    """Score of the position for player alone (never negative)."""
    opponent = opponent_of(player)

    if is_winner(macroboard, player):
        return MACRO_WIN_SCORE
    if is_winner(macroboard, opponent):
        return 0

    scores = []
    for k in range(9):
        if macroboard[k] == player:
            scores.append(MICRO_WIN_SCORE)
        elif macroboard[k] == opponent:
            scores.append(0)
        else:
            scores.append(evaluate_square(square_cells(field, k), player))

    return line_product(scores)


def relative_score(field: Sequence[int], macroboard: Sequence[int], player: int) -> int:
    return evaluate(field, macroboard, player) - evaluate(field, macroboard, opponent_of(player))
