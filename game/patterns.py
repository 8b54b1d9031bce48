"""
9-bit pattern helpers shared by the local (3x3 cells) and meta (3x3 squares) levels.
Bit i <-> cell i, row-major.
"""
from typing import Optional, Sequence

# Bitmask win patterns (position = r*3+c)
WIN_MASKS = (
    0b000000111,  # row 0
    0b000111000,  # row 1
    0b111000000,  # row 2
    0b001001001,  # col 0
    0b010010010,  # col 1
    0b100100100,  # col 2
    0b100010001,  # diag
    0b001010100,  # anti-diag
)

FULL_MASK = 0b111111111


def construct_pattern(cells: Sequence[int], player: int) -> int:
    """Mask of the cells owned by player."""
    pattern = 0
    for i in range(9):
        if cells[i] == player:
            pattern |= 1 << i
    return pattern


def is_winner(cells: Sequence[int], player: int) -> bool:
    pattern = construct_pattern(cells, player)
    for mask in WIN_MASKS:
        if (pattern & mask) == mask:
            return True
    return False


def count_overlap(pattern: int, mask: int) -> int:
    return bin(pattern & mask).count('1')


def missing_cell(pattern: int, mask: int) -> Optional[int]:
    """Index of the last cell needed to complete mask, if pattern already holds two of it."""
    if count_overlap(pattern, mask) != 2:
        return None
    for i in range(9):
        bit = 1 << i
        if (mask & bit) and not (pattern & bit):
            return i
    return None
