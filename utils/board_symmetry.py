"""
board symmetry transformation
Ultimate Tic-Tac-Toe has D4 symmetry group (8 symmetries); the same transform
applied to the 9x9 field and the 3x3 macroboard keeps the position consistent.
"""
import numpy as np
from game import Board

TRANSFORMS = {
    'identity': lambda a: a,
    'flip_horizontal': np.fliplr,
    'flip_vertical': np.flipud,
    'rotate_180': lambda a: np.rot90(a, k=2),
    'rotate_90': lambda a: np.rot90(a, k=-1),
    'rotate_270': lambda a: np.rot90(a, k=1),
    'transpose': np.transpose,
    'transpose_anti': lambda a: np.rot90(np.transpose(a), k=2),
}


class BoardSymmetry:
    """board symmetry transformation and player swap"""

    @staticmethod
    def transform_cells(cells, name: str):
        """Apply a named transform to a square (9 values) or a field (81 values)."""
        size = 3 if len(cells) == 9 else 9
        arr = np.array(cells, dtype=np.int8).reshape(size, size)
        return [int(v) for v in np.ascontiguousarray(TRANSFORMS[name](arr)).ravel()]

    @staticmethod
    def transform(board: Board, name: str) -> Board:
        transformed = board.clone()
        transformed.set_field(BoardSymmetry.transform_cells(board.field, name))
        transformed.set_macroboard(BoardSymmetry.transform_cells(board.macroboard, name))
        return transformed

    @staticmethod
    def get_all_symmetries(board: Board):
        """
        apply all symmetries

        Returns:
            list of (name, Board) tuples (8 entries)
        """
        return [(name, BoardSymmetry.transform(board, name)) for name in TRANSFORMS]

    @staticmethod
    def swap_players(board: Board) -> Board:
        """
        Create a new board with player 1 and player 2 swapped.
        Playable (-1) and closed (0) squares keep their state.
        """
        swapped = board.clone()
        field = np.array(swapped.field, dtype=np.int8)
        macro = np.array(swapped.macroboard, dtype=np.int8)

        for arr in (field, macro):
            ones, twos = arr == 1, arr == 2
            arr[ones] = 2
            arr[twos] = 1

        swapped.set_field([int(v) for v in field])
        swapped.set_macroboard([int(v) for v in macro])
        return swapped
