from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .patterns import is_winner
from .rules import (
    EMPTY, PLAYABLE, PLAYERS,
    square_of, square_cells, update_macroboard,
)


class IllegalMoveError(ValueError):
    """Move targets an occupied cell or a square that is not playable."""


@dataclass(frozen=True)
class GameSnapshot:
    field: Tuple[int, ...]
    macroboard: Tuple[int, ...]
    round: int
    move: int


class Board:
    """
    Composite board: 81 field cells (empty: 0, player 1: 1, player 2: 2)
    and 9 macroboard entries (playable: -1, closed: 0, won: 1/2).
    """

    def __init__(self, field: Optional[Sequence[int]] = None, macroboard: Optional[Sequence[int]] = None,
                 round: int = 0, move: int = 0):
        self.field = list(field) if field is not None else [EMPTY] * 81
        self.macroboard = list(macroboard) if macroboard is not None else [PLAYABLE] * 9
        self.round = round
        self.move = move

    @classmethod
    def new_game(cls) -> 'Board':
        """Empty board, every square playable, first move pending."""
        return cls(round=1, move=1)

    def clone(self) -> 'Board':
        """Fast board cloning, no shared storage with the original."""
        new_board = Board.__new__(Board)
        new_board.field = self.field[:]
        new_board.macroboard = self.macroboard[:]
        new_board.round = self.round
        new_board.move = self.move
        return new_board

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(tuple(self.field), tuple(self.macroboard), self.round, self.move)

    def restore(self, snapshot: GameSnapshot):
        self.field[:] = snapshot.field
        self.macroboard[:] = snapshot.macroboard
        self.round = snapshot.round
        self.move = snapshot.move

    def get_legal_moves(self) -> List[int]:
        """Legal field indices in row-major order."""
        field = self.field
        macroboard = self.macroboard
        legal_moves = []
        for i in range(81):
            if field[i] == EMPTY and macroboard[square_of(i)] == PLAYABLE:
                legal_moves.append(i)
        return legal_moves

    def is_valid_move(self, action: int) -> bool:
        if not (0 <= action < 81):
            return False
        return self.field[action] == EMPTY and self.macroboard[square_of(action)] == PLAYABLE

    def make_move(self, action: int, player: int, validate: bool = True):
        if validate:
            if player not in PLAYERS:
                raise IllegalMoveError(f"Unknown player {player}")
            if not self.is_valid_move(action):
                raise IllegalMoveError(f"Illegal move {action}")

        self.field[action] = player
        update_macroboard(self.field, self.macroboard, action, player)

    def undo_move(self, action: int, saved_macroboard: Sequence[int]):
        """Undo a move. Caller must save the macroboard before make_move."""
        self.field[action] = EMPTY
        self.macroboard[:] = saved_macroboard

    def get_cell(self, x: int, y: int) -> int:
        return self.field[y * 9 + x]

    def set_cell(self, x: int, y: int, value: int):
        self.field[y * 9 + x] = value

    def set_field(self, values: Sequence[int]):
        self.field[:] = values

    def set_macroboard(self, values: Sequence[int]):
        self.macroboard[:] = values

    def square(self, index: int) -> List[int]:
        return square_cells(self.field, index)

    def playable_squares(self) -> List[int]:
        return [s for s in range(9) if self.macroboard[s] == PLAYABLE]

    def winner(self) -> Optional[int]:
        """Player owning a macroboard line, if any."""
        for player in PLAYERS:
            if is_winner(self.macroboard, player):
                return player
        return None

    def is_game_over(self) -> bool:
        if self.winner() is not None:
            return True
        return not self.get_legal_moves()

    def to_array(self) -> np.ndarray:
        """(9, 9) view of the field, rows first."""
        return np.array(self.field, dtype=np.int8).reshape(9, 9)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self):
        return f"Board(round={self.round}, move={self.move}, macroboard={self.macroboard})"

    def __str__(self):
        symbols = {0: '.', 1: 'X', 2: 'O'}
        lines = []
        for r, row in enumerate(self.to_array()):
            if r and r % 3 == 0:
                lines.append('------+-------+------')
            cells = [symbols[int(v)] for v in row]
            lines.append(' | '.join(' '.join(cells[c:c + 3]) for c in (0, 3, 6)))
        return '\n'.join(lines)
