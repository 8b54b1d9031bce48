"""Heuristic evaluator: line-product scoring, win constants, symmetry."""
import random
import sys
sys.path.insert(0, '.')

import pytest

from ai.heuristic import (
    evaluate, evaluate_square, relative_score, line_product, cell_weights,
    MACRO_WIN_SCORE, MICRO_WIN_SCORE,
)
from game import Board, PLAYABLE, CLOSED
from utils import BoardSymmetry, TRANSFORMS


def _random_boards(num_games=5, seed=3):
    rng = random.Random(seed)
    for _ in range(num_games):
        board = Board.new_game()
        player = 1
        while not board.is_game_over():
            board.make_move(rng.choice(board.get_legal_moves()), player)
            player = 3 - player
            yield board.clone()


class TestLineProduct:

    def test_all_ones(self):
        assert line_product([1] * 9) == 8

    def test_zero_kills_lines(self):
        values = [1] * 9
        values[4] = 0  # center sits on 4 lines
        assert line_product(values) == 4

    def test_weights_are_per_player(self):
        assert dict(cell_weights(1)) == {0: 1, 1: 10, 2: 0}
        assert dict(cell_weights(2)) == {0: 1, 2: 10, 1: 0}


class TestEvaluateSquare:

    def test_empty_square(self):
        assert evaluate_square([0] * 9, 1) == 8

    def test_center_owned(self):
        cells = [0] * 9
        cells[4] = 1
        # 4 lines through the center score 10, the other 4 score 1
        assert evaluate_square(cells, 1) == 44
        assert evaluate_square(cells, 2) == 4

    def test_two_in_row(self):
        cells = [1, 1, 0, 0, 0, 0, 0, 0, 0]
        # row 0: 100, col 0: 10, col 1: 10, diag: 10, other 4 lines: 1
        assert evaluate_square(cells, 1) == 134


class TestEvaluate:

    def test_empty_board(self):
        board = Board.new_game()
        # every square scores 8, macro line-product: 8 lines * 8^3
        assert evaluate(board.field, board.macroboard, 1) == 8 * 512
        assert relative_score(board.field, board.macroboard, 1) == 0

    def test_macro_win(self):
        board = Board(macroboard=[1, 1, 1] + [CLOSED] * 6)
        assert evaluate(board.field, board.macroboard, 1) == MACRO_WIN_SCORE
        assert evaluate(board.field, board.macroboard, 2) == 0
        assert relative_score(board.field, board.macroboard, 2) == -MACRO_WIN_SCORE

    def test_micro_win_weight(self):
        board = Board(macroboard=[1] + [PLAYABLE] * 8)
        score = evaluate(board.field, board.macroboard, 1)
        # lines through square 0 (row, col, diag) use 1000 instead of 8
        assert score == 3 * MICRO_WIN_SCORE * 64 + 5 * 512

    def test_opponent_square_is_zero(self):
        board = Board(macroboard=[2] + [PLAYABLE] * 8)
        assert evaluate(board.field, board.macroboard, 1) == 5 * 512

    def test_never_negative(self):
        for board in _random_boards():
            assert evaluate(board.field, board.macroboard, 1) >= 0
            assert evaluate(board.field, board.macroboard, 2) >= 0


class TestEvaluateSymmetry:

    def test_player_swap(self):
        for board in _random_boards():
            swapped = BoardSymmetry.swap_players(board)
            assert evaluate(board.field, board.macroboard, 1) == evaluate(swapped.field, swapped.macroboard, 2)
            assert evaluate(board.field, board.macroboard, 2) == evaluate(swapped.field, swapped.macroboard, 1)

    @pytest.mark.parametrize("name", list(TRANSFORMS))
    def test_board_symmetries(self, name):
        for board in _random_boards(num_games=2):
            t = BoardSymmetry.transform(board, name)
            for player in (1, 2):
                assert evaluate(board.field, board.macroboard, player) == evaluate(t.field, t.macroboard, player)

    def test_deterministic(self):
        board = next(iter(_random_boards(num_games=1, seed=9)))
        assert evaluate(board.field, board.macroboard, 1) == evaluate(board.field, board.macroboard, 1)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
