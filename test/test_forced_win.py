"""Forced-win shortcut: scenario, soundness and the playable-squares guard."""
import random
import sys
sys.path.insert(0, '.')

import pytest

from ai.forced_win import find_forced_win, has_multiple_playable
from game import Board, PLAYABLE, CLOSED, to_action


def _row_win_position():
    """Player 1 owns squares 0 and 1; square 2 holds two of its cells in row 0, (8, 0) open."""
    board = Board(macroboard=[1, 1, PLAYABLE, CLOSED, PLAYABLE, CLOSED, CLOSED, CLOSED, CLOSED],
                  round=12, move=23)
    for x in range(6):
        board.set_cell(x, 0, 1)
    board.set_cell(6, 0, 1)
    board.set_cell(7, 0, 1)
    board.set_cell(6, 1, 2)
    board.set_cell(4, 4, 2)
    return board


class TestForcedWin:

    def test_completes_macro_row(self):
        board = _row_win_position()
        assert find_forced_win(board, 1) == to_action(8, 0)

    def test_no_win_for_other_player(self):
        assert find_forced_win(_row_win_position(), 2) is None

    def test_cell_taken(self):
        board = _row_win_position()
        board.set_cell(8, 0, 2)
        assert find_forced_win(board, 1) is None

    def test_square_not_playable(self):
        board = _row_win_position()
        board.macroboard[2] = CLOSED
        assert find_forced_win(board, 1) is None

    def test_respects_given_legal_moves(self):
        board = _row_win_position()
        assert find_forced_win(board, 1, legal_moves=[to_action(4, 3)]) is None

    def test_empty_board(self):
        assert find_forced_win(Board.new_game(), 1) is None

    def test_soundness_on_random_games(self):
        rng = random.Random(5)
        found = 0
        for _ in range(40):
            board = Board.new_game()
            player = 1
            while not board.is_game_over():
                for p in (1, 2):
                    action = find_forced_win(board, p)
                    if action is not None:
                        found += 1
                        trial = board.clone()
                        trial.make_move(action, p)
                        assert trial.winner() == p
                board.make_move(rng.choice(board.get_legal_moves()), player)
                player = 3 - player
        assert found > 0


class TestPlayableGuard:

    def test_single_playable(self):
        board = Board(macroboard=[PLAYABLE] + [CLOSED] * 8)
        assert not has_multiple_playable(board)

    def test_two_playable(self):
        assert has_multiple_playable(_row_win_position())

    def test_new_game(self):
        assert has_multiple_playable(Board.new_game())


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
