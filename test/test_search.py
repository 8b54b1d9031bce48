"""Minimax search: agreement with plain minimax, undo discipline, determinism."""
import random
import sys
sys.path.insert(0, '.')

import pytest

from ai.depth_policy import capped_depth
from ai.heuristic import relative_score, MACRO_WIN_SCORE
from ai.search import MinimaxSearch, INF
from game import Board, PLAYABLE, CLOSED, to_action


def _midgame_positions(count=4, plies=24, seed=21):
    rng = random.Random(seed)
    positions = []
    while len(positions) < count:
        board = Board.new_game()
        player = 1
        for _ in range(plies):
            if board.is_game_over():
                break
            board.make_move(rng.choice(board.get_legal_moves()), player)
            player = 3 - player
        if not board.is_game_over():
            positions.append((board, player))
    return positions


def _plain_minimax(board, depth, to_move, me):
    """Reference minimax without pruning, same depth caps and leaf scores."""
    legal = board.get_legal_moves()
    if depth == 0 or board.winner() is not None or not legal:
        return relative_score(board.field, board.macroboard, me)
    depth = capped_depth(depth, len(legal))
    scores = []
    for action in legal:
        child = board.clone()
        child.make_move(action, to_move)
        scores.append(_plain_minimax(child, depth - 1, 3 - to_move, me))
    return max(scores) if to_move == me else min(scores)


class TestMinimax:

    def test_leaf_is_relative_score(self):
        board, _ = _midgame_positions(count=1)[0]
        search = MinimaxSearch(1)
        assert search.minimax(board, 0, -INF, INF, 2) == relative_score(board.field, board.macroboard, 1)

    def test_terminal_position(self):
        board = Board(macroboard=[2, 2, 2] + [CLOSED] * 6)
        search = MinimaxSearch(1)
        assert search.minimax(board, 5, -INF, INF, 1) == -MACRO_WIN_SCORE

    def test_agrees_with_plain_minimax(self):
        for board, player in _midgame_positions():
            search = MinimaxSearch(player)
            for action in board.get_legal_moves()[:4]:
                child = board.clone()
                child.make_move(action, player)
                expected = _plain_minimax(child, 2, 3 - player, player)
                assert search.minimax(child, 2, -INF, INF, 3 - player) == expected

    def test_root_best_matches_plain_minimax(self):
        board, player = _midgame_positions(count=1, seed=4)[0]
        search = MinimaxSearch(player)
        best_action, best_score, scored = search.search_root(board, 1)

        exact = []
        for action in board.get_legal_moves():
            child = board.clone()
            child.make_move(action, player)
            exact.append((action, _plain_minimax(child, 1, 3 - player, player)))
        expected_score = max(s for _, s in exact)
        expected_action = next(a for a, s in exact if s == expected_score)

        assert best_score == expected_score
        assert best_action == expected_action
        assert [a for a, _ in scored] == board.get_legal_moves()


class TestUndoDiscipline:

    def test_board_unchanged_after_search(self):
        for board, player in _midgame_positions():
            before = board.snapshot()
            MinimaxSearch(player).search_root(board, 2)
            assert board.snapshot() == before

    def test_board_unchanged_after_minimax(self):
        board, player = _midgame_positions(count=1)[0]
        before = board.snapshot()
        MinimaxSearch(player).minimax(board, 3, -INF, INF, player)
        assert board.snapshot() == before

    def test_arena_grows_with_depth(self):
        search = MinimaxSearch(1)
        search._saved = search._saved[:1]
        board, _ = _midgame_positions(count=1)[0]
        search.minimax(board, 2, -INF, INF, 1)
        assert len(search._saved) >= 2


class TestDeterminism:

    def test_same_move_and_score(self):
        board, player = _midgame_positions(count=1, seed=8)[0]
        first = MinimaxSearch(player).search_root(board, 2)
        second = MinimaxSearch(player).search_root(board, 2)
        assert first[0] == second[0]
        assert first[1] == second[1]

    def test_first_found_wins_ties(self):
        # Fully symmetric empty square: all 9 moves tie at depth 0 of the reply
        board = Board(macroboard=[PLAYABLE] + [CLOSED] * 8, round=5, move=9)
        action, _, scored = MinimaxSearch(1).search_root(board, 0)
        best = max(s for _, s in scored)
        assert action == next(a for a, s in scored if s == best)

    def test_game_winning_move_scores_macro_win(self):
        board = Board(macroboard=[1, 1, PLAYABLE] + [CLOSED] * 6, round=20, move=40)
        board.set_cell(6, 0, 1)
        board.set_cell(7, 0, 1)
        _, _, scored = MinimaxSearch(1).search_root(board, 2)
        assert scored[0] == (to_action(8, 0), MACRO_WIN_SCORE)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
