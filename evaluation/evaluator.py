"""
Local match engine for the bot.

Plays complete games between two agents exposing
select_action(board, player, time_left=None) -> MoveResult, keeping the round
and move counters the way the game server reports them.
"""
import random
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from game import Board


# ─── Match result ────────────────────────────────────────────────

@dataclass
class MatchResult:
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    games: int = 0

    @property
    def win_rate_a(self):
        return self.wins_a / self.games if self.games else 0.0

    @property
    def win_rate_b(self):
        return self.wins_b / self.games if self.games else 0.0

    @property
    def draw_rate(self):
        return self.draws / self.games if self.games else 0.0

    @property
    def score_a(self):
        """Score for player A (win=1, draw=0.5, loss=0)."""
        return (self.wins_a + 0.5 * self.draws) / self.games if self.games else 0.5


# ─── Single game ─────────────────────────────────────────────────

def _advance(board: Board, action: int, player: int):
    board.make_move(action, player)
    board.move += 1
    board.round = (board.move + 1) // 2


def play_game(agent_1, agent_2, random_opening_plies: int = 0, rng: Optional[random.Random] = None) -> Optional[int]:
    """Play one game, agent_1 moving first. Returns the winning player id, None for a draw."""
    rng = rng or random.Random()
    board = Board.new_game()
    agents = {1: agent_1, 2: agent_2}
    player = 1

    for _ in range(random_opening_plies):
        legal = board.get_legal_moves()
        if not legal or board.winner() is not None:
            break
        _advance(board, rng.choice(legal), player)
        player = 3 - player

    while not board.is_game_over():
        result = agents[player].select_action(board, player)
        if not result.found:
            break
        _advance(board, result.action, player)
        player = 3 - player

    return board.winner()


def play_agents(agent_a, agent_b, num_games: int, random_opening_plies: int = 2,
                seed: Optional[int] = None, progress: bool = False) -> MatchResult:
    """Sequential match between two agents, alternating who moves first."""
    result = MatchResult()
    rng = random.Random(seed)

    games = range(num_games)
    if progress:
        games = tqdm(games, desc=f"{getattr(agent_a, 'name', 'A')} vs {getattr(agent_b, 'name', 'B')}", ncols=80)

    for i in games:
        a_is_p1 = (i % 2 == 0)
        if a_is_p1:
            winner = play_game(agent_a, agent_b, random_opening_plies, rng)
        else:
            winner = play_game(agent_b, agent_a, random_opening_plies, rng)

        result.games += 1
        if winner is None:
            result.draws += 1
        elif (winner == 1) == a_is_p1:
            result.wins_a += 1
        else:
            result.wins_b += 1

        if progress:
            games.set_postfix_str(f"W{result.wins_a} L{result.wins_b} D{result.draws}")

    return result


def evaluate_vs_baseline(agent, baseline, num_games=20, random_opening_plies=2, seed=None, progress=True):
    """Agent vs baseline agent. Returns dict with win_rate, etc."""
    r = play_agents(agent, baseline, num_games,
                    random_opening_plies=random_opening_plies, seed=seed, progress=progress)
    return {
        'bot_wins': r.wins_a, 'baseline_wins': r.wins_b,
        'draws': r.draws, 'games': r.games,
        'win_rate': r.win_rate_a, 'draw_rate': r.draw_rate,
    }
