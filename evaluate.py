#!/usr/bin/env python3
"""Play the bot against the random baseline and print the score."""
import argparse
import logging
import time

from ai import UltimateBot
from ai.baselines import RandomAgent
from config import Config, DepthConfig, ArenaConfig
from evaluation import evaluate_vs_baseline


def main():
    parser = argparse.ArgumentParser(description='Bot vs random baseline')
    parser.add_argument('--games', type=int, default=20,
                        help='Number of games (first move alternates)')
    parser.add_argument('--depth-policy', type=str, default='fixed', choices=['adaptive', 'fixed'],
                        help='Root depth selection')
    parser.add_argument('--fixed-depth', type=int, default=2,
                        help='Root depth for the fixed policy')
    parser.add_argument('--opening-plies', type=int, default=2,
                        help='Random moves played before the agents take over')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    config = Config(
        depth=DepthConfig(policy=args.depth_policy, fixed_depth=args.fixed_depth),
        arena=ArenaConfig(num_games=args.games, random_opening_plies=args.opening_plies, seed=args.seed),
    )
    bot = UltimateBot(config=config)
    baseline = RandomAgent(seed=args.seed)

    t0 = time.time()
    r = evaluate_vs_baseline(bot, baseline, num_games=config.arena.num_games,
                             random_opening_plies=config.arena.random_opening_plies, seed=config.arena.seed)
    elapsed = time.time() - t0

    print(f"{bot.name} vs {baseline.name}: {r['bot_wins']}W {r['baseline_wins']}L {r['draws']}D "
          f"({r['win_rate'] * 100:.1f}% wins) in {elapsed:.1f}s")


if __name__ == '__main__':
    main()
