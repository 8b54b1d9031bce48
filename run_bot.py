#!/usr/bin/env python3
"""Ultimate Tic-Tac-Toe bot: reads server commands on stdin, answers on stdout."""
import argparse
import logging
import sys

from config import Config, DepthConfig, SearchConfig
from protocol import BotIO


def main():
    parser = argparse.ArgumentParser(description='Ultimate Tic-Tac-Toe game-server bot')
    parser.add_argument('--depth-policy', type=str, default='adaptive', choices=['adaptive', 'fixed'],
                        help='Root depth selection')
    parser.add_argument('--fixed-depth', type=int, default=7,
                        help='Root depth for the fixed policy')
    parser.add_argument('--no-forced-win', action='store_true',
                        help='Skip the forced-win shortcut')
    parser.add_argument('--log-level', type=str, default='INFO',
                        help='Diagnostics level (written to stderr)')
    args = parser.parse_args()

    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    config = Config(
        depth=DepthConfig(policy=args.depth_policy, fixed_depth=args.fixed_depth),
        search=SearchConfig(use_forced_win=not args.no_forced_win),
    )
    BotIO(config).loop()


if __name__ == '__main__':
    main()
