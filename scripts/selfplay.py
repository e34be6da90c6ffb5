#!/usr/bin/env python3
"""
Self-play for Outer-Open Gomoku.

Usage:
    python scripts/selfplay.py                       # one 15x15 game, depth from config
    python scripts/selfplay.py --variant gomoku19 --depth 1
    python scripts/selfplay.py --games 10 --quiet --seed 42 --log

Prints the board after every move, the game result and the time the game
took. With --log the output is also written to a timestamped file under the
variant's log directory.
"""

import sys
import argparse
from pathlib import Path
from datetime import datetime

import numpy as np
from tqdm import tqdm

# repo root assumed to be parent of this file's folder
BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BASE_DIR / 'src'))

from outer_gomoku.config import VARIANTS, load_variant
from outer_gomoku.game.color import Color
from outer_gomoku.game.display import format_board, square_name
from outer_gomoku.game.position import Outcome
from outer_gomoku.game.rules import Rules
from outer_gomoku.selfplay import play_game


class Tee:
    def __init__(self, *files):
        self.files = files
    def write(self, data):
        for f in self.files:
            f.write(data)
            f.flush()
    def flush(self):
        for f in self.files:
            f.flush()


def setup_logging(log_dir: Path, tag: str):
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_path = log_dir / f'{tag}_{ts}.log'
    log_file = open(log_path, 'w')
    sys.stdout = Tee(sys.__stdout__, log_file)
    print(f"📝 Logging to: {log_path}")
    return log_path, log_file


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description='Outer-Open Gomoku self-play')
    ap.add_argument('--variant', choices=sorted(VARIANTS), default='outer-open')
    ap.add_argument('--depth', type=int, default=None, help='Search depth (default: from config)')
    ap.add_argument('--endgame', type=int, default=None,
                    help='Solve exactly at this many empty cells (default: from config)')
    ap.add_argument('--games', type=int, default=1)
    ap.add_argument('--seed', type=int, default=None)
    ap.add_argument('--random-opening', action='store_true',
                    help='Pick the first move at random from the opening zone')
    ap.add_argument('--quiet', action='store_true', help='Do not print the board after each move')
    ap.add_argument('--log', action='store_true', help='Also write output to a log file')
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = load_variant(args.variant)
    rules = Rules.from_config(config['game'], config['eval'])

    depth = args.depth if args.depth is not None else config['search']['depth']
    endgame = args.endgame if args.endgame is not None else config['search']['endgame']
    opening_move = None if args.random_opening else config['search'].get('opening_move')

    log_file = None
    if args.log:
        _, log_file = setup_logging(BASE_DIR / config['paths']['logs'], f'selfplay_{args.variant}')

    rng = np.random.default_rng(args.seed)

    print("Hello, this is Outer-Open Gomoku!")
    print(f"Variant: {args.variant} ({rules.row_count}x{rules.column_count}, {rules.win_length} in a row)")
    print(f"Self-playing with search depth = {depth}, endgame = {endgame}")

    def show(pos, mv, result):
        print(f"\nMove {rules.cell_count - pos.count(Color.EMPTY)}: {square_name(rules, mv)}", end="")
        if result is not None:
            print(f"  score={result.score} nodes={result.nodes_searched:,} time={result.time_ms}ms"
                  f"{' [endgame]' if result.endgame else ''}", end="")
        print()
        print(format_board(pos))

    results = {'black': 0, 'white': 0, 'draw': 0}
    games = range(args.games)
    if args.games > 1:
        games = tqdm(games, desc='Self-play')

    try:
        for _ in games:
            record = play_game(
                rules, depth, endgame, rng=rng,
                opening_move=opening_move,
                on_move=None if args.quiet else show,
            )

            print("Game over!!!!!!")
            if record.outcome == Outcome.WIN:
                print(f"Winner: {record.winner.name.lower()}")
                results[record.winner.name.lower()] += 1
            else:
                print("Draw")
                results['draw'] += 1
            print(f"Total play {record.plies} moves.")
            print(f"Time for this game is: {record.elapsed_s:.2f}s ({record.nodes_searched:,} nodes)\n")

        if args.games > 1:
            print(f"Results over {args.games} games: "
                  f"black {results['black']}, white {results['white']}, draw {results['draw']}")
    finally:
        if log_file is not None:
            sys.stdout = sys.__stdout__
            log_file.close()


if __name__ == '__main__':
    main()
