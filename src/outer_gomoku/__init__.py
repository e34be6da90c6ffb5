"""
Outer-Open Gomoku: a connection game engine with alpha-beta search.

Two players take turns placing stones on empty intersections; the first to
form an unbroken run (five on the 15x15 board) horizontally, vertically or
diagonally wins. In the outer-open variant the first move must be placed in
the two outer rows or columns of the board.

Typical use:

    rules = load_rules('outer-open')
    pos = new_position(rules)
    apply_move(pos, rules.square_make(1, 7))
    move = find_best_move(pos, depth=2, endgame=6)
"""

from outer_gomoku.config import load_variant
from outer_gomoku.errors import (
    ConfigError,
    GomokuError,
    IllegalMoveError,
    OpeningZoneError,
    SearchInvariantError,
)
from outer_gomoku.game import Color, MOVE_NONE, Outcome, Position, Rules, new_position
from outer_gomoku.engine import AlphaBetaEngine, SearchResult, find_best_move

__version__ = '0.1'


def load_rules(variant: str = 'outer-open') -> Rules:
    """Build the Rules of a registered variant."""
    config = load_variant(variant)
    return Rules.from_config(config['game'], config['eval'])


def apply_move(pos: Position, sq: int):
    pos.do_move(sq)


def is_terminal(pos: Position) -> Outcome:
    return pos.outcome()


__all__ = [
    'AlphaBetaEngine',
    'Color',
    'ConfigError',
    'GomokuError',
    'IllegalMoveError',
    'MOVE_NONE',
    'OpeningZoneError',
    'Outcome',
    'Position',
    'Rules',
    'SearchInvariantError',
    'SearchResult',
    'apply_move',
    'find_best_move',
    'is_terminal',
    'load_rules',
    'load_variant',
    'new_position',
]
