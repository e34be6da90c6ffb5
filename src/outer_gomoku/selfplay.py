"""
Self-play driver: the engine plays both sides of one game.

The first move comes from the opening zone (a fixed square or a random one),
every later move from the alpha-beta engine, until the game is won or drawn.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import numpy as np

from outer_gomoku.engine.alphabeta import AlphaBetaEngine, SearchResult
from outer_gomoku.game.color import Color, opponent
from outer_gomoku.game.opening import check_opening_move, choose_opening_move
from outer_gomoku.game.position import Outcome, Position


@dataclass
class GameRecord:
    """Summary of one finished self-play game."""
    moves: List[int] = field(default_factory=list)
    outcome: Outcome = Outcome.NONE
    winner: Optional[Color] = None
    elapsed_s: float = 0.0
    nodes_searched: int = 0
    endgame: bool = False

    @property
    def plies(self) -> int:
        return len(self.moves)


def play_game(
    rules,
    depth: int,
    endgame: int = 0,
    rng: Optional[np.random.Generator] = None,
    opening_move: Optional[Tuple[int, int]] = None,
    on_move: Optional[Callable[[Position, int, Optional[SearchResult]], None]] = None,
) -> GameRecord:
    """
    Play one game of the engine against itself.

    Args:
        rules: Rules of the variant
        depth: Search depth for every move after the first
        endgame: Empty-cell count at which the search solves exactly
        rng: Random source (opening choice and root shuffling)
        opening_move: (file, rank) of the first stone; random from the
            opening zone when None
        on_move: Called after every move with (position, move, search result),
            the result is None for the opening move

    Returns:
        GameRecord of the finished game
    """
    if rng is None:
        rng = np.random.default_rng()

    engine = AlphaBetaEngine(rules, rng=rng)
    pos = Position(rules)
    record = GameRecord()
    start = time.perf_counter()

    for i in range(rules.cell_count):
        result = None
        if i == 0:
            if opening_move is None:
                mv = choose_opening_move(rules, rng)
            else:
                mv = rules.square_make(*opening_move)
            check_opening_move(pos, mv)
        else:
            result = engine.search(pos, depth, endgame)
            mv = result.best_move
            record.nodes_searched += result.nodes_searched

        pos.do_move(mv)
        record.moves.append(mv)

        if on_move is not None:
            on_move(pos, mv, result)

        if pos.is_end():
            break

    record.outcome = pos.outcome()
    if record.outcome == Outcome.WIN:
        record.winner = opponent(pos.turn)
    record.endgame = engine.endgame
    record.elapsed_s = time.perf_counter() - start
    return record
