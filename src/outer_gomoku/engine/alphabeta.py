"""
Alpha-beta negamax search engine for Outer-Open Gomoku.

Full-width, depth-limited minimax in negamax form: every node returns the
score for its own side to move and the caller negates it.

Key features:
- Alpha-beta pruning (siblings are skipped once the best score reaches beta)
- Copy-per-branch (each child works on its own Position copy, no undo)
- Root move shuffling (chooses among equally scored moves at random)
- Endgame extension (solve to the end once few empty cells remain)
- Threat-pattern static evaluation at the depth limit


Algorithm overview:

    def negamax(pos, alpha, beta, depth, ply):
        if side that just moved has won:
            return -EVAL_INF + ply
        if board is full:
            return 0
        if depth == 0:
            return static_eval(pos)

        best = SCORE_NONE
        for move in moves (shuffled at the root):
            if best >= beta:
                break  # Beta cutoff
            child = copy(pos); child.do_move(move)
            score = -negamax(child, -beta, -max(alpha, best), depth - 1, ply + 1)
            best = max(best, score)
        return best
"""

import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from outer_gomoku.errors import SearchInvariantError
from outer_gomoku.engine.evaluate import Evaluator
from outer_gomoku.engine.moves import MoveList, gen_moves
from outer_gomoku.game.color import Color
from outer_gomoku.game.position import MOVE_NONE

SCORE_DRAW = 0


@dataclass
class SearchResult:
    """Result of alpha-beta search."""
    best_move: int
    score: int
    depth: int
    nodes_searched: int
    time_ms: int
    endgame: bool


@dataclass
class SearchContext:
    """
    Mutable state of one search invocation.

    Passed by reference through the recursion instead of living in globals.
    endgame is set at most once, before the recursion starts.
    """
    nodes_searched: int = 0
    endgame: bool = False
    best_move: int = MOVE_NONE


class AlphaBetaEngine:
    """
    Depth-limited alpha-beta negamax search.

    One engine is meant to play one game: once a search switches to endgame
    mode (exact solve of the remaining empties), the engine's endgame flag
    stays set for the rest of its run.
    """

    def __init__(
        self,
        rules,
        evaluator=None,
        rng: Optional[np.random.Generator] = None,
        shuffle_root: bool = True,
    ):
        """
        Initialize alpha-beta engine.

        Args:
            rules: Rules of the variant being played
            evaluator: Callable pos -> score for depth-limit leaves
                (defaults to the threat-pattern Evaluator)
            rng: Random source for root move shuffling
            shuffle_root: Disable to search root moves in board order
        """
        self.rules = rules
        self.evaluator = evaluator if evaluator is not None else Evaluator(rules)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.shuffle_root = shuffle_root

        self.eval_inf = rules.eval_inf
        self.score_none = rules.score_none

        self.endgame = False
        self.nodes_searched = 0

    def search(self, pos, depth: int, endgame: int = 0) -> SearchResult:
        """
        Main search entry point.

        Args:
            pos: Position to move from (not modified)
            depth: Requested search depth in plies, at least 1
            endgame: Solve exactly once this many empty cells or fewer remain

        Returns:
            SearchResult with best move, its score and statistics
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        if pos.is_end():
            raise ValueError("Can not search a finished game")

        start = time.perf_counter()
        ctx = SearchContext()

        new_depth = depth
        empties = pos.count(Color.EMPTY)
        if empties <= endgame or new_depth > empties:
            new_depth = empties

        if new_depth == empties:
            ctx.endgame = True
            self.endgame = True

        score = self._negamax(pos, -self.eval_inf, self.eval_inf, new_depth, 0, ctx)
        self.nodes_searched = ctx.nodes_searched

        return SearchResult(
            best_move=ctx.best_move,
            score=score,
            depth=new_depth,
            nodes_searched=ctx.nodes_searched,
            time_ms=int((time.perf_counter() - start) * 1000),
            endgame=ctx.endgame,
        )

    def find_best_move(self, pos, depth: int, endgame: int = 0) -> int:
        return self.search(pos, depth, endgame).best_move

    def _negamax(self, pos, alpha: int, beta: int, depth: int, ply: int, ctx: SearchContext) -> int:
        """
        Negamax alpha-beta search.

        Args:
            pos: Position (side to move is the side being scored)
            alpha: Lower bound
            beta: Upper bound
            depth: Remaining depth
            ply: Ply from root
            ctx: Search state of this invocation

        Returns:
            Score from the side to move's perspective. At ply 0 the best move
            is also stored in ctx.best_move.
        """
        assert -self.eval_inf <= alpha < beta <= self.eval_inf

        ctx.nodes_searched += 1

        # Leaf?
        if pos.is_winner():
            return -self.eval_inf + ply

        if pos.is_full():
            return SCORE_DRAW

        if depth == 0:
            return self.evaluator(pos)

        moves = gen_moves(pos, MoveList(self.rules.cell_count))
        if ply == 0 and self.shuffle_root:
            moves.shuffle(self.rng)

        bm = MOVE_NONE
        bs = self.score_none

        for mv in moves:
            if bs >= beta:
                break

            new_pos = pos.copy()
            new_pos.do_move(mv)

            sc = -self._negamax(new_pos, -beta, -max(alpha, bs), depth - 1, ply + 1, ctx)

            if sc > bs:
                bm = mv
                bs = sc

        if bm == MOVE_NONE:
            raise SearchInvariantError(
                f"No move selected at ply {ply} with {len(moves)} candidate moves"
            )
        assert -self.eval_inf <= bs <= self.eval_inf

        if ply == 0:
            ctx.best_move = bm
        return bs


def find_best_move(pos, depth: int, endgame: int = 0, rng: Optional[np.random.Generator] = None) -> int:
    """Search pos with a fresh engine and return the chosen square."""
    engine = AlphaBetaEngine(pos.rules, rng=rng)
    return engine.find_best_move(pos, depth, endgame)
