"""
Search engine for Outer-Open Gomoku.

This module contains the engine components:
- Move generation over the empty cells
- Threat-pattern static evaluation
- Alpha-beta negamax search with an endgame depth extension
"""

from outer_gomoku.engine.moves import MoveList, gen_moves
from outer_gomoku.engine.evaluate import Evaluator, evaluate
from outer_gomoku.engine.alphabeta import (
    AlphaBetaEngine,
    SearchContext,
    SearchResult,
    SCORE_DRAW,
    find_best_move,
)

__all__ = [
    'MoveList',
    'gen_moves',
    'Evaluator',
    'evaluate',
    'AlphaBetaEngine',
    'SearchContext',
    'SearchResult',
    'SCORE_DRAW',
    'find_best_move',
]
