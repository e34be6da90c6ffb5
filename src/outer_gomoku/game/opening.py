"""
Opening-zone rule of Outer-Open Gomoku.

The first stone of the game must be placed in the opening_rows outermost
rows or columns of the board. The rule is enforced by whoever selects the
first move; Position.do_move() never checks it.
"""

import numpy as np
from typing import List, Optional

from outer_gomoku.errors import OpeningZoneError
from outer_gomoku.game.color import Color


def in_opening_zone(rules, sq: int) -> bool:
    """
    Check if sq may receive the first stone of the game.

    Every playable square qualifies when the variant has no opening zone
    (opening_rows == 0).
    """
    if not rules.is_playable(sq):
        return False

    k = rules.opening_rows
    if k == 0:
        return True

    fl = rules.file_of(sq)
    rk = rules.rank_of(sq)
    return (
        fl < k or fl >= rules.column_count - k or
        rk < k or rk >= rules.row_count - k
    )


def opening_squares(rules) -> List[int]:
    """All squares of the opening zone, in board order."""
    return [int(sq) for sq in rules.playable if in_opening_zone(rules, int(sq))]


def is_first_move(pos) -> bool:
    return pos.count(Color.EMPTY) == pos.rules.cell_count


def check_opening_move(pos, sq: int):
    """
    Validate a move against the opening rule.

    Raises:
        OpeningZoneError: pos is the empty board and sq lies outside the zone.
    """
    if is_first_move(pos) and not in_opening_zone(pos.rules, sq):
        raise OpeningZoneError(sq)


def choose_opening_move(rules, rng: Optional[np.random.Generator] = None) -> int:
    """Pick a uniformly random square of the opening zone."""
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.choice(opening_squares(rules)))
