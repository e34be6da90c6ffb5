"""
Line-pattern scanner.

A pattern is a short string over 'O' (a stone of the scanned side) and '-'
(an empty cell), read along one of the 4 board directions starting at an
anchor cell. For five in a row the families are:

    five         OOOOO
    open_four    -OOOO-
    closed_four  OOOO-  OOO-O  OO-OO  O-OOO  -OOOO
    open_three   -OOO-  -OO-O-  -O-OO-

Scans are vectorised: for every kernel length the scanner gathers the cells
of all (direction, anchor) windows at once with numpy fancy indexing and
compares them against every compiled pattern of that length.
"""

import numpy as np
from typing import Dict, List

from outer_gomoku.game.color import Color

STONE = 'O'
GAP = '-'

FIVE = 'five'
OPEN_FOUR = 'open_four'
CLOSED_FOUR = 'closed_four'
OPEN_THREE = 'open_three'

FAMILIES = (FIVE, OPEN_FOUR, CLOSED_FOUR, OPEN_THREE)


def default_patterns(win_length: int) -> Dict[str, List[str]]:
    """
    Build the pattern families for a run of win_length stones.

    For win_length == 5 these are exactly the shapes listed in the module
    docstring.
    """
    n = win_length
    run = STONE * n

    closed = [run[:gap] + GAP + run[gap + 1:] for gap in range(n - 1, -1, -1)]

    open_three = [GAP + STONE * (n - 2) + GAP]
    for left in range(n - 3, 0, -1):
        right = n - 2 - left
        open_three.append(GAP + STONE * left + GAP + STONE * right + GAP)

    return {
        FIVE: [run],
        OPEN_FOUR: [GAP + STONE * (n - 1) + GAP],
        CLOSED_FOUR: closed,
        OPEN_THREE: open_three,
    }


def compile_pattern(text: str, side: Color) -> np.ndarray:
    """Translate a pattern string into the cell values it matches for side."""
    values = []
    for ch in text:
        if ch == STONE:
            values.append(int(side))
        elif ch == GAP:
            values.append(int(Color.EMPTY))
        else:
            raise ValueError(f"Bad pattern character {ch!r} in {text!r}")
    return np.array(values, dtype=np.int8)


class PatternScanner:
    """
    Counts pattern occurrences on positions of one rule set.

    The count forms visit every anchor in every direction; the boolean forms
    may stop at the first pattern length that matches.
    """

    def __init__(self, rules):
        self.rules = rules
        self.patterns = rules.patterns

        # (family, side) -> {kernel length: (num_patterns, length) array}
        self._kernels = {}

        # Cells of every win_length window through a square, minus the
        # square itself: 4 directions x win_length windows x (win_length - 1)
        n = rules.win_length
        self._through_offsets = np.array([
            [(j - k) * delta for j in range(n) if j != k]
            for delta in rules.directions
            for k in range(n)
        ], dtype=np.intp)

    def _compiled(self, side: Color, family: str) -> Dict[int, np.ndarray]:
        key = (family, side)
        kernels = self._kernels.get(key)
        if kernels is None:
            grouped = {}
            for text in self.patterns[family]:
                grouped.setdefault(len(text), []).append(compile_pattern(text, side))
            kernels = {length: np.stack(rows) for length, rows in grouped.items()}
            self._kernels[key] = kernels
        return kernels

    def _matches(self, cells: np.ndarray, length: int, kernels: np.ndarray) -> np.ndarray:
        windows = cells[self.rules.window_indices(length)]
        return (windows[:, None, :] == kernels[None, :, :]).all(axis=2)

    def count(self, pos, side: Color, family: str) -> int:
        """Number of occurrences of any pattern of the family, over the whole board."""
        total = 0
        for length, kernels in self._compiled(side, family).items():
            total += int(np.count_nonzero(self._matches(pos.cells, length, kernels)))
        return total

    def exists(self, pos, side: Color, family: str) -> bool:
        """True if the family occurs at least once."""
        for length, kernels in self._compiled(side, family).items():
            if self._matches(pos.cells, length, kernels).any():
                return True
        return False

    def has_five(self, pos, side: Color) -> bool:
        return self.exists(pos, side, FIVE)

    def has_open_four(self, pos, side: Color) -> bool:
        return self.exists(pos, side, OPEN_FOUR)

    def count_closed_four(self, pos, side: Color) -> int:
        return self.count(pos, side, CLOSED_FOUR)

    def count_open_three(self, pos, side: Color) -> int:
        return self.count(pos, side, OPEN_THREE)

    def is_five_through(self, pos, square: int) -> bool:
        """
        Check whether the stone on square is part of a full run.

        Only the windows passing through square are read, which is enough
        to detect a win created by the last move.
        """
        side = pos.cells[square]
        if side != Color.BLACK and side != Color.WHITE:
            return False

        idx = square + self._through_offsets
        inside = (idx >= 0) & (idx < pos.cells.shape[0])
        values = np.where(inside, pos.cells[np.clip(idx, 0, pos.cells.shape[0] - 1)], Color.BORDER)
        return bool((values == side).all(axis=1).any())
