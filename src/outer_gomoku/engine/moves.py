"""
Move generation.

Every empty playable cell is a legal move; the generator lists them in
board (row-major) order. Order is only changed by shuffle(), which the
search applies at the root.
"""

import numpy as np
from typing import Iterator, Optional

from outer_gomoku.game.color import Color


class MoveList:
    """Fixed-capacity list of squares with an explicit size."""

    def __init__(self, capacity: int):
        self.p_move = np.zeros(capacity, dtype=np.intp)
        self.p_size = 0

    def clear(self):
        self.p_size = 0

    def add(self, mv: int):
        self.p_move[self.p_size] = mv
        self.p_size += 1

    def extend(self, moves: np.ndarray):
        n = len(moves)
        self.p_move[self.p_size:self.p_size + n] = moves
        self.p_size += n

    def size(self) -> int:
        return self.p_size

    def shuffle(self, rng: Optional[np.random.Generator] = None):
        """Randomize the order of the stored moves in place."""
        if rng is None:
            rng = np.random.default_rng()
        rng.shuffle(self.p_move[:self.p_size])

    def tolist(self) -> list:
        return self.p_move[:self.p_size].tolist()

    def __len__(self) -> int:
        return self.p_size

    def __getitem__(self, i: int) -> int:
        if not 0 <= i < self.p_size:
            raise IndexError(i)
        return int(self.p_move[i])

    def __iter__(self) -> Iterator[int]:
        return iter(self.tolist())

    def __contains__(self, mv: int) -> bool:
        return mv in self.tolist()


def gen_moves(pos, move_list: Optional[MoveList] = None) -> MoveList:
    """
    List every empty square of pos.

    Args:
        pos: Position to scan (only its playable region is read)
        move_list: List to refill; a new one is created when omitted

    Returns:
        The filled move list
    """
    if move_list is None:
        move_list = MoveList(pos.rules.cell_count)
    move_list.clear()

    playable = pos.rules.playable
    move_list.extend(playable[pos.cells[playable] == Color.EMPTY])
    return move_list
