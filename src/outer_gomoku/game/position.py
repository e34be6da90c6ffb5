from enum import Enum

import numpy as np

from outer_gomoku.errors import IllegalMoveError
from outer_gomoku.game.color import Color, opponent

MOVE_NONE = -1


class Outcome(Enum):
    """Terminal status of a position."""
    NONE = 'none'
    WIN = 'win'
    DRAW = 'draw'


class Position:
    """
    Board cells plus the side to move.

    The cell array is flat (see Rules for the layout). BLACK always moves
    first and the side to move flips on every applied move. The search
    branches on copies, so do_move() mutating in place is safe.
    """

    def __init__(self, rules, cells=None, turn=Color.BLACK, last_move=MOVE_NONE):
        self.rules = rules
        if cells is None:
            self.cells = np.full(rules.square_size, Color.BORDER, dtype=np.int8)
            self.initialize()
        else:
            self.cells = cells
            self.p_turn = Color(turn)
            self.last_move = last_move

    def initialize(self):
        """Starting position: empty board, black to play."""
        self.cells.fill(Color.BORDER)
        self.cells[self.rules.playable] = Color.EMPTY
        self.p_turn = Color.BLACK
        self.last_move = MOVE_NONE

    @property
    def turn(self) -> Color:
        return self.p_turn

    def __getitem__(self, sq: int) -> Color:
        return Color(int(self.cells[sq]))

    def can_play(self, sq: int) -> bool:
        """True iff sq is a playable square holding no stone."""
        return 0 <= sq < self.cells.shape[0] and bool(self.cells[sq] == Color.EMPTY)

    is_occupiable = can_play

    def do_move(self, mv: int):
        """
        Place a stone of the side to move on mv and pass the turn.

        Raises:
            IllegalMoveError: mv is not an empty square. Opening-zone rules
                are the caller's business and are not checked here.
        """
        if not self.can_play(mv):
            raise IllegalMoveError(mv)

        self.cells[mv] = self.p_turn
        self.last_move = mv
        self.p_turn = opponent(self.p_turn)

    apply = do_move

    def count(self, pc: Color) -> int:
        """Number of playable cells holding pc."""
        return int(np.count_nonzero(self.cells[self.rules.playable] == pc))

    def copy(self) -> 'Position':
        return Position(self.rules, self.cells.copy(), self.p_turn, self.last_move)

    def is_winner(self) -> bool:
        """True if the side that just moved has completed a winning run."""
        scanner = self.rules.scanner
        if self.rules.anchored_win_check and self.last_move != MOVE_NONE:
            return scanner.is_five_through(self, self.last_move)
        return scanner.has_five(self, opponent(self.p_turn))

    def is_full(self) -> bool:
        return not (self.cells[self.rules.playable] == Color.EMPTY).any()

    def is_draw(self) -> bool:
        return self.is_full() and not self.is_winner()

    def is_end(self) -> bool:
        return self.is_winner() or self.is_draw()

    def outcome(self) -> Outcome:
        if self.is_winner():
            return Outcome.WIN
        if self.is_full():
            return Outcome.DRAW
        return Outcome.NONE


def new_position(rules) -> Position:
    return Position(rules)
