from enum import IntEnum


class Color(IntEnum):
    """
    State of one cell of the flattened board.

    BORDER fills the padding frame around the playable grid. It is never
    equal to a side or to EMPTY, so a pattern window that leaves the grid
    can not match.
    """
    BLACK = 0
    WHITE = 1
    EMPTY = 2
    BORDER = 3


def opponent(side: Color) -> Color:
    """Returns the other side. Only BLACK and WHITE have an opponent."""
    if side == Color.BLACK:
        return Color.WHITE
    if side == Color.WHITE:
        return Color.BLACK
    raise ValueError(f"{side.name} is not a side")
