"""
Exception types raised by the Outer-Open Gomoku engine.

Every failure in the core is a broken contract (a move onto an occupied
square, a search that selected nothing), so none of these are retried.
"""


class GomokuError(Exception):
    """Base class for all engine errors."""


class IllegalMoveError(GomokuError, ValueError):
    """A move was applied to a square that is not EMPTY."""

    def __init__(self, square: int, reason: str = "square is not empty"):
        self.square = square
        super().__init__(f"Illegal move {square}: {reason}")


class OpeningZoneError(IllegalMoveError):
    """The first move of an outer-open game was played outside the opening zone."""

    def __init__(self, square: int):
        super().__init__(square, "first move must be in the outer rows or columns")


class SearchInvariantError(GomokuError, RuntimeError):
    """The search finished a non-terminal node without selecting a move."""


class ConfigError(GomokuError, ValueError):
    """A variant configuration cannot be turned into playable rules."""
