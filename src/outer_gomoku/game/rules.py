import numpy as np

from outer_gomoku.errors import ConfigError
from outer_gomoku.game.patterns import (
    FAMILIES,
    GAP,
    STONE,
    PatternScanner,
    default_patterns,
)

# Static evaluation magnitudes; a variant's EVAL_CONFIG overrides them
DEFAULT_EVAL_WEIGHTS = {
    'open_four_loss': 4096,
    'open_four_win': 4096,
    'four_win': 2560,
    'double_four': 2048,
    'four_three': 3048,
    'double_three': 2560,
    'double_three_loss': 2048,
}


class Rules:
    """
    Geometry and rule data for one game variant.

    The board is stored as a flat array, one row of column_count cells
    followed by a BORDER cell, so

        square = rank * stride + file,   stride = column_count + 1

    Extra BORDER rows after the last rank keep every pattern window of every
    anchor inside the array. Position 0 is the top left corner.

    Board: row_count x column_count
    Win condition: win_length in a row (horizontal, vertical, or diagonal)
    """

    def __init__(
        self,
        row_count=15,
        column_count=15,
        win_length=5,
        opening_rows=2,
        anchored_win_check=False,
        patterns=None,
        eval_weights=None,
    ):
        self.row_count = row_count
        self.column_count = column_count
        self.win_length = win_length
        self.opening_rows = opening_rows
        self.anchored_win_check = anchored_win_check

        self.patterns = default_patterns(win_length)
        for family, texts in (patterns or {}).items():
            self.patterns[family] = list(texts)

        self.eval_weights = dict(DEFAULT_EVAL_WEIGHTS)
        for key, value in (eval_weights or {}).items():
            if key not in DEFAULT_EVAL_WEIGHTS:
                raise ConfigError(f"Unknown evaluation score '{key}'")
            self.eval_weights[key] = value

        self.stride = column_count + 1
        self.cell_count = row_count * column_count
        self.eval_inf = self.cell_count * 100
        self.score_none = -self.eval_inf - 1

        # left to right, top to bottom, top left to bottom right, top right to bottom left
        self.directions = (1, self.stride, self.stride + 1, self.stride - 1)

        self._validate()

        self.playable = np.array(
            [self.square_make(fl, rk) for rk in range(row_count) for fl in range(column_count)],
            dtype=np.intp,
        )
        self.max_kernel = max(len(text) for texts in self.patterns.values() for text in texts)
        self.square_size = int(self.playable[-1]) + (self.max_kernel - 1) * (self.stride + 1) + 1

        self._windows = {}
        self.scanner = PatternScanner(self)

    def __repr__(self):
        return f"Rules({self.row_count}x{self.column_count}, win={self.win_length})"

    @classmethod
    def from_config(cls, game_config: dict, eval_config: dict = None) -> 'Rules':
        """Build rules from a variant's GAME_CONFIG and EVAL_CONFIG dicts."""
        known = {'row_count', 'column_count', 'win_length', 'opening_rows',
                 'anchored_win_check', 'patterns'}
        unknown = set(game_config) - known
        if unknown:
            raise ConfigError(f"Unknown game config keys: {sorted(unknown)}")

        return cls(eval_weights=eval_config, **game_config)

    def _validate(self):
        if self.win_length < 3:
            raise ConfigError(f"win_length must be at least 3, got {self.win_length}")
        if min(self.row_count, self.column_count) < self.win_length:
            raise ConfigError(
                f"{self.row_count}x{self.column_count} board can not hold a run of {self.win_length}"
            )
        if not 0 <= 2 * self.opening_rows <= min(self.row_count, self.column_count):
            raise ConfigError(f"opening_rows out of range: {self.opening_rows}")

        for family, texts in self.patterns.items():
            if family not in FAMILIES:
                raise ConfigError(f"Unknown pattern family '{family}'")
            if not texts:
                raise ConfigError(f"Pattern family '{family}' is empty")
            for text in texts:
                if set(text) - {STONE, GAP} or STONE not in text:
                    raise ConfigError(f"Malformed pattern {text!r} in '{family}'")
        if self.patterns['five'] != [STONE * self.win_length]:
            raise ConfigError(f"The win pattern is fixed to {STONE * self.win_length!r}")

        for key, value in self.eval_weights.items():
            if not 0 < value < self.eval_inf:
                raise ConfigError(
                    f"Evaluation score {key}={value} must be in (0, {self.eval_inf})"
                )

    def square_make(self, fl: int, rk: int) -> int:
        return rk * self.stride + fl

    def file_of(self, sq: int) -> int:
        return sq % self.stride

    def rank_of(self, sq: int) -> int:
        return sq // self.stride

    def is_playable(self, sq: int) -> bool:
        return 0 <= sq < self.stride * self.row_count and self.file_of(sq) < self.column_count

    def window_indices(self, length: int) -> np.ndarray:
        """
        Cell indices of every window of the given length.

        Returns:
            Array (4 * cell_count, length): one row per (direction, anchor),
            directions outermost, anchors in board order.
        """
        idx = self._windows.get(length)
        if idx is None:
            if length > self.max_kernel:
                raise ValueError(f"Window length {length} exceeds board padding ({self.max_kernel})")
            steps = np.arange(length, dtype=np.intp)
            deltas = np.array(self.directions, dtype=np.intp)
            idx = self.playable[None, :, None] + deltas[:, None, None] * steps[None, None, :]
            idx = idx.reshape(-1, length)
            self._windows[length] = idx
        return idx
