# Game module

from .color import Color, opponent
from .rules import Rules
from .position import MOVE_NONE, Outcome, Position, new_position

__all__ = ['Color', 'opponent', 'Rules', 'MOVE_NONE', 'Outcome', 'Position', 'new_position']
