"""
Variant registry for Outer-Open Gomoku.

Each variant lives in its own config module with GAME_CONFIG, SEARCH_CONFIG,
EVAL_CONFIG and PATHS dicts; load_variant() merges them into one dict.
"""

import copy
import importlib

from outer_gomoku.errors import ConfigError

VARIANTS = {
    'outer-open': 'outer_gomoku.config_outer_open',
    'gomoku19': 'outer_gomoku.config_gomoku19',
}

DEFAULT_VARIANT = 'outer-open'


def load_variant(name: str = DEFAULT_VARIANT) -> dict:
    """
    Load a variant's configuration.

    Args:
        name: Key of VARIANTS

    Returns:
        Dict with 'name', 'game', 'search', 'eval' and 'paths' entries.
        The dicts are copies, so callers may edit them freely.
    """
    if name not in VARIANTS:
        known = ', '.join(sorted(VARIANTS))
        raise ConfigError(f"Unknown variant '{name}' (known: {known})")

    module = importlib.import_module(VARIANTS[name])
    return {
        'name': name,
        'game': copy.deepcopy(module.GAME_CONFIG),
        'search': copy.deepcopy(module.SEARCH_CONFIG),
        'eval': copy.deepcopy(module.EVAL_CONFIG),
        'paths': copy.deepcopy(module.PATHS),
    }
