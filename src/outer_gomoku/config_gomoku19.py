"""
Configuration file for Gomoku 19x19 (six in a row)
"""

# Board and rules
GAME_CONFIG = {
    'row_count': 19,
    'column_count': 19,
    'win_length': 6,

    # No opening restriction
    'opening_rows': 0,

    # Only the run_length windows per direction through the last move are tested
    'anchored_win_check': True,

    # Threat shapes for the longer run; the win is always win_length stones
    'patterns': {
        'open_four': ['-OOOOO-'],
        'closed_four': ['OOOOO-', 'OOOO-O', 'OOO-OO', 'OO-OOO', 'O-OOOO', '-OOOOO'],
        'open_three': ['-OOOO-', '-OOO-O-', '-OO-OO-', '-O-OOO-'],
    },
}

# Search Configuration
SEARCH_CONFIG = {
    'depth': 2,
    'endgame': 6,
    'opening_move': (9, 9),
}

EVAL_CONFIG = {
    'open_four_loss': 4096,
    'open_four_win': 4096,
    'four_win': 2560,
    'double_four': 2048,
    'four_three': 3048,
    'double_three': 2560,
    'double_three_loss': 2048,
}

# Paths
PATHS = {
    'logs': 'logs/gomoku19',
}
