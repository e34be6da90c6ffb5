"""
Configuration file for Outer-Open Gomoku (15x15, five in a row)
"""

# Board and rules
GAME_CONFIG = {
    # Board dimensions
    'row_count': 15,
    'column_count': 15,

    # Length of the winning run
    'win_length': 5,

    # First move must be within this many outer rows or columns (0 = anywhere)
    'opening_rows': 2,

    # Test only the lines through the last move when detecting a win
    'anchored_win_check': False,
}

# Search Configuration
SEARCH_CONFIG = {
    # Full-width search depth in plies
    'depth': 2,

    # Solve exactly once this many empty cells (or fewer) remain
    'endgame': 6,

    # Fixed first move as (file, rank); None picks a random opening-zone square
    'opening_move': (1, 7),
}

# Static evaluation scores, all strictly below EVAL_INF
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
    'logs': 'logs/outer_open',
}
