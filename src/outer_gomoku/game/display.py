"""Console rendering of positions."""

from outer_gomoku.game.color import Color

SYMBOLS = {
    Color.BLACK: '#',
    Color.WHITE: 'O',
    Color.EMPTY: '-',
    Color.BORDER: '|',
}


def format_board(pos) -> str:
    """
    Render the playable grid, one rank per line, then the side to move.

        # O - -
        - # - -
        ...
        white to play
    """
    rules = pos.rules
    lines = []
    for rk in range(rules.row_count):
        row = ''
        for fl in range(rules.column_count):
            row += SYMBOLS[pos[rules.square_make(fl, rk)]] + ' '
        lines.append(row)

    if pos.turn == Color.BLACK:
        lines.append('black to play')
    else:
        lines.append('white to play')
    return '\n'.join(lines)


def print_board(pos):
    print(format_board(pos))


def square_name(rules, sq: int) -> str:
    """Human readable (file, rank) of a square, e.g. 'f1 r7'."""
    return f"f{rules.file_of(sq)} r{rules.rank_of(sq)}"
