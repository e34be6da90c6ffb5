"""
Static evaluation of quiet leaf positions.

The score is from the side to move (the attacker). Threat shapes are tested
in order of severity and the first that applies decides the score:

1. defender has an open four        -> lost next move
2. attacker has an open four        -> won
3. attacker has a closed four       -> attacker completes it now
4. defender has two closed fours    -> can not block both
5. defender has a four and a three  -> four-three combination
6. attacker has two open threes
7. defender has two open threes
8. anything else scores 0

Every magnitude is a fixed value from the variant config and is validated to
stay below EVAL_INF, so a proven win or loss always outranks a heuristic.
"""

from outer_gomoku.game.color import opponent


class Evaluator:
    """Threat-based evaluator bound to one rule set."""

    def __init__(self, rules):
        self.rules = rules
        self.scanner = rules.scanner
        self.weights = dict(rules.eval_weights)

    def evaluate(self, pos) -> int:
        scanner = self.scanner
        w = self.weights

        atk = pos.turn
        dfn = opponent(atk)

        if scanner.has_open_four(pos, dfn):
            return -w['open_four_loss']

        if scanner.has_open_four(pos, atk):
            return w['open_four_win']

        if scanner.count_closed_four(pos, atk) > 0:
            return w['four_win']

        n_c4 = scanner.count_closed_four(pos, dfn)
        n_c3 = scanner.count_open_three(pos, dfn)

        # 4,4
        if n_c4 > 1:
            return -w['double_four']

        # 4,3
        if n_c4 == 1 and n_c3 > 0:
            return -w['four_three']

        # 3,3
        if scanner.count_open_three(pos, atk) > 1:
            return w['double_three']

        if n_c3 > 1:
            return -w['double_three_loss']

        return 0

    __call__ = evaluate


def evaluate(pos) -> int:
    """Evaluate pos with an evaluator built from its own rules."""
    return Evaluator(pos.rules).evaluate(pos)
