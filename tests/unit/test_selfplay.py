"""
Unit tests for variant configuration and the self-play driver.
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from outer_gomoku import load_rules
from outer_gomoku.config import VARIANTS, load_variant
from outer_gomoku.errors import ConfigError, OpeningZoneError
from outer_gomoku.game.color import Color
from outer_gomoku.game.opening import in_opening_zone
from outer_gomoku.game.position import Outcome
from outer_gomoku.game.rules import Rules
from outer_gomoku.selfplay import play_game


class TestConfig:
    """Test variant loading."""

    def test_outer_open(self):
        config = load_variant('outer-open')
        rules = Rules.from_config(config['game'], config['eval'])

        assert (rules.row_count, rules.column_count, rules.win_length) == (15, 15, 5)
        assert rules.opening_rows == 2
        assert not rules.anchored_win_check
        assert config['search']['depth'] >= 1

    def test_gomoku19(self):
        rules = load_rules('gomoku19')

        assert (rules.row_count, rules.column_count, rules.win_length) == (19, 19, 6)
        assert rules.anchored_win_check
        assert rules.opening_rows == 0
        assert rules.eval_inf == 361 * 100

    def test_every_variant_builds(self):
        for name in VARIANTS:
            config = load_variant(name)
            assert config['name'] == name
            Rules.from_config(config['game'], config['eval'])

    def test_unknown_variant(self):
        with pytest.raises(ConfigError):
            load_variant('renju')

    def test_returns_copies(self):
        config = load_variant('outer-open')
        config['game']['row_count'] = 3
        config['game']['patterns'] = {}

        assert load_variant('outer-open')['game']['row_count'] == 15
        assert 'patterns' not in load_variant('outer-open')['game']


class TestSelfPlay:
    """Test complete engine-vs-engine games on small boards."""

    def _rules(self):
        return Rules(row_count=7, column_count=7, opening_rows=1)

    def test_game_finishes(self):
        rules = self._rules()
        seen = []

        record = play_game(
            rules, depth=1, endgame=4,
            rng=np.random.default_rng(21),
            on_move=lambda pos, mv, result: seen.append((mv, result)),
        )

        assert record.outcome in (Outcome.WIN, Outcome.DRAW)
        assert 9 <= record.plies <= rules.cell_count
        assert len(set(record.moves)) == record.plies
        assert in_opening_zone(rules, record.moves[0])
        assert record.elapsed_s >= 0
        assert record.nodes_searched > 0

        assert [mv for mv, _ in seen] == record.moves
        assert seen[0][1] is None
        assert all(result is not None for _, result in seen[1:])

    def test_winner_made_last_move(self):
        rules = self._rules()
        for seed in range(3):
            record = play_game(rules, depth=1, endgame=4, rng=np.random.default_rng(seed))
            if record.outcome == Outcome.WIN:
                expected = Color.BLACK if record.plies % 2 == 1 else Color.WHITE
                assert record.winner == expected
            else:
                assert record.winner is None
                assert record.plies == rules.cell_count

    def test_fixed_opening_move(self):
        rules = self._rules()
        record = play_game(rules, depth=1, rng=np.random.default_rng(4), opening_move=(0, 3))

        assert record.moves[0] == rules.square_make(0, 3)

    def test_opening_outside_zone_rejected(self):
        rules = self._rules()
        with pytest.raises(OpeningZoneError):
            play_game(rules, depth=1, opening_move=(3, 3))

    def test_anchored_variant_game(self):
        rules = Rules(row_count=7, column_count=7, opening_rows=0, anchored_win_check=True)
        record = play_game(rules, depth=1, endgame=3, rng=np.random.default_rng(8))

        assert record.outcome in (Outcome.WIN, Outcome.DRAW)
