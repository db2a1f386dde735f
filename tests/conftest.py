import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tennispoint.engine import MatchConfig, MatchEngine, ScoringMode  # noqa: E402


def make_engine(**overrides):
    """Engine with tournament-like defaults: best of 3, 6 games, tie-break at 6-6."""
    values = dict(
        total_sets=3,
        games_per_set=6,
        tie_break_enabled=True,
        tie_break_at_game=6,
        scoring_mode=ScoringMode.TRADITIONAL,
    )
    values.update(overrides)
    return MatchEngine(MatchConfig(**values))


def score(engine, *players):
    for p in players:
        engine.score_point(p)


def win_game(engine, player):
    for _ in range(4):
        engine.score_point(player)


def win_games(engine, player, n):
    for _ in range(n):
        win_game(engine, player)


def reach_games(engine, a, b):
    """Alternate games so the set reaches a-b without either side winning it early."""
    for _ in range(min(a, b)):
        win_game(engine, 1)
        win_game(engine, 2)
    win_games(engine, 1, a - min(a, b))
    win_games(engine, 2, b - min(a, b))


@pytest.fixture
def engine():
    return make_engine()
