import pytest

from tennispoint.engine import MatchConfig, ScoringMode
from tennispoint.exceptions import InvalidConfig
from tennispoint.presets import (
    TieBreakChoice,
    build_config,
    describe,
    tie_break_at,
    tie_break_label,
)


def test_defaults_match_setup_screen():
    cfg = build_config()
    assert cfg == MatchConfig(
        total_sets=1,
        games_per_set=6,
        tie_break_enabled=False,
        tie_break_at_game=0,
        scoring_mode=ScoringMode.NO_ADVANTAGE,
    )


@pytest.mark.parametrize("choice, games, expected", [
    (TieBreakChoice.FULL, 6, 6),
    (TieBreakChoice.SHORT, 6, 5),
    (TieBreakChoice.NONE, 6, 0),
    (TieBreakChoice.FULL, 4, 4),
    (TieBreakChoice.SHORT, 8, 7),
    ("short", 2, 1),
])
def test_tie_break_follows_game_count(choice, games, expected):
    assert tie_break_at(choice, games) == expected


def test_tie_break_labels():
    assert tie_break_label(TieBreakChoice.FULL, 6) == "6 - 6"
    assert tie_break_label(TieBreakChoice.SHORT, 4) == "3 - 3"
    assert tie_break_label(TieBreakChoice.NONE, 6) == "none"


def test_build_config_enables_tie_break():
    cfg = build_config(3, 4, TieBreakChoice.SHORT, ScoringMode.TRADITIONAL)
    assert cfg.tie_break_enabled is True
    assert cfg.tie_break_at_game == 3
    assert cfg.total_sets == 3
    assert cfg.scoring_mode is ScoringMode.TRADITIONAL


def test_build_config_accepts_text_values():
    cfg = build_config(5, 8, "full", "semi-advantage")
    assert cfg.tie_break_at_game == 8
    assert cfg.scoring_mode is ScoringMode.SEMI_ADVANTAGE


@pytest.mark.parametrize("kwargs", [
    {"total_sets": 2},
    {"total_sets": 7},
    {"games_per_set": 5},
    {"games_per_set": 10},
])
def test_build_config_rejects_other_choices(kwargs):
    with pytest.raises(InvalidConfig):
        build_config(**kwargs)


def test_build_config_rejects_unknown_names():
    with pytest.raises(ValueError):
        build_config(tie_break="sometimes")
    with pytest.raises(ValueError):
        build_config(scoring_mode="golden")


def test_describe():
    assert describe(build_config()) == "1 set, 6 games, no tie-break, No-Ad"
    text = describe(build_config(3, 6, TieBreakChoice.FULL, ScoringMode.TRADITIONAL))
    assert text == "best of 3 sets, 6 games, tie-break at 6 - 6, Ad"
