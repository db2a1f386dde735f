from gui.setup_form import SetupForm
from tennispoint.engine import ScoringMode
from tennispoint.presets import TieBreakChoice, build_config


def test_defaults_build_default_config():
    form = SetupForm()
    assert form.build() == build_config()


def test_rows_show_labels_and_selection():
    form = SetupForm()
    rows = form.rows()
    assert [r[0] for r in rows] == ["Sets", "Games", "Tie-break", "Deuce"]
    assert rows[0] == ("Sets", ["1", "3", "5"], 0)
    assert rows[1] == ("Games", ["2", "4", "6", "8"], 2)
    assert rows[2] == ("Tie-break", ["6 - 6", "5 - 5", "none"], 2)
    assert rows[3] == ("Deuce", ["Ad", "Semi-Ad", "No-Ad"], 2)


def test_tie_break_labels_follow_games():
    form = SetupForm()
    form.move(1)
    form.change(1)  # games 6 -> 8
    assert form.games_per_set == 8
    assert form.labels(2) == ["8 - 8", "7 - 7", "none"]


def test_move_and_change_wrap_around():
    form = SetupForm()
    form.move(-1)
    assert form.active_row == 3
    form.change(1)  # No-Ad wraps to Ad
    assert form.scoring_mode is ScoringMode.TRADITIONAL
    form.move(1)
    assert form.active_row == 0
    form.change(-1)  # 1 set wraps to 5
    assert form.total_sets == 5


def test_build_uses_selection():
    form = SetupForm()
    form.change(1)  # 3 sets
    form.move(2)
    form.change(-2)  # none -> full
    cfg = form.build()
    assert form.tie_break is TieBreakChoice.FULL
    assert cfg.total_sets == 3
    assert cfg.tie_break_enabled is True
    assert cfg.tie_break_at_game == 6
