import pytest

from conftest import make_engine, reach_games, win_games
from model.adapter import ScoreRow, Scoreboard, format_rows, replay
from tennispoint.engine import MatchConfig, ScoringMode


def rows_as_tuples(board):
    return [(r.name, r.sets, r.games, r.point) for r in board.rows]


def test_board_starts_blank():
    board = Scoreboard(make_engine())
    assert rows_as_tuples(board) == [("Player1", 0, 0, "0"), ("Player2", 0, 0, "0")]
    assert board.status_line() == "Set 1"
    assert board.match_over is False
    assert board.winner_name() is None


def test_point_refreshes_rows():
    board = Scoreboard(make_engine(), names=("Ann", "Bea"))
    board.point(1)
    rows = board.point(2)
    assert rows is board.rows
    assert rows_as_tuples(board) == [("Ann", 0, 0, "15"), ("Bea", 0, 0, "15")]


def test_rows_follow_game_and_set_wins():
    engine = make_engine()
    board = Scoreboard(engine)
    for _ in range(6 * 4):
        board.point(2)
    assert rows_as_tuples(board) == [("Player1", 0, 0, "0"), ("Player2", 1, 0, "0")]
    assert board.status_line() == "Set 2"


def test_status_line_shows_tie_break():
    engine = make_engine()
    reach_games(engine, 6, 6)
    board = Scoreboard(engine)
    assert board.status_line() == "Set 1 - Tie-break"
    board.point(1)
    assert board.rows[0].point == "1"


def test_winner_and_back_to_setup():
    engine = make_engine(total_sets=1)
    board = Scoreboard(engine, names=("Ann", "Bea"))
    win_games(engine, 1, 6)
    board.refresh()
    assert board.match_over is True
    assert board.winner_name() == "Ann"
    assert board.status_line() == "Game, set and match Ann"
    assert rows_as_tuples(board)[0] == ("Ann", 0, 6, "0")

    board.back_to_setup()
    assert board.match_over is False
    assert rows_as_tuples(board) == [("Ann", 0, 0, "0"), ("Bea", 0, 0, "0")]


def test_board_needs_two_names():
    with pytest.raises(ValueError):
        Scoreboard(make_engine(), names=("Solo",))


def test_replay_yields_one_snapshot_per_point():
    cfg = MatchConfig(scoring_mode=ScoringMode.NO_ADVANTAGE)
    snaps = list(replay(cfg, [1, 2, 1]))
    assert [s.points for s in snaps] == [("15", "0"), ("15", "15"), ("30", "15")]


def test_replay_stops_at_match_end():
    cfg = MatchConfig(total_sets=1, games_per_set=2)
    snaps = list(replay(cfg, [1] * 8 + [2] * 5))
    assert len(snaps) == 8
    assert snaps[-1].match_over is True
    assert snaps[-1].games == (2, 0)
    assert snaps[-1].winner == 1


def test_replay_does_not_share_state():
    cfg = MatchConfig()
    first = list(replay(cfg, [1, 1]))
    second = list(replay(cfg, [2]))
    assert first[-1].points == ("30", "0")
    assert second[-1].points == ("0", "15")


def test_format_rows_alignment():
    lines = format_rows([ScoreRow("Ann", 1, 3, "Ad"), ScoreRow("Beatrice", 0, 2, "40")])
    assert lines[0] == "Player    Sets  Games  Point"
    assert lines[1] == "Ann          1      3     Ad"
    assert lines[2] == "Beatrice     0      2     40"
