from __future__ import annotations

"""Display model over `tennispoint.engine`.

`Scoreboard` mirrors the engine into a two-row table (name, sets, games,
point) after every action, so front-ends only ever read rows. `replay`
plays a recorded sequence of point winners through a fresh engine.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from tennispoint.engine import MatchConfig, MatchEngine, MatchSnapshot


DEFAULT_NAMES = ("Player1", "Player2")


@dataclass
class ScoreRow:
    """One line of the scoreboard table."""

    name: str
    sets: int = 0
    games: int = 0
    point: str = "0"


class Scoreboard:
    """Two-row table kept in step with a `MatchEngine`.

    Rows are rebuilt from the engine's query API after each point; they are
    never edited by hand.
    """

    def __init__(self, engine: MatchEngine, names: Sequence[str] = DEFAULT_NAMES):
        if len(names) != 2:
            raise ValueError("a scoreboard needs exactly two names")
        self.engine = engine
        self.rows: List[ScoreRow] = [ScoreRow(name=n) for n in names]
        self.refresh()

    def point(self, player: int) -> List[ScoreRow]:
        """Score a point for player 1 or 2 and return the refreshed rows."""
        self.engine.score_point(player)
        self.refresh()
        return self.rows

    def refresh(self) -> None:
        for player, row in enumerate(self.rows, start=1):
            row.sets = self.engine.set_score(player)
            row.games = self.engine.game_score(player)
            row.point = self.engine.point_score(player)

    @property
    def match_over(self) -> bool:
        return self.engine.is_match_over()

    def winner_name(self) -> Optional[str]:
        winner = self.engine.winner()
        return None if winner is None else self.rows[winner - 1].name

    def status_line(self) -> str:
        """Return a short line describing where the match stands."""
        if self.match_over:
            return f"Game, set and match {self.winner_name()}"
        text = f"Set {self.engine.current_set()}"
        if self.engine.in_tie_break():
            text += " - Tie-break"
        return text

    def back_to_setup(self) -> None:
        """Clear the score, as when leaving for the setup screen."""
        self.engine.reset()
        self.refresh()


def replay(config: MatchConfig, points: Iterable[int]) -> Iterator[MatchSnapshot]:
    """Yield a snapshot after each point of a recorded match.

    Stops once the match is over; later points would not change anything.
    """
    engine = MatchEngine(config)
    for player in points:
        engine.score_point(player)
        yield engine.snapshot()
        if engine.is_match_over():
            break


def format_rows(rows: Sequence[ScoreRow]) -> List[str]:
    """Return aligned text lines for a scoreboard table."""
    width = max(len("Player"), *(len(r.name) for r in rows))
    lines = [f"{'Player':<{width}}  Sets  Games  Point"]
    for r in rows:
        lines.append(f"{r.name:<{width}}  {r.sets:>4}  {r.games:>5}  {r.point:>5}")
    return lines


__all__ = ["DEFAULT_NAMES", "ScoreRow", "Scoreboard", "format_rows", "replay"]
