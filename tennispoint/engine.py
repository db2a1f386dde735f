from __future__ import annotations

"""Scoring state machine for a two-player tennis match.

A match is driven one point at a time through `MatchEngine.score_point`.
After each point the engine runs its checks in a fixed order: point tally,
game win, set win, match win. Every check is a plain function of the
config and the current counters so it can be tested on its own.
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Callable, Dict, List, Optional, Tuple

from .exceptions import InvalidConfig, InvalidPlayer


logger = logging.getLogger(__name__)

PLAYERS = (1, 2)

# Points needed to take a tie-break, and the lead it must be won by.
TIE_BREAK_POINTS = 7
WINNING_MARGIN = 2


class ScoringMode(str, Enum):
    """How a game is settled once both players reach 40."""

    TRADITIONAL = "traditional"
    SEMI_ADVANTAGE = "semi-advantage"
    NO_ADVANTAGE = "no-advantage"


@dataclass(frozen=True)
class MatchConfig:
    total_sets: int = 1  # best of N: 1, 3 or 5
    games_per_set: int = 6  # 2, 4, 6 or 8
    tie_break_enabled: bool = False
    # Games both players must reach for a tie-break; 0 never starts one.
    tie_break_at_game: int = 0
    scoring_mode: ScoringMode = ScoringMode.NO_ADVANTAGE


@dataclass
class MatchState:
    # All pairs are indexed by player index (0 for player 1, 1 for player 2).
    sets_won: List[int] = field(default_factory=lambda: [0, 0])
    games_won: List[int] = field(default_factory=lambda: [0, 0])
    # 0..3 map to 0/15/30/40; 4 only appears for the point that wins a game.
    game_points: List[int] = field(default_factory=lambda: [0, 0])
    tie_break_points: List[int] = field(default_factory=lambda: [0, 0])
    advantage: Optional[int] = None
    current_set: int = 1
    is_tie_break: bool = False
    match_over: bool = False


class PointCall(Enum):
    LOVE = "0"
    FIFTEEN = "15"
    THIRTY = "30"
    FORTY = "40"
    ADVANTAGE = "Ad"
    TIE_BREAK = "tie-break"


ORDINARY_CALLS = (PointCall.LOVE, PointCall.FIFTEEN, PointCall.THIRTY, PointCall.FORTY)


@dataclass(frozen=True)
class PointDisplay:
    """What the umpire would call for one player in the current game.

    Tie-break points carry their raw count; every other call renders to its
    fixed scoreboard text.
    """

    call: PointCall
    count: int = 0

    def __str__(self) -> str:
        if self.call is PointCall.TIE_BREAK:
            return str(self.count)
        return self.call.value


@dataclass(frozen=True)
class MatchSnapshot:
    sets: Tuple[int, int]
    games: Tuple[int, int]
    points: Tuple[str, str]
    current_set: int
    tie_break: bool
    match_over: bool
    winner: Optional[int] = None


def validate_config(config: MatchConfig) -> MatchConfig:
    """Reject rules that can never produce a finished match.

    The engine itself accepts any config; front-ends call this before
    building one.
    """
    if not isinstance(config.scoring_mode, ScoringMode):
        raise InvalidConfig(f"unknown scoring mode: {config.scoring_mode!r}")
    if config.total_sets <= 0 or config.total_sets % 2 == 0:
        raise InvalidConfig("total_sets must be a positive odd number")
    if config.games_per_set <= 0 or config.games_per_set % 2 != 0:
        raise InvalidConfig("games_per_set must be a positive even number")
    if config.tie_break_at_game < 0:
        raise InvalidConfig("tie_break_at_game cannot be negative")
    return config


def sets_needed_to_win(total_sets: int) -> int:
    """Return the number of sets needed to win a best-of-N match."""
    return total_sets // 2 + 1


def tie_break_active(config: MatchConfig, games: List[int]) -> bool:
    """Return True if the next point belongs to a tie-break."""
    return (
        config.tie_break_enabled
        and config.tie_break_at_game > 0
        and games[0] == config.tie_break_at_game
        and games[1] == config.tie_break_at_game
    )


def tie_break_won(points: List[int], idx: int) -> bool:
    """Return True if player `idx` has taken the tie-break."""
    return points[idx] >= TIE_BREAK_POINTS and points[idx] - points[1 - idx] >= WINNING_MARGIN


def has_won_set(config: MatchConfig, games: List[int], idx: int) -> bool:
    """Return True if player `idx` has won the set in progress.

    A set needs the configured game count and a two game lead, or a total
    one past the tie-break count (the 7-6 style finish of a tie-break set).
    """
    mine, theirs = games[idx], games[1 - idx]
    if mine < config.games_per_set:
        return False
    return mine - theirs >= WINNING_MARGIN or mine + theirs == 2 * config.tie_break_at_game + 1


def has_won_match(config: MatchConfig, sets_won: List[int], idx: int) -> bool:
    return sets_won[idx] == sets_needed_to_win(config.total_sets)


def advantage_point(state: MatchState, idx: int) -> bool:
    """Credit a point under deuce/advantage rules. Return True on game win."""
    opp = 1 - idx
    points = state.game_points
    if points[idx] < 3:
        points[idx] += 1
        return False
    if points[opp] < 3:
        points[idx] += 1
        return True
    # Deuce
    if state.advantage == idx:
        return True
    if state.advantage is None:
        state.advantage = idx
    else:
        state.advantage = None
    return False


def deciding_point(state: MatchState, idx: int) -> bool:
    """Credit a point where 40-40 is settled by the next point."""
    points = state.game_points
    if points[idx] >= 3 and points[1 - idx] >= 3:
        return True
    points[idx] += 1
    return points[idx] == 4


# SEMI_ADVANTAGE plays exactly like TRADITIONAL until a different rule is agreed.
POINT_RULES: Dict[ScoringMode, Callable[[MatchState, int], bool]] = {
    ScoringMode.TRADITIONAL: advantage_point,
    ScoringMode.SEMI_ADVANTAGE: advantage_point,
    ScoringMode.NO_ADVANTAGE: deciding_point,
}


def _player_index(player: int) -> int:
    if isinstance(player, bool) or player not in PLAYERS:
        raise InvalidPlayer(player)
    return player - 1


class MatchEngine:
    """Owns the rules and the live state of one match.

    The state is never handed out; callers read it through the query
    methods or an immutable `snapshot()`. Access from several threads must
    be serialized by the caller.
    """

    def __init__(self, config: MatchConfig):
        self.config = config
        self._state = MatchState()

    # --- Events ---

    def score_point(self, player: int) -> None:
        """Credit one point to player 1 or 2.

        Does nothing once the match is over.
        """
        idx = _player_index(player)
        state = self._state
        if state.match_over:
            logger.debug("Match over; ignoring point for player %d", player)
            return

        state.is_tie_break = tie_break_active(self.config, state.games_won)
        if state.is_tie_break:
            state.tie_break_points[idx] += 1
            game_won = tie_break_won(state.tie_break_points, idx)
        else:
            game_won = POINT_RULES[self.config.scoring_mode](state, idx)

        if game_won:
            self._win_game(idx)

    def reset(self) -> None:
        """Return to the state of a freshly built engine. Rules are kept."""
        self._state = MatchState()

    def _win_game(self, idx: int) -> None:
        state = self._state
        tie_break = state.is_tie_break
        state.games_won[idx] += 1
        state.game_points = [0, 0]
        state.tie_break_points = [0, 0]
        state.advantage = None
        state.is_tie_break = False
        logger.debug(
            "Game player %d%s, games %d-%d",
            idx + 1,
            " (tie-break)" if tie_break else "",
            state.games_won[0],
            state.games_won[1],
        )

        if not has_won_set(self.config, state.games_won, idx):
            return

        if self.config.total_sets == 1:
            # The set score is the final score, so the games stay on the board.
            state.match_over = True
            logger.info(
                "Match won by player %d, %d-%d", idx + 1, state.games_won[0], state.games_won[1]
            )
            return

        logger.info(
            "Set %d won by player %d, %d-%d",
            state.current_set,
            idx + 1,
            state.games_won[0],
            state.games_won[1],
        )
        state.sets_won[idx] += 1
        state.games_won = [0, 0]
        state.current_set += 1
        if has_won_match(self.config, state.sets_won, idx):
            state.match_over = True
            logger.info(
                "Match won by player %d, sets %d-%d", idx + 1, state.sets_won[0], state.sets_won[1]
            )

    # --- Queries ---

    def set_score(self, player: int) -> int:
        return self._state.sets_won[_player_index(player)]

    def game_score(self, player: int) -> int:
        return self._state.games_won[_player_index(player)]

    def in_tie_break(self) -> bool:
        return tie_break_active(self.config, self._state.games_won)

    def point_call(self, player: int) -> PointDisplay:
        """Return the structured point call for one player."""
        idx = _player_index(player)
        state = self._state
        if self.in_tie_break():
            return PointDisplay(PointCall.TIE_BREAK, state.tie_break_points[idx])
        points = state.game_points
        if points[0] >= 3 and points[1] >= 3:
            if state.advantage == idx:
                return PointDisplay(PointCall.ADVANTAGE)
            return PointDisplay(PointCall.FORTY)
        return PointDisplay(ORDINARY_CALLS[min(points[idx], 3)])

    def point_score(self, player: int) -> str:
        """Return the point score as scoreboard text ("0", "15", "Ad", "5", ...)."""
        return str(self.point_call(player))

    def is_match_over(self) -> bool:
        return self._state.match_over

    def current_set(self) -> int:
        return self._state.current_set

    def winner(self) -> Optional[int]:
        """Return the winning player once the match is over, else None."""
        state = self._state
        if not state.match_over:
            return None
        tally = state.games_won if self.config.total_sets == 1 else state.sets_won
        return 1 if tally[0] > tally[1] else 2

    def snapshot(self) -> MatchSnapshot:
        state = self._state
        return MatchSnapshot(
            sets=(state.sets_won[0], state.sets_won[1]),
            games=(state.games_won[0], state.games_won[1]),
            points=(self.point_score(1), self.point_score(2)),
            current_set=state.current_set,
            tie_break=self.in_tie_break(),
            match_over=state.match_over,
            winner=self.winner(),
        )


__all__ = [
    "MatchConfig",
    "MatchEngine",
    "MatchSnapshot",
    "MatchState",
    "PointCall",
    "PointDisplay",
    "ScoringMode",
    "has_won_match",
    "has_won_set",
    "sets_needed_to_win",
    "tie_break_active",
    "tie_break_won",
    "validate_config",
]
