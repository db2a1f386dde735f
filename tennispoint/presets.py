from __future__ import annotations

"""Rule choices offered by the setup screens.

Both front-ends build their `MatchConfig` here so the same choices and
defaults apply everywhere.
"""

from enum import Enum
from typing import Dict

from .engine import MatchConfig, ScoringMode, validate_config
from .exceptions import InvalidConfig


SET_CHOICES = (1, 3, 5)
GAME_CHOICES = (2, 4, 6, 8)


class TieBreakChoice(str, Enum):
    FULL = "full"  # tie-break at N-N
    SHORT = "short"  # tie-break at (N-1)-(N-1)
    NONE = "none"


SCORING_LABELS: Dict[ScoringMode, str] = {
    ScoringMode.TRADITIONAL: "Ad",
    ScoringMode.SEMI_ADVANTAGE: "Semi-Ad",
    ScoringMode.NO_ADVANTAGE: "No-Ad",
}

DEFAULT_SETS = 1
DEFAULT_GAMES = 6
DEFAULT_TIE_BREAK = TieBreakChoice.NONE
DEFAULT_SCORING = ScoringMode.NO_ADVANTAGE


def tie_break_at(choice: TieBreakChoice, games_per_set: int) -> int:
    """Return the tied game count that starts a tie-break, or 0 for none."""
    choice = TieBreakChoice(choice)
    if choice is TieBreakChoice.FULL:
        return games_per_set
    if choice is TieBreakChoice.SHORT:
        return games_per_set - 1
    return 0


def tie_break_label(choice: TieBreakChoice, games_per_set: int) -> str:
    """Return the label a setup screen shows for a tie-break choice."""
    at = tie_break_at(choice, games_per_set)
    return f"{at} - {at}" if at else "none"


def build_config(
    total_sets: int = DEFAULT_SETS,
    games_per_set: int = DEFAULT_GAMES,
    tie_break: TieBreakChoice = DEFAULT_TIE_BREAK,
    scoring_mode: ScoringMode = DEFAULT_SCORING,
) -> MatchConfig:
    """Build and validate the rules picked on a setup screen."""
    if total_sets not in SET_CHOICES:
        raise InvalidConfig(f"sets must be one of {SET_CHOICES}")
    if games_per_set not in GAME_CHOICES:
        raise InvalidConfig(f"games must be one of {GAME_CHOICES}")
    at = tie_break_at(tie_break, games_per_set)
    return validate_config(
        MatchConfig(
            total_sets=total_sets,
            games_per_set=games_per_set,
            tie_break_enabled=at > 0,
            tie_break_at_game=at,
            scoring_mode=ScoringMode(scoring_mode),
        )
    )


def describe(config: MatchConfig) -> str:
    """Return a one line summary of a rule set."""
    sets = "1 set" if config.total_sets == 1 else f"best of {config.total_sets} sets"
    if config.tie_break_enabled and config.tie_break_at_game:
        tb = f"tie-break at {config.tie_break_at_game} - {config.tie_break_at_game}"
    else:
        tb = "no tie-break"
    return f"{sets}, {config.games_per_set} games, {tb}, {SCORING_LABELS[config.scoring_mode]}"
