from __future__ import annotations

"""State of the rules setup screen.

Kept free of pygame so the form can be driven from tests: the app maps key
presses onto `move`, `change` and `build`.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from tennispoint.engine import MatchConfig, ScoringMode
from tennispoint.presets import (
    DEFAULT_GAMES,
    DEFAULT_SCORING,
    DEFAULT_SETS,
    DEFAULT_TIE_BREAK,
    GAME_CHOICES,
    SCORING_LABELS,
    SET_CHOICES,
    TieBreakChoice,
    build_config,
    tie_break_label,
)


TIE_BREAK_CHOICES = (TieBreakChoice.FULL, TieBreakChoice.SHORT, TieBreakChoice.NONE)
SCORING_CHOICES = (ScoringMode.TRADITIONAL, ScoringMode.SEMI_ADVANTAGE, ScoringMode.NO_ADVANTAGE)

ROW_TITLES = ("Sets", "Games", "Tie-break", "Deuce")


@dataclass
class SetupForm:
    # Index of the selected option per row, in ROW_TITLES order.
    selected: List[int] = field(
        default_factory=lambda: [
            SET_CHOICES.index(DEFAULT_SETS),
            GAME_CHOICES.index(DEFAULT_GAMES),
            TIE_BREAK_CHOICES.index(DEFAULT_TIE_BREAK),
            SCORING_CHOICES.index(DEFAULT_SCORING),
        ]
    )
    active_row: int = 0

    def _choices(self, row: int) -> Sequence:
        return (SET_CHOICES, GAME_CHOICES, TIE_BREAK_CHOICES, SCORING_CHOICES)[row]

    def move(self, step: int) -> None:
        """Move the highlight up (-1) or down (+1), wrapping around."""
        self.active_row = (self.active_row + step) % len(ROW_TITLES)

    def change(self, step: int) -> None:
        """Cycle the option of the highlighted row left (-1) or right (+1)."""
        n = len(self._choices(self.active_row))
        self.selected[self.active_row] = (self.selected[self.active_row] + step) % n

    @property
    def total_sets(self) -> int:
        return SET_CHOICES[self.selected[0]]

    @property
    def games_per_set(self) -> int:
        return GAME_CHOICES[self.selected[1]]

    @property
    def tie_break(self) -> TieBreakChoice:
        return TIE_BREAK_CHOICES[self.selected[2]]

    @property
    def scoring_mode(self) -> ScoringMode:
        return SCORING_CHOICES[self.selected[3]]

    def labels(self, row: int) -> List[str]:
        """Return the option labels for a row, as shown on screen."""
        if row == 2:
            return [tie_break_label(c, self.games_per_set) for c in TIE_BREAK_CHOICES]
        if row == 3:
            return [SCORING_LABELS[m] for m in SCORING_CHOICES]
        return [str(c) for c in self._choices(row)]

    def rows(self) -> List[Tuple[str, List[str], int]]:
        """Return (title, option labels, selected index) for every row."""
        return [(title, self.labels(i), self.selected[i]) for i, title in enumerate(ROW_TITLES)]

    def build(self) -> MatchConfig:
        return build_config(self.total_sets, self.games_per_set, self.tie_break, self.scoring_mode)
