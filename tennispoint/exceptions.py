"""Errors raised by the scoring engine and its front-ends."""


class ScoringError(Exception):
    """Base class for scoring errors."""


class InvalidPlayer(ScoringError, ValueError):
    """Raised when a point is credited to something other than player 1 or 2."""

    def __init__(self, player):
        super().__init__(f"player must be 1 or 2, got {player!r}")
        self.player = player


class InvalidConfig(ScoringError, ValueError):
    """Raised by config validation when the rules cannot describe a match."""
