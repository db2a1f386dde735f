"""Tennis point scorer: a rules engine for two-player tennis scoring."""

from .engine import MatchConfig, MatchEngine, ScoringMode
from .exceptions import InvalidConfig, InvalidPlayer, ScoringError

__all__ = [
    "InvalidConfig",
    "InvalidPlayer",
    "MatchConfig",
    "MatchEngine",
    "ScoringError",
    "ScoringMode",
]
