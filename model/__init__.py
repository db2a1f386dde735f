"""Display model package for the tennis point scorer.

This package mirrors the `tennispoint.engine` state into a small table that
front-ends (the CLI and the Pygame GUI) can render without touching the
scoring rules.
"""

__all__ = ["adapter"]
