"""Pygame GUI for the tennis point scorer.

Contains the rules setup form, a HUD for the scoreboard, and the
application entry point (`python -m gui.app`).
"""

__all__ = [
    "constants",
    "setup_form",
    "hud",
    "app",
]
