from __future__ import annotations

"""Constants for GUI rendering.

Sizes are in pixels for the default window; the app recomputes layout
from the live window size so resizing keeps the same proportions.
"""

# Colors (R,G,B)
BACKGROUND_COLOR = (10, 18, 24)
PANEL_COLOR = (36, 90, 66)  # court green behind the scoreboard
TEXT_COLOR = (245, 245, 245)
MUTED_TEXT_COLOR = (150, 160, 165)
HIGHLIGHT_COLOR = (242, 214, 0)  # ball yellow for the active row
BUTTON_COLOR = (52, 168, 83)
BUTTON_TEXT_COLOR = (255, 255, 255)
PLAYER_1_COLOR = (66, 135, 245)  # blue for Player 1
PLAYER_2_COLOR = (236, 88, 64)   # red for Player 2
BANNER_BG = (0, 0, 0, 160)

# Rendering
DEFAULT_WINDOW = (800, 600)
TARGET_FPS = 30
WINDOW_PADDING_PX = 40

# Font sizes
TITLE_FONT_SIZE = 30
NAME_FONT_SIZE = 30
SCORE_FONT_SIZE = 56
LABEL_FONT_SIZE = 20
HINT_FONT_SIZE = 16
