from __future__ import annotations

"""Scoreboard panel: two player columns, point buttons, status and hints."""

from dataclasses import dataclass, field
from typing import List, Tuple
import pygame

from model.adapter import ScoreRow
from . import constants as C


@dataclass
class HUDState:
    rows: List[ScoreRow] = field(default_factory=lambda: [ScoreRow("Player1"), ScoreRow("Player2")])
    rules: str = ""
    status: str = "Set 1"
    hint: str = "1/2 or click: point | B: back to setup (reset) | Esc: quit"
    match_over: bool = False
    winner_name: str | None = None


class HUD:
    def __init__(self, surf: pygame.Surface):
        # This sets up fonts and a small state object for drawing
        self.surf = surf
        self.font_name = pygame.font.SysFont("arial", C.NAME_FONT_SIZE, bold=True)
        self.font_score = pygame.font.SysFont("arial", C.SCORE_FONT_SIZE, bold=True)
        self.font_label = pygame.font.SysFont("arial", C.LABEL_FONT_SIZE)
        self.font_small = pygame.font.SysFont("arial", C.HINT_FONT_SIZE)
        self.state = HUDState()
        self.buttons: List[pygame.Rect] = []

    def update(self, **kwargs):
        # This updates values that the HUD will present
        for k, v in kwargs.items():
            if hasattr(self.state, k):
                setattr(self.state, k, v)

    def column_rects(self) -> Tuple[pygame.Rect, pygame.Rect]:
        """Return the left and right player column rectangles."""
        w, h = self.surf.get_size()
        pad = C.WINDOW_PADDING_PX
        col_w = (w - 3 * pad) // 2
        top = pad + 40
        col_h = h - top - pad - 40
        left = pygame.Rect(pad, top, col_w, col_h)
        right = pygame.Rect(2 * pad + col_w, top, col_w, col_h)
        return left, right

    def player_at(self, pos) -> int | None:
        """Return the player whose button or column contains `pos`."""
        for player, rect in enumerate(self.column_rects(), start=1):
            if rect.collidepoint(pos):
                return player
        return None

    def _blit_centered(self, img: pygame.Surface, cx: int, y: int) -> int:
        self.surf.blit(img, (cx - img.get_width() // 2, y))
        return y + img.get_height()

    def draw(self):
        # This renders both columns, the point buttons and the text lines
        self.surf.fill(C.BACKGROUND_COLOR)
        pad = C.WINDOW_PADDING_PX

        rules = self.font_small.render(self.state.rules, True, C.MUTED_TEXT_COLOR)
        self.surf.blit(rules, (pad, 12))
        status = self.font_label.render(self.state.status, True, C.TEXT_COLOR)
        self.surf.blit(status, (pad, 12 + rules.get_height() + 4))

        self.buttons = []
        colors = (C.PLAYER_1_COLOR, C.PLAYER_2_COLOR)
        for rect, row, color in zip(self.column_rects(), self.state.rows, colors):
            pygame.draw.rect(self.surf, C.PANEL_COLOR, rect, border_radius=10)
            pygame.draw.rect(self.surf, color, rect, 3, border_radius=10)
            cx = rect.centerx
            y = rect.top + 16
            y = self._blit_centered(self.font_name.render(row.name, True, color), cx, y) + 10
            for label, value in (("Sets", row.sets), ("Games", row.games), ("Point", row.point)):
                y = self._blit_centered(self.font_label.render(label, True, C.MUTED_TEXT_COLOR), cx, y)
                y = self._blit_centered(self.font_score.render(str(value), True, C.TEXT_COLOR), cx, y) + 6

            btn_img = self.font_name.render("Point", True, C.BUTTON_TEXT_COLOR)
            btn = pygame.Rect(0, 0, btn_img.get_width() + 32, btn_img.get_height() + 16)
            btn.midbottom = (cx, rect.bottom - 14)
            fill = C.MUTED_TEXT_COLOR if self.state.match_over else C.BUTTON_COLOR
            pygame.draw.rect(self.surf, fill, btn, border_radius=10)
            self.surf.blit(btn_img, (btn.centerx - btn_img.get_width() // 2, btn.centery - btn_img.get_height() // 2))
            self.buttons.append(btn)

        hint = self.font_small.render(self.state.hint, True, C.MUTED_TEXT_COLOR)
        self.surf.blit(hint, (pad, self.surf.get_height() - pad + 8))

        if self.state.match_over and self.state.winner_name:
            banner = self.font_name.render(f"Winner: {self.state.winner_name}", True, C.HIGHLIGHT_COLOR)
            bg = pygame.Surface((banner.get_width() + 24, banner.get_height() + 12), pygame.SRCALPHA)
            bg.fill(C.BANNER_BG)
            bx = (self.surf.get_width() - bg.get_width()) // 2
            by = (self.surf.get_height() - bg.get_height()) // 2
            self.surf.blit(bg, (bx, by))
            self.surf.blit(banner, (bx + 12, by + 6))
