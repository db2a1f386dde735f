from __future__ import annotations

"""Pygame app for the tennis point scorer.

Run with: `python -m gui.app`.

Controls:
  - Setup: Up/Down pick a rule, Left/Right change it, Enter starts
  - Scoring: 1/2 or click a column to score a point
  - B/Backspace: back to setup (the score is reset)
  - Q/Esc: quit
"""

import argparse
import sys
from typing import Optional

try:
    import pygame
except Exception as e:  # pragma: no cover - runtime dependency hint
    print("Pygame is required for GUI. Install via: pip install pygame", file=sys.stderr)
    raise

from tennispoint.engine import MatchEngine, ScoringMode
from tennispoint.presets import TieBreakChoice, describe
from model.adapter import DEFAULT_NAMES, Scoreboard

from . import constants as C
from .hud import HUD
from .setup_form import GAME_CHOICES, SCORING_CHOICES, SET_CHOICES, TIE_BREAK_CHOICES, SetupForm


def parse_args(argv=None):
    """Parse command line flags for the GUI app.

    With --no-prompt the rules come from the flags and the setup screen is
    skipped for the first match.
    """
    p = argparse.ArgumentParser(description="Tennis point scorer GUI (Pygame)")
    p.add_argument("--player-1", default=DEFAULT_NAMES[0])
    p.add_argument("--player-2", default=DEFAULT_NAMES[1])
    p.add_argument("--sets", type=int, choices=SET_CHOICES, default=None)
    p.add_argument("--games", type=int, choices=GAME_CHOICES, default=None)
    p.add_argument("--tie-break", choices=[c.value for c in TieBreakChoice], default=None)
    p.add_argument("--scoring", choices=[m.value for m in ScoringMode], default=None)
    p.add_argument("--no-prompt", action="store_true", help="Skip the setup screen and use provided flags")
    p.add_argument("--width", type=int, default=C.DEFAULT_WINDOW[0])
    p.add_argument("--height", type=int, default=C.DEFAULT_WINDOW[1])
    p.add_argument("--fps", type=int, default=C.TARGET_FPS)
    return p.parse_args(argv)


def form_from_args(args) -> SetupForm:
    """Preselect the setup form with any rules given on the command line."""
    form = SetupForm()
    if args.sets is not None:
        form.selected[0] = SET_CHOICES.index(args.sets)
    if args.games is not None:
        form.selected[1] = GAME_CHOICES.index(args.games)
    if args.tie_break is not None:
        form.selected[2] = TIE_BREAK_CHOICES.index(TieBreakChoice(args.tie_break))
    if args.scoring is not None:
        form.selected[3] = SCORING_CHOICES.index(ScoringMode(args.scoring))
    return form


def run(argv=None) -> int:
    """Run the pygame scorer.

    Alternates between the setup screen and the scoring screen until exit.
    """
    args = parse_args(argv)
    names = (args.player_1.strip() or DEFAULT_NAMES[0], args.player_2.strip() or DEFAULT_NAMES[1])

    pygame.init()
    pygame.display.set_caption("Tennis Point")
    flags = pygame.RESIZABLE | pygame.DOUBLEBUF
    screen = pygame.display.set_mode((args.width, args.height), flags)
    clock = pygame.time.Clock()

    form = form_from_args(args)

    def draw_setup():
        """Draw the rules setup screen."""
        screen.fill(C.BACKGROUND_COLOR)
        title_font = pygame.font.SysFont("arial", C.TITLE_FONT_SIZE, bold=True)
        font = pygame.font.SysFont("arial", C.LABEL_FONT_SIZE + 2)
        y = 50
        title = title_font.render("Set the match rules", True, C.TEXT_COLOR)
        screen.blit(title, ((screen.get_width() - title.get_width()) // 2, y))
        y += title.get_height() + 40
        x = 80
        for i, (row_title, labels, selected) in enumerate(form.rows()):
            active = i == form.active_row
            head = font.render(row_title, True, C.HIGHLIGHT_COLOR if active else C.TEXT_COLOR)
            screen.blit(head, (x, y))
            ox = x + 160
            for j, label in enumerate(labels):
                color = C.BUTTON_TEXT_COLOR if j == selected else C.MUTED_TEXT_COLOR
                img = font.render(label, True, color)
                box = pygame.Rect(ox - 8, y - 4, img.get_width() + 16, img.get_height() + 8)
                if j == selected:
                    pygame.draw.rect(screen, C.BUTTON_COLOR, box, border_radius=6)
                screen.blit(img, (ox, y))
                ox += box.width + 12
            y += head.get_height() + 28
        hint = pygame.font.SysFont("arial", C.HINT_FONT_SIZE).render(
            "Up/Down: rule | Left/Right: change | Enter: start match | Esc: quit", True, C.MUTED_TEXT_COLOR
        )
        screen.blit(hint, (x, y + 12))
        pygame.display.flip()

    def run_setup() -> bool:
        """Handle the setup screen; return False if the user quits."""
        while True:
            draw_setup()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        return False
                    if event.key == pygame.K_UP:
                        form.move(-1)
                    elif event.key in (pygame.K_DOWN, pygame.K_TAB):
                        form.move(1)
                    elif event.key == pygame.K_LEFT:
                        form.change(-1)
                    elif event.key == pygame.K_RIGHT:
                        form.change(1)
                    elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        return True
            clock.tick(args.fps)

    if args.no_prompt:
        config = form.build()
    else:
        if not run_setup():
            pygame.quit()
            return 0
        config = form.build()

    hud = HUD(screen)
    board: Optional[Scoreboard] = None

    def start_match(cfg):
        """Build a fresh engine for the chosen rules."""
        nonlocal board
        board = Scoreboard(MatchEngine(cfg), names)
        hud.update(rules=describe(cfg))
        refresh_hud()

    def refresh_hud():
        hud.update(
            rows=board.rows,
            status=board.status_line(),
            match_over=board.match_over,
            winner_name=board.winner_name(),
        )

    def score(player: int):
        # Points after the match ends are ignored by the engine itself.
        board.point(player)
        refresh_hud()

    start_match(config)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((max(480, event.w), max(360, event.h)), flags)
                hud.surf = screen
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key in (pygame.K_1, pygame.K_KP1):
                    score(1)
                elif event.key in (pygame.K_2, pygame.K_KP2):
                    score(2)
                elif event.key in (pygame.K_b, pygame.K_BACKSPACE):
                    board.back_to_setup()
                    if not run_setup():
                        running = False
                        break
                    # Rules may have changed, so the old engine is dropped.
                    start_match(form.build())
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                player = hud.player_at(event.pos)
                if player is not None:
                    score(player)

        if running:
            hud.draw()
            pygame.display.flip()
            clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run())
