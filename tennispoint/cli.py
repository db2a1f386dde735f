from __future__ import annotations

import argparse
import logging
import sys
import re
from typing import Callable, List, Optional

from model.adapter import DEFAULT_NAMES, Scoreboard, format_rows
from .engine import MatchEngine, ScoringMode
from .exceptions import InvalidConfig
from .presets import (
    DEFAULT_GAMES,
    DEFAULT_SCORING,
    DEFAULT_SETS,
    DEFAULT_TIE_BREAK,
    GAME_CHOICES,
    SET_CHOICES,
    TieBreakChoice,
    build_config,
    describe,
)


INVALID_INPUT = "Invalid input. Please try again."


def prompt_with_retries(prompt: str, validate: Callable[[str], bool], transform: Callable[[str], object] = lambda x: x, max_attempts: int = 10):
    """Ask for input with validation and a small retry budget.

    Returns the transformed value or exits on repeated invalid entries.
    """
    attempts = 0
    while attempts < max_attempts:
        try:
            raw = input(prompt).strip()
        except EOFError:
            print("Error: no input provided.")
            sys.exit(1)
        if validate(raw):
            try:
                return transform(raw)
            except ValueError:
                print(INVALID_INPUT)
                attempts += 1
                continue
        else:
            print(INVALID_INPUT)
            attempts += 1
    print("Multiple invalid attempts. Exiting.")
    sys.exit(1)


def is_valid_name(s: str) -> bool:
    """Return True if a player name has only letters, digits and spaces."""
    s = s.strip()
    return bool(s) and re.fullmatch(r"[A-Za-z0-9 ]+", s) is not None


def is_valid_choice(choices) -> Callable[[str], bool]:
    """Return a validator accepting the text form of any of `choices`."""
    allowed = {str(c.value if isinstance(c, (ScoringMode, TieBreakChoice)) else c) for c in choices}
    return lambda s: s in allowed


def parse_points(text: str) -> List[int]:
    """Turn a sequence like "1121 2,2" into point winners.

    Spaces and commas are ignored; any other character is an error.
    """
    points = []
    for ch in text:
        if ch in " ,":
            continue
        if ch not in "12":
            raise ValueError(f"unexpected point winner {ch!r}")
        points.append(int(ch))
    return points


def print_board(board: Scoreboard) -> None:
    for line in format_rows(board.rows):
        print(line)
    print(board.status_line())


def play_scripted(board: Scoreboard, points: List[int]) -> None:
    """Feed a recorded sequence of winners and print the board after each."""
    for player in points:
        if board.match_over:
            print("Match is over; remaining points ignored.")
            break
        board.point(player)
        print(f"Point {board.rows[player - 1].name}")
        print_board(board)


def play_interactive(board: Scoreboard) -> None:
    """Read point winners from stdin until quit or end of input."""
    while True:
        try:
            raw = input("Point for (1/2), r to reset, q to quit: ").strip().lower()
        except EOFError:
            return
        if raw == "q":
            return
        if raw == "r":
            board.back_to_setup()
            print("Score reset.")
            print_board(board)
            continue
        if raw not in ("1", "2"):
            print(INVALID_INPUT)
            continue
        if board.match_over:
            print("Match is over. Press r to reset or q to quit.")
            continue
        player = int(raw)
        board.point(player)
        print(f"Point {board.rows[player - 1].name}")
        print_board(board)


def main(argv=None) -> int:
    """Run the text mode scorekeeper.

    Rules come from flags or prompts; points come from --points or stdin.
    """
    parser = argparse.ArgumentParser(description="Tennis point scorer (CLI)")
    parser.add_argument("--player-1", dest="player_1", type=str, help="Player 1 name", default=None)
    parser.add_argument("--player-2", dest="player_2", type=str, help="Player 2 name", default=None)
    parser.add_argument("--sets", dest="total_sets", type=int, choices=SET_CHOICES, help="Sets in the match (1, 3 or 5)", default=None)
    parser.add_argument("--games", dest="games_per_set", type=int, choices=GAME_CHOICES, help="Games per set (2, 4, 6 or 8)", default=None)
    parser.add_argument("--tie-break", dest="tie_break", choices=[c.value for c in TieBreakChoice], help="Tie-break at N-N (full), (N-1)-(N-1) (short) or none", default=None)
    parser.add_argument("--scoring", dest="scoring_mode", choices=[m.value for m in ScoringMode], help="Deuce rule", default=None)
    parser.add_argument("--points", dest="points", type=str, help="Scripted point winners, e.g. 1121", default=None)
    parser.add_argument("--no-prompt", action="store_true", help="Use defaults for missing values instead of asking")
    parser.add_argument("--verbose", action="store_true", help="Log game, set and match events")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    names = []
    for i, (flag_value, default) in enumerate(zip((args.player_1, args.player_2), DEFAULT_NAMES), start=1):
        if flag_value is None:
            if args.no_prompt:
                names.append(default)
            else:
                names.append(prompt_with_retries(f"Player {i} name: ", is_valid_name, str))
        else:
            name = flag_value.strip()
            if not is_valid_name(name):
                print(INVALID_INPUT)
                return 2
            names.append(name)

    def pick(value, default, prompt, choices, transform):
        if value is not None:
            return value
        if args.no_prompt:
            return default
        return prompt_with_retries(prompt, is_valid_choice(choices), transform)

    total_sets = pick(args.total_sets, DEFAULT_SETS, "Number of sets (1, 3 or 5): ", SET_CHOICES, int)
    games_per_set = pick(args.games_per_set, DEFAULT_GAMES, "Games per set (2, 4, 6 or 8): ", GAME_CHOICES, int)
    tie_break = pick(args.tie_break, DEFAULT_TIE_BREAK, "Tie-break (full, short, none): ", TieBreakChoice, TieBreakChoice)
    scoring_mode = pick(
        args.scoring_mode,
        DEFAULT_SCORING,
        "Deuce rule (traditional, semi-advantage, no-advantage): ",
        ScoringMode,
        ScoringMode,
    )

    points: Optional[List[int]] = None
    if args.points is not None:
        try:
            points = parse_points(args.points)
        except ValueError:
            print(INVALID_INPUT)
            return 2

    try:
        config = build_config(total_sets, games_per_set, TieBreakChoice(tie_break), ScoringMode(scoring_mode))
    except InvalidConfig:
        print(INVALID_INPUT)
        return 2

    board = Scoreboard(MatchEngine(config), names)
    print(f"Start of play - {names[0]} vs {names[1]} - {describe(config)}")

    if points is not None:
        play_scripted(board, points)
    else:
        play_interactive(board)

    winner = board.winner_name()
    if winner is not None:
        print(f"Winner: {winner}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
