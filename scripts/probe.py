from collections import Counter
import os, sys
import random

# Ensure project root is on sys.path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tennispoint.engine import MatchEngine, ScoringMode
from tennispoint.presets import TieBreakChoice, build_config, describe


def run(seed: int, config, p1_win=0.5):
    """Play one match of random points and return (points, tie-breaks, sets).

    Each point goes to player 1 with probability `p1_win`.
    """
    rng = random.Random(seed)
    engine = MatchEngine(config)
    points = 0
    tie_breaks = 0
    was_tie_break = False
    while not engine.is_match_over():
        engine.score_point(1 if rng.random() < p1_win else 2)
        points += 1
        in_tb = engine.in_tie_break()
        if in_tb and not was_tie_break:
            tie_breaks += 1
        was_tie_break = in_tb
    if config.total_sets == 1:
        final = (engine.game_score(1), engine.game_score(2))
    else:
        final = (engine.set_score(1), engine.set_score(2))
    return points, tie_breaks, final


def probe(label, config, **kwargs):
    """Try many seeds and print simple distribution info.

    This is a rough way to compare how long matches run under each rule.
    """
    c = Counter()
    n = 200
    total_points = 0
    total_tbs = 0
    for s in range(n):
        points, tie_breaks, final = run(s, config, **kwargs)
        total_points += points
        total_tbs += tie_breaks
        c[final] += 1
    print(f"\n[{label}] {describe(config)}")
    print(f"matches: {n}  avg points: {round(total_points / n, 1)}  tie-breaks: {total_tbs}")
    for k, v in c.most_common(5):
        print(v, k)


def main():
    """Run a few probes with different deuce rules."""
    for mode in ScoringMode:
        probe(mode.value, build_config(3, 6, TieBreakChoice.FULL, mode))
    # Short sets with a tie-break one game early
    probe('short sets', build_config(1, 4, TieBreakChoice.SHORT, ScoringMode.NO_ADVANTAGE))
    # A stronger player 1
    probe('p1 60%', build_config(5, 6, TieBreakChoice.FULL, ScoringMode.TRADITIONAL), p1_win=0.6)


if __name__ == '__main__':
    main()
