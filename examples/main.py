"""
main.py — Play a dice match in the console
==========================================

Three players roll two six-sided dice each turn. Whoever throws the
highest total in a round scores a point; the first to exactly 3 wins.

    python main.py

Switch STRATEGY to "all_equal" to score doubles instead, or plug in
your own ScoringStrategy subclass (see lowest_sum.py).
"""

from dice_match import MatchConfig, MatchRunner

STRATEGY = "highest_sum"

# ── Configuration ──
config = MatchConfig(
    players=["Juan", "Maria", "Pedro"],
    faces_per_die=6,
    dice_per_turn=2,
    strategy=STRATEGY,
    target_score=3,
    log_file=None,
    log_level="INFO",   # "DEBUG" shows every turn
)

# ── Run ──
if __name__ == "__main__":
    MatchRunner(config).run()
