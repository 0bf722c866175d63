"""
lowest_sum.py — A custom scoring rule
=====================================

Registers a strategy that rewards the lowest total of the round and
plays a match with it.

    python lowest_sum.py
"""

from dice_match import MatchConfig, MatchRunner, ScoringStrategy, register_strategy


@register_strategy
class LowestSumStrategy(ScoringStrategy):
    """One point to every player tied for the lowest total."""

    name = "lowest_sum"

    def evaluate(self, histories):
        sums = [sum(history[-1]) for history in histories]
        lowest = min(sums)
        return [1 if s == lowest else 0 for s in sums]


if __name__ == "__main__":
    config = MatchConfig(
        players=["Ann", "Bob", "Cid", "Dee"],
        strategy="lowest_sum",
        target_score=2,
        seed=7,
        log_file=None,
    )
    MatchRunner(config).run()
