# Area: Scoring
"""
dice_match._match.strategy_executor — Checked strategy execution
================================================================

Wraps strategy invocation with result validation so a faulty custom
strategy fails loudly instead of corrupting the scores.
"""

from __future__ import annotations
import logging
from typing import Any, List, Sequence

from ..errors import InvalidScoringResultError
from ..scoring import ScoringStrategy
from ..types import Histories

logger = logging.getLogger("dice_match.executor")


def validate_points(points: Any, player_count: int) -> List[str]:
    """Return a list of problems with a strategy result (empty if valid)."""
    if isinstance(points, (str, bytes)) or not isinstance(points, Sequence):
        return [f"Expected a sequence of ints, got {type(points).__name__}"]

    errors = []
    if len(points) != player_count:
        errors.append(f"Expected {player_count} entries, got {len(points)}")
    for index, value in enumerate(points):
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(f"Entry {index} is {type(value).__name__}, expected int")
        elif value < 0:
            errors.append(f"Entry {index} is negative ({value})")
    return errors


def execute_strategy(strategy: ScoringStrategy, histories: Histories) -> List[int]:
    """
    Run a scoring strategy and validate its output.

    Raises
    ------
    InvalidScoringResultError
        If the result is not one non-negative int per player.
    """
    strategy_name = strategy.name or strategy.__class__.__name__
    logger.debug(f"[STRATEGY] Executing {strategy_name} for {len(histories)} players")

    points = strategy.evaluate(histories)

    errors = validate_points(points, len(histories))
    if errors:
        raise InvalidScoringResultError(
            strategy_name=strategy_name,
            input_payload={"histories": [[list(roll) for roll in h] for h in histories]},
            output_payload=points,
            validation_errors=errors,
        )

    logger.debug(f"[STRATEGY] {strategy_name} returned {list(points)}")
    return list(points)
