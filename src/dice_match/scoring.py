# Area: Scoring
"""
dice_match.scoring — Pluggable round-scoring strategies
=======================================================

A strategy turns every player's roll history into the points each
player earns for the round that just finished. Subclass ScoringStrategy
and implement evaluate():

    from dice_match import ScoringStrategy

    class LowestSum(ScoringStrategy):
        name = "lowest_sum"

        def evaluate(self, histories):
            sums = [sum(h[-1]) if h else None for h in histories]
            best = min(s for s in sums if s is not None)
            return [1 if s == best else 0 for s in sums]

Strategies must be pure: identical input gives identical output and no
state is modified. The match guarantees every history has the same
length when evaluate() is called.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from .errors import UnknownStrategyError
from .types import Histories


class ScoringStrategy(ABC):
    """
    Abstract base class for round-scoring rules.

    Attributes:
        name: Registry key used by configuration and the CLI
    """

    name: str = ""

    @abstractmethod
    def evaluate(self, histories: Histories) -> List[int]:
        """
        Score the round that just completed.

        Parameters
        ----------
        histories : Sequence[History]
            One roll history per player, in turn order. The last entry
            of each history is that player's roll for this round.

        Returns
        -------
        List[int]
            Points earned by each player, aligned with ``histories``.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AllEqualFacesStrategy(ScoringStrategy):
    """One point to every player whose latest roll shows a single face value."""

    name = "all_equal"

    def evaluate(self, histories: Histories) -> List[int]:
        return [1 if _all_equal(history) else 0 for history in histories]


class HighestSumStrategy(ScoringStrategy):
    """One point to every player whose latest roll has the highest total.

    Ties give a point to each tied player.
    """

    name = "highest_sum"

    def evaluate(self, histories: Histories) -> List[int]:
        sums = [sum(history[-1]) if history else None for history in histories]
        played = [s for s in sums if s is not None]
        if not played:
            return [0] * len(sums)
        best = max(played)
        return [1 if s == best else 0 for s in sums]


def _all_equal(history) -> bool:
    if not history:
        return False
    last = history[-1]
    return all(face == last[0] for face in last)


# ══════════════════════════════════════════════════════════════
# STRATEGY REGISTRY
# ══════════════════════════════════════════════════════════════

STRATEGIES: Dict[str, Type[ScoringStrategy]] = {
    AllEqualFacesStrategy.name: AllEqualFacesStrategy,
    HighestSumStrategy.name: HighestSumStrategy,
}


def register_strategy(strategy_cls: Type[ScoringStrategy]) -> Type[ScoringStrategy]:
    """Register a strategy class under its ``name``. Usable as a decorator."""
    if not strategy_cls.name:
        raise ValueError(f"{strategy_cls.__name__} must define a non-empty 'name'")
    STRATEGIES[strategy_cls.name] = strategy_cls
    return strategy_cls


def get_strategy(name: str) -> ScoringStrategy:
    """Build a registered strategy by name."""
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(name, sorted(STRATEGIES)) from None
    return strategy_cls()
