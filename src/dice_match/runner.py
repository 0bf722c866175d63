"""
dice_match.runner — Console match driver
========================================

The MatchRunner builds a Match from a MatchConfig, registers the
players, starts it, and calls take_turn() until somebody wins,
printing every roll and every round's winners.

Usage
-----
    from dice_match import MatchConfig, MatchRunner

    config = MatchConfig(players=["Juan", "Maria", "Pedro"],
                         strategy="highest_sum", target_score=3)
    match = MatchRunner(config).run()
"""

from __future__ import annotations
import logging
import random
import sys
from typing import List, Optional, TextIO

from .config import MatchConfig
from .errors import MatchStalledError
from .match import Match
from .player import Player
from .scoring import ScoringStrategy, get_strategy
from ._shared.logging_config import setup_logging

logger = logging.getLogger("dice_match.runner")


class MatchRunner:
    """Drives one match to completion and reports progress to ``out``."""

    def __init__(
        self,
        config: MatchConfig,
        strategy: Optional[ScoringStrategy] = None,
        out: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.strategy = strategy or get_strategy(config.strategy)
        self.out = out or sys.stdout
        self.rng = rng or random.Random(config.seed)

        setup_logging(
            log_file_path=config.log_file,
            level=getattr(logging, config.log_level),
        )

    def build_match(self) -> Match:
        match = Match(
            faces_per_die=self.config.faces_per_die,
            dice_per_turn=self.config.dice_per_turn,
            strategy=self.strategy,
            target_score=self.config.target_score,
            rng=self.rng,
        )
        for name in self.config.players:
            match.add_player(Player(name))
        return match

    def run(self) -> Match:
        """
        Play a full match.

        Returns:
            The finished match

        Raises:
            MatchStalledError: If max_rounds rounds pass without a winner
        """
        match = self.build_match()
        match.start()
        logger.info(
            f"Running match: strategy={self.strategy.name}, "
            f"target={self.config.target_score}, seed={self.config.seed}"
        )

        while not match.is_won():
            turn = match.current_turn()
            if turn == 1:
                if len(match.round_results) >= self.config.max_rounds:
                    raise MatchStalledError(
                        rounds=len(match.round_results),
                        target_score=match.target_score,
                        scores={p.display_name: p.score for p in match.players},
                    )
                self._print(f"Round: {match.round_number()}.")

            player = match.current_player()
            round_winners = match.take_turn()
            self._print(f"  {player.display_name:<30}: {list(match.last_roll())}.")
            if round_winners is not None:
                self._print(f"Round winners: {_names(round_winners)}.")

        self._print(f"Winners: {_names(match.winners())}")
        return match

    def _print(self, line: str) -> None:
        print(line, file=self.out)


def _names(players: List[Player]) -> str:
    return "[" + ", ".join(p.display_name for p in players) + "]"
