# Area: Dice
"""
dice_match.solo_round — One player's roll history
=================================================

A SoloRound throws a fixed number of dice per turn and keeps every
result in an append-only history. An optional finish condition is
checked over the whole history after each roll; once it holds, the
round refuses further rolls until reset().
"""

from __future__ import annotations
import logging
import random
from typing import Callable, List, Optional

from .die import Die
from .errors import AlreadyFinishedError
from .types import History, RollVector

logger = logging.getLogger("dice_match.solo_round")

FinishCondition = Callable[[History], bool]


def never_finished(history: History) -> bool:
    """Finish condition for rounds whose outcome is decided elsewhere."""
    return False


class SoloRound:
    """
    Roll history of a single player.

    Attributes:
        dice_per_turn: Number of dice thrown on every roll
        faces_per_die: Number of faces of each die
    """

    def __init__(
        self,
        faces_per_die: int,
        dice_per_turn: int,
        finish_condition: Optional[FinishCondition] = None,
        rng: Optional[random.Random] = None,
    ):
        if dice_per_turn < 1:
            raise ValueError(f"At least one die per turn is required, got {dice_per_turn}")
        self.faces_per_die = faces_per_die
        self.dice_per_turn = dice_per_turn
        self._die = Die(faces_per_die, rng=rng)
        self._finish_condition = finish_condition or never_finished
        self._history: List[RollVector] = []
        self._finished = False

    def roll_once(self) -> RollVector:
        """
        Throw all dice once and record the result.

        Returns:
            The new roll vector

        Raises:
            AlreadyFinishedError: If the finish condition already held
        """
        if self._finished:
            raise AlreadyFinishedError("Cannot roll. This solo round is already finished")

        roll = tuple(self._die.roll() for _ in range(self.dice_per_turn))
        self._history.append(roll)
        self._finished = bool(self._finish_condition(self.full_history()))
        if self._finished:
            logger.debug(f"Solo round finished after {len(self._history)} rolls")
        return roll

    def rounds_played(self) -> int:
        return len(self._history)

    def last_roll(self) -> Optional[RollVector]:
        return self._history[-1] if self._history else None

    def roll_for(self, round_number: int) -> Optional[RollVector]:
        """Return the roll of a 1-based round, or None if it was not played."""
        if round_number < 1 or round_number > len(self._history):
            return None
        return self._history[round_number - 1]

    def full_history(self) -> History:
        return tuple(self._history)

    def is_finished(self) -> bool:
        return self._finished

    def reset(self) -> None:
        """Return to the initial state, as if no roll had been made."""
        self._die.reset()
        self._history.clear()
        self._finished = False

    def __repr__(self) -> str:
        return (
            f"SoloRound(faces_per_die={self.faces_per_die}, "
            f"dice_per_turn={self.dice_per_turn}, rounds={len(self._history)})"
        )
