# Area: Match
"""Player identity and cumulative score."""

from __future__ import annotations
import uuid
from typing import Optional

from .solo_round import SoloRound


class Player:
    """
    A match participant.

    The solo round is attached by Match.add_player(); a player never
    rolls on its own.
    """

    def __init__(self, display_name: str):
        self.display_name = display_name
        self.player_id = str(uuid.uuid4())
        self.score = 0
        self._solo_round: Optional[SoloRound] = None

    @property
    def solo_round(self) -> Optional[SoloRound]:
        return self._solo_round

    def _attach_round(self, solo_round: SoloRound) -> None:
        self._solo_round = solo_round

    def award(self, points: int) -> int:
        """Add round points and return the new total."""
        if points < 0:
            raise ValueError(f"Points cannot be negative, got {points}")
        self.score += points
        return self.score

    def __eq__(self, other) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.player_id == other.player_id

    def __hash__(self) -> int:
        return hash(self.player_id)

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"Player({self.display_name!r}, score={self.score})"
