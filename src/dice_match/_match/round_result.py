# Area: Match
"""
dice_match._match.round_result — Round Result Dataclasses
=========================================================

Defines the record the match keeps for every completed round.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..types import RollVector


@dataclass
class PlayerRoundScore:
    """
    One player's outcome for a single round.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name of the player
        roll: The roll vector thrown this round
        points: Points earned this round
        total: Cumulative score after this round
    """

    player_id: str
    name: str
    roll: RollVector
    points: int
    total: int


@dataclass
class RoundResult:
    """
    Outcome of one full cycle through all players.

    Attributes:
        round_number: 1-based round number
        scores: Per-player outcomes, in turn order
        round_winner_ids: Players who earned points this round
        match_winner_ids: Players who hit the target, or None if undecided
    """

    round_number: int
    scores: List[PlayerRoundScore] = field(default_factory=list)
    round_winner_ids: List[str] = field(default_factory=list)
    match_winner_ids: Optional[List[str]] = None

    @property
    def ends_match(self) -> bool:
        return self.match_winner_ids is not None
