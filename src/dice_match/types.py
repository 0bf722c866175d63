"""
dice_match.types — Shared type aliases and snapshot schemas
===========================================================

Roll data flows through the package as plain tuples of ints, and the
scoreboard snapshot is a plain dict so it can be dumped as JSON.

    from dice_match import RollVector, ScoreboardSnapshot

Use __annotations__ to inspect fields:

    >>> PlayerSnapshot.__annotations__
    {'name': str, 'player_id': str, 'score': int, ...}
"""

from typing import List, Optional, Sequence, Tuple, TypedDict


# ============================================
# Roll data
# ============================================

# One roll: the face values of every die thrown in a single turn.
RollVector = Tuple[int, ...]

# A player's rolls in round order (index 0 is round 1).
History = Tuple[RollVector, ...]

# Input to a scoring strategy: one history per player, in turn order.
Histories = Sequence[History]


# ============================================
# Scoreboard snapshot
# ============================================

class PlayerSnapshot(TypedDict):
    """One player's standing in a scoreboard snapshot."""
    name: str                          # e.g. "Alice"
    player_id: str                     # uuid4 string
    score: int                         # cumulative points
    rounds_played: int
    last_roll: Optional[List[int]]     # None before the first roll


class ScoreboardSnapshot(TypedDict):
    """Serializable view of a match, as returned by Match.scoreboard().

    Fields
    ------
    state : str
        "setup", "active" or "finished".
    round_number : int
        The round in progress (see Match.round_number()).
    target_score : int
        Score a player must hit exactly to win.
    players : List[PlayerSnapshot]
        Players in turn order.
    winners : Optional[List[str]]
        Display names of the match winners, None while undecided.
    """
    state: str
    round_number: int
    target_score: int
    players: List[PlayerSnapshot]
    winners: Optional[List[str]]
