# Area: Match
"""
dice_match._match.snapshot — Scoreboard snapshot builder
========================================================

Builds a serializable view of a match for display and logging.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..types import PlayerSnapshot, ScoreboardSnapshot

if TYPE_CHECKING:
    from ..match import Match
    from ..player import Player


def build_scoreboard(match: "Match") -> ScoreboardSnapshot:
    """Build serializable scoreboard snapshot."""
    winners = match.winners()
    return {
        "state": match.state.value,
        "round_number": match.round_number(),
        "target_score": match.target_score,
        "players": [_player_snapshot(p) for p in match.players],
        "winners": [w.display_name for w in winners] if winners is not None else None,
    }


def _player_snapshot(player: "Player") -> PlayerSnapshot:
    solo_round = player.solo_round
    last_roll = solo_round.last_roll() if solo_round else None
    return {
        "name": player.display_name,
        "player_id": player.player_id,
        "score": player.score,
        "rounds_played": solo_round.rounds_played() if solo_round else 0,
        "last_roll": list(last_roll) if last_roll is not None else None,
    }
