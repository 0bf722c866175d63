# Area: Match
"""
Match internals - lifecycle and round bookkeeping for Match.

This package handles:
- Match state machine (setup, active, finished)
- Checked execution of scoring strategies
- Per-round result records
- Scoreboard snapshots
"""

from .enums import MatchState, MatchEvent
from .state_machine import MatchStateMachine
from .round_result import RoundResult, PlayerRoundScore
from .strategy_executor import execute_strategy, validate_points

__all__ = [
    "MatchState",
    "MatchEvent",
    "MatchStateMachine",
    "RoundResult",
    "PlayerRoundScore",
    "execute_strategy",
    "validate_points",
]
