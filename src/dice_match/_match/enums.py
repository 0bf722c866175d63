# Area: Match
"""
dice_match._match.enums — Match State Machine Enums
===================================================

Defines the states and events of the match lifecycle.
"""

from enum import Enum


class MatchState(Enum):
    """
    States of the match state machine.

    State transitions:
    SETUP -> ACTIVE (on START)
    ACTIVE -> FINISHED (on WIN)
    FINISHED is terminal.
    """
    SETUP = "setup"
    ACTIVE = "active"
    FINISHED = "finished"


class MatchEvent(Enum):
    """
    Events that trigger state transitions.

    - START: Match.start() closed registration and shuffled the order
    - WIN: a completed round left at least one player on the target score
    """
    START = "START"
    WIN = "WIN"
