# Area: Match
"""
dice_match._match.state_machine — Match State Machine
=====================================================

Tracks the match lifecycle and validates transitions against a
fixed transition table.
"""

import logging

from .enums import MatchEvent, MatchState
from ..errors import MatchInvariantError

logger = logging.getLogger("dice_match.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    MatchState.SETUP: {
        MatchEvent.START: MatchState.ACTIVE,
    },
    MatchState.ACTIVE: {
        MatchEvent.WIN: MatchState.FINISHED,
    },
    MatchState.FINISHED: {},
}


class MatchStateMachine:
    """
    State machine for the match lifecycle.

    Attributes:
        current_state: The current state of the state machine
    """

    def __init__(self):
        """Initialize state machine in SETUP."""
        self.current_state = MatchState.SETUP

    def can_transition(self, event: MatchEvent) -> bool:
        """Check if a transition is valid from current state."""
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: MatchEvent) -> MatchState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            MatchInvariantError: If the transition is not valid. Callers
                check preconditions first, so this signals a bug.
        """
        if not self.can_transition(event):
            raise MatchInvariantError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        previous = self.current_state
        self.current_state = TRANSITIONS[previous][event]
        logger.info(f"Match state: {previous.value} → {self.current_state.value}")
        return self.current_state

    @property
    def is_setup(self) -> bool:
        return self.current_state == MatchState.SETUP

    @property
    def is_finished(self) -> bool:
        return self.current_state == MatchState.FINISHED
