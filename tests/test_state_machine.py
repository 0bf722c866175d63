# Area: Match Tests
"""Tests for the match state machine."""

import pytest
from dice_match._match.enums import MatchEvent, MatchState
from dice_match._match.state_machine import TRANSITIONS, MatchStateMachine
from dice_match.errors import MatchInvariantError


class TestMatchStateMachine:
    """Tests for MatchStateMachine transitions."""

    def test_initial_state_is_setup(self):
        sm = MatchStateMachine()
        assert sm.current_state == MatchState.SETUP
        assert sm.is_setup is True
        assert sm.is_finished is False

    def test_start_moves_to_active(self):
        sm = MatchStateMachine()
        assert sm.transition(MatchEvent.START) == MatchState.ACTIVE

    def test_win_moves_to_finished(self):
        sm = MatchStateMachine()
        sm.transition(MatchEvent.START)
        assert sm.transition(MatchEvent.WIN) == MatchState.FINISHED
        assert sm.is_finished is True

    def test_win_from_setup_invalid(self):
        sm = MatchStateMachine()
        assert sm.can_transition(MatchEvent.WIN) is False
        with pytest.raises(MatchInvariantError):
            sm.transition(MatchEvent.WIN)

    def test_finished_is_terminal(self):
        sm = MatchStateMachine()
        sm.transition(MatchEvent.START)
        sm.transition(MatchEvent.WIN)
        for event in MatchEvent:
            assert sm.can_transition(event) is False
        assert TRANSITIONS[MatchState.FINISHED] == {}

    def test_start_twice_invalid(self):
        sm = MatchStateMachine()
        sm.transition(MatchEvent.START)
        with pytest.raises(MatchInvariantError):
            sm.transition(MatchEvent.START)
        assert sm.current_state == MatchState.ACTIVE
