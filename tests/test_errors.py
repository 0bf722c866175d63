# Area: Shared Tests
"""Tests for the exception hierarchy."""

import pytest
from dice_match.errors import (
    AlreadyFinishedError,
    AlreadyStartedError,
    ConfigError,
    DiceMatchError,
    MatchStalledError,
    MatchStateError,
    NoPlayersError,
    NotStartedError,
    UnknownStrategyError,
)


class TestErrorHierarchy:
    """Tests for error classes."""

    @pytest.mark.parametrize("error_cls", [
        AlreadyStartedError, NotStartedError, NoPlayersError, AlreadyFinishedError,
    ])
    def test_state_errors(self, error_cls):
        error = error_cls()
        assert isinstance(error, MatchStateError)
        assert isinstance(error, DiceMatchError)
        assert str(error)

    def test_custom_message(self):
        assert str(AlreadyFinishedError("solo round done")) == "solo round done"

    def test_unknown_strategy_message(self):
        error = UnknownStrategyError("x", ["all_equal", "highest_sum"])
        assert "all_equal, highest_sum" in str(error)

    def test_stalled_keeps_context(self):
        error = MatchStalledError(rounds=5, target_score=3, scores={"Ann": 4})
        assert error.rounds == 5
        assert "No winner after 5 rounds" in str(error)

    def test_config_error_block(self):
        block = ConfigError(["players: required"], source="m.json").format_error_log()
        assert "CONFIG_VALIDATION_FAILURE" in block
        assert "m.json" in block
        assert "• players: required" in block
