# Area: Shared
"""
dice_match.errors — Custom exception classes
============================================

Defines the exception hierarchy for match errors.
State errors are raised by the operation that detected the violated
precondition. Strategy errors store full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .error_formatter import format_error_block


class DiceMatchError(Exception):
    """Base exception for all dice_match package errors."""
    pass


# ── Lifecycle errors ─────────────────────────────────────────

class MatchStateError(DiceMatchError):
    """Raised when an operation is not allowed in the current match state."""
    pass


class AlreadyStartedError(MatchStateError):
    """Raised when adding a player after the match has started."""

    def __init__(self, message: str = "Cannot add players. The match has already started"):
        super().__init__(message)


class NotStartedError(MatchStateError):
    """Raised when taking a turn before start() was called."""

    def __init__(self, message: str = "The match must be started explicitly with start()"):
        super().__init__(message)


class NoPlayersError(MatchStateError):
    """Raised when taking a turn in a match without players."""

    def __init__(self, message: str = "There are no players in the match"):
        super().__init__(message)


class AlreadyFinishedError(MatchStateError):
    """Raised when playing on after the match (or a solo round) has finished."""

    def __init__(self, message: str = "Cannot play any more. The match is already finished"):
        super().__init__(message)


class MatchInvariantError(DiceMatchError):
    """Raised when internal match bookkeeping reaches an impossible state."""
    pass


class MatchStalledError(DiceMatchError):
    """Raised when a driven match exceeds its round limit without a winner."""

    def __init__(self, rounds: int, target_score: int, scores: Dict[str, int]):
        self.rounds = rounds
        self.target_score = target_score
        self.scores = scores
        super().__init__(
            f"No winner after {rounds} rounds (target {target_score}, scores {scores})"
        )


# ── Strategy and configuration errors ────────────────────────

class UnknownStrategyError(DiceMatchError):
    """Raised when a scoring strategy name is not registered."""

    def __init__(self, name: str, available: List[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown scoring strategy '{name}'. Available: {', '.join(available)}"
        )


class InvalidScoringResultError(DiceMatchError):
    """Raised when a scoring strategy returns an unusable point vector."""

    def __init__(
        self,
        strategy_name: str,
        input_payload: Dict[str, Any],
        output_payload: Any,
        validation_errors: List[str],
    ):
        self.strategy_name = strategy_name
        self.input_payload = input_payload
        self.output_payload = output_payload
        self.validation_errors = validation_errors
        super().__init__(
            f"Strategy '{strategy_name}' returned an invalid result: {validation_errors}"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_SCORING_RESULT",
            source_name=self.strategy_name,
            input_payload=self.input_payload,
            output_payload={"raw_output": repr(self.output_payload)},
            validation_errors=self.validation_errors,
        )


class ConfigError(DiceMatchError):
    """Raised when the match configuration fails validation."""

    def __init__(self, validation_errors: List[str], source: Optional[str] = None):
        self.validation_errors = validation_errors
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"Invalid match configuration{where}: {validation_errors}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="CONFIG_VALIDATION_FAILURE",
            source_name=self.source or "config",
            input_payload={},
            output_payload=None,
            validation_errors=self.validation_errors,
        )
