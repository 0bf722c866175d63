# Area: Match
"""
dice_match.match — Multi-player dice match
==========================================

Players take turns in a fixed order, each throwing the same number of
dice. When every player has rolled once the round is scored by the
match's ScoringStrategy, and the match ends as soon as some player's
cumulative score equals the target exactly.

Usage:
    match = Match(faces_per_die=6, dice_per_turn=2,
                  strategy=HighestSumStrategy(), target_score=3)
    for name in ("Ann", "Bob"):
        match.add_player(Player(name))
    match.start()
    while not match.is_won():
        match.take_turn()
"""

from __future__ import annotations
import logging
import random
from typing import List, Optional, Tuple

from .errors import (
    AlreadyFinishedError,
    AlreadyStartedError,
    MatchInvariantError,
    NoPlayersError,
    NotStartedError,
)
from .player import Player
from .scoring import ScoringStrategy
from .solo_round import SoloRound, never_finished
from .types import RollVector, ScoreboardSnapshot
from ._match.enums import MatchEvent, MatchState
from ._match.round_result import PlayerRoundScore, RoundResult
from ._match.snapshot import build_scoreboard
from ._match.state_machine import MatchStateMachine
from ._match.strategy_executor import execute_strategy

logger = logging.getLogger("dice_match.match")


class Match:
    """
    Turn sequencer for a multi-player dice match.

    Not thread-safe: a single caller drives the match by calling
    take_turn() repeatedly.

    Attributes:
        faces_per_die: Faces of every die in the match
        dice_per_turn: Dice thrown by a player per turn
        strategy: Rule deciding who scores at the end of each round
        target_score: Score a player must reach exactly to win
    """

    def __init__(
        self,
        faces_per_die: int,
        dice_per_turn: int,
        strategy: ScoringStrategy,
        target_score: int,
        rng: Optional[random.Random] = None,
    ):
        for label, value in (
            ("faces_per_die", faces_per_die),
            ("dice_per_turn", dice_per_turn),
            ("target_score", target_score),
        ):
            if value < 1:
                raise ValueError(f"{label} must be at least 1, got {value}")

        self.faces_per_die = faces_per_die
        self.dice_per_turn = dice_per_turn
        self.strategy = strategy
        self.target_score = target_score
        self._rng = rng if rng is not None else random.Random()

        self._players: List[Player] = []
        self._turn = 0
        self._winners: Optional[List[Player]] = None
        self._round_results: List[RoundResult] = []
        self.state_machine = MatchStateMachine()

    # ── Lifecycle ────────────────────────────────────────────

    @property
    def state(self) -> MatchState:
        return self.state_machine.current_state

    def is_started(self) -> bool:
        return not self.state_machine.is_setup

    def is_won(self) -> bool:
        return self._winners is not None

    def winners(self) -> Optional[List[Player]]:
        return list(self._winners) if self._winners is not None else None

    def add_player(self, player: Player) -> int:
        """
        Register a player and give them a fresh solo round.

        Returns:
            The number of players registered so far

        Raises:
            AlreadyStartedError: If start() was already called
        """
        if self.is_started():
            raise AlreadyStartedError()
        if player in self._players:
            raise ValueError(f"Player {player} is already in the match")

        # Round-level finishing never applies; the match decides the winner.
        player._attach_round(SoloRound(
            self.faces_per_die,
            self.dice_per_turn,
            finish_condition=never_finished,
            rng=self._rng,
        ))
        self._players.append(player)
        logger.debug(f"Added player {player} ({len(self._players)} total)")
        return len(self._players)

    def start(self) -> bool:
        """
        Close registration and draw the turn order.

        Returns:
            True if the match was started now, False if it already was
        """
        if self.is_started():
            return False

        self._rng.shuffle(self._players)
        self._turn = 0
        self.state_machine.transition(MatchEvent.START)
        logger.info(
            f"Match started: {len(self._players)} players, "
            f"order {[p.display_name for p in self._players]}"
        )
        return True

    # ── Turn queries ─────────────────────────────────────────

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    def current_turn(self) -> int:
        """1-based position of the player due to roll."""
        return self._turn + 1

    def current_player(self) -> Player:
        if not self._players:
            raise NoPlayersError()
        return self._players[self._turn]

    def player_at(self, turn: int) -> Player:
        """Return the player at a 1-based turn position."""
        if turn < 1 or turn > len(self._players):
            raise IndexError(f"Turn {turn} out of range 1..{len(self._players)}")
        return self._players[turn - 1]

    def round_number(self) -> int:
        """The round in progress, counting from 1.

        Right after a round completes the next round number is reported.
        """
        if not self._players:
            return 1
        completed = self._players[0].solo_round.rounds_played()
        return completed + 1 if self._turn == 0 else completed

    def last_roll(self) -> Optional[RollVector]:
        """Roll thrown by whoever played the most recent turn."""
        if not self._players:
            return None
        previous = (self._turn - 1) % len(self._players)
        return self._players[previous].solo_round.last_roll()

    @property
    def round_results(self) -> List[RoundResult]:
        return list(self._round_results)

    def scoreboard(self) -> ScoreboardSnapshot:
        return build_scoreboard(self)

    # ── Play ─────────────────────────────────────────────────

    def take_turn(self) -> Optional[List[Player]]:
        """
        Let the current player roll, scoring the round if it is complete.

        Returns:
            None while the round is still in progress; otherwise the
            players who earned points this round (possibly empty)

        Raises:
            NotStartedError: If start() has not been called
            NoPlayersError: If the match has no players
            AlreadyFinishedError: If the match already has winners
        """
        if not self.is_started():
            raise NotStartedError()
        if not self._players:
            raise NoPlayersError()
        if self.is_won():
            raise AlreadyFinishedError()

        player = self._players[self._turn]
        try:
            roll = player.solo_round.roll_once()
        except AlreadyFinishedError as e:
            raise MatchInvariantError(
                f"Solo round of {player} finished on its own; match rounds never finish"
            ) from e
        logger.debug(f"Turn {self._turn + 1}: {player} rolled {list(roll)}")

        self._turn = (self._turn + 1) % len(self._players)
        if self._turn != 0:
            return None

        return self._score_round()

    def _score_round(self) -> List[Player]:
        histories = [p.solo_round.full_history() for p in self._players]
        points = execute_strategy(self.strategy, histories)

        result = RoundResult(round_number=len(histories[0]))
        round_winners = []
        for player, history, earned in zip(self._players, histories, points):
            player.award(earned)
            if earned > 0:
                round_winners.append(player)
            result.scores.append(PlayerRoundScore(
                player_id=player.player_id,
                name=player.display_name,
                roll=history[-1],
                points=earned,
                total=player.score,
            ))
        result.round_winner_ids = [p.player_id for p in round_winners]

        match_winners = [p for p in self._players if p.score == self.target_score]
        if match_winners:
            self._winners = match_winners
            result.match_winner_ids = [p.player_id for p in match_winners]
            self.state_machine.transition(MatchEvent.WIN)
            logger.info(
                f"Match won in round {result.round_number} by "
                f"{[p.display_name for p in match_winners]}"
            )

        self._round_results.append(result)
        logger.info(
            f"Round {result.round_number} scored: "
            f"winners {[p.display_name for p in round_winners]}, "
            f"scores {dict((p.display_name, p.score) for p in self._players)}"
        )
        return round_winners
