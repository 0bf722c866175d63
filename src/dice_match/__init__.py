"""
dice_match — Turn-based multi-player dice match
===============================================

Players take turns throwing a fixed number of dice. At the end of every
round a pluggable scoring strategy decides who earns a point, and the
match ends when a player's score equals the target exactly.

Quick Start:
    from dice_match import MatchConfig, MatchRunner
    MatchRunner(MatchConfig(players=["Juan", "Maria", "Pedro"])).run()

Driving a match yourself:
    from dice_match import Match, Player, AllEqualFacesStrategy
    match = Match(faces_per_die=6, dice_per_turn=1,
                  strategy=AllEqualFacesStrategy(), target_score=2)
    match.add_player(Player("Ann"))
    match.add_player(Player("Bob"))
    match.start()
    while not match.is_won():
        match.take_turn()

Custom scoring:
    from dice_match import ScoringStrategy, register_strategy

    @register_strategy
    class MyRule(ScoringStrategy):
        name = "my_rule"
        def evaluate(self, histories): ...
"""

from .die import Die
from .solo_round import SoloRound
from .player import Player
from .match import Match
from .scoring import (
    ScoringStrategy,
    AllEqualFacesStrategy,
    HighestSumStrategy,
    STRATEGIES,
    get_strategy,
    register_strategy,
)
from .config import MatchConfig, load_config
from .runner import MatchRunner
from ._match.enums import MatchState
from ._match.round_result import RoundResult, PlayerRoundScore
from .errors import (
    DiceMatchError,
    MatchStateError,
    AlreadyStartedError,
    NotStartedError,
    NoPlayersError,
    AlreadyFinishedError,
    MatchInvariantError,
    MatchStalledError,
    UnknownStrategyError,
    InvalidScoringResultError,
    ConfigError,
)
from .types import RollVector, History, PlayerSnapshot, ScoreboardSnapshot

__all__ = [
    # Core
    "Die",
    "SoloRound",
    "Player",
    "Match",
    "MatchState",
    "RoundResult",
    "PlayerRoundScore",
    # Scoring
    "ScoringStrategy",
    "AllEqualFacesStrategy",
    "HighestSumStrategy",
    "STRATEGIES",
    "get_strategy",
    "register_strategy",
    # Driver
    "MatchConfig",
    "load_config",
    "MatchRunner",
    # Errors
    "DiceMatchError",
    "MatchStateError",
    "AlreadyStartedError",
    "NotStartedError",
    "NoPlayersError",
    "AlreadyFinishedError",
    "MatchInvariantError",
    "MatchStalledError",
    "UnknownStrategyError",
    "InvalidScoringResultError",
    "ConfigError",
    # Types
    "RollVector",
    "History",
    "PlayerSnapshot",
    "ScoreboardSnapshot",
]
__version__ = "1.0.0"
