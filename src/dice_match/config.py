# Area: Shared
"""
dice_match.config — Match configuration
=======================================

Settings are merged from, in increasing priority:
    1. A JSON config file
    2. Environment variables (a .env file is loaded first if given)
    3. Explicit overrides (the CLI flags)

and validated as a MatchConfig.
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .scoring import STRATEGIES

logger = logging.getLogger("dice_match.config")

# Environment variable -> config key
ENV_MAPPINGS = {
    "DICE_PLAYERS": "players",
    "DICE_FACES": "faces_per_die",
    "DICE_PER_TURN": "dice_per_turn",
    "DICE_STRATEGY": "strategy",
    "DICE_TARGET": "target_score",
    "DICE_SEED": "seed",
    "DICE_MAX_ROUNDS": "max_rounds",
    "DICE_LOG_FILE": "log_file",
    "DICE_LOG_LEVEL": "log_level",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class MatchConfig(BaseModel):
    """Validated settings for one driven match."""

    model_config = ConfigDict(extra="forbid")

    players: List[str] = Field(min_length=1)
    faces_per_die: int = Field(default=6, ge=1)
    dice_per_turn: int = Field(default=2, ge=1)
    strategy: str = "highest_sum"
    target_score: int = Field(default=3, ge=1)
    seed: Optional[int] = None
    max_rounds: int = Field(default=1000, ge=1)
    log_file: Optional[str] = "dice_match.log"
    log_level: str = "INFO"

    @field_validator("players", mode="before")
    @classmethod
    def _split_players(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            value = [name.strip() if isinstance(name, str) else name for name in value]
        return value

    @field_validator("players")
    @classmethod
    def _names_not_blank(cls, value: List[str]) -> List[str]:
        if any(not name for name in value):
            raise ValueError("player names must not be blank")
        return value

    @field_validator("strategy")
    @classmethod
    def _known_strategy(cls, value: str) -> str:
        if value not in STRATEGIES:
            raise ValueError(
                f"unknown strategy '{value}', expected one of {sorted(STRATEGIES)}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {LOG_LEVELS}")
        return level


def read_env(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Collect config keys from DICE_* environment variables."""
    environ = os.environ if environ is None else environ
    return {
        config_key: environ[env_key]
        for env_key, config_key in ENV_MAPPINGS.items()
        if env_key in environ
    }


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> MatchConfig:
    """
    Load and validate the match configuration.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional .env file to load into the environment
        overrides: Values that win over file and environment (None skipped)

    Raises:
        ConfigError: If the file cannot be read or validation fails
    """
    data: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError([f"config file not found: {config_path}"], source=config_path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError([f"invalid JSON: {e}"], source=config_path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError([f"cannot read config file: {e}"], source=config_path) from e
        if not isinstance(data, dict):
            raise ConfigError(["config file must contain a JSON object"], source=config_path)

    if env_file:
        load_dotenv(env_file)
    data.update(read_env())

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        config = MatchConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(errors, source=config_path) from e

    logger.debug(f"Loaded config: {config.model_dump()}")
    return config
