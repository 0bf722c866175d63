# Area: Shared
"""
dice_match.cli — Command-line interface
=======================================

Provides CLI entry point for playing a match in the console.

Usage:
    python -m dice_match --players Juan,Maria,Pedro
    python -m dice_match --config match.json --seed 7
    DICE_STRATEGY=all_equal python -m dice_match --players Ann,Bob

Settings come from the config file, then DICE_* environment variables
(a .env file in the working directory is loaded), then CLI flags.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import load_config
from .errors import DiceMatchError
from .runner import MatchRunner
from .scoring import STRATEGIES
from ._shared.logging_config import log_error, setup_logging

logger = logging.getLogger("dice_match.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dice-match",
        description="Play a turn-based multi-player dice match",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m dice_match --players Juan,Maria,Pedro
  python -m dice_match --players Ann,Bob --dice 1 --strategy all_equal --target 2
  python -m dice_match --config match.json --seed 42
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Path to .env file with DICE_* variables (default: .env)",
    )
    parser.add_argument("--players", type=str, help="Comma-separated player names")
    parser.add_argument("--faces", type=int, help="Faces per die")
    parser.add_argument("--dice", type=int, help="Dice thrown per turn")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=sorted(STRATEGIES),
        help="Round scoring strategy",
    )
    parser.add_argument("--target", type=int, help="Exact score needed to win")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible match")
    parser.add_argument("--max-rounds", type=int, help="Give up after this many rounds")
    parser.add_argument("--log-file", type=str, help="Path to the JSON log file")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every turn (DEBUG level)",
    )

    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Map CLI flags onto config keys."""
    return {
        "players": args.players,
        "faces_per_die": args.faces,
        "dice_per_turn": args.dice,
        "strategy": args.strategy,
        "target_score": args.target,
        "seed": args.seed,
        "max_rounds": args.max_rounds,
        "log_file": args.log_file,
        "log_level": "DEBUG" if args.verbose else None,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(
            config_path=args.config,
            env_file=args.env_file,
            overrides=build_overrides(args),
        )
    except DiceMatchError as e:
        setup_logging(log_file_path=None)
        log_error(e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        MatchRunner(config).run()
    except DiceMatchError as e:
        log_error(e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
