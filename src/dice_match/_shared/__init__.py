# Area: Shared
"""
Shared utilities used by the match runner and CLI.

This package contains:
- Logging configuration
"""

from .logging_config import setup_logging, log_error

__all__ = ["setup_logging", "log_error"]
