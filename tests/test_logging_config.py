# Area: Shared Tests
"""Tests for logging setup and error reporting."""

import json
import logging

import pytest
from dice_match._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_error,
    setup_logging,
)
from dice_match.errors import ConfigError, NotStartedError


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("dice_match")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_terminal_and_file_handlers(self, tmp_path):
        setup_logging(str(tmp_path / "logs" / "match.log"), level=logging.DEBUG)
        logger = logging.getLogger("dice_match")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 2
        assert (tmp_path / "logs" / "match.log").exists()

    def test_file_logging_disabled(self):
        setup_logging(None)
        assert len(logging.getLogger("dice_match").handlers) == 1

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging(str(tmp_path / "a.log"))
        setup_logging(str(tmp_path / "b.log"))
        assert len(logging.getLogger("dice_match").handlers) == 2

    def test_child_logger_writes_json(self, tmp_path):
        path = tmp_path / "match.log"
        setup_logging(str(path))
        logging.getLogger("dice_match.match").info("Round 1 scored")
        for handler in logging.getLogger("dice_match").handlers:
            handler.flush()

        record = json.loads(path.read_text().splitlines()[-1])
        assert record["level"] == "INFO"
        assert record["logger"] == "dice_match.match"
        assert record["message"] == "Round 1 scored"


class TestFormatters:
    """Tests for the terminal and JSON formatters."""

    def make_record(self):
        return logging.LogRecord("dice_match", logging.WARNING, __file__, 1, "careful", None, None)

    def test_terminal_formatter_colours_level(self):
        formatted = TerminalFormatter(fmt="%(levelname)s %(message)s").format(self.make_record())
        assert "\033[33mWARNING\033[0m careful" == formatted

    def test_terminal_formatter_leaves_record_untouched(self):
        record = self.make_record()
        TerminalFormatter(fmt="%(levelname)s").format(record)
        assert record.levelname == "WARNING"

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(self.make_record()))
        assert data["level"] == "WARNING"
        assert data["message"] == "careful"
        assert "timestamp" in data


class TestLogError:
    """Tests for log_error()."""

    def test_prints_structured_block(self, capsys):
        setup_logging(None)
        log_error(ConfigError(["target_score: too small"], source="match.json"))
        err = capsys.readouterr().err
        assert "CONFIG_VALIDATION_FAILURE" in err
        assert "target_score: too small" in err

    def test_plain_error_logged_only(self, capsys):
        setup_logging(None)
        log_error(NotStartedError())
        err = capsys.readouterr().err
        assert "MATCH ERROR" not in err
        assert "NotStartedError" in err
