"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path

from restcall.logging_config import (
    get_logger,
    log_http_exchange,
    setup_logging,
)


def _entries(log_file: Path) -> list:
    lines = [line for line in log_file.read_text().strip().split("\n") if line]
    return [json.loads(line) for line in lines]


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()

        logger = get_logger("test")
        assert hasattr(logger, 'info') and hasattr(logger, 'warning') and hasattr(logger, 'error')

    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG

    def test_setup_logging_json_format(self, temp_dir: Path):
        """Test setup_logging with JSON format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        log_entry = _entries(log_file)[0]
        assert log_entry["event"] == "test_message"
        assert log_entry["key"] == "value"
        assert log_entry["logger"] == "restcall.test"
        assert "timestamp" in log_entry
        assert "level" in log_entry

    def test_setup_logging_human_format(self, temp_dir: Path):
        """Test setup_logging with human-readable format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=False)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        log_content = log_file.read_text()
        assert "test_message" in log_content
        assert "key" in log_content


class TestHttpExchangeLogging:
    def test_success_logged_at_debug(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file, json_format=True)

        log_http_exchange(
            get_logger("test"),
            method="GET",
            url="https://api.example.com/items",
            status_code=200,
            duration_ms=12.5,
        )

        entry = _entries(log_file)[0]
        assert entry["event"] == "http_exchange"
        assert entry["level"] == "debug"
        assert entry["method"] == "GET"
        assert entry["status_code"] == 200
        assert entry["duration_ms"] == 12.5

    def test_error_status_logged_at_warning(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        log_http_exchange(
            get_logger("test"),
            method="DELETE",
            url="https://api.example.com/items/1",
            status_code=404,
            duration_ms=3.0,
            attempt="first",
        )

        entry = _entries(log_file)[0]
        assert entry["level"] == "warning"
        assert entry["attempt"] == "first"
