"""
Tests for logging configuration module.
"""

import logging

import pytest

from elastic_tabs.common import vlog
from elastic_tabs.logging_config import (
    LOGGER_NAME,
    ColoredFormatter,
    get_logger,
    setup_logging,
)


def _record(level=logging.INFO, msg="Test message"):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestSetupLogging:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self):
        logger = setup_logging()
        assert logger.name == "elastic_tabs"
        assert logger.level == logging.INFO

    def test_setup_logging_verbose(self):
        logger = setup_logging(verbose=True)
        assert logger.level == logging.DEBUG

    def test_console_handler_uses_stderr(self, capsys):
        logger = setup_logging(level="INFO")
        logger.info("to stderr")
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_setup_logging_quiet(self):
        logger = setup_logging(quiet=True)
        assert logger.level == logging.WARNING
        console_handlers = [
            h for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ]
        assert console_handlers == []

    def test_setup_logging_with_file(self, tmp_path):
        log_file = tmp_path / "subdir" / "test.log"
        logger = setup_logging(log_file=str(log_file), quiet=True)
        logger.warning("Test message")
        for handler in logger.handlers:
            handler.flush()
        assert "Test message" in log_file.read_text()

    def test_setup_logging_custom_level(self):
        logger = setup_logging(level="warning")
        assert logger.level == logging.WARNING


class TestGetLogger:
    """Test logger retrieval."""

    def test_get_logger_package(self):
        assert get_logger().name == LOGGER_NAME
        assert get_logger() is get_logger()

    def test_get_logger_child(self):
        assert get_logger("writer").name == "elastic_tabs.writer"
        assert get_logger("elastic_tabs.writer") is get_logger("writer")


class TestColoredFormatter:
    """Test colored log formatter."""

    def test_with_colors(self):
        formatter = ColoredFormatter("%(levelname_colored)s %(message)s", use_colors=True)
        formatted = formatter.format(_record())
        assert "Test message" in formatted
        assert "\033[" in formatted

    def test_without_colors(self):
        formatter = ColoredFormatter("%(levelname_colored)s %(message)s", use_colors=False)
        formatted = formatter.format(_record())
        assert formatted == "INFO Test message"

    @pytest.mark.parametrize("level", [
        logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL,
    ])
    def test_all_levels(self, level):
        formatter = ColoredFormatter("%(levelname_colored)s", use_colors=True)
        assert logging.getLevelName(level) in formatter.format(_record(level))


class TestVlog:
    """Test verbose logging helper."""

    def test_vlog_verbose(self, caplog):
        setup_logging(level="INFO", propagate=True)
        with caplog.at_level(logging.INFO, logger="elastic_tabs"):
            vlog("Test vlog message", verbose=True)
        assert "Test vlog message" in caplog.text

    def test_vlog_silent_by_default(self, caplog, monkeypatch):
        monkeypatch.delenv("ELASTIC_TABS_DEBUG", raising=False)
        setup_logging(level="INFO", propagate=True)
        with caplog.at_level(logging.INFO, logger="elastic_tabs"):
            vlog("Should not appear", verbose=False)
        assert "Should not appear" not in caplog.text

    def test_vlog_env(self, caplog, monkeypatch):
        monkeypatch.setenv("ELASTIC_TABS_DEBUG", "1")
        setup_logging(level="INFO", propagate=True)
        with caplog.at_level(logging.INFO, logger="elastic_tabs"):
            vlog("From env", verbose=False)
        assert "From env" in caplog.text
