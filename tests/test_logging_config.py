"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from wal_show.logging_config import get_logger, setup_logging


class TestSetupLogging:
    def test_levels_follow_verbosity(self):
        assert setup_logging("verbose").level == logging.DEBUG
        assert setup_logging("normal").level == logging.WARNING
        assert setup_logging("quiet").level == logging.ERROR

    def test_unknown_verbosity_is_normal(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_rich_handler_on_stderr(self):
        setup_logging("normal")
        handlers = logging.getLogger().handlers
        assert any(isinstance(h, RichHandler) for h in handlers)
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)

    def test_log_file_gets_records(self, tmp_path):
        log_file = tmp_path / "wal-show.log"
        setup_logging("verbose", log_file=str(log_file))
        get_logger("formatters").debug("rendered %d timelines", 2)
        text = log_file.read_text()
        assert "wal_show.formatters - DEBUG - rendered 2 timelines" in text

    def test_log_file_respects_level(self, tmp_path):
        log_file = tmp_path / "wal-show.log"
        setup_logging("normal", log_file=str(log_file))
        get_logger().debug("hidden")
        get_logger().warning("shown")
        text = log_file.read_text()
        assert "hidden" not in text
        assert "shown" in text


class TestGetLogger:
    def test_root_name(self):
        assert get_logger().name == "wal_show"

    def test_prefixes_short_names(self):
        assert get_logger("loader").name == "wal_show.loader"
        assert get_logger("wal_show.cli").name == "wal_show.cli"
