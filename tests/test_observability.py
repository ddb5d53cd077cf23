"""
Tests for observability — logging setup.
"""

import logging
from pathlib import Path

from ghfetch.core.observability.logging_config import _parse_level, _PrefixFormatter, setup_logging


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("WARNING") == logging.WARNING

    def test_fallback_to_info(self):
        assert _parse_level(None) == logging.INFO
        assert _parse_level("chatty") == logging.INFO


class TestSetupLogging:
    def test_single_console_handler(self, restore_logging):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(restore_logging.handlers) == 1
        assert restore_logging.level == logging.INFO

    def test_info_uses_prefix_format(self, restore_logging):
        setup_logging("INFO")
        assert isinstance(restore_logging.handlers[0].formatter, _PrefixFormatter)

    def test_verbose_and_debug_formats(self, restore_logging):
        setup_logging("INFO", verbose=True)
        assert "%(name)s" in restore_logging.handlers[0].formatter._fmt
        setup_logging("DEBUG")
        assert "%(lineno)d" in restore_logging.handlers[0].formatter._fmt

    def test_log_file_lowers_root_level(self, restore_logging, tmp_path: Path):
        log_file = tmp_path / "ghfetch.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        assert restore_logging.level == logging.DEBUG

        logging.getLogger("ghfetch.test").debug("file only")
        for handler in restore_logging.handlers:
            handler.flush()
        assert "file only" in log_file.read_text()

        file_handler = restore_logging.handlers[1]
        file_handler.close()


class TestPrefixFormatter:
    def test_level_prefixes(self):
        formatter = _PrefixFormatter("%(levelprefix)s%(message)s")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
        assert formatter.format(record) == "⚠️  careful"
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "broken", None, None)
        assert formatter.format(record) == "❌ broken"
