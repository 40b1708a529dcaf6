"""Tests for logging setup and terminal color helpers."""

import io
import logging

import pytest

from holidaycal.utils.logging import (
    VERBOSE,
    AutoColoredFormatter,
    get_log_level,
    setup_logging,
)
from holidaycal.utils.terminal import colorize, detect_color_support


class TestGetLogLevel:

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("verbose", VERBOSE),
            ("Info", logging.INFO),
            ("WARNING", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_known_levels(self, name, expected):
        assert get_log_level(name) == expected

    def test_unknown_level_raises(self):
        with pytest.raises(AttributeError):
            get_log_level("CHATTY")


class TestSetupLogging:

    def test_single_handler_on_package_logger(self):
        stream = io.StringIO()
        logger = setup_logging("INFO", enable_colors=False, stream=stream)
        setup_logging("INFO", enable_colors=False, stream=stream)

        assert logger.name == "holidaycal"
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_messages_below_level_are_dropped(self):
        stream = io.StringIO()
        setup_logging("WARNING", enable_colors=False, stream=stream)

        child = logging.getLogger("holidaycal.api.fetcher")
        child.info("hidden")
        child.warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "WARNING - shown" in output

    def test_verbose_method(self):
        stream = io.StringIO()
        setup_logging("VERBOSE", enable_colors=False, stream=stream)

        logging.getLogger("holidaycal.cli").verbose("details %d", 3)

        assert "VERBOSE - details 3" in stream.getvalue()

    def test_third_party_loggers_capped(self):
        setup_logging("DEBUG", enable_colors=False, stream=io.StringIO())
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING


class TestAutoColoredFormatter:

    def test_non_tty_stream_disables_colors(self):
        formatter = AutoColoredFormatter("%(levelname)s %(message)s", stream=io.StringIO())
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        assert formatter.use_colors is False
        assert formatter.format(record) == "ERROR boom"

    def test_colors_applied_when_supported(self):
        formatter = AutoColoredFormatter("%(levelname)s %(message)s", stream=io.StringIO())
        formatter.use_colors = True
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        assert formatter.format(record) == "\033[31mERROR\033[0m boom"


class TestTerminal:

    def test_colorize_red(self):
        assert colorize("01", "red") == "\x1b[31m01\x1b[0m"

    def test_colorize_green(self):
        assert colorize("Today", "green") == "\x1b[32mToday\x1b[0m"

    def test_colorize_unknown_color(self):
        with pytest.raises(KeyError):
            colorize("x", "octarine")

    def test_non_tty_has_no_color_support(self):
        assert detect_color_support(io.StringIO()) is False

    def test_no_color_env(self, monkeypatch):
        class FakeTTY(io.StringIO):
            def isatty(self):
                return True

        monkeypatch.setenv("TERM", "xterm")
        assert detect_color_support(FakeTTY()) is True
        monkeypatch.setenv("NO_COLOR", "1")
        assert detect_color_support(FakeTTY()) is False
