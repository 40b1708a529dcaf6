"""Logging configuration and setup utilities."""

import logging
import os
import sys
from typing import Any, Optional, TextIO

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

LOG_LEVELS = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Third-party loggers that are noisy at DEBUG/INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Add verbose() method to Logger class for detailed diagnostic logging.

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Rendering %d months", 12)
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


# Add verbose method to all Logger instances
logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name (str): Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        int: Numeric log level value for use with logging methods

    Raises:
        AttributeError: If level name is not recognized or invalid

    Example:
        >>> get_log_level("VERBOSE")
        15
        >>> get_log_level("debug")
        10
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, level_name)
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    COLORS = {
        "ERROR": "\033[31m",
        "INFO": "\033[34m",
        "VERBOSE": "\033[32m",
        "WARNING": "\033[33m",
        "DEBUG": "\033[35m",
        "CRITICAL": "\033[31m\033[1m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        *args: Any,
        enable_colors: bool = True,
        stream: Optional[TextIO] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.use_colors = enable_colors and self._detect_color_support(stream or sys.stderr)

    def _detect_color_support(self, stream: TextIO) -> bool:
        """Auto-detect terminal color capabilities."""
        if not hasattr(stream, "isatty") or not stream.isatty():
            return False

        term = os.environ.get("TERM", "").lower()
        if term == "dumb":
            return False

        colorterm = os.environ.get("COLORTERM", "").lower()
        return bool(colorterm or "color" in term or "xterm" in term)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if supported."""
        formatted = super().format(record)

        if not self.use_colors:
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            colored_level = f"{self.COLORS[level_name]}{level_name}{self.RESET}"
            formatted = formatted.replace(level_name, colored_level, 1)

        return formatted


def setup_logging(
    level: str = "WARNING",
    enable_colors: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Set up console logging for the ``holidaycal`` logger hierarchy.

    Diagnostics go to stderr so they never interleave with the holiday
    listing on stdout.

    Args:
        level: Log level name, see ``LOG_LEVELS``
        enable_colors: Allow colored level names when the stream is a TTY
        stream: Output stream (defaults to stderr)

    Returns:
        The configured ``holidaycal`` logger
    """
    logger = logging.getLogger("holidaycal")
    logger.setLevel(get_log_level(level))
    logger.propagate = False

    # Clear existing handlers
    logger.handlers.clear()

    target = stream if stream is not None else sys.stderr
    handler = logging.StreamHandler(target)
    handler.setLevel(get_log_level(level))
    handler.setFormatter(
        AutoColoredFormatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
            enable_colors=enable_colors,
            stream=target,
        )
    )
    logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger
