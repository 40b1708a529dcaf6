"""ANSI color helpers for terminal output."""

import os
import sys
from typing import Optional, TextIO

COLOR_CODES = {
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
}

RESET = "\x1b[0m"


def colorize(text: str, color: str) -> str:
    """Wrap ``text`` in the ANSI escape sequence for ``color``.

    Args:
        text: Text to colorize
        color: One of the names in ``COLOR_CODES``

    Raises:
        KeyError: If the color name is unknown
    """
    return f"\x1b[{COLOR_CODES[color]}m{text}{RESET}"


def detect_color_support(stream: Optional[TextIO] = None) -> bool:
    """Return True when ``stream`` (stdout by default) looks like a color terminal."""
    stream = stream if stream is not None else sys.stdout

    if "NO_COLOR" in os.environ:
        return False

    # Check if output is not a TTY
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False

    return os.environ.get("TERM", "").lower() != "dumb"
