"""Utility functions for holidaycal."""

from .logging import VERBOSE, get_log_level, setup_logging
from .terminal import colorize, detect_color_support

__all__ = [
    "VERBOSE",
    "colorize",
    "detect_color_support",
    "get_log_level",
    "setup_logging",
]
