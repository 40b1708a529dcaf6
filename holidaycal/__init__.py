"""holidaycal - statutory holiday lists and calendars for Canadian provinces."""

__version__ = "1.0.0"
__author__ = "holidaycal contributors"
__description__ = "Command-line viewer for Canadian statutory holidays"

# Package metadata
__all__ = [
    "__author__",
    "__description__",
    "__version__",
]
