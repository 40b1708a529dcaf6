"""Text rendering of holiday lists and month calendars."""

from .calendar_grid import (
    BLANK_CELL,
    WEEKDAY_HEADER,
    CalendarCell,
    MonthGrid,
    build_month_grid,
    format_grid,
    render_month,
)
from .console_renderer import ConsoleRenderer, ListEntry, merge_today

__all__ = [
    "BLANK_CELL",
    "WEEKDAY_HEADER",
    "CalendarCell",
    "ConsoleRenderer",
    "ListEntry",
    "MonthGrid",
    "build_month_grid",
    "format_grid",
    "merge_today",
    "render_month",
]
