"""Month grid layout for fixed-width holiday calendars.

A month is laid out on a fixed 6x7 grid: rows are weeks (row 0 holds the
1st of the month) and columns are weekdays, Sunday first::

        July 2024
    Su Mo Tu We Th Fr Sa
       01 02 03 04 05 06
    07 08 09 10 11 12 13
    ...

Months without a holiday are not rendered at all.
"""

import calendar
import datetime
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from ..api.models import Holiday
from ..utils.terminal import colorize

logger = logging.getLogger(__name__)

GRID_ROWS = 6
GRID_COLS = 7
GRID_WIDTH = GRID_COLS * 3
WEEKDAY_HEADER = "Su Mo Tu We Th Fr Sa"
HOLIDAY_COLOR = "red"


@dataclass(frozen=True)
class CalendarCell:
    """One grid position: a two-character day label or blank."""

    day_label: str = ""
    is_holiday: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.day_label


BLANK_CELL = CalendarCell()

GridRows = Tuple[Tuple[CalendarCell, ...], ...]


@dataclass(frozen=True)
class MonthGrid:
    """Fixed 6x7 layout of a single month."""

    year: int
    month: int
    cells: GridRows

    @property
    def title(self) -> str:
        """Month and year, e.g. ``"July 2024"``."""
        return f"{calendar.month_name[self.month]} {self.year}"

    @property
    def has_holiday(self) -> bool:
        return any(cell.is_holiday for cell in self.day_cells())

    def cell(self, row: int, col: int) -> CalendarCell:
        return self.cells[row][col]

    def day_cells(self) -> Tuple[CalendarCell, ...]:
        """Non-blank cells in reading order."""
        return tuple(cell for row in self.cells for cell in row if not cell.is_blank)


def _holiday_dates(holidays: Iterable[Union[str, Holiday]]) -> frozenset:
    return frozenset(h.date if isinstance(h, Holiday) else h for h in holidays)


def build_month_grid(
    year: int, month: int, holidays: Iterable[Union[str, Holiday]]
) -> MonthGrid:
    """Lay out ``month`` of ``year`` and flag the days found in ``holidays``.

    Args:
        year: Calendar year
        month: Month number, 1-12
        holidays: ISO date strings (or ``Holiday`` models) known to be holidays

    Returns:
        MonthGrid with one labelled cell per day of the month
    """
    holiday_dates = _holiday_dates(holidays)

    # calendar.monthrange counts Monday as 0; shift so Sunday is column 0
    first_weekday, days_in_month = calendar.monthrange(year, month)
    offset = (first_weekday + 1) % GRID_COLS

    grid = [[BLANK_CELL] * GRID_COLS for _ in range(GRID_ROWS)]
    for index in range(days_in_month):
        day = datetime.date(year, month, index + 1)
        row, col = divmod(index + offset, GRID_COLS)
        grid[row][col] = CalendarCell(
            day_label=f"{day.day:02d}",
            is_holiday=day.isoformat() in holiday_dates,
        )

    return MonthGrid(year=year, month=month, cells=tuple(tuple(row) for row in grid))


def format_cell(cell: CalendarCell, color: bool = True) -> str:
    label = cell.day_label.rjust(2)
    if cell.is_holiday and color:
        return colorize(label, HOLIDAY_COLOR)
    return label


def format_grid(grid: MonthGrid, color: bool = True) -> str:
    """Render a grid as text: centered title, weekday header and six week rows."""
    padding = " " * ((GRID_WIDTH - len(grid.title)) // 2)
    lines = [f"{padding}{grid.title}", WEEKDAY_HEADER]
    for row in grid.cells:
        lines.append(" ".join(format_cell(cell, color) for cell in row))
    return "\n".join(lines)


def render_month(
    year: int,
    month: int,
    holidays: Iterable[Union[str, Holiday]],
    color: bool = True,
) -> Optional[str]:
    """Render one month, or return None when it contains no holiday."""
    grid = build_month_grid(year, month, holidays)
    if not grid.has_holiday:
        logger.debug(f"No holidays in {grid.title}, skipping")
        return None
    return format_grid(grid, color=color)
