"""Console renderer for holiday listings and calendars."""

import datetime
import logging
import sys
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, TextIO, Union

from ..api.models import Holiday, ProvinceHolidays
from ..utils.terminal import colorize, detect_color_support
from .calendar_grid import render_month

logger = logging.getLogger(__name__)

TODAY_COLOR = "green"

KIND_HOLIDAY = "holiday"
KIND_TODAY = "today"
KIND_HOLIDAY_TODAY = "holiday_today"


@dataclass(frozen=True)
class ListEntry:
    """One line of the holiday list."""

    kind: str
    day: str
    holiday: Optional[Holiday] = None


def merge_today(holidays: Sequence[Holiday], today: datetime.date) -> List[ListEntry]:
    """Merge the current date into an already sorted holiday list.

    The marker goes before the first holiday that falls after ``today``. A
    holiday on ``today`` absorbs the marker and is emitted once. When every
    holiday is in the past the marker is appended.
    """
    entries: List[ListEntry] = []
    inserted = False

    for holiday in holidays:
        if not inserted:
            holiday_day = holiday.as_date()
            if today < holiday_day:
                entries.append(ListEntry(kind=KIND_TODAY, day=today.isoformat()))
                inserted = True
            elif today == holiday_day:
                entries.append(
                    ListEntry(kind=KIND_HOLIDAY_TODAY, day=holiday.date, holiday=holiday)
                )
                inserted = True
                continue
        entries.append(ListEntry(kind=KIND_HOLIDAY, day=holiday.date, holiday=holiday))

    if not inserted:
        entries.append(ListEntry(kind=KIND_TODAY, day=today.isoformat()))

    return entries


class ConsoleRenderer:
    """Renders holiday lists and month calendars to the terminal."""

    def __init__(self, settings: Any, stream: Optional[TextIO] = None) -> None:
        """Initialize console renderer.

        Args:
            settings: Application settings (``color``: True, False or None to auto-detect)
            stream: Output stream, stdout by default
        """
        self.settings = settings
        self.stream = stream

        color = getattr(settings, "color", None)
        self.color = detect_color_support(stream) if color is None else bool(color)

        logger.debug("Console renderer initialized")

    def _paint(self, text: str, color: str) -> str:
        return colorize(text, color) if self.color else text

    def format_holiday(self, holiday: Holiday) -> str:
        """Format a holiday as ``YYYY-MM-DD: [National] Name``."""
        scope = "National" if holiday.is_federal else "Provincial"
        return f"{holiday.date}: [{scope}] {holiday.name_en}"

    def format_entry(self, entry: ListEntry) -> str:
        if entry.kind == KIND_TODAY:
            return self._paint(f"{entry.day}: --> Today <--", TODAY_COLOR)
        if entry.holiday is None:
            raise ValueError(f"List entry of kind {entry.kind!r} has no holiday")
        line = self.format_holiday(entry.holiday)
        if entry.kind == KIND_HOLIDAY_TODAY:
            return self._paint(f"{line} (Today)", TODAY_COLOR)
        return line

    def render_header(self, data: ProvinceHolidays, year: int) -> str:
        return f"\nList of statutory holidays in {data.province.name_en}, {year}:\n"

    def render_list(self, holidays: Sequence[Holiday], today: datetime.date) -> str:
        return "\n".join(self.format_entry(entry) for entry in merge_today(holidays, today))

    def render_calendars(self, year: int, holidays: Iterable[Union[str, Holiday]]) -> str:
        """Render every month of ``year`` that contains a holiday.

        Each block is preceded by a blank line; months without holidays are
        skipped.
        """
        dates = list(holidays)
        blocks = []
        for month in range(1, 13):
            block = render_month(year, month, dates, color=self.color)
            if block is not None:
                blocks.append(f"\n{block}")
        logger.debug(f"Rendered {len(blocks)} of 12 months for {year}")
        return "\n".join(blocks)

    def render(
        self,
        data: ProvinceHolidays,
        year: int,
        today: datetime.date,
        show_calendar: bool = False,
    ) -> str:
        """Render the complete output for one province and year."""
        parts = [self.render_header(data, year), self.render_list(data.holidays, today)]
        if show_calendar:
            calendars = self.render_calendars(year, data.holiday_dates)
            if calendars:
                parts.append(calendars)
        return "\n".join(parts)

    def display(self, content: str) -> None:
        """Write rendered content followed by a newline."""
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(content + "\n")
        stream.flush()
