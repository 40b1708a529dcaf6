"""CLI module for holidaycal.

This module provides the command-line interface: argument parsing, settings
resolution, the single holiday fetch and console output.
"""

import argparse
import datetime
import logging
import sys
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from ..api.exceptions import HolidayError
from ..api.fetcher import HolidayFetcher
from ..config.settings import HolidayCalSettings, get_settings, reset_settings
from ..display.console_renderer import ConsoleRenderer
from ..utils.logging import setup_logging
from .parser import create_parser, parse_province, parse_year

logger = logging.getLogger(__name__)


def build_settings(args: argparse.Namespace) -> HolidayCalSettings:
    """Create the process settings, letting command-line flags win over env and YAML values."""
    overrides = {}
    if args.config is not None:
        overrides["config_file"] = args.config
    if args.no_color:
        overrides["color"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    elif args.quiet:
        overrides["log_level"] = "ERROR"
    elif args.verbose:
        overrides["log_level"] = "VERBOSE"
    reset_settings()
    return get_settings(**overrides)


async def run_holidays(
    args: argparse.Namespace,
    settings: HolidayCalSettings,
    today: Optional[datetime.date] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """Fetch and print the holidays selected by ``args``.

    Returns:
        Exit code (0 for success, 1 for fetch failure)
    """
    today = today or datetime.date.today()
    province = args.province or settings.province
    year = args.year if args.year is not None else today.year

    logger.info(f"Listing holidays for {province} in {year}")

    try:
        async with HolidayFetcher(settings, transport=transport) as fetcher:
            data = await fetcher.fetch_holidays(province, year)
    except HolidayError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    renderer = ConsoleRenderer(settings)
    renderer.display(renderer.render(data, year, today, show_calendar=bool(args.calendar)))
    return 0


async def main_entry(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point with argument parsing.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = build_settings(args)
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level, enable_colors=settings.color is not False)
    logger.debug(f"Settings: {settings.model_dump()}")

    return await run_holidays(args, settings)


__all__ = [
    "build_settings",
    "create_parser",
    "main_entry",
    "parse_province",
    "parse_year",
    "run_holidays",
]
