"""Command-line argument parsing for holidaycal.

This module handles all command-line argument parsing functionality,
including argument groups, validation, and parsing logic.
"""

import argparse
from pathlib import Path

from .. import __version__
from ..config.settings import PROVINCE_CODES
from ..utils.logging import LOG_LEVELS

MIN_YEAR = 1900
MAX_YEAR = 2200


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Province and year have no parser defaults: ``None`` means "use the
    configured default province" and "use the current year".

    Returns:
        argparse.ArgumentParser: Configured parser

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["--province", "on", "--year", "2024", "--calendar"])
        >>> args.province, args.year, args.calendar
        ('ON', 2024, True)
    """
    parser = argparse.ArgumentParser(
        prog="holidaycal",
        description="holidaycal - list Canadian statutory holidays and show them on a calendar",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Holidays in BC for the current year
  %(prog)s --province ON            # Holidays in Ontario
  %(prog)s -p QC -y 2025 --calendar # Quebec 2025 with month calendars
        """,
    )

    parser.add_argument(
        "--province",
        "-p",
        type=parse_province,
        default=None,
        metavar="CODE",
        help=f"Province or territory code, one of {', '.join(PROVINCE_CODES)} (default: BC)",
    )

    parser.add_argument(
        "--year",
        "-y",
        type=parse_year,
        default=None,
        help="Year to list holidays for (default: current year)",
    )

    parser.add_argument(
        "--calendar",
        "-c",
        nargs="?",
        const=True,
        default=False,
        type=_calendar_flag,
        metavar="CALENDAR",
        help="Also display the holidays in month calendar format",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Output and configuration arguments
    output_group = parser.add_argument_group("output", "Output and configuration options")

    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colored holiday and today lines"
    )

    output_group.add_argument(
        "--config", type=Path, metavar="PATH", help="YAML configuration file"
    )

    logging_group = parser.add_argument_group("logging", "Diagnostic logging options (stderr)")

    logging_group.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Set the diagnostic log level",
    )

    logging_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose diagnostic logging"
    )

    logging_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors (sets log level to ERROR)",
    )

    return parser


def parse_province(value: str) -> str:
    """Validate and normalise a province code for command-line arguments.

    Raises:
        argparse.ArgumentTypeError: If the code is not a Canadian province or territory
    """
    code = value.strip().upper()
    if code not in PROVINCE_CODES:
        raise argparse.ArgumentTypeError(
            f"Invalid province '{value}'. Use one of: {', '.join(PROVINCE_CODES)}"
        )
    return code


def parse_year(value: str) -> int:
    """Parse a year for command-line arguments.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer in range
    """
    try:
        year = int(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Invalid year: {value}") from err

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise argparse.ArgumentTypeError(
            f"Year out of range: {year}. Use {MIN_YEAR}-{MAX_YEAR}"
        )
    return year


def _calendar_flag(value: str) -> bool:
    # Any value given to --calendar switches the calendar on
    return True


__all__ = [
    "create_parser",
    "parse_province",
    "parse_year",
]
