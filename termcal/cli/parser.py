"""Command-line argument parsing for termcal.

This module builds the argument parser and validates the optional
``month year`` positionals before any terminal mode change happens.
"""

import argparse
import logging
import re
from pathlib import Path
from typing import NamedTuple, Optional, Sequence

from .. import __version__
from ..utils.dates import MONTHS_IN_YEAR
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Unsigned decimal integer, a leading plus sign is accepted
_UNSIGNED = re.compile(r"\+?[0-9]+")


class CalendarConfig(NamedTuple):
    """Month and year requested on the command line."""

    month: int
    year: int


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser with the calendar positionals,
            display options and logging options

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["2", "2024", "--no-colors"])
        >>> args.calendar
        ['2', '2024']
    """
    parser = argparse.ArgumentParser(
        prog="termcal",
        description="termcal - full-screen month calendar with keyboard navigation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Keys:
  Up / Down      previous / next month
  Left / Right   previous / next year
  t              jump back to today
  q              quit

Examples:
  %(prog)s                  # Show the current month with today highlighted
  %(prog)s 2 2024           # Show February 2024
  %(prog)s --log-dir /tmp   # Write a debug log while browsing
        """,
    )

    parser.add_argument(
        "calendar",
        nargs="*",
        metavar="DATE",
        help="Month (1-12) followed by the year to show instead of the current date",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version information",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging and detailed output"
    )

    # Display options
    display_group = parser.add_argument_group("display", "Terminal display options")

    display_group.add_argument(
        "--no-colors", action="store_true", help="Draw the calendar without colors"
    )

    # Logging options
    logging_group = parser.add_argument_group("logging", "Logging configuration options")

    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set both console and file log levels",
    )

    logging_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only show errors on console (sets console level to ERROR)",
    )

    logging_group.add_argument(
        "--log-dir", type=Path, help="Write log files to this directory (enables file logging)"
    )

    logging_group.add_argument(
        "--max-log-files", type=int, help="Maximum number of log files to keep (default: 5)"
    )

    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored console output"
    )

    return parser


def _parse_unsigned(value: str) -> Optional[int]:
    if not _UNSIGNED.fullmatch(value):
        return None
    return int(value)


def parse_calendar_args(values: Sequence[str]) -> Optional[CalendarConfig]:
    """Validate the ``month year`` positionals.

    Args:
        values: Positional arguments as given on the command line

    Returns:
        CalendarConfig for an explicit month, None to start at today

    Raises:
        ConfigurationError: If the month or year is missing or invalid
    """
    if not values:
        return None

    month = _parse_unsigned(values[0])
    if month is None:
        raise ConfigurationError("Month is expected as integer")
    if not 1 <= month <= MONTHS_IN_YEAR:
        raise ConfigurationError("Month should be in range 1 to 12")

    if len(values) < 2:
        raise ConfigurationError("Year not entered")

    year = _parse_unsigned(values[1])
    if year is None:
        raise ConfigurationError("Year is expected as positive integer")

    if len(values) > 2:
        logger.debug(f"Ignoring extra arguments: {list(values[2:])}")

    return CalendarConfig(month, year)


__all__ = ["CalendarConfig", "create_parser", "parse_calendar_args"]
