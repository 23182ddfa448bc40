"""CLI module for termcal.

This module provides the command-line interface: argument parsing,
validation of the requested month and dispatch to the interactive mode.
"""

import sys
from typing import Optional, Sequence

from ..config.settings import get_settings
from ..utils.exceptions import ConfigurationError, TerminalError
from ..utils.logging import apply_command_line_overrides, setup_logging
from .modes.interactive import run_interactive_mode
from .parser import CalendarConfig, create_parser, parse_calendar_args


def main_entry(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point with argument parsing.

    Configuration errors are reported before the terminal is touched.
    Terminal errors are reported after the session has restored it.

    Args:
        argv: Command line arguments without the program name, defaults to sys.argv

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse already printed usage or the error; --help and --version exit 0
        return 0 if e.code in (0, None) else 1

    # Console logging covers everything outside the full-screen session
    settings = apply_command_line_overrides(get_settings(), args)
    setup_logging(settings)

    try:
        calendar_config = parse_calendar_args(args.calendar)
        return run_interactive_mode(args, calendar_config)
    except (ConfigurationError, TerminalError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


__all__ = [
    "CalendarConfig",
    "create_parser",
    "main_entry",
    "parse_calendar_args",
    "run_interactive_mode",
]
