"""Entry point for `python -m termcal` command.

Delegates to the CLI module and maps unexpected failures to exit codes.
"""

import logging
import sys

from termcal.cli import main_entry

logger = logging.getLogger(__name__)


def main() -> None:
    """Entry point for python -m termcal and the ``termcal`` console script."""
    try:
        exit_code = main_entry()
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("Operation cancelled by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
