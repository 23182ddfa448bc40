"""Interactive mode handler for the termcal CLI.

Builds the calendar state from the parsed arguments and runs the
full-screen navigation loop inside a scoped terminal session.
"""

from typing import Any, Optional

from ...config.settings import get_settings
from ...display import ConsoleRenderer, TerminalSession
from ...ui import CalendarState, InteractiveController, KeyboardHandler
from ...ui.navigation import NO_HIGHLIGHT
from ...utils.logging import apply_command_line_overrides, setup_logging
from ..parser import CalendarConfig


def create_state(calendar_config: Optional[CalendarConfig]) -> CalendarState:
    """Create the starting state: today, or an explicit month without highlight.

    Args:
        calendar_config: Month and year from the command line, None for today

    Returns:
        Initial calendar state
    """
    if calendar_config is None:
        return CalendarState.today()
    return CalendarState.from_date(NO_HIGHLIGHT, calendar_config.month, calendar_config.year)


def run_interactive_mode(args: Any, calendar_config: Optional[CalendarConfig] = None) -> int:
    """Run the calendar in full-screen interactive navigation mode.

    Args:
        args: Parsed command line arguments
        calendar_config: Validated month and year, None to start at today

    Returns:
        Exit code (0 for success)

    Raises:
        TerminalError: If the terminal cannot be set up, drawn to or read from.
            The terminal is restored before the error leaves this function.
    """
    settings = apply_command_line_overrides(get_settings(), args)

    # The full-screen session owns the terminal, only file logging stays active
    logger = setup_logging(settings, interactive_mode=True)

    state = create_state(calendar_config)
    logger.info(f"Starting interactive mode at {state}")

    try:
        with TerminalSession(use_colors=settings.display.use_colors) as screen:
            controller = InteractiveController(
                state,
                screen,
                KeyboardHandler(screen.window),
                ConsoleRenderer(settings.display.index_width),
            )
            controller.run()
    finally:
        # Terminal is back in normal mode, console logging may resume
        logger = setup_logging(settings)

    logger.info("Interactive mode finished")
    return 0
