"""Interactive UI controller for calendar navigation."""

import logging
from typing import Optional

from ..display.console_renderer import ConsoleRenderer
from ..display.renderer_protocol import ScreenProtocol
from .keyboard import KeyboardHandler, KeyCode
from .navigation import CalendarState

logger = logging.getLogger(__name__)


class InteractiveController:
    """Controls the render-and-input loop of the calendar viewer.

    The loop is single threaded: it blocks on the next key press, applies the
    bound navigation, and redraws the whole frame.
    """

    def __init__(
        self,
        state: CalendarState,
        screen: ScreenProtocol,
        keyboard: KeyboardHandler,
        renderer: Optional[ConsoleRenderer] = None,
    ):
        """Initialize interactive controller.

        Args:
            state: Calendar state to show and navigate
            screen: Drawing surface of the active terminal session
            keyboard: Keyboard handler reading from the same terminal
            renderer: Console renderer, a default one is created if omitted
        """
        self.state = state
        self.screen = screen
        self.keyboard = keyboard
        self.renderer = renderer or ConsoleRenderer()

        self._running = False
        self._frames = 0

        self._setup_keyboard_handlers()

        logger.info("Interactive controller initialized")

    def _setup_keyboard_handlers(self) -> None:
        """Set up keyboard event handlers."""
        # Control keys
        self.keyboard.register_key_handler(
            KeyCode.CHAR, self._handle_exit, char="q", description="q: Quit"
        )
        self.keyboard.register_key_handler(
            KeyCode.CHAR, self._handle_jump_to_today, char="t", description="t: Today"
        )

        # Navigation keys
        self.keyboard.register_key_handler(
            KeyCode.UP_ARROW, self._handle_previous_month, description="↑ Previous month"
        )
        self.keyboard.register_key_handler(
            KeyCode.DOWN_ARROW, self._handle_next_month, description="↓ Next month"
        )
        self.keyboard.register_key_handler(
            KeyCode.RIGHT_ARROW, self._handle_next_year, description="→ Next year"
        )
        self.keyboard.register_key_handler(
            KeyCode.LEFT_ARROW, self._handle_previous_year, description="← Previous year"
        )

        logger.debug("Keyboard handlers configured")

    def _handle_previous_month(self) -> None:
        """Handle up arrow key - go to previous month."""
        self.state.previous_month()
        logger.debug("User navigated to previous month")

    def _handle_next_month(self) -> None:
        """Handle down arrow key - go to next month."""
        self.state.next_month()
        logger.debug("User navigated to next month")

    def _handle_next_year(self) -> None:
        """Handle right arrow key - go to next year."""
        self.state.next_year()
        logger.debug("User navigated to next year")

    def _handle_previous_year(self) -> None:
        """Handle left arrow key - go to previous year."""
        self.state.previous_year()
        logger.debug("User navigated to previous year")

    def _handle_jump_to_today(self) -> None:
        """Handle t key - jump to today."""
        self.state.jump_to_today()
        logger.debug("User jumped to today")

    def _handle_exit(self) -> None:
        """Handle q key - leave the input loop."""
        logger.info("User requested exit")
        self.stop()

    def run(self) -> None:
        """Render once, then process key presses until exit is requested.

        Raises:
            TerminalError: If drawing or reading input fails
        """
        if self._running:
            logger.warning("Interactive controller already running")
            return

        self._running = True
        logger.info(f"Starting interactive calendar navigation at {self.state}")
        logger.info(f"Key bindings: {self.keyboard.get_help_text()}")

        try:
            self.update_display()
            while self._running:
                event = self.keyboard.read_event()
                self.keyboard.dispatch(event)
                if not self._running:
                    break
                self.update_display()
        finally:
            self._running = False
            logger.info(f"Interactive mode stopped after {self._frames} frames")

    def stop(self) -> None:
        """Request the input loop to end after the current key press."""
        self._running = False
        logger.debug("Interactive controller stop requested")

    def update_display(self) -> None:
        """Redraw the full frame from the current state."""
        self.renderer.render(self.state, self.screen)
        self._frames += 1

    @property
    def is_running(self) -> bool:
        """Check if interactive controller is running."""
        return self._running
