"""Full-screen terminal session built on curses.

``TerminalSession`` is the scoped handle for the process-wide terminal mode:
entering it switches to the alternate screen with raw input and a hidden
cursor, leaving it restores the terminal on every exit path.
"""

import curses
import logging
from types import TracebackType
from typing import Any, Dict, Optional, Tuple, Type

from ..utils.exceptions import TerminalError
from .styles import Style, spec_for

logger = logging.getLogger(__name__)

_BASIC_COLORS = {
    "red": curses.COLOR_RED,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "green": curses.COLOR_GREEN,
}
# Bright black, available on 16+ color terminals
_GREY = 8


class CursesScreen:
    """Screen primitives drawing into a curses window.

    Drawing only touches curses' virtual screen; nothing reaches the terminal
    until :meth:`flush`, so a frame is written as one batch.
    """

    def __init__(self, window: Any, attributes: Optional[Dict[Style, int]] = None) -> None:
        """Initialize screen.

        Args:
            window: The curses window returned by initscr()
            attributes: curses attribute per style tag, missing tags draw plain
        """
        self.window = window
        self.attributes = attributes or {}

    def size(self) -> Tuple[int, int]:
        """Return the current terminal size as (width, height)."""
        height, width = self.window.getmaxyx()
        return width, height

    def clear(self) -> None:
        """Blank the pending frame."""
        self.window.erase()

    def print(self, x: int, y: int, text: str, style: Style = Style.PLAIN) -> None:
        """Queue ``text`` at (x, y), clipped to the screen.

        Args:
            x: Zero-based column
            y: Zero-based row
            text: Text to draw
            style: Style tag for the text

        Raises:
            TerminalError: If curses rejects the write
        """
        width, height = self.size()
        if x < 0 or y < 0 or x >= width or y >= height:
            return
        try:
            self.window.addnstr(y, x, text, width - x, self.attributes.get(style, curses.A_NORMAL))
        except curses.error as e:
            # addnstr reports an error after writing the bottom-right cell
            if (y, x + len(text)) < (height - 1, width):
                raise TerminalError(f"Failed to draw at ({x}, {y})", e) from e

    def flush(self) -> None:
        """Write the pending frame to the terminal."""
        try:
            self.window.refresh()
        except curses.error as e:
            raise TerminalError("Failed to write to terminal", e) from e


class TerminalSession:
    """Scoped acquisition of the full-screen terminal mode.

    Example:
        >>> with TerminalSession(use_colors=True) as screen:
        ...     screen.print(0, 0, "hello")
        ...     screen.flush()
    """

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize terminal session.

        Args:
            use_colors: Allow colored output when the terminal supports it
        """
        self.use_colors = use_colors
        self.window: Optional[Any] = None

    def __enter__(self) -> CursesScreen:
        try:
            self.window = curses.initscr()
            curses.noecho()
            curses.raw()
            self.window.keypad(True)
            self._hide_cursor()
            attributes = self._init_styles()
        except curses.error as e:
            self.close()
            raise TerminalError(f"Failed to enter full-screen mode: {e}", e) from e

        logger.info("Entered full-screen terminal mode")
        return CursesScreen(self.window, attributes)

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    @property
    def is_active(self) -> bool:
        """Check if the terminal is currently in full-screen mode."""
        return self.window is not None

    def close(self) -> None:
        """Restore normal terminal mode. Safe to call more than once."""
        if self.window is None:
            return

        window, self.window = self.window, None
        for step, action in (
            ("disable keypad", lambda: window.keypad(False)),
            ("leave raw mode", curses.noraw),
            ("enable echo", curses.echo),
            ("show cursor", lambda: curses.curs_set(1)),
            ("leave alternate screen", curses.endwin),
        ):
            try:
                action()
            except curses.error as e:
                logger.warning(f"Could not {step} while restoring terminal: {e}")

        logger.info("Terminal restored")

    def _hide_cursor(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")

    def _init_styles(self) -> Dict[Style, int]:
        """Build the curses attribute for every style tag."""
        colors_available = self.use_colors and curses.has_colors()
        if colors_available:
            curses.start_color()
            curses.use_default_colors()

        attributes: Dict[Style, int] = {}
        pairs: Dict[int, int] = {}
        for style in Style:
            spec = spec_for(style, use_colors=colors_available)
            attr = curses.A_NORMAL
            if spec.bold:
                attr |= curses.A_BOLD
            if spec.dim:
                attr |= curses.A_DIM
            if spec.color is not None:
                color = self._color_number(spec.color)
                if color not in pairs:
                    pairs[color] = len(pairs) + 1
                    curses.init_pair(pairs[color], color, -1)
                attr |= curses.color_pair(pairs[color])
            attributes[style] = attr

        logger.debug(f"Initialized {len(pairs)} color pairs (colors={colors_available})")
        return attributes

    def _color_number(self, name: str) -> int:
        if name == "grey":
            return _GREY if curses.COLORS >= 16 else curses.COLOR_WHITE
        return _BASIC_COLORS[name]


__all__ = ["CursesScreen", "TerminalSession"]
