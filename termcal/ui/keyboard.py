"""Keyboard input handling for interactive navigation."""

import curses
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple, Union

from ..utils.exceptions import TerminalError

logger = logging.getLogger(__name__)

ESC = "\x1b"


class KeyCode(Enum):
    """Key codes for navigation commands."""

    LEFT_ARROW = "left"
    RIGHT_ARROW = "right"
    UP_ARROW = "up"
    DOWN_ARROW = "down"
    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    RESIZE = "resize"
    UNKNOWN = "unknown"


class Modifier(Enum):
    """Modifier keys held together with a key."""

    SHIFT = "shift"
    ALT = "alt"
    CTRL = "ctrl"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press as read from the terminal."""

    code: KeyCode
    char: Optional[str] = None
    modifiers: FrozenSet[Modifier] = field(default_factory=frozenset)

    @property
    def is_plain(self) -> bool:
        """Check if the key was pressed without any modifier."""
        return not self.modifiers

    def with_modifier(self, modifier: Modifier) -> "KeyEvent":
        """Return a copy of this event with ``modifier`` added."""
        return KeyEvent(self.code, self.char, self.modifiers | {modifier})


_ARROW_KEYS = {
    curses.KEY_UP: KeyCode.UP_ARROW,
    curses.KEY_DOWN: KeyCode.DOWN_ARROW,
    curses.KEY_LEFT: KeyCode.LEFT_ARROW,
    curses.KEY_RIGHT: KeyCode.RIGHT_ARROW,
}

_SHIFTED_ARROW_KEYS = {
    curses.KEY_SR: KeyCode.UP_ARROW,
    curses.KEY_SF: KeyCode.DOWN_ARROW,
    curses.KEY_SLEFT: KeyCode.LEFT_ARROW,
    curses.KEY_SRIGHT: KeyCode.RIGHT_ARROW,
}

# Extended terminfo names for modified arrows, e.g. kUP5 is Ctrl+Up
_EXTENDED_ARROW = re.compile(r"^k(UP|DN|LFT|RIT)([2-8])$")
_EXTENDED_ARROW_CODES = {
    "UP": KeyCode.UP_ARROW,
    "DN": KeyCode.DOWN_ARROW,
    "LFT": KeyCode.LEFT_ARROW,
    "RIT": KeyCode.RIGHT_ARROW,
}


def _xterm_modifiers(value: int) -> FrozenSet[Modifier]:
    """Decode an xterm modifier parameter (1 + bitmask of shift=1, alt=2, ctrl=4)."""
    mask = value - 1
    modifiers = set()
    if mask & 1:
        modifiers.add(Modifier.SHIFT)
    if mask & 2:
        modifiers.add(Modifier.ALT)
    if mask & 4:
        modifiers.add(Modifier.CTRL)
    return frozenset(modifiers)


BindingKey = Tuple[KeyCode, Optional[str]]


class KeyboardHandler:
    """Reads key presses from a curses window and dispatches them to handlers.

    Handlers fire only for an exact key match pressed without modifiers.
    """

    def __init__(self, window: Any) -> None:
        """Initialize keyboard handler.

        Args:
            window: curses window with keypad mode enabled
        """
        self.window = window
        self._key_callbacks: Dict[BindingKey, Callable[[], None]] = {}
        self._descriptions: Dict[BindingKey, str] = {}

        logger.debug("Keyboard handler initialized")

    def register_key_handler(
        self,
        key_code: KeyCode,
        callback: Callable[[], None],
        char: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        """Register a callback for a specific key.

        Args:
            key_code: Key code to handle
            callback: Function to call when key is pressed
            char: Character for KeyCode.CHAR bindings
            description: Short help text for the binding
        """
        binding = (key_code, char)
        self._key_callbacks[binding] = callback
        if description:
            self._descriptions[binding] = description
        logger.debug(f"Registered handler for key: {key_code} {char or ''}".rstrip())

    def read_event(self) -> KeyEvent:
        """Block until one key press arrives and return it.

        Raises:
            TerminalError: If reading from the terminal fails
        """
        try:
            key = self.window.get_wch()
        except curses.error as e:
            raise TerminalError("Failed to read keyboard input", e) from e

        if key == ESC:
            return self._read_after_escape()
        return self.parse_key(key)

    def parse_key(self, key: Union[str, int]) -> KeyEvent:
        """Translate a value returned by get_wch() into a KeyEvent.

        Args:
            key: A character string or a curses key code

        Returns:
            Corresponding KeyEvent
        """
        if isinstance(key, str):
            return self._parse_char(key)
        return self._parse_key_code(key)

    def dispatch(self, event: KeyEvent) -> bool:
        """Run the handler bound to ``event``.

        Args:
            event: Key press to dispatch

        Returns:
            True if a handler ran, False if the key was ignored
        """
        if not event.is_plain:
            logger.debug(f"Ignoring modified key: {event}")
            return False

        binding = (event.code, event.char if event.code is KeyCode.CHAR else None)
        callback = self._key_callbacks.get(binding)
        if callback is None:
            logger.debug(f"No handler for key: {event}")
            return False

        callback()
        logger.debug(f"Handled key: {event}")
        return True

    def get_help_text(self) -> str:
        """Get help text for registered key handlers.

        Returns:
            Formatted help text
        """
        help_lines = [
            self._descriptions[binding]
            for binding in self._key_callbacks
            if binding in self._descriptions
        ]
        return " | ".join(help_lines) if help_lines else "No key handlers registered"

    def _read_after_escape(self) -> KeyEvent:
        """Distinguish a lone Escape from an Alt+key sequence."""
        self.window.nodelay(True)
        try:
            follow = self.window.get_wch()
        except curses.error:
            return KeyEvent(KeyCode.ESCAPE)
        finally:
            self.window.nodelay(False)

        return self.parse_key(follow).with_modifier(Modifier.ALT)

    def _parse_char(self, char: str) -> KeyEvent:
        if char in ("\r", "\n"):
            return KeyEvent(KeyCode.ENTER)
        if char == ESC:
            return KeyEvent(KeyCode.ESCAPE)

        code = ord(char)
        if 1 <= code <= 26:
            return KeyEvent(KeyCode.CHAR, chr(code + 96), frozenset({Modifier.CTRL}))
        if code < 32 or code == 127:
            return KeyEvent(KeyCode.UNKNOWN, char)
        if char.isupper():
            return KeyEvent(KeyCode.CHAR, char, frozenset({Modifier.SHIFT}))
        return KeyEvent(KeyCode.CHAR, char)

    def _parse_key_code(self, key: int) -> KeyEvent:
        if key in _ARROW_KEYS:
            return KeyEvent(_ARROW_KEYS[key])
        if key in _SHIFTED_ARROW_KEYS:
            return KeyEvent(_SHIFTED_ARROW_KEYS[key], modifiers=frozenset({Modifier.SHIFT}))
        if key == curses.KEY_RESIZE:
            return KeyEvent(KeyCode.RESIZE)
        if key == curses.KEY_ENTER:
            return KeyEvent(KeyCode.ENTER)

        name = self._key_name(key)
        match = _EXTENDED_ARROW.match(name)
        if match:
            return KeyEvent(
                _EXTENDED_ARROW_CODES[match.group(1)],
                modifiers=_xterm_modifiers(int(match.group(2))),
            )

        logger.debug(f"Unknown key code: {key} ({name})")
        return KeyEvent(KeyCode.UNKNOWN)

    def _key_name(self, key: int) -> str:
        try:
            return curses.keyname(key).decode("ascii", errors="replace")
        except (ValueError, curses.error):
            return ""


__all__ = ["KeyCode", "KeyEvent", "KeyboardHandler", "Modifier"]
