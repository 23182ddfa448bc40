"""Shared test fixtures for termcal."""

import curses
import logging
from typing import Any, List, Optional, Tuple

import pytest

from termcal.config.settings import reset_settings
from termcal.display.styles import Style
from termcal.ui.navigation import CalendarState, DayMonthYear


class FakeScreen:
    """In-memory drawing surface recording every call in order."""

    def __init__(self, width: int = 84, height: int = 28) -> None:
        self.width = width
        self.height = height
        self.calls: List[Tuple[Any, ...]] = []

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def clear(self) -> None:
        self.calls.append(("clear",))

    def print(self, x: int, y: int, text: str, style: Style = Style.PLAIN) -> None:
        self.calls.append(("print", x, y, text, style))

    def flush(self) -> None:
        self.calls.append(("flush",))

    def printed(self) -> List[Tuple[int, int, str, Style]]:
        return [call[1:] for call in self.calls if call[0] == "print"]

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)


class FakeWindow:
    """Stand-in for a curses window that replays queued get_wch() results.

    Queued exceptions are raised instead of returned. In nodelay mode an empty
    queue raises ``error`` the way curses does when no input is pending.
    """

    def __init__(self, keys: Optional[List[Any]] = None, error: type = Exception) -> None:
        self.keys = list(keys or [])
        self.error = error
        self.nodelay_calls: List[bool] = []
        self._nodelay = False

    def get_wch(self) -> Any:
        if not self.keys:
            if self._nodelay:
                raise self.error("no input")
            raise AssertionError("read past the end of the scripted keys")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def nodelay(self, flag: bool) -> None:
        self._nodelay = flag
        self.nodelay_calls.append(flag)


@pytest.fixture
def fake_screen() -> FakeScreen:
    """84x28 recording screen."""
    return FakeScreen()


@pytest.fixture
def anchor() -> DayMonthYear:
    """Fixed 'today' used instead of the host clock."""
    return DayMonthYear(15, 7, 2023)


@pytest.fixture
def state(anchor: DayMonthYear) -> CalendarState:
    """State showing the anchor date with its day highlighted."""
    return CalendarState(anchor.day, anchor.month, anchor.year, anchor=anchor)


@pytest.fixture
def clean_settings():
    """Reset the global settings instance before and after a test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_window():
    """Factory for scripted curses windows that raise curses.error when drained in nodelay mode."""

    def _make(*keys: Any) -> FakeWindow:
        return FakeWindow(list(keys), error=curses.error)

    return _make


@pytest.fixture
def make_screen():
    """Factory for recording screens of a given size."""

    def _make(width: int = 84, height: int = 28) -> FakeScreen:
        return FakeScreen(width, height)

    return _make


@pytest.fixture(autouse=True)
def restore_termcal_logger():
    """Undo setup_logging() changes to the ``termcal`` and root loggers after each test."""
    root_level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(root_level)
    logger = logging.getLogger("termcal")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
