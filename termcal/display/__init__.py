"""Terminal display: layout, style tags and the full-screen session."""

from .console_renderer import ConsoleRenderer
from .styles import Style
from .terminal import CursesScreen, TerminalSession

__all__ = ["ConsoleRenderer", "CursesScreen", "Style", "TerminalSession"]
