"""User interface components for interactive calendar navigation."""

from .navigation import CalendarState
from .keyboard import KeyboardHandler
from .interactive import InteractiveController

__all__ = ["CalendarState", "InteractiveController", "KeyboardHandler"]
