"""Exceptions raised by termcal."""

from typing import Optional


class TermcalError(Exception):
    """Base exception for all termcal errors."""


class ConfigurationError(TermcalError):
    """Raised when the command-line calendar arguments are missing or invalid.

    Detected before the terminal is touched, so there is nothing to restore.
    """


class TerminalError(TermcalError):
    """Exception raised when the terminal cannot be set up, queried, drawn to or read."""

    def __init__(self, message: str, original: Optional[Exception] = None) -> None:
        """Initialize TerminalError.

        Args:
            message: Error message
            original: The underlying curses or OS error, if any
        """
        super().__init__(message)
        self.original = original
