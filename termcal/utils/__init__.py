"""Utility modules for termcal."""

from .dates import days_in_month, is_leap_year, weekday_offset_of_first
from .exceptions import ConfigurationError, TermcalError, TerminalError

__all__ = [
    "ConfigurationError",
    "TermcalError",
    "TerminalError",
    "days_in_month",
    "is_leap_year",
    "weekday_offset_of_first",
]
