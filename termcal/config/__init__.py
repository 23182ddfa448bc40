"""Configuration management for termcal."""

from .settings import DisplaySettings, LoggingSettings, TermcalSettings, get_settings, reset_settings

__all__ = [
    "DisplaySettings",
    "LoggingSettings",
    "TermcalSettings",
    "get_settings",
    "reset_settings",
]
