"""Execution modes of the termcal CLI."""

from .interactive import run_interactive_mode

__all__ = ["run_interactive_mode"]
