"""Logging configuration and setup utilities."""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from ..config.settings import TermcalSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Add verbose() method to Logger class for detailed diagnostic logging.

    Args:
        self (logging.Logger): Logger instance (automatically provided)
        message (Any): Log message or format string
        *args (Any): Arguments for string formatting
        **kwargs (Any): Additional keyword arguments for logging

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Rendered %d cells", cell_count)
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


# Add verbose method to all Logger instances
logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name (str): Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        int: Numeric log level value, INFO for unknown names

    Example:
        >>> get_log_level("verbose")
        15
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    # Color schemes for different terminal types
    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(self, *args: Any, enable_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities of stderr."""
        if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb" or "NO_COLOR" in os.environ:
            return "none"

        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"

        if term and "color" in term:
            return "basic"

        return "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color_start = self.COLORS[level_name][self.color_mode]
            color_end = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{color_start}{level_name}{color_end}", 1)

        return formatted


class TimestampedFileHandler(logging.FileHandler):
    """Handler that creates timestamped log files per execution."""

    def __init__(
        self, log_dir: Union[str, Path], prefix: str = "termcal", max_files: int = 5
    ) -> None:
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self.max_files = max_files

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = self.log_dir / f"{prefix}_{timestamp}.log"

        self.log_dir.mkdir(parents=True, exist_ok=True)
        super().__init__(str(log_path), encoding="utf-8")

        self.cleanup_old_files()

    def cleanup_old_files(self) -> None:
        """Remove log files beyond max_files limit, keeping most recent."""
        log_files = list(self.log_dir.glob(f"{self.prefix}_*.log"))

        if len(log_files) > self.max_files:
            log_files.sort(key=lambda f: f.stat().st_mtime, reverse=True)
            for old_file in log_files[self.max_files :]:
                try:
                    old_file.unlink()
                except OSError as e:
                    logging.getLogger(__name__).debug(f"Could not remove old log {old_file}: {e}")


def setup_logging(settings: "TermcalSettings", interactive_mode: bool = False) -> logging.Logger:
    """Configure the ``termcal`` logger from settings.

    In interactive mode the terminal belongs to the full-screen session, so no
    stderr handler is attached, records do not propagate to the root logger
    and only the file handler (if enabled) remains.

    Args:
        settings: Application settings
        interactive_mode: True while the full-screen session owns the terminal

    Returns:
        Configured ``termcal`` logger
    """
    logger = logging.getLogger("termcal")
    logger.setLevel(logging.DEBUG)  # Allow all levels, handlers will filter
    # Root handlers write to the terminal too, so records stop here while full screen
    logger.propagate = not interactive_mode

    # One log file per run: an existing file handler for the same target is kept
    previous_file: Optional[TimestampedFileHandler] = None
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, TimestampedFileHandler) and previous_file is None:
            previous_file = handler
        else:
            handler.close()

    if settings.logging.console_enabled and not interactive_mode:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(get_log_level(settings.logging.console_level))
        console_handler.setFormatter(
            AutoColoredFormatter(
                "%(asctime)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
                enable_colors=settings.logging.console_colors,
            )
        )
        logger.addHandler(console_handler)

    if settings.logging.file_enabled:
        reuse = (
            previous_file is not None
            and previous_file.log_dir == Path(settings.log_dir)
            and previous_file.prefix == settings.logging.file_prefix
        )
        if reuse:
            file_handler = previous_file
            previous_file = None
        else:
            file_handler = TimestampedFileHandler(
                log_dir=settings.log_dir,
                prefix=settings.logging.file_prefix,
                max_files=settings.logging.max_log_files,
            )
        file_handler.setLevel(get_log_level(settings.logging.file_level))

        if settings.logging.include_function_names:
            file_format = (
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
            )
        else:
            file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))

        logger.addHandler(file_handler)
        if not reuse:
            logger.info(f"Logging to file: {file_handler.baseFilename}")

    if previous_file is not None:
        previous_file.close()

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    # Keep the root logger quiet so third-party output never lands on the screen
    logging.getLogger().setLevel(get_log_level(settings.logging.third_party_level))

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module with termcal namespace.

    Args:
        name (str): Logger name, typically the module's __name__ value

    Returns:
        logging.Logger: Logger under the ``termcal.`` hierarchy
    """
    if name == "termcal" or name.startswith("termcal."):
        return logging.getLogger(name)
    return logging.getLogger(f"termcal.{name}")


def apply_command_line_overrides(settings: "TermcalSettings", args: Any) -> "TermcalSettings":
    """Apply command-line argument overrides to logging and display settings.

    Priority: Command-line > Environment > YAML > Defaults. Modifies the
    settings object in-place and returns it for convenience.

    Args:
        settings (TermcalSettings): Current settings object to modify
        args (Any): Parsed command-line arguments from argparse

    Returns:
        TermcalSettings: Settings object with command-line overrides applied
    """
    if getattr(args, "log_level", None):
        settings.logging.console_level = args.log_level
        settings.logging.file_level = args.log_level

    if getattr(args, "verbose", False):
        settings.logging.console_level = "VERBOSE"
        settings.logging.file_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.logging.console_level = "ERROR"

    if getattr(args, "log_dir", None):
        settings.logging.file_directory = str(args.log_dir)
        settings.logging.file_enabled = True

    if getattr(args, "no_log_colors", False):
        settings.logging.console_colors = False

    if getattr(args, "max_log_files", None):
        settings.logging.max_log_files = args.max_log_files

    if getattr(args, "no_colors", False):
        settings.display.use_colors = False

    return settings


__all__ = [
    "VERBOSE",
    "AutoColoredFormatter",
    "TimestampedFileHandler",
    "apply_command_line_overrides",
    "get_log_level",
    "get_logger",
    "setup_logging",
]
