"""Settings management using Pydantic for type validation and configuration."""

import logging
from pathlib import Path
from typing import Any, Optional, cast

import yaml
from pydantic import BaseModel, Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL")


def _validate_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level '{value}'. Use one of: {', '.join(LOG_LEVELS)}")
    return level


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    # Console Logging (stderr, outside the full-screen session only)
    console_enabled: bool = Field(default=True, description="Enable console logging")
    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    # File Logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(
        default="DEBUG",
        description="File log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to data_dir/logs)"
    )
    file_prefix: str = Field(default="termcal", description="Log file prefix")
    max_log_files: int = Field(default=5, ge=1, description="Maximum number of log files to keep")
    include_function_names: bool = Field(
        default=True, description="Include function names and line numbers in file logs"
    )

    # Third-party Libraries
    third_party_level: str = Field(
        default="WARNING", description="Log level for third-party libraries"
    )

    @field_validator("console_level", "file_level", "third_party_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        return _validate_level(value)


class DisplaySettings(BaseModel):
    """Full-screen display settings."""

    use_colors: bool = Field(
        default=True, description="Use colors when the terminal supports them"
    )
    # Month names start at column 1 and "September" is 9 characters wide
    index_width: int = Field(
        default=12,
        ge=11,
        description="Columns reserved on the left for the year and month index",
    )


class TermcalSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Private attributes
    _explicit_args: set = PrivateAttr(default_factory=set)

    # File Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "termcal")
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".local" / "share" / "termcal")

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
    display: DisplaySettings = Field(
        default_factory=DisplaySettings, description="Display settings"
    )

    model_config = SettingsConfigDict(
        env_prefix="TERMCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        validate_assignment=True,
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)

        # Track which arguments were explicitly provided
        self._explicit_args = set(kwargs.keys())

        # Load YAML configuration after basic initialization
        self._load_yaml_config()

    @property
    def config_file(self) -> Path:
        """Path to YAML configuration file."""
        return self.config_dir / "config.yaml"

    @property
    def log_dir(self) -> Path:
        """Directory for log files."""
        if self.logging.file_directory:
            return Path(self.logging.file_directory)
        return self.data_dir / "logs"

    def _find_config_file(self) -> Optional[Path]:
        """Find the YAML config file in the config directory."""
        if self.config_file.is_file():
            return self.config_file
        return None

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists.

        Values from the file only fill sections that were not passed
        explicitly. Environment variables still win for the fields they set.
        """
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                return
            if not isinstance(config_data, dict):
                raise ValueError("top level must be a mapping")

            self._load_section("logging", config_data)
            self._load_section("display", config_data)

        except Exception as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logger.warning(f"Could not load YAML config from {config_file}: {e}")

    def _load_section(self, name: str, config_data: dict) -> None:
        """Merge one YAML section into the matching nested model."""
        if name not in config_data or name in self._explicit_args:
            return

        section = config_data[name] or {}
        if not isinstance(section, dict):
            raise ValueError(f"'{name}' must be a mapping")

        current: BaseModel = getattr(self, name)
        explicitly_set = current.model_fields_set
        merged = {**section, **current.model_dump(include=explicitly_set)}
        setattr(self, name, type(current).model_validate({**current.model_dump(), **merged}))


# Global settings management
_settings_instance: Optional[TermcalSettings] = None


def get_settings() -> TermcalSettings:
    """Get the global settings instance, creating it lazily if needed.

    Returns:
        TermcalSettings: The global settings instance
    """
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = TermcalSettings()
    return cast(TermcalSettings, globals()["_settings_instance"])


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None


__all__ = [
    "LOG_LEVELS",
    "DisplaySettings",
    "LoggingSettings",
    "TermcalSettings",
    "get_settings",
    "reset_settings",
]
