"""Configuration management for web-omnihandler.

This module provides the AppOptions dataclass for configuring an
attached application.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .exceptions import ConfigurationError
from .logs import LogSinks

LogsOption = Union[None, Callable[..., Any], LogSinks, Mapping[str, Callable[..., Any]]]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppOptions:
    """Options recognized by :func:`web_omnihandler.attach`.

    Attributes:
        debug: Log request and response details at info level instead of
            debug level. Default: False
        logs: Logging configuration installed into the process-wide facade.
            Either a single function used for every level, a LogSinks, or a
            mapping with any of the keys "debug", "info", "warn", "error".
            None keeps the standard-library logger sinks. Default: None
        log_path: Directory for a rotating log file. None disables file
            logging. Default: None
        log_level: Level of the file log handler. Default: "INFO"
        max_log_value_size: Maximum length of a serialized value in a log
            line before it is truncated. Default: 10000
    """

    debug: bool = False
    logs: LogsOption = None
    log_path: Optional[str] = None
    log_level: str = "INFO"
    max_log_value_size: int = 10000

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid.
        """
        if not isinstance(self.debug, bool):
            raise ConfigurationError(f"debug must be a bool, got {self.debug!r}")

        # Raises for sinks that are not callable
        LogSinks.coerce(self.logs)

        if not isinstance(self.log_level, str):
            raise ConfigurationError(
                f"log_level must be a string, got {self.log_level!r}"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {list(_LOG_LEVELS)}, got {self.log_level}"
            )

        if self.max_log_value_size <= 0:
            raise ConfigurationError(
                f"max_log_value_size must be positive, got {self.max_log_value_size}"
            )

    @property
    def log_level_value(self) -> int:
        """The numeric standard-library level for ``log_level``."""
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls) -> "AppOptions":
        """Create options from environment variables.

        Environment variable mappings:
            OMNI_DEBUG -> debug (true/false)
            OMNI_LOG_PATH -> log_path
            OMNI_LOG_LEVEL -> log_level
            OMNI_MAX_LOG_VALUE_SIZE -> max_log_value_size

        Returns:
            AppOptions instance with values from environment.

        Raises:
            ConfigurationError: If environment values are invalid.
        """
        kwargs: Dict[str, Any] = {}

        if debug := os.environ.get("OMNI_DEBUG"):
            debug_lower = debug.lower()
            if debug_lower in ("true", "1", "yes"):
                kwargs["debug"] = True
            elif debug_lower in ("false", "0", "no"):
                kwargs["debug"] = False
            else:
                raise ConfigurationError(
                    f"Invalid OMNI_DEBUG value: {debug}. "
                    "Must be true/false, 1/0, or yes/no"
                )

        if log_path := os.environ.get("OMNI_LOG_PATH"):
            kwargs["log_path"] = log_path

        if log_level := os.environ.get("OMNI_LOG_LEVEL"):
            kwargs["log_level"] = log_level

        if max_size := os.environ.get("OMNI_MAX_LOG_VALUE_SIZE"):
            try:
                kwargs["max_log_value_size"] = int(max_size)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid OMNI_MAX_LOG_VALUE_SIZE value: {max_size}"
                ) from e

        return cls(**kwargs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppOptions":
        """Create options from a dictionary.

        Args:
            data: Options dictionary with field names as keys. Unknown keys
                are ignored.

        Returns:
            AppOptions instance with values from dictionary.

        Raises:
            ConfigurationError: If dictionary values are invalid.
        """
        valid_fields = {
            "debug",
            "logs",
            "log_path",
            "log_level",
            "max_log_value_size",
        }

        kwargs = {k: v for k, v in data.items() if k in valid_fields}

        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def merge(self, **kwargs: Any) -> "AppOptions":
        """Create new options with some values overridden.

        Args:
            **kwargs: Option values to override.

        Returns:
            New AppOptions instance with merged values.
        """
        current: Dict[str, Any] = {
            "debug": self.debug,
            "logs": self.logs,
            "log_path": self.log_path,
            "log_level": self.log_level,
            "max_log_value_size": self.max_log_value_size,
        }
        current.update(kwargs)
        try:
            return AppOptions(**current)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
