"""Process-wide logging facade.

Holds the four severity-leveled sinks (debug, info, warn, error) used by
the dispatch pipeline. Until :func:`set_logs` is called the sinks forward
to the standard library logger ``web_omnihandler``, so early log calls
always have somewhere to go.

Example:
    from web_omnihandler import logs

    logs.set_logs(print)             # one function for every level
    logs.set_logs({"error": alert})  # per level, others keep the default
    logs.reset_logs()
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Optional, Union

logger = logging.getLogger("web_omnihandler")

LogFunction = Callable[..., Any]

LEVELS = ("debug", "info", "warn", "error")


def _forward(method: str) -> LogFunction:
    def sink(*parts: Any) -> None:
        getattr(logger, method)(" ".join(str(part) for part in parts))

    sink.__name__ = f"default_{method}"
    return sink


@dataclass(frozen=True)
class LogSinks:
    """A complete set of four log sinks.

    Attributes:
        debug: Sink for debug-level messages.
        info: Sink for info-level messages.
        warn: Sink for warning-level messages.
        error: Sink for error-level messages.
    """

    debug: LogFunction
    info: LogFunction
    warn: LogFunction
    error: LogFunction

    @classmethod
    def default(cls) -> "LogSinks":
        """Sinks forwarding to the ``web_omnihandler`` standard logger."""
        return cls(
            debug=_forward("debug"),
            info=_forward("info"),
            warn=_forward("warning"),
            error=_forward("error"),
        )

    @classmethod
    def coerce(
        cls, value: Union[None, LogFunction, "LogSinks", Mapping[str, LogFunction]]
    ) -> "LogSinks":
        """Build a LogSinks from any accepted logging configuration.

        Args:
            value: None for the defaults, a single callable applied to every
                level, a LogSinks, or a mapping of level name to callable.
                Levels missing from a mapping keep their default sink.

        Returns:
            The normalized LogSinks.

        Raises:
            ConfigurationError: If the value or one of its sinks is not usable.
        """
        from .exceptions import ConfigurationError

        if value is None:
            return cls.default()
        if isinstance(value, LogSinks):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - set(LEVELS)
            if unknown:
                raise ConfigurationError(
                    f"Unknown log levels {sorted(unknown)}, expected {list(LEVELS)}"
                )
            defaults = cls.default()
            sinks = {
                f.name: value.get(f.name) or getattr(defaults, f.name)
                for f in fields(cls)
            }
            for level, sink in sinks.items():
                if not callable(sink):
                    raise ConfigurationError(f"Log sink for '{level}' is not callable")
            return cls(**sinks)
        if callable(value):
            return cls(debug=value, info=value, warn=value, error=value)
        raise ConfigurationError(
            f"Invalid logs option of type {type(value).__name__}: "
            "expected a callable or a mapping of level to callable"
        )


_sinks: LogSinks = LogSinks.default()


def set_logs(
    value: Union[None, LogFunction, LogSinks, Mapping[str, LogFunction]]
) -> LogSinks:
    """Replace all four process-wide sinks at once.

    The most recent call wins.

    Args:
        value: Any value accepted by :meth:`LogSinks.coerce`.

    Returns:
        The installed LogSinks.
    """
    global _sinks
    _sinks = LogSinks.coerce(value)
    return _sinks


def reset_logs() -> None:
    """Restore the default standard-logger sinks."""
    global _sinks
    _sinks = LogSinks.default()


def get_logs() -> LogSinks:
    """Get the currently installed sinks."""
    return _sinks


# Sinks are looked up on each call so callers never hold a replaced sink.
def debug(*parts: Any) -> None:
    _sinks.debug(*parts)


def info(*parts: Any) -> None:
    _sinks.info(*parts)


def warn(*parts: Any) -> None:
    _sinks.warn(*parts)


def error(*parts: Any) -> None:
    _sinks.error(*parts)


def level_for(sinks: Optional[LogSinks], debug_mode: bool) -> LogFunction:
    """Pick the sink request/response details are logged with.

    Args:
        sinks: The sinks to choose from. Uses the process-wide sinks if None.
        debug_mode: Whether the application runs in debug mode.

    Returns:
        The info sink in debug mode, the debug sink otherwise.
    """
    sinks = sinks or _sinks
    return sinks.info if debug_mode else sinks.debug
