"""Web OmniHandler - one request handler for many Python web frameworks.

This package lets a single normalized handler serve requests coming from
Flask, FastAPI, Sanic or AWS Lambda. The framework is detected from the
arguments of each call, so the handler author never needs to know which
one produced a request.

Quick Start (Flask):
    from flask import Flask, request
    from web_omnihandler import attach

    async def handler(body, headers, metadata=None):
        return {"status": 200, "body": {"echo": body}}

    omni = attach({"handler": handler})
    app = Flask(__name__)

    @app.post("/webhook")
    def webhook():
        return omni(request)

Quick Start (AWS Lambda):
    omni = attach({"handler": handler})

    def lambda_handler(event, context):
        return omni(event, context)

Full Configuration:
    from web_omnihandler import AppOptions, attach

    options = AppOptions(
        debug=True,
        logs={"error": report_error},
        log_path="/var/log/omni",
    )
    omni = attach(service, options)

Plugins:
    def with_greeting(app):
        return {"greet": lambda name: f"hello {name}"}

    omni = attach(service).use(with_greeting)
    omni.greet("world")
"""

__version__ = "0.1.0"

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .config import AppOptions
from .core import App, BaseAdapter, FrameworkRegistry, Plugin
from .core.app import RESERVED_FIELDS
from .exceptions import ConfigurationError, FrameworkAdapterError, OmniHandlerError
from .logs import LogSinks, reset_logs, set_logs
from .models import JSON_CONTENT_TYPE, StandardResponse

logger = logging.getLogger(__name__)

# Track if file logging has been set up
_file_handler_initialized = False


def _setup_file_logging(log_path: str, log_level: int = logging.INFO) -> None:
    """Set up file logging for the web_omnihandler package.

    Creates a rotating log file in the specified directory.

    Args:
        log_path: Directory path for log files.
        log_level: Logging level (default: INFO).
    """
    global _file_handler_initialized

    if _file_handler_initialized:
        return

    try:
        log_dir = Path(log_path)
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / "omnihandler.log"

        # Create rotating file handler (10MB max, keep 5 backups)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)

        root_logger = logging.getLogger("web_omnihandler")
        root_logger.addHandler(file_handler)

        # Ensure the logger level allows the messages through
        if root_logger.level == logging.NOTSET or root_logger.level > log_level:
            root_logger.setLevel(log_level)

        _file_handler_initialized = True
        logger.info(f"File logging initialized: {log_file}")

    except OSError as e:
        logger.warning(f"Failed to set up file logging: {e}")


def _service_fields(service: Any) -> Dict[str, Any]:
    """Collect the public fields of a service mapping or object."""
    if service is None:
        return {}
    if isinstance(service, Mapping):
        return dict(service)
    return {
        name: getattr(service, name)
        for name in dir(service)
        if not name.startswith("_")
    }


def attach(
    service: Any = None,
    options: Union[AppOptions, Mapping[str, Any], None] = None,
    **kwargs: Any,
) -> App:
    """Create an application serving a service's normalized handler.

    The service's public fields are copied onto the app. Its ``handler``
    becomes the app's handler, wrapped by the interceptor. The app's log
    sinks are installed process-wide, replacing those of any earlier
    ``attach`` call.

    Args:
        service: A mapping or object providing ``handler`` and any extra
            fields to expose on the app.
        options: Application options, as AppOptions or a dict. If None,
            uses defaults.
        **kwargs: Quick option overrides (e.g., debug=True).

    Returns:
        The callable App.

    Raises:
        ConfigurationError: If the options are invalid, the handler is not
            callable, or the service overrides a reserved app field.

    Example:
        omni = attach({"handler": handler}, debug=True)
        response = await omni({"query": "hi"}, {"x-request-id": "1"})
    """
    if options is None:
        options = AppOptions()
    elif isinstance(options, Mapping):
        options = AppOptions.from_dict(options)

    if kwargs:
        options = options.merge(**kwargs)

    if options.log_path:
        _setup_file_logging(options.log_path, options.log_level_value)

    app = App(options)

    fields = _service_fields(service)
    handler = fields.pop("handler", None)
    reserved = RESERVED_FIELDS.intersection(fields)
    if reserved:
        raise ConfigurationError(
            f"Service fields {sorted(reserved)} would override the application"
        )
    if handler is not None and not callable(handler):
        raise ConfigurationError(
            f"Service handler must be callable, got {type(handler).__name__}"
        )
    for name, value in fields.items():
        setattr(app, name, value)

    set_logs(app.logs)

    app.handler = app.interceptor.wrap(handler if handler is not None else app.handler)

    logger.info(
        f"Application attached - debug: {app.debug}, "
        f"frameworks: {app.frameworks.list_frameworks()}"
    )
    if handler is None:
        logger.warning("No handler provided, every request will fail")
    return app


__all__ = [
    # Version
    "__version__",
    # Core components
    "attach",
    "App",
    "Plugin",
    "BaseAdapter",
    "FrameworkRegistry",
    # Configuration
    "AppOptions",
    # Logging
    "LogSinks",
    "set_logs",
    "reset_logs",
    # Types
    "StandardResponse",
    "JSON_CONTENT_TYPE",
    # Exceptions
    "OmniHandlerError",
    "ConfigurationError",
    "FrameworkAdapterError",
]
