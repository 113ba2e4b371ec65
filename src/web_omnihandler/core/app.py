"""Application core and dispatcher.

This module defines the App object returned by ``attach``. An App is
callable: calling it with a framework's native arguments detects the
framework and routes the request to the normalized handler.
"""

import logging
from typing import Any, Callable, Mapping, Optional, TYPE_CHECKING

from ..exceptions import ConfigurationError
from ..logs import LogSinks
from .interceptor import Interceptor
from .registry import BUILTIN_FRAMEWORKS, FrameworkRegistry

if TYPE_CHECKING:
    from ..config import AppOptions
    from ..models import NormalizedHandler

logger = logging.getLogger(__name__)

Plugin = Callable[["App"], Optional[Any]]

# Attribute names that services and plugins may not override
RESERVED_FIELDS = frozenset(
    {"frameworks", "logs", "options", "interceptor", "debug", "use", "dispatch"}
)


async def _handler_not_set(body: Any, headers: Any, metadata: Any = None) -> Any:
    raise ConfigurationError("Normalized handler not set")


class App:
    """A deployed service able to serve requests from any registered framework.

    Attributes:
        frameworks: The app's own copy of the framework registry.
        handler: The current normalized handler. Before attachment it fails
            every call with ConfigurationError.
        logs: The log sinks owned by this app.
        options: The options the app was created with.
        interceptor: The logging and header wrapper applied to the handler.

    Example:
        app = App(AppOptions(debug=True))
        app.handler = app.interceptor.wrap(my_handler)

        # Framework detected from the arguments
        response = app(flask.request)
        # No framework matched: handler(body, headers)
        response = await app({"query": "hi"}, {"x-id": "1"})
    """

    def __init__(
        self,
        options: Optional["AppOptions"] = None,
        frameworks: Optional[FrameworkRegistry] = None,
    ) -> None:
        """Initialize the application.

        Args:
            options: Application options. Uses defaults if None.
            frameworks: Registry to copy. Uses the built-in adapters if None.
        """
        if options is None:
            from ..config import AppOptions

            options = AppOptions()

        self.options = options
        if frameworks is None:
            # Importing the package registers the built-in adapters
            from .. import frameworks as _builtin  # noqa: F401

            frameworks = BUILTIN_FRAMEWORKS
        self.frameworks = frameworks.copy()
        self.handler: "NormalizedHandler" = _handler_not_set
        self.logs = LogSinks.coerce(options.logs)
        self.interceptor = Interceptor(
            self.logs,
            debug=options.debug,
            max_log_value_size=options.max_log_value_size,
        )
        self._debug = options.debug

    @property
    def debug(self) -> bool:
        """Whether the app logs request details at info level."""
        return self._debug

    def use(self, plugin: Plugin) -> Any:
        """Apply a plugin to this app.

        A plugin receives the app and either mutates it and returns None,
        returns a mapping of new capabilities to merge onto the app, or
        returns an extended app-shaped object.

        A merged ``handler`` is wrapped by the app's interceptor, so its
        responses keep the JSON content type.

        Args:
            plugin: The plugin to apply.

        Returns:
            This app when the plugin returned None or a mapping, otherwise
            the plugin's result.

        Raises:
            ConfigurationError: If a returned mapping overrides a reserved
                app field or provides a non-callable handler.
        """
        result = plugin(self)
        if result is None:
            return self
        if isinstance(result, Mapping):
            fields = dict(result)
            reserved = RESERVED_FIELDS.intersection(fields)
            if reserved:
                raise ConfigurationError(
                    f"Plugin fields {sorted(reserved)} would override the application"
                )
            handler = fields.pop("handler", None)
            if handler is not None:
                if not callable(handler):
                    raise ConfigurationError(
                        f"Plugin handler must be callable, got {type(handler).__name__}"
                    )
                self.handler = self.interceptor.wrap(handler)
            for name, value in fields.items():
                setattr(self, name, value)
            return self
        return result

    def dispatch(self, *args: Any) -> Any:
        """Route raw framework arguments to the normalized handler.

        The first registered adapter whose ``check`` accepts the arguments
        handles the request. Without a match the handler is called with the
        first two arguments as body and headers; the rest are dropped.

        Args:
            *args: The framework's native call arguments.

        Returns:
            The adapter's native response, or the handler's awaitable
            result on the fallback path.
        """
        match = self.frameworks.detect(*args)
        if match is not None:
            _, adapter = match
            return adapter.handle(self.handler)(*args)

        logger.debug("No framework matched, calling handler directly")
        body = args[0] if len(args) > 0 else None
        headers = args[1] if len(args) > 1 else {}
        return self.handler(body, headers)

    def __call__(self, *args: Any) -> Any:
        return self.dispatch(*args)

    def __repr__(self) -> str:
        return f"App(debug={self.debug}, frameworks={self.frameworks.list_frameworks()})"
