"""Request/response interceptor.

This module wraps the normalized handler so that every invocation is
logged and every response carries the JSON content type.
"""

import inspect
import json
from functools import wraps
from typing import Any, Mapping, Optional, TYPE_CHECKING

from ..logs import LogSinks, get_logs, level_for
from ..models import JSON_CONTENT_TYPE, get_headers, set_headers

if TYPE_CHECKING:
    from ..models import NormalizedHandler, Response

# Maximum size for logged values to keep log lines bounded
MAX_LOG_VALUE_SIZE = 10000


def _json_default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return repr(value)


def _truncate_value(value: str, max_size: int = MAX_LOG_VALUE_SIZE) -> str:
    """Truncate a string value if it exceeds max size.

    Args:
        value: The string value to truncate.
        max_size: Maximum allowed size.

    Returns:
        Truncated string with indicator if truncated.
    """
    if len(value) <= max_size:
        return value
    return value[:max_size] + "... [truncated]"


def stringify(value: Any, max_size: int = MAX_LOG_VALUE_SIZE) -> str:
    """Serialize a value for a log line without ever raising.

    Tries JSON first, then ``repr``. Circular or otherwise unserializable
    values degrade to a placeholder string.

    Args:
        value: The value to serialize.
        max_size: Maximum length of the result.

    Returns:
        The serialized, possibly truncated, string.
    """
    try:
        text = json.dumps(value, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError, RecursionError):
        try:
            text = repr(value)
        except Exception:
            text = f"<unserializable {type(value).__name__}>"
    except Exception:
        text = f"<unserializable {type(value).__name__}>"
    return _truncate_value(text, max_size)


class Interceptor:
    """Logging and header-normalizing wrapper around a normalized handler.

    On every call the wrapped handler logs the request body and headers,
    awaits the handler, forces ``content-type: application/json;charset=utf-8``
    on the response and logs the response. Handler errors propagate
    unchanged.

    Attributes:
        logs: The sinks to log with. Uses the process-wide sinks if None.
        debug: Log at info level when True, debug level otherwise.
        max_log_value_size: Truncation limit for serialized values.

    Example:
        interceptor = Interceptor(LogSinks.default(), debug=True)
        app.handler = interceptor.wrap(handler)
    """

    def __init__(
        self,
        logs: Optional[LogSinks] = None,
        debug: bool = False,
        max_log_value_size: int = MAX_LOG_VALUE_SIZE,
    ) -> None:
        self.logs = logs
        self.debug = debug
        self.max_log_value_size = max_log_value_size

    @property
    def log(self) -> Any:
        """The sink request details are logged with."""
        return level_for(self.logs or get_logs(), self.debug)

    def wrap(self, handler: "NormalizedHandler") -> "NormalizedHandler":
        """Wrap a normalized handler.

        Both sync and async handlers are accepted; the wrapper is always
        a coroutine function.

        Args:
            handler: The handler to wrap.

        Returns:
            The wrapped async handler.
        """

        @wraps(handler)
        async def standard(
            body: Any, headers: Mapping[str, str], metadata: Any = None
        ) -> "Response":
            log = self.log
            log("Request", stringify(body, self.max_log_value_size))
            log("Headers", stringify(headers, self.max_log_value_size))

            response = handler(body, headers, metadata)
            if inspect.isawaitable(response):
                response = await response

            self.normalize(response)
            log("Response", stringify(response, self.max_log_value_size))
            return response

        return standard

    @staticmethod
    def normalize(response: "Response") -> "Response":
        """Ensure a response has headers and the JSON content type.

        Any differently-cased content-type entry is replaced.

        Args:
            response: The handler's response, mutated in place.

        Returns:
            The same response.
        """
        headers = get_headers(response)
        if headers is None:
            headers = {}
            set_headers(response, headers)
        for key in [k for k in headers if k.lower() == "content-type"]:
            del headers[key]
        headers["content-type"] = JSON_CONTENT_TYPE
        return response
