"""Data models for web-omnihandler.

This module defines the normalized response returned by handlers and the
helpers adapters use to read any accepted response shape.
"""

import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, MutableMapping, Optional, Tuple, Union

JSON_CONTENT_TYPE = "application/json;charset=utf-8"


@dataclass
class StandardResponse:
    """Framework-agnostic response produced by a normalized handler.

    Handlers may equally return a plain dict with the same keys, or any
    object exposing a mutable ``headers`` attribute.

    Attributes:
        status: HTTP status code. Default: 200
        body: JSON-serializable response body.
        headers: Response headers. Created by the interceptor if missing.
    """

    status: int = 200
    body: Any = None
    headers: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation.

        Returns:
            Dictionary with all response data.
        """
        return {
            "status": self.status,
            "body": self.body,
            "headers": dict(self.headers) if self.headers is not None else None,
        }

    def to_json(self) -> str:
        """Convert to JSON string.

        Returns:
            JSON string representation.
        """
        return json.dumps(self.to_dict(), ensure_ascii=False, default=repr)


Response = Union[StandardResponse, MutableMapping[str, Any], Any]

NormalizedHandler = Callable[..., Union[Response, Awaitable[Response]]]


def get_headers(response: Response) -> Optional[MutableMapping[str, str]]:
    """Get the headers mapping of a response, if it has one.

    Args:
        response: Any accepted response shape.

    Returns:
        The headers mapping, or None when the response carries none.
    """
    if isinstance(response, MutableMapping):
        return response.get("headers")
    return getattr(response, "headers", None)


def set_headers(response: Response, headers: MutableMapping[str, str]) -> None:
    """Attach a headers mapping to a response.

    Args:
        response: Any accepted response shape.
        headers: The mapping to attach.
    """
    if isinstance(response, MutableMapping):
        response["headers"] = headers
    else:
        setattr(response, "headers", headers)


def unpack_response(response: Response) -> Tuple[int, Any, Dict[str, str]]:
    """Split a response into status, body and headers for an adapter.

    Args:
        response: Any accepted response shape.

    Returns:
        Tuple of (status, body, headers). Status defaults to 200.
    """
    if isinstance(response, MutableMapping):
        status = response.get("status", 200)
        body = response.get("body")
    else:
        status = getattr(response, "status", 200)
        body = getattr(response, "body", None)
    headers = dict(get_headers(response) or {})
    return int(status if status is not None else 200), body, headers
