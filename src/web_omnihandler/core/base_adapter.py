"""Base adapter for framework integration.

This module defines the abstract base class for framework adapters,
which bridge a framework's native request and response shapes to the
normalized handler contract.
"""

import asyncio
import inspect
import json
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Mapping, TYPE_CHECKING, TypeVar, Union

if TYPE_CHECKING:
    from ..models import NormalizedHandler, Response

# Generic type variables for framework-specific types
RequestType = TypeVar("RequestType")
ResponseType = TypeVar("ResponseType")


class BaseAdapter(ABC, Generic[RequestType, ResponseType]):
    """Abstract base class for framework adapters.

    Each supported framework (Flask, FastAPI, AWS Lambda, etc.) has its
    own adapter. The dispatcher asks every registered adapter, in
    registration order, whether it recognizes the incoming arguments and
    hands the request to the first one that does.

    Generic Parameters:
        RequestType: The framework's request type (e.g., flask.Request).
        ResponseType: The framework's response type (e.g., flask.Response).

    Example:
        @BUILTIN_FRAMEWORKS.register("flask")
        class FlaskAdapter(BaseAdapter[Request, Response]):
            def check(self, *args):
                return bool(args) and isinstance(args[0], Request)
            ...
    """

    @abstractmethod
    def check(self, *args: Any) -> bool:
        """Check whether the raw call arguments belong to this framework.

        Must be free of side effects and must not raise for arguments
        meant for another framework, since it is called speculatively.

        Args:
            *args: The raw positional arguments given to the dispatcher.

        Returns:
            True if this adapter recognizes the request shape.
        """
        pass

    @abstractmethod
    def handle(self, handler: "NormalizedHandler") -> Callable[..., Any]:
        """Create a framework-native entry point bound to a handler.

        Args:
            handler: The normalized handler to invoke.

        Returns:
            A callable taking the raw arguments and returning the
            framework's native response (or an awaitable of it).
        """
        pass

    def get_framework_name(self) -> str:
        """Get the name of the framework this adapter handles.

        Returns:
            The framework name (e.g., "flask", "lambda").
        """
        return self.__class__.__name__.replace("Adapter", "").lower()

    async def invoke(
        self,
        handler: "NormalizedHandler",
        body: Any,
        headers: Mapping[str, str],
        metadata: Any = None,
    ) -> "Response":
        """Call a normalized handler and await its result if needed.

        Args:
            handler: The normalized handler.
            body: The decoded request body.
            headers: The request headers.
            metadata: Framework-specific objects for the handler.

        Returns:
            The handler's response.
        """
        response = handler(body, headers, metadata)
        if inspect.isawaitable(response):
            response = await response
        return response

    def invoke_sync(
        self,
        handler: "NormalizedHandler",
        body: Any,
        headers: Mapping[str, str],
        metadata: Any = None,
    ) -> "Response":
        """Run :meth:`invoke` to completion for synchronous frameworks.

        Must not be called from a thread with a running event loop.
        """
        return asyncio.run(self.invoke(handler, body, headers, metadata))

    @staticmethod
    def decode_body(raw: Union[bytes, str, None]) -> Any:
        """Decode a raw request body.

        Args:
            raw: The raw body.

        Returns:
            None for an empty body, the parsed JSON value, or the body as
            text when it is not valid JSON.
        """
        if not raw:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        try:
            return json.loads(raw)
        except ValueError:
            return raw

    @staticmethod
    def lower_headers(headers: Any) -> dict:
        """Copy a framework header collection into a lower-cased dict."""
        return {str(key).lower(): value for key, value in headers.items()}
