"""Sanic framework adapter.

This module provides the Sanic-specific implementation of the
framework adapter interface.
"""

import json
import logging
from typing import Any, Awaitable, Callable, TYPE_CHECKING

from sanic.request import Request
from sanic.response import HTTPResponse

from ...core import BUILTIN_FRAMEWORKS, BaseAdapter
from ...models import JSON_CONTENT_TYPE, unpack_response

if TYPE_CHECKING:
    from ...models import NormalizedHandler

logger = logging.getLogger(__name__)


@BUILTIN_FRAMEWORKS.register("sanic")
class SanicAdapter(BaseAdapter[Request, HTTPResponse]):
    """Sanic framework adapter.

    Example:
        from sanic import Sanic
        from web_omnihandler import attach

        app = Sanic("MyApp")
        omni = attach({"handler": handler})

        @app.post("/webhook")
        async def webhook(request):
            return await omni(request)
    """

    def check(self, *args: Any) -> bool:
        """Check if the first argument is a Sanic request.

        Args:
            *args: The raw dispatcher arguments.

        Returns:
            True for a Sanic request, False otherwise.
        """
        return len(args) > 0 and isinstance(args[0], Request)

    def handle(
        self, handler: "NormalizedHandler"
    ) -> Callable[..., Awaitable[HTTPResponse]]:
        """Create an async Sanic entry point.

        Args:
            handler: The normalized handler.

        Returns:
            A coroutine function taking the request and returning an
            HTTPResponse.
        """

        async def entry(request: Request, *args: Any) -> HTTPResponse:
            body = self.decode_body(request.body)
            headers = self.lower_headers(request.headers)
            metadata = {"sanic": {"request": request}}

            response = await self.invoke(handler, body, headers, metadata)

            status, payload, response_headers = unpack_response(response)
            content_type = response_headers.pop("content-type", JSON_CONTENT_TYPE)
            logger.debug(f"Sanic response status: {status}")
            return HTTPResponse(
                json.dumps(payload, ensure_ascii=False),
                status=status,
                headers=response_headers,
                content_type=content_type,
            )

        return entry

    def get_framework_name(self) -> str:
        """Get the name of the framework this adapter handles.

        Returns:
            The string "sanic".
        """
        return "sanic"
