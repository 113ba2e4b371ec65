"""FastAPI framework adapter.

This module provides the FastAPI/Starlette-specific implementation of the
framework adapter interface.
"""

import logging
from typing import Any, Awaitable, Callable, TYPE_CHECKING

from starlette.requests import Request
from starlette.responses import JSONResponse

from ...core import BUILTIN_FRAMEWORKS, BaseAdapter
from ...models import unpack_response

if TYPE_CHECKING:
    from ...models import NormalizedHandler

logger = logging.getLogger(__name__)


@BUILTIN_FRAMEWORKS.register("fastapi")
class FastAPIAdapter(BaseAdapter[Request, JSONResponse]):
    """FastAPI framework adapter.

    Recognizes a Starlette request as the first argument and returns an
    awaitable entry point, so route functions ``await`` the dispatcher.
    """

    def check(self, *args: Any) -> bool:
        """Check if the first argument is a Starlette request.

        Args:
            *args: The raw dispatcher arguments.

        Returns:
            True for a Starlette/FastAPI request, False otherwise.
        """
        return len(args) > 0 and isinstance(args[0], Request)

    def handle(
        self, handler: "NormalizedHandler"
    ) -> Callable[..., Awaitable[JSONResponse]]:
        """Create an async FastAPI entry point.

        Args:
            handler: The normalized handler.

        Returns:
            A coroutine function taking the request and returning a
            JSONResponse.
        """

        async def entry(request: Request, *args: Any) -> JSONResponse:
            body = self.decode_body(await request.body())
            headers = self.lower_headers(request.headers)
            metadata = {"fastapi": {"request": request}}

            response = await self.invoke(handler, body, headers, metadata)

            status, payload, response_headers = unpack_response(response)
            logger.debug(f"FastAPI response status: {status}")
            return JSONResponse(
                content=payload,
                status_code=status,
                headers=response_headers,
            )

        return entry

    def get_framework_name(self) -> str:
        """Get the name of the framework this adapter handles.

        Returns:
            The string "fastapi".
        """
        return "fastapi"
