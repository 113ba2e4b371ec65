"""Flask framework adapter.

This module provides the Flask-specific implementation of the
framework adapter interface.
"""

import json
import logging
from typing import Any, Callable, TYPE_CHECKING

from flask import Request, Response

from ...core import BUILTIN_FRAMEWORKS, BaseAdapter
from ...models import unpack_response

if TYPE_CHECKING:
    from ...models import NormalizedHandler

logger = logging.getLogger(__name__)


@BUILTIN_FRAMEWORKS.register("flask")
class FlaskAdapter(BaseAdapter[Request, Response]):
    """Flask framework adapter.

    Recognizes a Flask request (or the ``flask.request`` proxy) as the
    first argument. The entry point is synchronous, matching Flask's
    WSGI views. It drives the async handler with ``asyncio.run``, so it
    cannot be called from an ``async def`` Flask view or any other thread
    with a running event loop.

    Example:
        from flask import Flask, request
        from web_omnihandler import attach

        app = Flask(__name__)
        omni = attach({"handler": handler})

        @app.post("/webhook")
        def webhook():
            return omni(request)
    """

    def check(self, *args: Any) -> bool:
        """Check if the first argument is a Flask request.

        Args:
            *args: The raw dispatcher arguments.

        Returns:
            True for a Flask request, False otherwise.
        """
        return len(args) > 0 and isinstance(args[0], Request)

    def handle(self, handler: "NormalizedHandler") -> Callable[..., Response]:
        """Create a Flask view-compatible entry point.

        Args:
            handler: The normalized handler.

        Returns:
            A function taking the Flask request and returning a Response.
        """

        def entry(request: Request, *args: Any) -> Response:
            body = request.get_json(silent=True)
            if body is None:
                body = self.decode_body(request.get_data())
            headers = self.lower_headers(request.headers)
            metadata = {"flask": {"request": request}}

            response = self.invoke_sync(handler, body, headers, metadata)

            status, payload, response_headers = unpack_response(response)
            logger.debug(f"Flask response status: {status}")
            return Response(
                json.dumps(payload, ensure_ascii=False),
                status=status,
                headers=response_headers,
            )

        return entry

    def get_framework_name(self) -> str:
        """Get the name of the framework this adapter handles.

        Returns:
            The string "flask".
        """
        return "flask"
