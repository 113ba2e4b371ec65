"""AWS Lambda adapter.

This module provides the Lambda-specific implementation of the
framework adapter interface.
"""

import base64
import binascii
import json
import logging
from typing import Any, Callable, Dict, Mapping, TYPE_CHECKING

from ...core import BUILTIN_FRAMEWORKS, BaseAdapter
from ...exceptions import FrameworkAdapterError
from ...models import unpack_response

if TYPE_CHECKING:
    from ...models import NormalizedHandler

logger = logging.getLogger(__name__)


# Keys present on API Gateway and function URL proxy events
_PROXY_EVENT_KEYS = ("requestContext", "httpMethod", "routeKey")


def _is_proxy_event(event: Mapping[str, Any]) -> bool:
    return any(key in event for key in _PROXY_EVENT_KEYS)


def _is_lambda_context(context: Any) -> bool:
    return hasattr(context, "aws_request_id") and callable(
        getattr(context, "get_remaining_time_in_millis", None)
    )


@BUILTIN_FRAMEWORKS.register("lambda")
class LambdaAdapter(BaseAdapter[Mapping[str, Any], Dict[str, Any]]):
    """AWS Lambda adapter.

    Recognizes the ``(event, context)`` pair the Lambda runtime passes to
    a function handler. The entry point is synchronous and returns an API
    Gateway proxy response dict.
    """

    def check(self, *args: Any) -> bool:
        """Check if the arguments are a Lambda event and context.

        Args:
            *args: The raw dispatcher arguments.

        Returns:
            True for a mapping event followed by a Lambda context.
        """
        return (
            len(args) >= 2
            and isinstance(args[0], Mapping)
            and _is_lambda_context(args[1])
        )

    def handle(self, handler: "NormalizedHandler") -> Callable[..., Dict[str, Any]]:
        """Create a Lambda function handler.

        Args:
            handler: The normalized handler.

        Returns:
            A function taking ``(event, context)`` and returning the proxy
            response dict.
        """

        def entry(event: Mapping[str, Any], context: Any, *args: Any) -> Dict[str, Any]:
            body = self.get_event_body(event)
            headers = self.lower_headers(event.get("headers") or {})
            metadata = {"lambda": {"event": event, "context": context}}

            response = self.invoke_sync(handler, body, headers, metadata)

            status, payload, response_headers = unpack_response(response)
            logger.debug(
                f"Lambda response status: {status} "
                f"(request {getattr(context, 'aws_request_id', '-')})"
            )
            return {
                "statusCode": status,
                "headers": response_headers,
                "body": json.dumps(payload, ensure_ascii=False),
            }

        return entry

    def get_event_body(self, event: Mapping[str, Any]) -> Any:
        """Extract the request body from a Lambda event.

        Proxy events carry the body as a (possibly base64-encoded) string
        and omit it on requests without one. Other events without a
        ``body`` key are direct invocations and the event itself is the body.

        Args:
            event: The Lambda event.

        Returns:
            The decoded body, or None for a proxy event without a body.

        Raises:
            FrameworkAdapterError: If a base64-flagged body cannot be decoded.
        """
        if "body" not in event:
            if _is_proxy_event(event):
                return None
            return dict(event)

        raw = event["body"]
        if not isinstance(raw, (str, bytes)):
            return raw
        if event.get("isBase64Encoded"):
            try:
                raw = base64.b64decode(raw, validate=True)
            except (binascii.Error, ValueError) as e:
                raise FrameworkAdapterError(
                    "Invalid base64 body in Lambda event",
                    framework="lambda",
                    cause=e,
                ) from e
        return self.decode_body(raw)

    def get_framework_name(self) -> str:
        """Get the name of the framework this adapter handles.

        Returns:
            The string "lambda".
        """
        return "lambda"
