"""Unit tests for LambdaAdapter."""

import base64
import json
from typing import Any, List

import pytest

from web_omnihandler.core import BUILTIN_FRAMEWORKS
from web_omnihandler.exceptions import FrameworkAdapterError
from web_omnihandler.frameworks.aws_lambda import LambdaAdapter


class FakeContext:
    """Minimal stand-in for the Lambda runtime context."""

    aws_request_id = "req-123"
    function_name = "omni"

    def get_remaining_time_in_millis(self) -> int:
        return 3000


class TestLambdaAdapter:
    """Tests for LambdaAdapter class."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.adapter = LambdaAdapter()
        self.context = FakeContext()
        self.calls: List[tuple] = []

    def _handler(self, status: int = 200) -> Any:
        async def handler(body: Any, headers: Any, metadata: Any = None) -> dict:
            self.calls.append((body, headers, metadata))
            return {
                "status": status,
                "body": {"echo": body},
                "headers": {"content-type": "application/json;charset=utf-8"},
            }

        return handler

    def test_check_event_and_context(self) -> None:
        """Test that a Lambda event/context pair is recognized."""
        assert self.adapter.check({"body": "{}"}, self.context) is True

    def test_check_rejects_foreign_arguments(self) -> None:
        """Test that other call shapes are not recognized."""
        assert self.adapter.check() is False
        assert self.adapter.check({"body": "{}"}) is False
        assert self.adapter.check({"body": "{}"}, {"a": "1"}) is False
        assert self.adapter.check("body", self.context) is False
        assert self.adapter.check(None, None) is False

    def test_get_framework_name(self) -> None:
        """Test framework name is 'lambda'."""
        assert self.adapter.get_framework_name() == "lambda"

    def test_registered_in_builtin_frameworks(self) -> None:
        """Test that adapter is registered as a built-in."""
        from web_omnihandler import frameworks  # noqa: F401

        assert isinstance(BUILTIN_FRAMEWORKS.get("lambda"), LambdaAdapter)

    def test_discovery_registers_lambda_last(self) -> None:
        """Test that discovery reports lambda after the optional frameworks."""
        from web_omnihandler.frameworks import discover_frameworks

        discovered = discover_frameworks()

        assert discovered[-1] == "lambda"
        assert discovered == BUILTIN_FRAMEWORKS.list_frameworks()

    def test_handle_proxy_event(self) -> None:
        """Test translating an API Gateway proxy event."""
        event = {
            "httpMethod": "POST",
            "headers": {"Content-Type": "application/json", "X-Id": "7"},
            "body": json.dumps({"query": "hi"}),
        }

        result = self.adapter.handle(self._handler(status=201))(event, self.context)

        assert result["statusCode"] == 201
        assert json.loads(result["body"]) == {"echo": {"query": "hi"}}
        assert result["headers"]["content-type"] == "application/json;charset=utf-8"

        body, headers, metadata = self.calls[0]
        assert body == {"query": "hi"}
        assert headers == {"content-type": "application/json", "x-id": "7"}
        assert metadata["lambda"]["context"] is self.context
        assert metadata["lambda"]["event"] is event

    def test_handle_base64_body(self) -> None:
        """Test that base64-encoded bodies are decoded."""
        raw = base64.b64encode(json.dumps({"a": 1}).encode()).decode()
        event = {"body": raw, "isBase64Encoded": True, "headers": None}

        self.adapter.handle(self._handler())(event, self.context)

        assert self.calls[0][0] == {"a": 1}
        assert self.calls[0][1] == {}

    def test_handle_invalid_base64_body(self) -> None:
        """Test that undecodable bodies raise FrameworkAdapterError."""
        event = {"body": "***", "isBase64Encoded": True}

        with pytest.raises(FrameworkAdapterError):
            self.adapter.handle(self._handler())(event, self.context)

    def test_handle_text_body(self) -> None:
        """Test that non-JSON bodies reach the handler as text."""
        event = {"body": "plain text"}

        self.adapter.handle(self._handler())(event, self.context)

        assert self.calls[0][0] == "plain text"

    def test_handle_direct_invocation(self) -> None:
        """Test that an event without a body is the body itself."""
        event = {"query": "direct"}

        self.adapter.handle(self._handler())(event, self.context)

        assert self.calls[0][0] == {"query": "direct"}

    @pytest.mark.parametrize(
        "event",
        [
            {
                "version": "2.0",
                "routeKey": "GET /items",
                "rawPath": "/items",
                "requestContext": {"http": {"method": "GET"}},
                "headers": {"Accept": "application/json"},
            },
            {"httpMethod": "GET", "path": "/items", "headers": None},
        ],
    )
    def test_handle_proxy_event_without_body(self, event: dict) -> None:
        """Test that a proxy GET without a body reaches the handler as None."""
        result = self.adapter.handle(self._handler())(event, self.context)

        assert self.calls[0][0] is None
        assert json.loads(result["body"]) == {"echo": None}

    def test_handler_error_propagates(self) -> None:
        """Test that handler failures are not swallowed."""

        async def failing(body: Any, headers: Any, metadata: Any = None) -> dict:
            raise RuntimeError("handler failed")

        with pytest.raises(RuntimeError, match="handler failed"):
            self.adapter.handle(failing)({"body": None}, self.context)
