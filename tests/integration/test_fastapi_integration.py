"""Integration tests for serving a handler through FastAPI."""

import asyncio
from typing import Any

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from web_omnihandler import StandardResponse, attach, reset_logs


class TestFastAPIIntegration:
    """Integration tests for FastAPI with an attached App."""

    def setup_method(self) -> None:
        """Set up test fixtures."""

        async def handler(body: Any, headers: Any, metadata: Any = None) -> Any:
            await asyncio.sleep(0)
            if body == {"fail": True}:
                raise ValueError("handler failed")
            if body == {"html": True}:
                return {"body": "<p/>", "headers": {"Content-Type": "text/html"}}
            return StandardResponse(
                status=200,
                body={"echo": body, "request_id": headers.get("x-request-id")},
            )

        self.omni = attach({"handler": handler})
        self.app = FastAPI()

        @self.app.post("/webhook")
        async def webhook(request: Request) -> Any:
            return await self.omni(request)

        self.client = TestClient(self.app, raise_server_exceptions=False)

    def teardown_method(self) -> None:
        """Restore the default log sinks."""
        reset_logs()

    def test_request_is_dispatched_to_handler(self) -> None:
        """Test that the FastAPI adapter handles the request."""
        response = self.client.post(
            "/webhook", json={"query": "hi"}, headers={"X-Request-Id": "r1"}
        )

        assert response.status_code == 200
        assert response.json() == {"echo": {"query": "hi"}, "request_id": "r1"}
        assert response.headers["content-type"] == "application/json;charset=utf-8"

    def test_content_type_forced_to_json(self) -> None:
        """Test that the handler's content type is overwritten."""
        response = self.client.post("/webhook", json={"html": True})

        assert response.headers["content-type"] == "application/json;charset=utf-8"
        assert response.json() == "<p/>"

    def test_handler_error_is_not_swallowed(self) -> None:
        """Test that handler failures surface as server errors."""
        response = self.client.post("/webhook", json={"fail": True})

        assert response.status_code == 500
