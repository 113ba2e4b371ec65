"""Integration tests for serving a handler through Flask."""

from typing import Any, List

import pytest

pytest.importorskip("flask")

from flask import Flask, request

from web_omnihandler import attach, reset_logs


class TestFlaskIntegration:
    """Integration tests for Flask with an attached App."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.lines: List[tuple] = []

        async def handler(body: Any, headers: Any, metadata: Any = None) -> dict:
            return {"status": 200, "body": {"echo": body}}

        self.omni = attach(
            {"handler": handler},
            debug=True,
            logs=lambda *parts: self.lines.append(parts),
        )
        self.app = Flask(__name__)

        @self.app.post("/webhook")
        def webhook() -> Any:
            return self.omni(request)

        self.client = self.app.test_client()

    def teardown_method(self) -> None:
        """Restore the default log sinks."""
        reset_logs()

    def test_request_is_dispatched_to_handler(self) -> None:
        """Test that the Flask adapter handles the request."""
        response = self.client.post("/webhook", json={"query": "hi"})

        assert response.status_code == 200
        assert response.get_json() == {"echo": {"query": "hi"}}
        assert response.headers["Content-Type"] == "application/json;charset=utf-8"

    def test_request_and_response_logged(self) -> None:
        """Test that the interceptor logs through the configured sink."""
        self.client.post("/webhook", json={"query": "hi"})

        labels = [line[0] for line in self.lines]
        assert labels == ["Request", "Headers", "Response"]
        assert self.lines[0][1] == '{"query": "hi"}'
