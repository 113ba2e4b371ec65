"""Unit tests for SanicAdapter."""

import pytest

pytest.importorskip("sanic")

from web_omnihandler.core import BUILTIN_FRAMEWORKS
from web_omnihandler.frameworks.sanic import SanicAdapter


class TestSanicAdapter:
    """Tests for SanicAdapter class."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.adapter = SanicAdapter()

    def test_check_rejects_other_objects(self) -> None:
        """Test that non-Sanic arguments are not recognized."""
        assert self.adapter.check() is False
        assert self.adapter.check({}) is False
        assert self.adapter.check("string", {}) is False
        assert self.adapter.check(None) is False

    def test_get_framework_name(self) -> None:
        """Test framework name is 'sanic'."""
        assert self.adapter.get_framework_name() == "sanic"

    def test_registered_in_builtin_frameworks(self) -> None:
        """Test that adapter is registered as a built-in."""
        from web_omnihandler import frameworks  # noqa: F401

        assert isinstance(BUILTIN_FRAMEWORKS.get("sanic"), SanicAdapter)

    def test_handle_returns_entry_point(self) -> None:
        """Test that handle builds a coroutine function."""
        import inspect

        async def handler(body, headers, metadata=None):
            return {}

        assert inspect.iscoroutinefunction(self.adapter.handle(handler))
