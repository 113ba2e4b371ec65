"""Sanic framework integration for web-omnihandler.

This module provides the Sanic-specific adapter.
"""

from .adapter import SanicAdapter

__all__ = ["SanicAdapter"]
