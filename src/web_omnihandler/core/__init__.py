"""Core dispatch layer.

This module provides the abstract adapter contract, the framework
registry, the request/response interceptor and the App dispatcher.

Public API:
    - App: Callable dispatcher with plugin composition
    - BaseAdapter: Abstract base class for framework adapters
    - FrameworkRegistry: Ordered registry of framework adapters
    - BUILTIN_FRAMEWORKS: Registry every App is copied from
    - Interceptor: Logging and content-type wrapper for handlers

Example:
    # Implementing support for a new framework
    from web_omnihandler.core import BUILTIN_FRAMEWORKS, BaseAdapter

    @BUILTIN_FRAMEWORKS.register("bottle")
    class BottleAdapter(BaseAdapter[BaseRequest, HTTPResponse]):
        ...
"""

from .app import App, Plugin
from .base_adapter import BaseAdapter
from .interceptor import Interceptor, stringify
from .registry import BUILTIN_FRAMEWORKS, FrameworkRegistry

__all__ = [
    "App",
    "Plugin",
    "BaseAdapter",
    "BUILTIN_FRAMEWORKS",
    "FrameworkRegistry",
    "Interceptor",
    "stringify",
]
