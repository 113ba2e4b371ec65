"""Flask framework integration for web-omnihandler.

Public API:
    - FlaskAdapter: Framework adapter for Flask requests
"""

from .adapter import FlaskAdapter

__all__ = [
    "FlaskAdapter",
]
