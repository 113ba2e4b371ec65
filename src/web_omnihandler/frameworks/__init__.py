"""Framework integrations for web-omnihandler.

Importing this package registers every adapter whose framework is
installed with BUILTIN_FRAMEWORKS. Registration order is detection order.

Supported Frameworks:
    - Flask: Synchronous entry point returning flask.Response
    - FastAPI: Async entry point for any Starlette request
    - Sanic: Async entry point returning sanic HTTPResponse
    - Lambda: AWS Lambda (event, context) pairs, no extra dependency

Example:
    from web_omnihandler.frameworks import discover_frameworks

    discover_frameworks()  # ['flask', 'fastapi', 'lambda'] without sanic
"""

import importlib
import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)

# (registry name, adapter subpackage), in detection order
_ADAPTER_MODULES: Tuple[Tuple[str, str], ...] = (
    ("flask", "flask"),
    ("fastapi", "fastapi"),
    ("sanic", "sanic"),
    ("lambda", "aws_lambda"),
)

_discovered_frameworks: List[str] = []


def discover_frameworks() -> List[str]:
    """Import the adapter subpackages whose framework is installed.

    Each subpackage registers its adapter on import. A framework that
    cannot be imported is skipped. Later calls return the first result.

    Returns:
        Names of the registered frameworks, in detection order.
    """
    if not _discovered_frameworks:
        for name, module in _ADAPTER_MODULES:
            try:
                importlib.import_module(f".{module}", __name__)
            except ImportError as e:
                logger.debug(f"{name} adapter unavailable, skipping: {e}")
                continue
            _discovered_frameworks.append(name)
            logger.debug(f"Discovered {name} framework adapter")

    return _discovered_frameworks.copy()


# Auto-discover on import
discover_frameworks()


__all__ = [
    "discover_frameworks",
]
