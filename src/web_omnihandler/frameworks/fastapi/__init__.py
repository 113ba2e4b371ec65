"""FastAPI framework integration for web-omnihandler.

Any Starlette-based application, FastAPI included, is recognized through
its request object.

Example:
    from fastapi import FastAPI, Request
    from web_omnihandler import attach

    app = FastAPI()
    omni = attach({"handler": handler})

    @app.post("/webhook")
    async def webhook(request: Request):
        return await omni(request)
"""

from .adapter import FastAPIAdapter

__all__ = [
    "FastAPIAdapter",
]
