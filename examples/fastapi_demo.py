"""FastAPI demo application for web-omnihandler.

Run with: uvicorn examples.fastapi_demo:app --reload
Or: python examples/fastapi_demo.py

Available endpoints:
    POST /webhook - Normalized handler through the dispatcher
    GET  /health  - Health check served by FastAPI directly
"""

import asyncio

from fastapi import FastAPI, Request

from web_omnihandler import AppOptions, attach


async def handler(body, headers, metadata=None):
    """Echo the body back after a short await."""
    await asyncio.sleep(0.01)
    return {"status": 200, "body": {"echo": body, "trace": headers.get("x-trace-id")}}


def with_request_counter(omni_app):
    """Plugin counting dispatched requests."""
    counter = {"requests": 0}
    inner = omni_app.handler

    async def counting_handler(body, headers, metadata=None):
        counter["requests"] += 1
        return await inner(body, headers, metadata)

    omni_app.handler = counting_handler
    return {"request_count": lambda: counter["requests"]}


omni = attach({"handler": handler}, AppOptions(debug=True)).use(with_request_counter)

app = FastAPI(
    title="FastAPI OmniHandler Demo",
    description="Demo application showcasing web-omnihandler with FastAPI",
    version="0.1.0",
)


@app.post("/webhook")
async def webhook(request: Request):
    return await omni(request)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "requests": omni.request_count()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
