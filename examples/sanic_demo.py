"""Sanic demo application for web-omnihandler.

Usage:
    pip install web-omnihandler[sanic]
    python sanic_demo.py

Then try:
    curl -X POST http://localhost:8000/webhook -d '{"query": "hello"}'
"""

import logging

from sanic import Sanic

from web_omnihandler import attach

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

log = logging.getLogger("sanic_demo")


async def handler(body, headers, metadata=None):
    return {"status": 200, "body": {"echo": body}}


# Route every severity to one logger call
omni = attach({"handler": handler}, logs=lambda *parts: log.info(" ".join(parts)))

app = Sanic("OmniHandlerDemo")


@app.post("/webhook")
async def webhook(request):
    return await omni(request)


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8000, debug=True)
