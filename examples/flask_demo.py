"""Flask demo application for web-omnihandler.

Usage:
    pip install web-omnihandler[flask]
    python flask_demo.py

Then try:
    curl -X POST http://localhost:5000/webhook \\
         -H "Content-Type: application/json" \\
         -d '{"query": "hello"}'
"""

import logging

from flask import Flask, request

from web_omnihandler import AppOptions, StandardResponse, attach

# Configure logging to see request/response lines
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


async def handler(body, headers, metadata=None):
    """Answer every request the same way, whatever framework sent it."""
    query = (body or {}).get("query", "") if isinstance(body, dict) else ""
    return StandardResponse(
        status=200,
        body={"reply": f"You said: {query}", "framework": sorted(metadata or {})},
    )


omni = attach({"handler": handler}, AppOptions(debug=True, log_path="/tmp/omni-demo"))

app = Flask(__name__)


@app.route("/webhook", methods=["POST"])
def webhook():
    """Hand the request to the dispatcher."""
    return omni(request)


@app.route("/health")
def health():
    """Health check endpoint, served by Flask directly."""
    return {"status": "healthy"}


if __name__ == "__main__":
    print(f"Registered frameworks: {omni.frameworks.list_frameworks()}")
    app.run(debug=True, port=5000)
