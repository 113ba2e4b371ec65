"""AWS Lambda integration for web-omnihandler.

Handles API Gateway proxy events (REST and HTTP APIs) as well as direct
invocations carrying a plain JSON payload. Needs no third-party package.

Example:
    from web_omnihandler import attach

    omni = attach({"handler": handler})

    def lambda_handler(event, context):
        return omni(event, context)
"""

from .adapter import LambdaAdapter

__all__ = ["LambdaAdapter"]
