"""AWS Lambda demo for web-omnihandler.

Deploy this module with ``lambda_demo.lambda_handler`` as the function
handler behind an API Gateway proxy integration.
"""

from web_omnihandler import attach


async def handler(body, headers, metadata=None):
    context = (metadata or {}).get("lambda", {}).get("context")
    return {
        "status": 200,
        "body": {
            "echo": body,
            "request_id": getattr(context, "aws_request_id", None),
        },
    }


omni = attach({"handler": handler}, {"debug": True})


def lambda_handler(event, context):
    return omni(event, context)
