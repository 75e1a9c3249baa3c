"""
Handles GET requests to the /health_status endpoint.
"""
from __future__ import annotations

from sanic import HTTPResponse, Request, json
from sanic_ext import openapi


@openapi.definition(summary="Report whether the document store is ready to serve requests")
async def on_get_health_status(request: Request) -> HTTPResponse:
    """
    Handles GET requests to the /health_status endpoint.

    The service is healthy once the document store has been built for this server process.

    :param request: The Sanic request object.
    """
    if getattr(request.app.ctx, "store", None) is None:
        return json({"status": "starting"}, status=503)
    return json({"status": "healthy"}, status=200)
