"""
Handles GET requests to the /collections/{collection_name}/sorted endpoint.
"""
from __future__ import annotations

from sanic import HTTPResponse, Request
from sanic_ext import openapi

from docstore.rest.responses import error_response, json_response
from docstore.results import capture


@openapi.definition(summary="List documents ordered by one field")
@openapi.parameter("field", str, "query", required=True)
@openapi.parameter("direction", str, "query")
@openapi.parameter("limit", int, "query")
async def on_sorted_documents(request: Request, collection_name: str) -> HTTPResponse:
    """
    Handles GET requests to the /collections/{collection_name}/sorted endpoint.

    Query parameters: ``field``, ``direction`` (``asc`` or ``desc``, defaults to ``asc``) and ``limit``.

    :param request: The Sanic request object.
    :param collection_name: The collection to query.
    """
    result = await capture(
        request.app.ctx.store.get_documents_sorted(
            collection_name,
            request.args.get("field"),
            request.args.get("direction", "asc"),
            request.args.get("limit"),
        )
    )
    if not result.ok:
        return error_response(result.error)

    return json_response({"documents": result.value}, status=200)
