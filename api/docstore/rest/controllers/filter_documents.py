"""
Handles POST requests to the /collections/{collection_name}/filter endpoint.
"""
from __future__ import annotations

from logging import getLogger

from sanic import HTTPResponse, Request
from sanic_ext import openapi

from docstore.models.query import FilterOperator
from docstore.rest.responses import bad_request, error_response, json_response
from docstore.results import capture

logger = getLogger(__name__)


@openapi.definition(
    summary="List the documents matching one predicate",
    description=f"Body: field, operator (one of {', '.join(op.value for op in FilterOperator)}) and value.",
)
async def on_filter_documents(request: Request, collection_name: str) -> HTTPResponse:
    """
    Handles POST requests to the /collections/{collection_name}/filter endpoint.

    The body holds ``field``, ``operator`` and ``value``; a JSON body keeps the value's type.

    :param request: The Sanic request object.
    :param collection_name: The collection to query.
    """
    logger.info("Received filter request for %s", collection_name)
    body = request.json
    if not isinstance(body, dict):
        return bad_request("request body must be a JSON object")

    result = await capture(
        request.app.ctx.store.get_documents_with_filter(
            collection_name,
            body.get("field"),
            body.get("operator"),
            body.get("value"),
        )
    )
    if not result.ok:
        return error_response(result.error)

    return json_response({"documents": result.value}, status=200)
