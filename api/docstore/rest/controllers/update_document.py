"""
Handles PATCH requests to the /collections/{collection_name}/documents/{document_id} endpoint.
"""
from __future__ import annotations

from logging import getLogger

from sanic import HTTPResponse, Request, empty
from sanic_ext import openapi

from docstore.rest.responses import bad_request, error_response
from docstore.results import capture

logger = getLogger(__name__)


@openapi.definition(summary="Merge fields into an existing document")
async def on_update_document(request: Request, collection_name: str, document_id: str) -> HTTPResponse:
    """
    Handles PATCH requests to the /collections/{collection_name}/documents/{document_id} endpoint.

    Only the fields present in the JSON body are changed.

    :param request: The Sanic request object.
    :param collection_name: The collection holding the document.
    :param document_id: The document identifier.
    """
    logger.info("Received PATCH request for document %s in %s", document_id, collection_name)
    data = request.json
    if not isinstance(data, dict):
        return bad_request("request body must be a JSON object")

    result = await capture(request.app.ctx.store.update_document(collection_name, document_id, data))
    if not result.ok:
        return error_response(result.error)

    return empty()
