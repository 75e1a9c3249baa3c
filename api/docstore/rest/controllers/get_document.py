"""
Handles GET requests to the /collections/{collection_name}/documents/{document_id} endpoint.
"""
from __future__ import annotations

from logging import getLogger

from sanic import HTTPResponse, Request, json
from sanic_ext import openapi

from docstore.errors import ErrorKind
from docstore.rest.responses import error_response, json_response
from docstore.results import capture

logger = getLogger(__name__)


@openapi.definition(summary="Get a document by id")
async def on_get_document(request: Request, collection_name: str, document_id: str) -> HTTPResponse:
    """
    Handles GET requests to the /collections/{collection_name}/documents/{document_id} endpoint.

    :param request: The Sanic request object.
    :param collection_name: The collection holding the document.
    :param document_id: The document identifier.
    """
    logger.info("Received GET request for document %s in %s", document_id, collection_name)
    result = await capture(request.app.ctx.store.get_document(collection_name, document_id))
    if not result.ok:
        return error_response(result.error)

    if result.value is None:
        return json({"error": "Document not found", "kind": ErrorKind.NOT_FOUND.value}, status=404)

    return json_response(result.value, status=200)
