"""
Handles DELETE requests to the /collections/{collection_name}/documents/{document_id} endpoint.
"""
from __future__ import annotations

from sanic import HTTPResponse, Request, empty
from sanic_ext import openapi

from docstore.rest.responses import error_response
from docstore.results import capture


@openapi.definition(summary="Delete a document, succeeding when it is already absent")
async def on_delete_document(request: Request, collection_name: str, document_id: str) -> HTTPResponse:
    """
    Handles DELETE requests to the /collections/{collection_name}/documents/{document_id} endpoint.

    :param request: The Sanic request object.
    :param collection_name: The collection holding the document.
    :param document_id: The document identifier.
    """
    result = await capture(request.app.ctx.store.delete_document(collection_name, document_id))
    if not result.ok:
        return error_response(result.error)

    return empty()
