"""
Handles POST requests to the /collections/{collection_name}/documents endpoint.
"""
from __future__ import annotations

from logging import getLogger

from pydantic import BaseModel, Field
from sanic import HTTPResponse, Request
from sanic_ext import openapi

from docstore.rest.responses import bad_request, error_response, json_response
from docstore.results import capture

logger = getLogger(__name__)


class CreateDocumentResponse(BaseModel):
    """Model for the response when a document is created."""

    id: str = Field(..., description="The identifier assigned to the new document")


@openapi.definition(summary="Create a document", description="Responds with the id the store assigned.")
async def on_create_document(request: Request, collection_name: str) -> HTTPResponse:
    """
    Handles POST requests to the /collections/{collection_name}/documents endpoint.

    The JSON body is stored as the fields of the new document.

    :param request: The Sanic request object.
    :param collection_name: The collection to add the document to.
    """
    logger.info("Received request to create a document in %s", collection_name)
    data = request.json
    if not isinstance(data, dict):
        return bad_request("request body must be a JSON object")

    result = await capture(request.app.ctx.store.create_document(collection_name, data))
    if not result.ok:
        return error_response(result.error)

    return json_response(CreateDocumentResponse(id=result.value).model_dump(), status=201)
