"""
Handles GET requests to the /collections/{collection_name}/documents endpoint.
"""
from __future__ import annotations

from logging import getLogger

from sanic import HTTPResponse, Request
from sanic_ext import openapi

from docstore.rest.responses import error_response, json_response
from docstore.results import capture

logger = getLogger(__name__)


@openapi.definition(summary="List every document of a collection")
async def on_list_documents(request: Request, collection_name: str) -> HTTPResponse:
    """
    Handles GET requests to the /collections/{collection_name}/documents endpoint.

    :param request: The Sanic request object.
    :param collection_name: The collection to read.
    """
    logger.info("Received request to list documents of %s", collection_name)
    result = await capture(request.app.ctx.store.get_all_documents(collection_name))
    if not result.ok:
        return error_response(result.error)

    return json_response({"documents": result.value}, status=200)
