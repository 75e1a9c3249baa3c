"""Contains a function to register all controllers with the app."""
from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import Callable

from sanic import Sanic, response

from docstore.rest.controllers.create_document import on_create_document
from docstore.rest.controllers.delete_document import on_delete_document
from docstore.rest.controllers.filter_documents import on_filter_documents
from docstore.rest.controllers.get_document import on_get_document
from docstore.rest.controllers.health_status import on_get_health_status
from docstore.rest.controllers.list_documents import on_list_documents
from docstore.rest.controllers.sorted_documents import on_sorted_documents
from docstore.rest.controllers.update_document import on_update_document

logger = getLogger(__name__)

DOCUMENTS_URI = "/collections/<collection_name:str>/documents"
DOCUMENT_URI = f"{DOCUMENTS_URI}/<document_id:str>"


@dataclass
class RouteConfig:
    handler: Callable[..., response.BaseHTTPResponse]
    uri: str
    methods: list[str]
    name: str


def register_routes(api: Sanic):
    """Registers all controllers with the app."""

    routes: list[RouteConfig] = [
        RouteConfig(on_list_documents, DOCUMENTS_URI, ["GET"], "list_documents"),
        RouteConfig(on_create_document, DOCUMENTS_URI, ["POST"], "create_document"),
        RouteConfig(on_get_document, DOCUMENT_URI, ["GET"], "get_document"),
        RouteConfig(on_update_document, DOCUMENT_URI, ["PATCH"], "update_document"),
        RouteConfig(on_delete_document, DOCUMENT_URI, ["DELETE"], "delete_document"),
        RouteConfig(on_filter_documents, "/collections/<collection_name:str>/filter", ["POST"], "filter_documents"),
        RouteConfig(on_sorted_documents, "/collections/<collection_name:str>/sorted", ["GET"], "sorted_documents"),
        RouteConfig(on_get_health_status, "/health_status", ["GET"], "health_status"),
    ]

    for route_config in routes:
        api.add_route(
            handler=route_config.handler,
            uri=route_config.uri,
            methods=route_config.methods,
            name=route_config.name,
        )
        logger.info("Registered %s %s controller", route_config.methods[0], route_config.uri)
