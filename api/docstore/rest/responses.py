"""JSON responses shared by the REST controllers."""
from __future__ import annotations

import base64
import json as json_lib
from datetime import date, datetime
from functools import partial
from typing import Any

from sanic import HTTPResponse, json

from docstore.errors import DocumentStoreError, ErrorKind

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_QUERY: 400,
    ErrorKind.WRITE_REJECTED: 422,
    ErrorKind.STORE_UNAVAILABLE: 503,
}


def _encode_value(value: Any) -> Any:
    """Encode the Firestore value types the json module does not know about."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    # GeoPoint
    if hasattr(value, "latitude") and hasattr(value, "longitude"):
        return {"latitude": value.latitude, "longitude": value.longitude}
    # DocumentReference
    if hasattr(value, "path"):
        return value.path
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


dumps = partial(json_lib.dumps, default=_encode_value)


def json_response(body: Any, status: int = 200) -> HTTPResponse:
    return json(body, status=status, dumps=dumps)


def error_response(error: DocumentStoreError) -> HTTPResponse:
    """Map a failed document store operation to an HTTP error response."""
    return json({"error": error.message, "kind": error.kind.value}, status=STATUS_BY_KIND[error.kind])


def bad_request(message: str) -> HTTPResponse:
    return json({"error": message, "kind": ErrorKind.INVALID_QUERY.value}, status=400)
