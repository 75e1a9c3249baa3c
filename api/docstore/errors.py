"""Error taxonomy for document store operations."""
from __future__ import annotations

from enum import Enum

from google.api_core import exceptions as core_exceptions


class ErrorKind(str, Enum):
    """The kind of failure a document store operation can end with."""

    STORE_UNAVAILABLE = "store_unavailable"
    NOT_FOUND = "not_found"
    INVALID_QUERY = "invalid_query"
    WRITE_REJECTED = "write_rejected"


class DocumentStoreError(Exception):
    """Base exception for every failed document store operation."""

    kind: ErrorKind = ErrorKind.STORE_UNAVAILABLE

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        collection: str | None = None,
        document_id: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.collection = collection
        self.document_id = document_id


class StoreUnavailable(DocumentStoreError):
    """Raised on transport, authentication or network failures."""

    kind = ErrorKind.STORE_UNAVAILABLE


class NotFound(DocumentStoreError):
    """Raised when an operation requires a document that does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidQuery(DocumentStoreError):
    """Raised for unsupported filter operators or malformed sort specs."""

    kind = ErrorKind.INVALID_QUERY


class WriteRejected(DocumentStoreError):
    """Raised when the store refuses a create, update or delete."""

    kind = ErrorKind.WRITE_REJECTED


_QUERY_ERRORS = (core_exceptions.InvalidArgument, core_exceptions.FailedPrecondition)
_WRITE_ERRORS = _QUERY_ERRORS + (core_exceptions.PermissionDenied, core_exceptions.AlreadyExists)


def error_class_for(exc: Exception, *, write: bool, existence_required: bool = False) -> type[DocumentStoreError]:
    """
    Pick the document store error matching an exception raised by the Firestore client.

    :param exc: The exception raised by the client.
    :param write: Whether the failed call mutated the store.
    :param existence_required: Whether the call targeted a document that must already exist. Only then does a
        client NotFound mean a missing document; otherwise it points at a missing database or project.
    """
    if isinstance(exc, core_exceptions.NotFound):
        return NotFound if existence_required else StoreUnavailable
    # the client raises TypeError/ValueError for values and field paths it cannot encode
    if write and isinstance(exc, _WRITE_ERRORS + (TypeError, ValueError)):
        return WriteRejected
    if not write and isinstance(exc, _QUERY_ERRORS + (TypeError, ValueError)):
        return InvalidQuery
    return StoreUnavailable
