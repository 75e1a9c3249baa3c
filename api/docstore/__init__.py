"""Asynchronous CRUD and query access to Firestore collections."""
from docstore.errors import (
    DocumentStoreError,
    ErrorKind,
    InvalidQuery,
    NotFound,
    StoreUnavailable,
    WriteRejected,
)
from docstore.models.query import Filter, FilterOperator, SortDirection, SortSpec
from docstore.results import Result, capture
from docstore.store import Document, DocumentStore

__all__ = [
    "Document",
    "DocumentStore",
    "DocumentStoreError",
    "ErrorKind",
    "Filter",
    "FilterOperator",
    "InvalidQuery",
    "NotFound",
    "Result",
    "SortDirection",
    "SortSpec",
    "StoreUnavailable",
    "WriteRejected",
    "capture",
]
