"""Asynchronous document store façade over a Firestore client."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from logging import Logger
from typing import Any

from google.api_core import exceptions as core_exceptions
from google.cloud import firestore
from pydantic import ValidationError

from docstore.errors import DocumentStoreError, InvalidQuery, WriteRejected, error_class_for
from docstore.models.query import Filter, SortSpec

Document = dict[str, Any]


def _to_document(snapshot: Any) -> Document:
    """Merge the snapshot's id into its fields. Stored fields win over the id on a name clash."""
    return {"id": snapshot.id, **(snapshot.to_dict() or {})}


def _validation_message(error: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors())


class DocumentStore:
    """CRUD and query operations over the collections of a Firestore database."""

    def __init__(
        self,
        client: firestore.AsyncClient,
        *,
        logger: Logger = logging.getLogger(__name__),
    ):
        """
        Initialize the DocumentStore.

        :param client: An initialized Firestore AsyncClient. It is shared by all calls and never mutated.
        :param logger: Logger instance. Defaults to the module's logger.
        """
        self.client = client
        self._logger = logger

    @property
    def logger(self) -> Logger:
        """Logger property. If `_logger` is None, it initializes a new logger."""
        if self._logger is None:
            self._logger = logging.getLogger(__name__)
        return self._logger

    def _error(
        self,
        error_class: type[DocumentStoreError],
        message: str,
        operation: str,
        collection_name: Any,
        document_id: Any = None,
    ) -> DocumentStoreError:
        self.logger.error(
            "%s failed for collection %s, document %s: %s", operation, collection_name, document_id, message
        )
        return error_class(message, operation=operation, collection=collection_name, document_id=document_id)

    def _client_error(
        self,
        exc: Exception,
        operation: str,
        collection_name: str,
        document_id: str | None = None,
        *,
        write: bool,
        existence_required: bool = False,
    ) -> DocumentStoreError:
        error_class = error_class_for(exc, write=write, existence_required=existence_required)
        return self._error(error_class, str(exc), operation, collection_name, document_id)

    def _check_names(
        self,
        operation: str,
        collection_name: Any,
        document_id: Any = None,
        *,
        write: bool,
        needs_id: bool = False,
    ) -> None:
        error_class = WriteRejected if write else InvalidQuery
        if not isinstance(collection_name, str) or not collection_name:
            raise self._error(error_class, "collection name must be a non-empty string", operation, collection_name)
        if needs_id and (not isinstance(document_id, str) or not document_id):
            raise self._error(
                error_class, "document id must be a non-empty string", operation, collection_name, document_id
            )

    async def create_document(self, collection_name: str, data: Mapping[str, Any]) -> str:
        """
        Add a new document to a collection. The collection is created on first write.

        :param collection_name: The collection to add the document to.
        :param data: The fields of the new document.
        :return: The identifier the store assigned to the document.
        """
        self._check_names("create_document", collection_name, write=True)
        if not isinstance(data, Mapping):
            raise self._error(WriteRejected, "document data must be a mapping", "create_document", collection_name)

        try:
            _, doc_ref = await self.client.collection(collection_name).add(dict(data))
        except Exception as e:
            raise self._client_error(e, "create_document", collection_name, write=True) from e

        self.logger.info("Document created in %s with id %s", collection_name, doc_ref.id)
        return doc_ref.id

    async def get_document(self, collection_name: str, document_id: str) -> Document | None:
        """
        Fetch one document by identifier.

        :param collection_name: The collection holding the document.
        :param document_id: The document identifier.
        :return: The document with its id merged in, or None if it does not exist.
        """
        self._check_names("get_document", collection_name, document_id, write=False, needs_id=True)

        try:
            snapshot = await self.client.collection(collection_name).document(document_id).get()
        except Exception as e:
            raise self._client_error(e, "get_document", collection_name, document_id, write=False) from e

        if not snapshot.exists:
            self.logger.info("Document %s not found in %s", document_id, collection_name)
            return None

        self.logger.info("Document %s found in %s", document_id, collection_name)
        return _to_document(snapshot)

    async def get_all_documents(self, collection_name: str) -> list[Document]:
        """
        Fetch every document of a collection.

        :param collection_name: The collection to read.
        """
        self._check_names("get_all_documents", collection_name, write=False)

        try:
            snapshots = await self.client.collection(collection_name).get()
        except Exception as e:
            raise self._client_error(e, "get_all_documents", collection_name, write=False) from e

        documents = [_to_document(snapshot) for snapshot in snapshots]
        self.logger.info("Found %s documents in %s", len(documents), collection_name)
        return documents

    async def get_documents_with_filter(
        self, collection_name: str, field: str, operator: Any, value: Any
    ) -> list[Document]:
        """
        Fetch the documents matching a single predicate.

        :param collection_name: The collection to query.
        :param field: The field to compare.
        :param operator: A FilterOperator, its symbol (e.g. ``"<="``) or its name.
        :param value: The value to compare against.
        """
        self._check_names("get_documents_with_filter", collection_name, write=False)
        try:
            predicate = Filter(field=field, operator=operator, value=value)
        except ValidationError as e:
            raise self._error(
                InvalidQuery, _validation_message(e), "get_documents_with_filter", collection_name
            ) from e

        try:
            query = self.client.collection(collection_name).where(filter=predicate.to_field_filter())
            snapshots = await query.get()
        except Exception as e:
            raise self._client_error(e, "get_documents_with_filter", collection_name, write=False) from e

        documents = [_to_document(snapshot) for snapshot in snapshots]
        self.logger.info(
            "Found %s documents in %s where %s %s %r",
            len(documents),
            collection_name,
            predicate.field,
            predicate.operator.value,
            predicate.value,
        )
        return documents

    async def get_documents_sorted(
        self,
        collection_name: str,
        field: str,
        direction: Any = "asc",
        limit_count: int | None = None,
    ) -> list[Document]:
        """
        Fetch documents ordered by one field.

        The order of documents with equal values in `field` is left to the store.

        :param collection_name: The collection to query.
        :param field: The field to order by.
        :param direction: A SortDirection, ``"asc"`` or ``"desc"``. Defaults to ascending.
        :param limit_count: The maximum number of documents to return. None or 0 means no limit.
        """
        self._check_names("get_documents_sorted", collection_name, write=False)
        try:
            sort = SortSpec(field=field, direction=direction, limit=limit_count)
        except ValidationError as e:
            raise self._error(InvalidQuery, _validation_message(e), "get_documents_sorted", collection_name) from e

        try:
            query = self.client.collection(collection_name).order_by(
                sort.field, direction=sort.direction.firestore_direction
            )
            if sort.limit:
                query = query.limit(sort.limit)
            snapshots = await query.get()
        except Exception as e:
            raise self._client_error(e, "get_documents_sorted", collection_name, write=False) from e

        documents = [_to_document(snapshot) for snapshot in snapshots]
        self.logger.info(
            "Found %s documents in %s ordered by %s %s",
            len(documents),
            collection_name,
            sort.field,
            sort.direction.value,
        )
        return documents

    async def update_document(self, collection_name: str, document_id: str, data: Mapping[str, Any]) -> None:
        """
        Merge fields into an existing document. Fields absent from `data` are left untouched.

        :param collection_name: The collection holding the document.
        :param document_id: The document identifier.
        :param data: The fields to set.
        :raises NotFound: If the document does not exist.
        """
        self._check_names("update_document", collection_name, document_id, write=True, needs_id=True)
        if not isinstance(data, Mapping) or not data:
            raise self._error(
                WriteRejected,
                "update data must be a non-empty mapping",
                "update_document",
                collection_name,
                document_id,
            )

        try:
            await self.client.collection(collection_name).document(document_id).update(dict(data))
        except Exception as e:
            raise self._client_error(
                e, "update_document", collection_name, document_id, write=True, existence_required=True
            ) from e

        self.logger.info("Document %s updated in %s", document_id, collection_name)

    async def delete_document(self, collection_name: str, document_id: str) -> None:
        """
        Delete a document. Deleting a document that does not exist is a no-op.

        :param collection_name: The collection holding the document.
        :param document_id: The document identifier.
        """
        self._check_names("delete_document", collection_name, document_id, write=True, needs_id=True)

        try:
            await self.client.collection(collection_name).document(document_id).delete()
        except core_exceptions.NotFound:
            self.logger.info("Document %s already absent from %s", document_id, collection_name)
            return
        except Exception as e:
            raise self._client_error(e, "delete_document", collection_name, document_id, write=True) from e

        self.logger.info("Document %s deleted from %s", document_id, collection_name)


__all__ = ["Document", "DocumentStore"]
