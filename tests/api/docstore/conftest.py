import copy
import operator
import uuid
from collections import defaultdict

import pytest
from google.api_core import exceptions as core_exceptions

from docstore.store import DocumentStore

_OPS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "array_contains": lambda field_value, value: isinstance(field_value, list) and value in field_value,
}


class FakeSnapshot:
    def __init__(self, id, data):
        self.id = id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocumentReference:
    def __init__(self, docs, id):
        self._docs = docs
        self.id = id

    async def get(self):
        return FakeSnapshot(self.id, self._docs.get(self.id))

    async def update(self, data):
        if self.id not in self._docs:
            raise core_exceptions.NotFound(f"No document to update: {self.id}")
        self._docs[self.id].update(copy.deepcopy(data))

    async def delete(self):
        self._docs.pop(self.id, None)


class FakeQuery:
    """Evaluates where/order_by/limit in memory, skipping documents that lack the field like Firestore does."""

    def __init__(self, docs, filters=(), order=None, limit_count=None):
        self._docs = docs
        self._filters = filters
        self._order = order
        self._limit = limit_count

    def where(self, *, filter):
        return FakeQuery(self._docs, self._filters + (filter,), self._order, self._limit)

    def order_by(self, field_path, direction="ASCENDING"):
        return FakeQuery(self._docs, self._filters, (field_path, direction), self._limit)

    def limit(self, count):
        return FakeQuery(self._docs, self._filters, self._order, count)

    async def get(self):
        items = list(self._docs.items())
        for field_filter in self._filters:
            compare = _OPS[field_filter.op_string]
            items = [
                (id, data)
                for id, data in items
                if field_filter.field_path in data and compare(data[field_filter.field_path], field_filter.value)
            ]
        if self._order is not None:
            field, direction = self._order
            items = sorted(
                [(id, data) for id, data in items if field in data],
                key=lambda item: item[1][field],
                reverse=direction == "DESCENDING",
            )
        if self._limit is not None:
            items = items[: self._limit]
        return [FakeSnapshot(id, copy.deepcopy(data)) for id, data in items]


class FakeCollection(FakeQuery):
    def document(self, document_id=None):
        return FakeDocumentReference(self._docs, document_id or uuid.uuid4().hex[:20])

    async def add(self, data):
        doc_ref = self.document()
        self._docs[doc_ref.id] = copy.deepcopy(data)
        return None, doc_ref


class FakeAsyncClient:
    """In-memory stand-in for google.cloud.firestore.AsyncClient, for tests only."""

    def __init__(self):
        self.collections = defaultdict(dict)

    def collection(self, name):
        return FakeCollection(self.collections[name])


@pytest.fixture
def firestore_client():
    return FakeAsyncClient()


@pytest.fixture
def store(firestore_client):
    return DocumentStore(firestore_client)


@pytest.fixture
def users():
    """Seed data for the users collection."""
    return [
        {"name": "Ivan", "age": 30, "tags": ["admin"]},
        {"name": "Olga", "age": 22, "tags": ["editor"]},
        {"name": "Petr", "age": 25, "tags": ["editor", "admin"]},
        {"name": "Anna", "age": 41, "tags": []},
        {"name": "Boris"},
    ]
