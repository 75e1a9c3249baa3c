"""Explicit success or failure values for document store calls."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar

from docstore.errors import DocumentStoreError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """The outcome of one document store operation: either a value or a tagged error."""

    value: T | None = None
    error: DocumentStoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """The error kind of a failed result, None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T | None:
        """Return the value, raising the stored error if the operation failed."""
        if self.error is not None:
            raise self.error
        return self.value


async def capture(operation: Awaitable[T]) -> Result[T]:
    """
    Await a document store operation and wrap its outcome.

    Only document store errors are captured; anything else propagates.

    :param operation: The awaitable returned by a DocumentStore method.
    """
    try:
        return Result(value=await operation)
    except DocumentStoreError as e:
        return Result(error=e)
