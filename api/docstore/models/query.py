"""Validated filter and sort values for single-predicate and single-field document queries."""
from __future__ import annotations

import re
from enum import Enum
from typing import Any

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from pydantic import BaseModel, Field, field_validator


class FilterOperator(str, Enum):
    """Comparison operators supported by a single-predicate filter."""

    EQUALS = "=="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_OR_EQUAL = ">="
    LESS_OR_EQUAL = "<="
    NOT_EQUALS = "!="
    ARRAY_CONTAINS = "array-contains"

    @property
    def firestore_op(self) -> str:
        """The operator string understood by the Firestore client."""
        return self.value.replace("-", "_")

    @classmethod
    def parse(cls, raw: Any) -> FilterOperator:
        """Accept a member, its symbol (``"<="``) or its name (``"less_or_equal"`` or ``"lessOrEqual"``)."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            name = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", raw).upper()
            for member in cls:
                if raw in (member.value, member.firestore_op) or name == member.name:
                    return member
        raise ValueError(f"Unsupported filter operator: {raw!r}")


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @property
    def firestore_direction(self) -> str:
        if self is SortDirection.DESCENDING:
            return firestore.Query.DESCENDING
        return firestore.Query.ASCENDING

    @classmethod
    def parse(cls, raw: Any) -> SortDirection:
        """Accept a member, ``asc``/``desc`` or ``ascending``/``descending`` in any case."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            normalized = raw.strip().lower()
            if normalized in ("asc", "ascending"):
                return cls.ASCENDING
            if normalized in ("desc", "descending"):
                return cls.DESCENDING
        raise ValueError(f"Unsupported sort direction: {raw!r}")


class Filter(BaseModel):
    """A single (field, operator, value) predicate applied server-side."""

    field: str = Field(..., min_length=1, description="The field to compare")
    operator: FilterOperator = Field(..., description="The comparison operator")
    value: Any = Field(None, description="The value to compare against")

    @field_validator("operator", mode="before")
    @classmethod
    def _parse_operator(cls, value: Any) -> FilterOperator:
        return FilterOperator.parse(value)

    def to_field_filter(self) -> FieldFilter:
        """Returns the Filter as a Firestore FieldFilter."""
        return FieldFilter(self.field, self.operator.firestore_op, self.value)


class SortSpec(BaseModel):
    """Single-field ordering with an optional maximum result count."""

    field: str = Field(..., min_length=1, description="The field to order by")
    direction: SortDirection = Field(SortDirection.ASCENDING, description="The sort direction")
    limit: int | None = Field(
        None,
        ge=0,
        description="The maximum number of documents to return, 0 or None for no limit",
    )

    @field_validator("direction", mode="before")
    @classmethod
    def _parse_direction(cls, value: Any) -> SortDirection:
        return SortDirection.parse(value)
