import pytest
from pydantic import ValidationError

from docstore.models.query import Filter, FilterOperator, SortDirection, SortSpec


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("==", FilterOperator.EQUALS),
        (">", FilterOperator.GREATER_THAN),
        ("<", FilterOperator.LESS_THAN),
        (">=", FilterOperator.GREATER_OR_EQUAL),
        ("<=", FilterOperator.LESS_OR_EQUAL),
        ("!=", FilterOperator.NOT_EQUALS),
        ("array-contains", FilterOperator.ARRAY_CONTAINS),
        ("array_contains", FilterOperator.ARRAY_CONTAINS),
        ("greater_or_equal", FilterOperator.GREATER_OR_EQUAL),
        ("equals", FilterOperator.EQUALS),
        ("greaterThan", FilterOperator.GREATER_THAN),
        ("lessThan", FilterOperator.LESS_THAN),
        ("greaterOrEqual", FilterOperator.GREATER_OR_EQUAL),
        ("lessOrEqual", FilterOperator.LESS_OR_EQUAL),
        ("notEquals", FilterOperator.NOT_EQUALS),
        ("arrayContains", FilterOperator.ARRAY_CONTAINS),
        ("LESS_OR_EQUAL", FilterOperator.LESS_OR_EQUAL),
        (FilterOperator.NOT_EQUALS, FilterOperator.NOT_EQUALS),
    ],
)
def test_filter_operator_parse(raw, expected):
    assert FilterOperator.parse(raw) is expected


@pytest.mark.parametrize("raw", ["in", "array-contains-any", "=", "", None])
def test_filter_operator_parse_rejects_unsupported(raw):
    with pytest.raises(ValueError):
        FilterOperator.parse(raw)


def test_filter_to_field_filter():
    field_filter = Filter(field="tags", operator="array-contains", value="admin").to_field_filter()

    assert field_filter.field_path == "tags"
    assert field_filter.op_string == "array_contains"
    assert field_filter.value == "admin"


def test_filter_requires_field():
    with pytest.raises(ValidationError):
        Filter(field="", operator="==", value=1)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("asc", SortDirection.ASCENDING),
        ("Ascending", SortDirection.ASCENDING),
        ("DESC", SortDirection.DESCENDING),
        ("descending", SortDirection.DESCENDING),
    ],
)
def test_sort_direction_parse(raw, expected):
    assert SortDirection.parse(raw) is expected


def test_sort_direction_maps_to_firestore():
    assert SortDirection.ASCENDING.firestore_direction == "ASCENDING"
    assert SortDirection.DESCENDING.firestore_direction == "DESCENDING"


def test_sort_spec_defaults():
    sort = SortSpec(field="age")

    assert sort.direction is SortDirection.ASCENDING
    assert sort.limit is None


def test_sort_spec_coerces_numeric_limit():
    assert SortSpec(field="age", direction="desc", limit="10").limit == 10


@pytest.mark.parametrize("kwargs", [{"limit": -1}, {"direction": "up"}, {"limit": 2.5}])
def test_sort_spec_rejects_malformed_values(kwargs):
    with pytest.raises(ValidationError):
        SortSpec(field="age", **kwargs)
