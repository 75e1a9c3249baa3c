import pytest

from docstore.errors import ErrorKind, NotFound
from docstore.results import Result, capture


async def succeed():
    return "abc"


async def fail_not_found():
    raise NotFound("no such document", operation="update_document", collection="users", document_id="abc")


async def fail_unexpectedly():
    raise RuntimeError("boom")


@pytest.mark.asyncio
async def test_capture_success():
    result = await capture(succeed())

    assert result.ok
    assert result.kind is None
    assert result.unwrap() == "abc"


@pytest.mark.asyncio
async def test_capture_document_store_error():
    result = await capture(fail_not_found())

    assert not result.ok
    assert result.kind is ErrorKind.NOT_FOUND
    assert result.value is None
    with pytest.raises(NotFound):
        result.unwrap()


@pytest.mark.asyncio
async def test_capture_lets_other_errors_propagate():
    with pytest.raises(RuntimeError):
        await capture(fail_unexpectedly())


def test_successful_result_may_hold_none():
    result = Result(value=None)

    assert result.ok
    assert result.unwrap() is None
