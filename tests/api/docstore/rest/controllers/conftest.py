import uuid

import pytest
from sanic import Sanic
from sanic_testing import TestManager


@pytest.fixture
def app(store) -> Sanic:
    """Fixture to create a new Sanic application backed by the in-memory store."""
    sanitized_name = f"{__name__.replace('.', '_')}_{uuid.uuid4().hex}"
    app_instance = Sanic(sanitized_name)
    TestManager(app_instance)

    from docstore.rest.controllers import register_routes

    register_routes(app_instance)
    app_instance.ctx.store = store

    return app_instance
