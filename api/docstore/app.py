"""
Initialize the Sanic app and route requests to the document store controllers.
"""
import logging
from logging import getLogger

from sanic import Sanic

from docstore.clients.firestore import create_firestore_client
from docstore.config import ApiConfig
from docstore.rest.controllers import register_routes
from docstore.store import DocumentStore

# set the logging level based on an env var
logging.basicConfig(level=ApiConfig.log_level)

logger = getLogger(__name__)


def create_app(name: str = "docstore") -> Sanic:
    """
    Create the Sanic app with every route registered.

    The document store is built once per server process, before it starts serving.

    :param name: The Sanic application name.
    """
    app = Sanic(name=name)

    @app.before_server_start
    async def setup_store(app: Sanic, _):
        app.ctx.store = DocumentStore(create_firestore_client())
        logger.info("Document store ready")

    register_routes(app)
    return app


api = create_app()


if __name__ == "__main__":
    api.run(host="0.0.0.0", port=ApiConfig.port, auto_reload=True)
