"""
Firestore client factory.

The document store takes its client as an argument, so this module only builds
AsyncClient instances; it never holds one. The client authenticates using the
credentials set in the environment.
"""
from __future__ import annotations

from logging import getLogger

from google.cloud import firestore

from docstore.config import FirestoreConfig

logger = getLogger(__name__)


def create_firestore_client(project: str | None = None, database: str | None = None) -> firestore.AsyncClient:
    """
    Create a new asynchronous Firestore client.

    :param project: The Google Cloud project. Defaults to FirestoreConfig.project_id.
    :param database: The Firestore database name. Defaults to FirestoreConfig.database.
    """
    project = project or FirestoreConfig.project_id
    database = database or FirestoreConfig.database
    if FirestoreConfig.emulator_host:
        logger.info("Using Firestore emulator at %s", FirestoreConfig.emulator_host)
    logger.info("Creating Firestore client for project %s, database %s", project, database)
    return firestore.AsyncClient(project=project, database=database)


__all__ = ["create_firestore_client"]
