"""Exports config variables that are used throughout the code."""
import os


class FirestoreConfig:
    """Contains the config variables for the Firestore client."""

    project_id = os.environ.get("FIRESTORE_PROJECT_ID") or os.environ.get("GOOGLE_CLOUD_PROJECT")
    database = os.environ.get("FIRESTORE_DATABASE", "(default)")
    # read by the client library itself, kept here for visibility in logs
    emulator_host = os.environ.get("FIRESTORE_EMULATOR_HOST")


class ApiConfig:
    """Contains the config variables for the REST API server."""

    port = int(os.environ.get("PORT", 8080))
    log_level = os.environ.get("LOGLEVEL", "INFO")
