"""Store Wiring: builds the configured DocumentStore once per process.

Invariants:
    - The backend is chosen from Settings at startup, never per request
    - get_store() fails with StorageUnavailableError until init_store() ran

Design Decisions:
    - Singleton store initialized by the FastAPI lifespan; routes reach it
      only through the get_store dependency, so tests override one function
"""

import logging

from taskboard.config import Settings
from taskboard.core.errors import StorageUnavailableError
from taskboard.core.repository_protocols import DocumentStore
from taskboard.infrastructure.flat_file_store import JsonFileStore
from taskboard.infrastructure.sql_store import SqlDocumentStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> DocumentStore:
    """Instantiate the backend named by settings.storage_backend."""
    if settings.storage_backend == "sql":
        logger.info("Using SQL document store")
        return SqlDocumentStore(settings.database_url)
    logger.info(
        "Using JSON file store",
        extra={"store_path": settings.data_file},
    )
    return JsonFileStore(settings.data_file, mirror_path=settings.mirror_file)


# Singleton (initialized on startup)
store: DocumentStore | None = None


def init_store(settings: Settings) -> DocumentStore:
    global store
    store = build_store(settings)
    return store


def get_store() -> DocumentStore:
    """FastAPI dependency for the document store."""
    if store is None:
        raise StorageUnavailableError("store not initialized", "init")
    return store
