"""SQL Document Store: the Taskboard document as a JSON row in a SQL database.

Invariants:
    - Same contract as JsonFileStore: load() returns the whole document,
      save() replaces it
    - Every session rolls back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to StorageUnavailableError

Design Decisions:
    - Table created on construction with create_all: the schema is one table
      and schema evolution is out of scope
    - Synchronous engine: repositories are synchronous on both backends
"""

import copy
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy import create_engine, select, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.orm import Session, sessionmaker

from taskboard.core.errors import StorageUnavailableError
from taskboard.core.records import (
    empty_document, malformed_collections, normalize_document,
)
from taskboard.db.base import Base
from taskboard.models.document import StoredDocument

logger = logging.getLogger(__name__)

DOCUMENT_NAME = "taskboard"


class SqlDocumentStore:
    """DocumentStore backed by a single row of the `documents` table."""

    def __init__(self, database_url: str, name: str = DOCUMENT_NAME):
        self.name = name
        self.engine = create_engine(database_url, pool_pre_ping=True)
        self._session_factory = sessionmaker(
            self.engine, class_=Session, expire_on_commit=False,
        )
        self._create_schema()

    def _create_schema(self) -> None:
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create documents table: {e}")
            raise StorageUnavailableError("Could not create schema", "create")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise StorageUnavailableError("Integrity constraint violated", "commit")
        except OperationalError as e:
            session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StorageUnavailableError("Connection or operational error", "execute")
        except DBAPIError as e:
            session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StorageUnavailableError("Database driver error", "query")
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageUnavailableError("Database operation failed", "unknown")
        finally:
            session.close()

    def load(self) -> dict:
        with self.session() as db:
            row = db.get(StoredDocument, self.name)
            if row is None:
                row = StoredDocument(name=self.name, body=empty_document())
                db.add(row)
                db.commit()
            # Detach from the ORM-tracked JSON value
            document = copy.deepcopy(row.body)
        if not isinstance(document, dict):
            raise StorageUnavailableError("document is not a JSON object", "read")
        bad = malformed_collections(document)
        if bad:
            logger.error(f"Stored collections are not lists: {bad}")
            raise StorageUnavailableError(
                f"collection {bad[0]!r} is not a list", "read",
            )
        return normalize_document(document)

    def save(self, document: dict) -> None:
        with self.session() as db:
            row = db.execute(
                select(StoredDocument).where(StoredDocument.name == self.name),
            ).scalar_one_or_none()
            if row is None:
                row = StoredDocument(name=self.name)
                db.add(row)
            row.body = copy.deepcopy(document)
            row.updated_at = datetime.now(timezone.utc)
            db.commit()

    def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False
