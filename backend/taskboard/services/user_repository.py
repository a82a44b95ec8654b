"""User Repository: create and look up users in the stored document.

Invariants:
    - Users are appended; never updated or deleted here
    - Lookups return the first match or None (absence is not an error)
    - Email matching is exact (case-sensitive, as stored)
"""

import logging
from datetime import datetime, timezone

from taskboard.core.domain_types import Collection
from taskboard.core.records import build_user
from taskboard.core.repository_protocols import DocumentStore

logger = logging.getLogger(__name__)


class UserRepository:
    """CRUD over the `users` collection."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def create(self, user_data: dict) -> dict:
        """Append a user. Caller supplies id, email, password (hash) and name."""
        document = self._store.load()
        user = build_user(user_data, datetime.now(timezone.utc))
        document[Collection.USERS.value].append(user)
        self._store.save(document)
        logger.info("User created", extra={"user_id": user["id"]})
        return user

    def find_by_email(self, email: str) -> dict | None:
        users = self._store.load()[Collection.USERS.value]
        return next((u for u in users if u.get("email") == email), None)

    def find_by_id(self, user_id: str) -> dict | None:
        users = self._store.load()[Collection.USERS.value]
        return next((u for u in users if u.get("id") == user_id), None)
