"""Board Repository: board CRUD plus cascade delete of the board's tasks.

Invariants:
    - get_by_user_id preserves insertion order
    - update merges only supplied fields; boards have no updatedAt
    - delete removes the board AND its tasks in one load -> save cycle
    - Not-found is None / False, never an exception

Design Decisions:
    - Cascade lives here, not in the store: the store only knows documents
"""

import logging
from datetime import datetime, timezone

from taskboard.core.domain_types import Collection
from taskboard.core.records import build_board, find_index, merge_fields
from taskboard.core.repository_protocols import DocumentStore

logger = logging.getLogger(__name__)

BOARDS = Collection.BOARDS.value
TASKS = Collection.TASKS.value


class BoardRepository:
    """CRUD over the `boards` collection."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def create(self, board_data: dict) -> dict:
        """Append a board. Caller supplies id, trimmed name and owner userId."""
        document = self._store.load()
        board = build_board(board_data, datetime.now(timezone.utc))
        document[BOARDS].append(board)
        self._store.save(document)
        logger.info(
            "Board created",
            extra={"board_id": board["id"], "user_id": board["userId"]},
        )
        return board

    def get_by_user_id(self, user_id: str) -> list[dict]:
        boards = self._store.load()[BOARDS]
        return [b for b in boards if b.get("userId") == user_id]

    def get_by_id(self, board_id: str) -> dict | None:
        boards = self._store.load()[BOARDS]
        return next((b for b in boards if b.get("id") == board_id), None)

    def update(self, board_id: str, updates: dict) -> dict | None:
        document = self._store.load()
        index = find_index(document[BOARDS], board_id)
        if index is None:
            return None
        board = merge_fields(document[BOARDS][index], updates)
        document[BOARDS][index] = board
        self._store.save(document)
        return board

    def delete(self, board_id: str) -> bool:
        """Remove the board and every task that references it."""
        document = self._store.load()
        index = find_index(document[BOARDS], board_id)
        if index is None:
            return False
        del document[BOARDS][index]
        remaining = [t for t in document[TASKS] if t.get("boardId") != board_id]
        cascaded = len(document[TASKS]) - len(remaining)
        document[TASKS] = remaining
        self._store.save(document)
        logger.info(
            "Board deleted",
            extra={"board_id": board_id, "cascaded_tasks": cascaded},
        )
        return True
