"""Task Repository: task CRUD with defaults and sparse updates.

Invariants:
    - create fills description/status/completed/priority/dueDate defaults
    - update merges only supplied fields and restamps updatedAt, strictly
      later than the previous value
    - Not-found is None / False, never an exception
"""

import logging
from datetime import datetime, timezone

from taskboard.core.domain_types import Collection
from taskboard.core.records import (
    build_task, find_index, merge_fields, next_timestamp,
)
from taskboard.core.repository_protocols import DocumentStore

logger = logging.getLogger(__name__)

TASKS = Collection.TASKS.value


class TaskRepository:
    """CRUD over the `tasks` collection."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def create(self, task_data: dict) -> dict:
        """Append a task. Caller supplies id, trimmed title, boardId and userId."""
        document = self._store.load()
        task = build_task(task_data, datetime.now(timezone.utc))
        document[TASKS].append(task)
        self._store.save(document)
        logger.info(
            "Task created",
            extra={"task_id": task["id"], "board_id": task["boardId"]},
        )
        return task

    def get_by_board_id(self, board_id: str) -> list[dict]:
        tasks = self._store.load()[TASKS]
        return [t for t in tasks if t.get("boardId") == board_id]

    def get_by_id(self, task_id: str) -> dict | None:
        tasks = self._store.load()[TASKS]
        return next((t for t in tasks if t.get("id") == task_id), None)

    def update(self, task_id: str, updates: dict) -> dict | None:
        document = self._store.load()
        index = find_index(document[TASKS], task_id)
        if index is None:
            return None
        current = document[TASKS][index]
        task = merge_fields(current, updates)
        task["updatedAt"] = next_timestamp(
            datetime.now(timezone.utc), current.get("updatedAt"),
        )
        document[TASKS][index] = task
        self._store.save(document)
        return task

    def delete(self, task_id: str) -> bool:
        document = self._store.load()
        index = find_index(document[TASKS], task_id)
        if index is None:
            return False
        del document[TASKS][index]
        self._store.save(document)
        return True
