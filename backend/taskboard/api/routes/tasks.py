"""Task Routes: list, create, update and delete tasks on the caller's boards.

Invariants:
    - Every route is behind the authorization gate
    - Listing and creating require the board to exist (404) and be owned (403)
    - Update and delete check the task's own userId
    - Update passes only the fields the client sent
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status

from taskboard.api.dependencies import (
    get_board_repository, get_task_repository,
    owned_board, owned_task, require_user_id,
)
from taskboard.core.errors import ResourceNotFoundError
from taskboard.schemas.board import MessageResponse
from taskboard.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskboard.services.board_repository import BoardRepository
from taskboard.services.task_repository import TaskRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    board_id: str = Query(alias="boardId", min_length=1),
    user_id: str = Depends(require_user_id),
    boards: BoardRepository = Depends(get_board_repository),
    tasks: TaskRepository = Depends(get_task_repository),
):
    owned_board(boards, board_id, user_id)
    return tasks.get_by_board_id(board_id)


@router.post(
    "", response_model=TaskResponse, status_code=status.HTTP_201_CREATED,
)
def create_task(
    body: TaskCreate,
    user_id: str = Depends(require_user_id),
    boards: BoardRepository = Depends(get_board_repository),
    tasks: TaskRepository = Depends(get_task_repository),
):
    owned_board(boards, body.board_id, user_id)
    return tasks.create({
        "id": str(uuid.uuid4()),
        "title": body.title,
        "description": body.description or "",
        "dueDate": body.due_date or None,
        "priority": body.priority.value if body.priority else None,
        "boardId": body.board_id,
        "userId": user_id,
    })


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    body: TaskUpdate,
    user_id: str = Depends(require_user_id),
    tasks: TaskRepository = Depends(get_task_repository),
):
    owned_task(tasks, task_id, user_id)
    task = tasks.update(task_id, body.to_updates())
    if task is None:
        raise ResourceNotFoundError("Task", task_id)
    return task


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: str,
    user_id: str = Depends(require_user_id),
    tasks: TaskRepository = Depends(get_task_repository),
):
    owned_task(tasks, task_id, user_id)
    if not tasks.delete(task_id):
        raise ResourceNotFoundError("Task", task_id)
    logger.info("Task deleted", extra={"task_id": task_id, "user_id": user_id})
    return {"message": "Task deleted successfully"}
