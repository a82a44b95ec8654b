"""Route Dependencies: authorization gate, repository providers, ownership checks.

Invariants:
    - require_user_id accepts `Authorization: Bearer <token>` first, then a
      `token` cookie
    - No credential -> UnauthenticatedError("Authentication required");
      rejected credential -> UnauthenticatedError("Invalid token"); both 401
    - A valid token is sufficient: the user's existence is not re-checked
    - The resolved id is stored on request.state.user_id and returned
    - owned_board / owned_task turn absence into 404 and a foreign owner into 403

Design Decisions:
    - FastAPI dependency instead of a handler decorator: routes declare
      `user_id: str = Depends(require_user_id)` and keep their own signature
    - HTTPBearer(auto_error=False): the gate, not FastAPI, decides the 401 body
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskboard.core.errors import (
    ErrorContext, ResourceNotFoundError, UnauthenticatedError, UnauthorizedError,
)
from taskboard.core.repository_protocols import DocumentStore
from taskboard.infrastructure.security import CredentialService, get_credential_service
from taskboard.infrastructure.storage import get_store
from taskboard.services.board_repository import BoardRepository
from taskboard.services.task_repository import TaskRepository
from taskboard.services.user_repository import UserRepository

bearer_scheme = HTTPBearer(auto_error=False)

TOKEN_COOKIE = "token"


def extract_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    """Bearer token from the Authorization header, else the token cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(TOKEN_COOKIE) or None


async def require_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    credential_service: CredentialService = Depends(get_credential_service),
) -> str:
    """Authorization gate: resolve the caller's user id or reject with 401."""
    token = extract_token(request, credentials)
    if not token:
        raise UnauthenticatedError("Authentication required")
    user_id = credential_service.verify_token(token)
    if user_id is None:
        raise UnauthenticatedError("Invalid token")
    request.state.user_id = user_id
    return user_id


def get_user_repository(store: DocumentStore = Depends(get_store)) -> UserRepository:
    return UserRepository(store)


def get_board_repository(store: DocumentStore = Depends(get_store)) -> BoardRepository:
    return BoardRepository(store)


def get_task_repository(store: DocumentStore = Depends(get_store)) -> TaskRepository:
    return TaskRepository(store)


def owned_board(boards: BoardRepository, board_id: str, user_id: str) -> dict:
    """Board record if it exists and belongs to user_id."""
    board = boards.get_by_id(board_id)
    if board is None:
        raise ResourceNotFoundError("Board", board_id)
    if board.get("userId") != user_id:
        raise UnauthorizedError("Board", board_id, ErrorContext(user_id=user_id))
    return board


def owned_task(tasks: TaskRepository, task_id: str, user_id: str) -> dict:
    """Task record if it exists and belongs to user_id."""
    task = tasks.get_by_id(task_id)
    if task is None:
        raise ResourceNotFoundError("Task", task_id)
    if task.get("userId") != user_id:
        raise UnauthorizedError("Task", task_id, ErrorContext(user_id=user_id))
    return task
