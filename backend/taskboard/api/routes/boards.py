"""Board Routes: list, create, rename and delete the caller's boards.

Invariants:
    - Every route is behind the authorization gate
    - Rename and delete answer 404 for unknown ids and 403 for foreign boards
    - Delete cascades to the board's tasks (BoardRepository.delete)
"""

import logging
import uuid

from fastapi import APIRouter, Depends, status

from taskboard.api.dependencies import (
    get_board_repository, owned_board, require_user_id,
)
from taskboard.core.errors import ResourceNotFoundError
from taskboard.schemas.board import BoardResponse, BoardWrite, MessageResponse
from taskboard.services.board_repository import BoardRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/boards", tags=["boards"])


@router.get("", response_model=list[BoardResponse])
def list_boards(
    user_id: str = Depends(require_user_id),
    boards: BoardRepository = Depends(get_board_repository),
):
    return boards.get_by_user_id(user_id)


@router.post(
    "", response_model=BoardResponse, status_code=status.HTTP_201_CREATED,
)
def create_board(
    body: BoardWrite,
    user_id: str = Depends(require_user_id),
    boards: BoardRepository = Depends(get_board_repository),
):
    return boards.create({
        "id": str(uuid.uuid4()),
        "name": body.name,
        "userId": user_id,
    })


@router.put("/{board_id}", response_model=BoardResponse)
def rename_board(
    board_id: str,
    body: BoardWrite,
    user_id: str = Depends(require_user_id),
    boards: BoardRepository = Depends(get_board_repository),
):
    owned_board(boards, board_id, user_id)
    board = boards.update(board_id, {"name": body.name})
    if board is None:
        # Removed between the ownership check and the update
        raise ResourceNotFoundError("Board", board_id)
    return board


@router.delete("/{board_id}", response_model=MessageResponse)
def delete_board(
    board_id: str,
    user_id: str = Depends(require_user_id),
    boards: BoardRepository = Depends(get_board_repository),
):
    owned_board(boards, board_id, user_id)
    if not boards.delete(board_id):
        raise ResourceNotFoundError("Board", board_id)
    return {"message": "Board deleted successfully"}
