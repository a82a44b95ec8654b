"""Repository fixtures: one repository of each kind over the same JSON store."""

import pytest

from taskboard.services.board_repository import BoardRepository
from taskboard.services.task_repository import TaskRepository
from taskboard.services.user_repository import UserRepository


@pytest.fixture
def users(store):
    return UserRepository(store)


@pytest.fixture
def boards(store):
    return BoardRepository(store)


@pytest.fixture
def tasks(store):
    return TaskRepository(store)


@pytest.fixture
def alice(users, credential_service):
    return users.create({
        "id": "user-alice",
        "email": "alice@example.com",
        "password": credential_service.hash_password("secret1"),
        "name": "Alice",
    })


@pytest.fixture
def work_board(boards, alice):
    return boards.create({"id": "board-work", "name": "Work", "userId": alice["id"]})
