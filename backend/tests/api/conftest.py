"""API fixtures: FastAPI test client over a per-test JSON store.

Invariants:
    - get_store and get_credential_service overridden; lifespan is not run
    - register() returns (user, auth headers) for a freshly registered user
"""

import pytest
from httpx import ASGITransport, AsyncClient

from taskboard.infrastructure.security import get_credential_service
from taskboard.infrastructure.storage import get_store
from taskboard.main import app


@pytest.fixture
async def client(store, credential_service):
    """FastAPI test client with storage and credentials overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_credential_service] = lambda: credential_service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    async def _register(email="alice@example.com", password="secret1", name="Alice"):
        res = await client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert res.status_code == 201, res.text
        body = res.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}
    return _register


@pytest.fixture
async def alice(register):
    return await register()


@pytest.fixture
async def bob(register):
    return await register(email="bob@example.com", name="Bob")


@pytest.fixture
async def work_board(client, alice):
    _, headers = alice
    res = await client.post("/api/v1/boards", json={"name": "Work"}, headers=headers)
    assert res.status_code == 201
    return res.json()
