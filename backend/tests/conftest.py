"""Root conftest: shared test configuration and store fixtures."""

import os

import pytest

# Ensure tests never sign with the development secret or pay full bcrypt cost
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

from taskboard.infrastructure.flat_file_store import JsonFileStore  # noqa: E402
from taskboard.infrastructure.security import CredentialService  # noqa: E402


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def store(data_file):
    return JsonFileStore(data_file)


@pytest.fixture
def credential_service():
    return CredentialService("test-secret", rounds=4)
