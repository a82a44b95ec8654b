"""Store Wiring: backend selection and the get_store dependency."""

import pytest

import taskboard.infrastructure.storage as storage_module
from taskboard.config import Settings
from taskboard.core.errors import StorageUnavailableError
from taskboard.infrastructure.flat_file_store import JsonFileStore
from taskboard.infrastructure.sql_store import SqlDocumentStore
from taskboard.infrastructure.storage import build_store, get_store, init_store


def test_json_backend_is_default(tmp_path):
    settings = Settings(data_file=tmp_path / "data.json")
    store = build_store(settings)
    assert isinstance(store, JsonFileStore)
    assert store.path == tmp_path / "data.json"
    assert store.mirror_path is None


def test_json_backend_with_mirror(tmp_path):
    settings = Settings(
        data_file=tmp_path / "data.json", mirror_file=tmp_path / "mirror.json",
    )
    assert build_store(settings).mirror_path == tmp_path / "mirror.json"


def test_blank_mirror_setting_disables_mirror():
    assert Settings(mirror_file="  ").mirror_file is None


def test_sql_backend(tmp_path):
    settings = Settings(
        storage_backend="sql", database_url=f"sqlite:///{tmp_path / 'db.sqlite'}",
    )
    assert isinstance(build_store(settings), SqlDocumentStore)


def test_get_store_before_init_fails(monkeypatch):
    monkeypatch.setattr(storage_module, "store", None)
    with pytest.raises(StorageUnavailableError):
        get_store()


def test_init_store_sets_singleton(monkeypatch, tmp_path):
    monkeypatch.setattr(storage_module, "store", None)
    store = init_store(Settings(data_file=tmp_path / "data.json"))
    assert get_store() is store
