"""Record Builders: defaults, sparse merges and monotonic timestamps.

Tests:
    - build_task fills every default and stamps createdAt == updatedAt
    - Supplied task fields win over defaults
    - merge_fields leaves unsupplied fields untouched and does not mutate input
    - next_timestamp always advances past the previous stamp, reads "Z" stamps
      and ignores a previous stamp it cannot parse
"""

from datetime import datetime, timedelta, timezone

from taskboard.core.domain_types import Priority
from taskboard.core.records import (
    build_board, build_task, build_user, empty_document, find_index,
    format_timestamp, malformed_collections, merge_fields, next_timestamp,
    normalize_document,
    public_user,
)

NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def test_empty_document_has_three_collections():
    assert empty_document() == {"users": [], "boards": [], "tasks": []}


def test_normalize_fills_missing_collections():
    doc = normalize_document({"users": [{"id": "u1"}]})
    assert doc == {"users": [{"id": "u1"}], "boards": [], "tasks": []}


def test_malformed_collections_names_non_list_values():
    doc = {"users": None, "boards": [], "tasks": {}}
    assert malformed_collections(doc) == ["users", "tasks"]
    assert malformed_collections({"users": []}) == []


def test_build_user_keeps_hash_under_password_key():
    user = build_user(
        {"id": "u1", "email": "a@b.co", "password": "$2b$hash", "name": "A"}, NOW,
    )
    assert user == {
        "id": "u1", "email": "a@b.co", "password": "$2b$hash", "name": "A",
        "createdAt": format_timestamp(NOW),
    }


def test_build_board_stamps_created_at():
    board = build_board({"id": "b1", "name": "Work", "userId": "u1"}, NOW)
    assert board["createdAt"] == "2026-03-01T09:30:00.000000+00:00"
    assert set(board) == {"id", "name", "userId", "createdAt"}


def test_build_task_fills_defaults():
    task = build_task(
        {"id": "t1", "title": "Write report", "boardId": "b1", "userId": "u1"}, NOW,
    )
    assert task["description"] == ""
    assert task["status"] == "pending"
    assert task["completed"] is False
    assert task["priority"] == "medium"
    assert task["dueDate"] is None
    assert task["createdAt"] == task["updatedAt"]


def test_build_task_keeps_supplied_fields():
    task = build_task(
        {
            "id": "t1", "title": "Ship", "boardId": "b1", "userId": "u1",
            "description": "v2", "status": "in-progress", "completed": True,
            "priority": Priority.HIGH, "dueDate": "2026-04-01",
        },
        NOW,
    )
    assert task["description"] == "v2"
    assert task["status"] == "in-progress"
    assert task["completed"] is True
    assert task["priority"] == "high"
    assert isinstance(task["priority"], str)
    assert task["dueDate"] == "2026-04-01"


def test_build_task_none_falls_back_to_default():
    task = build_task(
        {
            "id": "t1", "title": "x", "boardId": "b1", "userId": "u1",
            "priority": None, "description": None, "dueDate": "",
        },
        NOW,
    )
    assert task["priority"] == "medium"
    assert task["description"] == ""
    assert task["dueDate"] is None


def test_merge_fields_only_overrides_supplied_keys():
    record = {"id": "t1", "title": "a", "completed": False}
    merged = merge_fields(record, {"completed": True})
    assert merged == {"id": "t1", "title": "a", "completed": True}
    assert record["completed"] is False


def test_next_timestamp_uses_now_when_it_advances():
    previous = format_timestamp(NOW)
    later = NOW + timedelta(seconds=5)
    assert next_timestamp(later, previous) == format_timestamp(later)


def test_next_timestamp_bumps_when_clock_stalls():
    previous = format_timestamp(NOW)
    stamp = next_timestamp(NOW, previous)
    assert datetime.fromisoformat(stamp) == NOW + timedelta(microseconds=1)
    assert stamp > previous


def test_next_timestamp_bumps_when_clock_goes_backwards():
    previous = format_timestamp(NOW)
    stamp = next_timestamp(NOW - timedelta(hours=1), previous)
    assert datetime.fromisoformat(stamp) > NOW


def test_next_timestamp_accepts_naive_previous():
    stamp = next_timestamp(NOW, "2026-03-01T09:30:00")
    assert datetime.fromisoformat(stamp) > NOW - timedelta(seconds=1)


def test_find_index():
    records = [{"id": "a"}, {"id": "b"}]
    assert find_index(records, "b") == 1
    assert find_index(records, "zz") is None


def test_public_user_drops_password():
    user = {"id": "u1", "email": "a@b.co", "password": "h", "name": "A"}
    assert "password" not in public_user(user)
    assert public_user(user)["email"] == "a@b.co"


def test_next_timestamp_reads_zulu_previous():
    stamp = next_timestamp(NOW, "2026-03-01T10:00:00.000Z")
    assert stamp == "2026-03-01T10:00:00.000001+00:00"


def test_next_timestamp_ignores_unparseable_previous():
    assert next_timestamp(NOW, "not a timestamp") == format_timestamp(NOW)
