"""Record Builders: pure construction and merging of stored user/board/task dicts.

Invariants:
    - Records are plain dicts with the camelCase keys of the stored document
    - Builders fill defaults only for fields the caller did not supply
    - merge_fields never resets a field that is absent from the updates
    - next_timestamp is strictly greater than the previous stamp it is given;
      an unparseable previous stamp is ignored
    - No IO and no clock reads: callers pass `now`

Design Decisions:
    - Pure functions over methods on a store class: repositories stay a thin
      load -> mutate -> save shell around these
    - Timestamps are ISO-8601 UTC strings, which sort lexicographically in
      the same order as the instants they encode
"""

from datetime import datetime, timedelta, timezone

from taskboard.core.domain_types import Collection, DEFAULT_PRIORITY, DEFAULT_STATUS


def empty_document() -> dict:
    """A document with all three collections present and empty."""
    return {collection.value: [] for collection in Collection}


def normalize_document(document: dict) -> dict:
    """Fill in any collection missing from a stored document."""
    for collection in Collection:
        document.setdefault(collection.value, [])
    return document


def malformed_collections(document: dict) -> list[str]:
    """Names of collections present in `document` whose value is not a list."""
    return [
        collection.value for collection in Collection
        if not isinstance(document.get(collection.value, []), list)
    ]


def format_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="microseconds")


def next_timestamp(now: datetime, previous: str | None = None) -> str:
    """Stamp for `now`, bumped by one microsecond if it would not advance `previous`."""
    moment = now.astimezone(timezone.utc)
    if isinstance(previous, str) and previous:
        last = _parse_timestamp(previous)
        if last is not None and moment <= last:
            moment = last + timedelta(microseconds=1)
    return format_timestamp(moment)


def _parse_timestamp(stamp: str) -> datetime | None:
    """Aware UTC datetime for a stored stamp, or None if it does not parse.

    Accepts a trailing "Z" and naive stamps (read as UTC).
    """
    if stamp.endswith("Z"):
        stamp = stamp[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(stamp)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_user(user_data: dict, now: datetime) -> dict:
    return {
        "id": user_data["id"],
        "email": user_data["email"],
        "password": user_data["password"],
        "name": user_data["name"],
        "createdAt": format_timestamp(now),
    }


def build_board(board_data: dict, now: datetime) -> dict:
    return {
        "id": board_data["id"],
        "name": board_data["name"],
        "userId": board_data["userId"],
        "createdAt": format_timestamp(now),
    }


def build_task(task_data: dict, now: datetime) -> dict:
    """New task record. Falsy optional fields fall back to their defaults."""
    stamp = format_timestamp(now)
    priority = task_data.get("priority") or DEFAULT_PRIORITY.value
    return {
        "id": task_data["id"],
        "title": task_data["title"],
        "description": task_data.get("description") or "",
        "status": task_data.get("status") or DEFAULT_STATUS,
        "completed": bool(task_data.get("completed", False)),
        "priority": getattr(priority, "value", priority),
        "dueDate": task_data.get("dueDate") or None,
        "boardId": task_data["boardId"],
        "userId": task_data["userId"],
        "createdAt": stamp,
        "updatedAt": stamp,
    }


def merge_fields(record: dict, updates: dict) -> dict:
    """Shallow merge of the supplied fields over a copy of the record."""
    return {**record, **updates}


def find_index(records: list[dict], record_id: str) -> int | None:
    """Position of the first record with this id, or None."""
    for index, record in enumerate(records):
        if record.get("id") == record_id:
            return index
    return None


def public_user(user: dict) -> dict:
    """User record without the password hash."""
    return {key: value for key, value in user.items() if key != "password"}
