"""Domain Types: identity wrappers and the closed value sets of the data model.

Invariants:
    - UserId, BoardId, TaskId wrap opaque strings (stored as-is in the document)
    - Collection names are exactly the three top-level keys of the document
    - Priority is one of low|medium|high; default is medium
    - str Enums serialize into the JSON document without custom encoders

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Task status is a free string in the document; only its default is fixed
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
BoardId = NewType("BoardId", str)
TaskId = NewType("TaskId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Collection(str, Enum):
    """Top-level collections of the stored document."""
    USERS = "users"
    BOARDS = "boards"
    TASKS = "tasks"


class Priority(str, Enum):
    """Task priority."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_PRIORITY = Priority.MEDIUM
DEFAULT_STATUS = "pending"
