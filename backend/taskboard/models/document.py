"""StoredDocument ORM: one row holding an entire Taskboard document.

Invariants:
    - name is the primary key; the application uses a single well-known name
    - body is the same {users, boards, tasks} object the JSON file holds
    - updated_at is restamped on every save

Design Decisions:
    - JSON column instead of per-entity tables: repositories keep the same
      whole-document load/save contract on either backend
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base


class StoredDocument(Base):
    """A named whole-document snapshot."""
    __tablename__ = "documents"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    body: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
