"""ORM Models: SQLAlchemy declarative models for the SQL document backend.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is populated before create_all runs
"""

from taskboard.models.document import StoredDocument  # noqa: F401
