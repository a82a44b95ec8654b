"""Database Infrastructure: SQLAlchemy Base for the SQL document backend.

Invariants:
    - Only the SQL document store touches these modules
"""
