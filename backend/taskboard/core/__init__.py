"""Core Layer: pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions here take the clock as an argument when they need one

Design Decisions:
    - Functional core separated from the imperative shell (repositories, routes)
"""
