"""Taskboard Application Package: boards, tasks and the JSON document they live in.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
