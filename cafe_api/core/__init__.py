"""Core Layer — pure domain logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (routes + catalog store)
"""
