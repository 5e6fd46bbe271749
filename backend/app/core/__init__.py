"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - The User entity validates itself; persistence is reached only through Protocols

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
