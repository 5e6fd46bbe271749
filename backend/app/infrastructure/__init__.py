"""Infrastructure Layer — persistence adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - Database failures surface as core DatabaseError

Design Decisions:
    - One adapter per concern (database, user store, logging)
"""
