"""Services Layer — orchestration between core entities and repository Protocols.

Invariants:
    - Services depend on core Protocols, never on SQLAlchemy or FastAPI
    - Services return presentation schemas, or None/False for absence

Design Decisions:
    - One service class per aggregate for locality
"""
