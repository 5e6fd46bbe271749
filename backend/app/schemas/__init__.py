"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and type at the system boundary
    - Non-emptiness of User fields is enforced by the entity, not here

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
