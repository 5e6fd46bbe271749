"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Absence is returned as None (lookups) or False (exists), never raised

Design Decisions:
    - Protocol over ABC: structural subtyping, so a test double needs no base class
    - Async in Protocol: boundary methods are async because implementations do IO
    - No atomic check-then-act primitive: uniqueness under concurrent writers is
      the store's job (SQL store: unique index on users.email)
"""

from typing import Protocol

from app.core.domain_types import UserId
from app.core.user import User


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def get_by_email(self, email: str) -> User | None: ...
    async def get_by_id(self, user_id: UserId) -> User | None: ...
    async def get_all(self) -> list[User]: ...
    async def add(self, user: User) -> User: ...
    async def update(self, user: User) -> User: ...
    async def exists(self, user_id: UserId) -> bool: ...
    async def delete(self, user_id: UserId) -> None: ...
