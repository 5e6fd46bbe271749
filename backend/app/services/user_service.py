"""User Service — orchestrates User CRUD over a UserRepository.

Invariants:
    - create writes to the store exactly once when the email is free, zero times otherwise
    - update/delete check existence first; the store's update/delete is never
      called for an unknown id
    - Absence is a result (None / False), never an exception
    - ValidationError and ConflictError propagate unchanged; store failures propagate opaque
    - No cache, no lock, no retry: every read goes to the store

Design Decisions:
    - Repository injected via constructor (Protocol), so tests swap in an in-memory store
    - update rejects an email held by a different user: same rule as create, checked
      only when the email actually changes (one extra read)
    - Check-then-act is not atomic; the SQL store backs it with a unique index
"""

import logging

from app.core.domain_types import UserId
from app.core.errors import ConflictError, ErrorContext
from app.core.repository_protocols import UserRepository
from app.core.user import User
from app.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Create/read/update/delete for users with email uniqueness."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create(self, data: UserCreate) -> UserResponse:
        """Create a user. Raises ConflictError on duplicate email."""
        existing = await self.repository.get_by_email(data.email)
        if existing is not None:
            logger.warning(
                "Rejected duplicate email on create",
                extra={"user_id": str(existing.id), "error_code": "EMAIL_CONFLICT"},
            )
            raise ConflictError(context=ErrorContext(user_id=str(existing.id)))

        user = User.create(data.first_name, data.last_name, data.email)
        stored = await self.repository.add(user)
        logger.info("User created", extra={"user_id": str(stored.id)})
        return _to_response(stored)

    async def get_by_id(self, user_id: UserId) -> UserResponse | None:
        user = await self.repository.get_by_id(user_id)
        return _to_response(user) if user is not None else None

    async def get_all(self) -> list[UserResponse]:
        users = await self.repository.get_all()
        return [_to_response(u) for u in users]

    async def update(
        self, user_id: UserId, data: UserUpdate,
    ) -> UserResponse | None:
        """Replace a user's fields. Returns None when the user does not exist."""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            return None

        if data.email != user.email:
            holder = await self.repository.get_by_email(data.email)
            if holder is not None and holder.id != user.id:
                logger.warning(
                    "Rejected duplicate email on update",
                    extra={"user_id": str(user_id), "error_code": "EMAIL_CONFLICT"},
                )
                raise ConflictError(context=ErrorContext(user_id=str(user_id)))

        user.update_details(data.first_name, data.last_name, data.email)
        stored = await self.repository.update(user)
        logger.info("User updated", extra={"user_id": str(stored.id)})
        return _to_response(stored)

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user. Returns False when the user does not exist."""
        if not await self.repository.exists(user_id):
            return False
        await self.repository.delete(user_id)
        logger.info("User deleted", extra={"user_id": str(user_id)})
        return True


def _to_response(user: User) -> UserResponse:
    """Translate the core entity into its presentation form."""
    return UserResponse.model_validate(user)
