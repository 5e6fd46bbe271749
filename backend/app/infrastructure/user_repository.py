"""SQL User Repository — UserRepository implementation over an AsyncSession.

Invariants:
    - Returns core User entities, never ORM rows
    - add/update commit immediately; a unique-index violation on email becomes ConflictError
    - delete is idempotent (deleting a missing id is a no-op)
    - get_all returns users in creation order

Design Decisions:
    - Structural implementation of core.repository_protocols.UserRepository (no inheritance)
    - IntegrityError caught here, not in DatabaseSessionManager: only the store knows
      that the violated constraint is the email index
"""

import logging

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.core.errors import ConflictError, DatabaseError, ErrorContext
from app.core.user import User
from app.models.user import UserModel

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """Persists users in the `users` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(UserModel).where(UserModel.email == email),
        )
        row = result.scalar_one_or_none()
        return _to_entity(row) if row else None

    async def get_by_id(self, user_id: UserId) -> User | None:
        row = await self.db.get(UserModel, user_id)
        return _to_entity(row) if row else None

    async def get_all(self) -> list[User]:
        result = await self.db.execute(
            select(UserModel).order_by(UserModel.created_at),
        )
        return [_to_entity(row) for row in result.scalars().all()]

    async def add(self, user: User) -> User:
        row = UserModel(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.db.add(row)
        await self._commit_or_conflict(user)
        await self.db.refresh(row)
        return _to_entity(row)

    async def update(self, user: User) -> User:
        row = await self.db.get(UserModel, user.id)
        if row is None:
            raise DatabaseError(
                f"user {user.id} disappeared before update", "update",
            )
        row.first_name = user.first_name
        row.last_name = user.last_name
        row.email = user.email
        row.updated_at = user.updated_at
        await self._commit_or_conflict(user)
        await self.db.refresh(row)
        return _to_entity(row)

    async def exists(self, user_id: UserId) -> bool:
        found = await self.db.scalar(
            select(UserModel.id).where(UserModel.id == user_id),
        )
        return found is not None

    async def delete(self, user_id: UserId) -> None:
        await self.db.execute(
            delete(UserModel).where(UserModel.id == user_id),
        )
        await self.db.commit()

    async def _commit_or_conflict(self, user: User) -> None:
        """Commit, mapping the email unique-index violation to ConflictError."""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Email uniqueness enforced by store: {e.orig}",
                extra={"user_id": str(user.id), "error_code": "EMAIL_CONFLICT"},
            )
            raise ConflictError(context=ErrorContext(user_id=str(user.id)))


def _to_entity(row: UserModel) -> User:
    return User(
        id=UserId(row.id),
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
