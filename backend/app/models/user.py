"""User ORM — persisted form of the core User entity.

Invariants:
    - id is UUID primary key, supplied by the core (User.create), never generated here
    - email has a unique index: the store's guarantee against concurrent duplicate creates
    - first_name, last_name, email are non-nullable

Design Decisions:
    - Separate class from core.user.User: the core stays free of SQLAlchemy
      (mapping lives in infrastructure/user_repository.py)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class UserModel(Base):
    """users table row."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
