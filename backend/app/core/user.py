"""User Entity — the single record type managed by Roster.

Invariants:
    - id is assigned once at construction and never changes
    - first_name, last_name, email are never empty (whitespace-only counts as empty)
    - email is stored exactly as supplied
    - update_details validates every field before mutating any of them

Design Decisions:
    - Plain dataclass, no ORM coupling: the SQL store maps to/from it (ADR: core has no IO)
    - create() factory instead of validating in __init__: the store rebuilds
      persisted users without re-running construction rules
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from app.core.domain_types import UserId
from app.core.errors import ValidationError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """A person record — pure dataclass, no IO."""

    first_name: str
    last_name: str
    email: str
    id: UserId = field(default_factory=lambda: UserId(uuid4()))
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime | None = None

    @classmethod
    def create(cls, first_name: str, last_name: str, email: str) -> "User":
        """Build a new user with a fresh id. Raises ValidationError on empty fields."""
        check_user_fields(first_name, last_name, email)
        return cls(first_name=first_name, last_name=last_name, email=email)

    def update_details(self, first_name: str, last_name: str, email: str) -> None:
        """Overwrite the mutable fields. Raises ValidationError on empty fields."""
        check_user_fields(first_name, last_name, email)
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.updated_at = _utcnow()


def check_user_fields(first_name: str, last_name: str, email: str) -> None:
    """Raise ValidationError naming the first empty required field."""
    for name, value in (
        ("first_name", first_name),
        ("last_name", last_name),
        ("email", email),
    ):
        if not value or not value.strip():
            raise ValidationError(f"{name} cannot be empty", field=name)
