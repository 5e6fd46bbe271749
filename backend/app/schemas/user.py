"""User Schemas — Pydantic models for the users API boundary.

Invariants:
    - UserCreate/UserUpdate carry all three mutable fields (full replacement on update)
    - Values pass through untouched: no stripping, no email normalization
    - UserResponse is the presentation form returned by UserService

Design Decisions:
    - Empty strings are accepted here and rejected by User.create/update_details,
      so the entity stays the single owner of its invariants
    - from_attributes: UserResponse.model_validate(user) reads the core dataclass directly
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """User creation payload."""
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=320)


class UserUpdate(BaseModel):
    """User update payload — replaces all mutable fields."""
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=320)


class UserResponse(BaseModel):
    """User response — public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime | None = None
