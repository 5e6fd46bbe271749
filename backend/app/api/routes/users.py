"""Users API — HTTP adapter over UserService.

Invariants:
    - Every route delegates to UserService; no business rule lives here
    - Service absence (None / False) → ResourceNotFoundError → 404
    - ConflictError → 409 and ValidationError → 400 via the global RosterError handler
    - Success: list/get/update → 200, create → 201, delete → 204 with empty body

Design Decisions:
    - get_user_service as a FastAPI dependency: tests override it or get_db
      to swap the store without touching routes
    - Path ids parsed as UUID by FastAPI: a malformed id is a 400, not a 404
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import get_db
from app.infrastructure.user_repository import SqlUserRepository
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """Wire UserService to the SQL store for this request."""
    return UserService(SqlUserRepository(db))


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users."""
    return await service.get_all()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    """Get a single user."""
    user = await service.get_by_id(UserId(user_id))
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return user


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """Create a user. 409 when the email is taken."""
    user = await service.create(body)
    response.headers["Location"] = f"{router.prefix}/{user.id}"
    return user


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """Replace a user's fields."""
    user = await service.update(UserId(user_id), body)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    """Delete a user."""
    if not await service.delete(UserId(user_id)):
        raise ResourceNotFoundError("User", str(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
