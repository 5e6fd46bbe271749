"""Service test fixtures — UserService over the in-memory store."""

import pytest

from app.services.user_service import UserService
from fake_user_repository import InMemoryUserRepository


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(repo):
    return UserService(repo)
