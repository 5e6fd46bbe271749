"""Health probes and the catch-all error handler.

Design Decisions:
    - Catch-all test uses raise_app_exceptions=False: Starlette re-raises after
      the 500 response is sent, which httpx would otherwise surface
"""

from httpx import ASGITransport, AsyncClient

from app.api.routes.users import get_user_service
from app.core.errors import DatabaseError
from app.main import app
from app.services.user_service import UserService
import app.infrastructure.database as db_module

from fake_user_repository import InMemoryUserRepository


async def test_liveness_returns_healthy(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_store_outage_maps_to_503():
    repo = InMemoryUserRepository()
    repo.failures["get_all"] = DatabaseError("Connection refused", "execute")
    app.dependency_overrides[get_user_service] = lambda: UserService(repo)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            res = await c.get("/api/v1/users")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"


async def test_unexpected_exception_returns_generic_500():
    repo = InMemoryUserRepository()
    repo.failures["get_all"] = RuntimeError("secret internals")
    app.dependency_overrides[get_user_service] = lambda: UserService(repo)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            res = await c.get("/api/v1/users")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text
