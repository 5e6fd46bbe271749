"""DatabaseSessionManager — health check and SQLAlchemy error mapping."""

import pytest
from sqlalchemy import text

from app.core.errors import DatabaseError
from app.infrastructure.database import DatabaseSessionManager
import app.infrastructure.database as db_module


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.close()


async def test_health_check_succeeds_on_sqlite(manager):
    assert await manager.health_check() is True


async def test_create_tables_runs(manager):
    await manager.create_tables()
    assert await manager.health_check() is True


async def test_operational_error_mapped_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.operation == "execute"
    assert exc_info.value.http_status == 503


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError):
        async for _ in db_module.get_db():
            pass
