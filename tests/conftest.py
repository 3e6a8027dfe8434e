"""Root conftest — environment, async DB, and FastAPI test client.

Invariants:
    - Environment configured before the app module is imported
    - Every test gets a fresh SQLite database file under tmp_path
    - get_db dependency overridden to use the test DatabaseSessionManager
    - db_manager patched so readiness probes see the test database

Design Decisions:
    - File-backed SQLite over :memory: so the renderer's concurrent fan-out
      requests each get their own connection
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from blogapp.db.base import Base  # noqa: E402
import blogapp.models  # noqa: E402,F401
from blogapp.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
import blogapp.infrastructure.database as db_module  # noqa: E402
from blogapp.main import app  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def test_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Seed data through the API ──────────────────────────────────

async def _register(client, name: str, username: str, password: str) -> dict:
    res = await client.post(
        "/users/", json={"name": name, "username": username, "password": password},
    )
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def alice(client):
    return await _register(client, "Alice", "alice", "wonderland")


@pytest.fixture
async def bob(client):
    return await _register(client, "Bob", "bob", "builder")


@pytest.fixture
async def post(client, alice):
    res = await client.post(
        "/blogs/",
        json={"title": "Hello", "content": "World", "author": alice["id"]},
    )
    assert res.status_code == 201
    return res.json()
