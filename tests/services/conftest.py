"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - get_settings dependency overridden so the age requirement is fixed (18)
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so rows committed through the API are visible to assertions
    - error_client disables raise_app_exceptions: Starlette re-raises after the
      catch-all handler renders the 500, and the test needs the response
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from user_registry.config import Settings, get_settings
from user_registry.db.base import Base
from user_registry.infrastructure.database import get_db, DatabaseSessionManager
from user_registry.infrastructure.user_repository import SqlAlchemyUserRepository
import user_registry.infrastructure.database as db_module
from user_registry.main import app

AGE_REQUIREMENT = 18


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
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
async def repository(test_db):
    return SqlAlchemyUserRepository(test_db)


@pytest.fixture
async def read_repository(test_session_factory):
    """Repository on its own session: sees committed state, no stale identity map."""
    async with test_session_factory() as session:
        yield SqlAlchemyUserRepository(session)


def _override_app(test_engine, test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: Settings(
        age_requirement=AGE_REQUIREMENT,
    )

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager
    return original_manager


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB and settings dependencies overridden."""
    original_manager = _override_app(test_engine, test_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def error_client(test_engine, test_session_factory):
    """Like client, but returns 500 responses instead of raising."""
    original_manager = _override_app(test_engine, test_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
