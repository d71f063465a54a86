"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session manager (same
      commit/rollback unit of work as production)
    - db_manager patched so the readiness probe sees the test database
    - Default categories seeded before each test

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every
      session sees the tables created by the fixture
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.repositories import SqlCategoryRepository
from app.services.category_service import seed_default_categories
import app.infrastructure.database as db_module
import app.models  # noqa: F401
from app.main import app


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
async def db_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with manager.session() as db:
        await seed_default_categories(SqlCategoryRepository(db))
    return manager


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with db_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def product_payload():
    return {
        "name": "Test Product",
        "description": "Test description",
        "price": 99.99,
        "quantity": 100,
        "category": "ELECTRONICS",
    }


@pytest.fixture
async def created_product(client, product_payload):
    res = await client.post("/api/products", json=product_payload)
    assert res.status_code == 201
    return res.json()
