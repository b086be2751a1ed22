"""
Recipe API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession (no real DB needed)
    ├── mock_store: AsyncMock standing in for RecipeStore
    ├── sample_recipe_fields: Valid create payload
    ├── db_session_factory: In-memory SQLite with the recipes table created
    ├── db_session: One session from that factory
    └── test_client: HTTPX AsyncClient wired to the app, backed by the SQLite factory
"""

import os

# Must be set before recipe_api.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from recipe_api.database import Base, get_db_session
from recipe_api.models.recipe import Recipe  # noqa: F401  (registers the table)
from recipe_api.services.recipe_store import RecipeStore


# ══════════════════════════════════════════════════════════════════════════
# Mock Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_x(mock_db_session):
            mock_db_session.get.return_value = recipe
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_store():
    """AsyncMock with RecipeStore's interface; configure return values per test."""
    return AsyncMock(spec=RecipeStore)


@pytest.fixture
def sample_recipe_fields():
    """A complete, valid recipe body."""
    return {
        "title": "Chocolate Chip Cookies",
        "ingredients": ["flour", "sugar", "chocolate chips"],
        "instructions": "Mix ingredients. Bake at 350 for 15 minutes.",
        "image": "https://www.example.com/recipe-image.jpg",
    }


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_session_factory():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with db_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_session_factory):
    """
    HTTPX AsyncClient talking to the real app through ASGITransport.

    get_db_session is overridden so requests run against the in-memory
    database instead of the configured engine.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/recipes")
            assert response.status_code == 200
    """
    from recipe_api.main import app

    async def override_get_db_session():
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
