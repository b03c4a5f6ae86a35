"""
Shared pytest fixtures for University API tests.

Test categories:
    - Unit tests: Service against an in-memory store, no database
    - Integration tests: Full application against an in-memory SQLite database

Database:
    Integration tests run on ``sqlite+aiosqlite`` with a StaticPool so every
    session in a test shares the same in-memory database. Tables are created
    from model metadata for each test function.
"""

import os
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# =============================================================================
# Environment Setup
# =============================================================================

# Override settings BEFORE importing app modules
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("DATABASE_URL_SYNC", "sqlite:///:memory:")
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_TO_FILE", "false")

# Now import app modules
from university_api.config import Settings  # noqa: E402
from university_api.core.database.base import Base  # noqa: E402
from university_api.core.database.session import get_db  # noqa: E402

# Import all models to register them with Base.metadata
from university_api.core.universities.models import University  # noqa: E402, F401


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Get test settings instance."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        database_url_sync="sqlite:///:memory:",
        app_env="testing",
        debug=False,
        log_level="WARNING",
        log_to_file=False,
    )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_engine(test_settings: Settings):
    """Create test database engine.

    StaticPool keeps a single connection, which is what holds the
    in-memory database alive between sessions.
    """
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def setup_database(test_engine):
    """Create all tables in test database."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create session factory for tests."""
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(
    test_session_factory,
    setup_database,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database session for each test.

    Allows the endpoint to commit its own transactions.
    """
    async with test_session_factory() as session:
        yield session
        if session.in_transaction():
            await session.rollback()


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app() -> FastAPI:
    """Create test application instance.

    Lifespan events are not triggered by ASGITransport, so the startup
    migration check does not run.
    """
    from university_api.main import create_app

    return create_app()


@pytest_asyncio.fixture
async def async_client(
    app: FastAPI,
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def university_payload() -> dict[str, Any]:
    """Valid create request body."""
    return {
        "alpha_two_code": "US",
        "web_pages": ["https://www.mit.edu/"],
        "name": "Massachusetts Institute of Technology",
        "country": "United States",
        "domains": ["mit.edu"],
        "state_province": "Massachusetts",
    }


@pytest_asyncio.fixture
async def created_university(
    async_client: AsyncClient,
    university_payload: dict[str, Any],
) -> dict[str, Any]:
    """Create a university through the API and return its public record."""
    response = await async_client.post("/api/v1/universities", json=university_payload)
    assert response.status_code == 201
    return response.json()["newUniversity"]
