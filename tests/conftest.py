"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from harvest.profiles import ExtractionProfile, menu_item_profile, restaurant_profile
from store.database import enable_sqlite_savepoints
from store.models import Base

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Create test engine; one shared connection keeps the in-memory database alive
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
enable_sqlite_savepoints(test_engine)

# Create test session factory
TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@pytest.fixture
def menu_profile() -> ExtractionProfile:
    """Menu item profile with default settings."""
    return menu_item_profile()


@pytest.fixture
def listing_profile() -> ExtractionProfile:
    """Restaurant listing profile with default fuzzy dedup settings."""
    return restaurant_profile()


@pytest.fixture
async def setup_database() -> AsyncGenerator[None, None]:
    """Create test database tables, dropping them afterwards."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def session(setup_database: None) -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for tests."""
    async with TestSessionLocal() as session:
        yield session
