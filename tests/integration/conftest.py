"""Pytest configuration and fixtures for integration tests."""

import pytest_asyncio

from order_core.data import Base, RetailerModel, UnitOfWork
from order_core.infrastructure.database import create_engine, get_session_factory, init_database

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine with all tables."""
    engine = create_engine(TEST_DATABASE_URL)
    await init_database(engine)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield get_session_factory(test_engine)


@pytest_asyncio.fixture
async def uow_factory(test_session_factory):
    """Callable returning a fresh UnitOfWork per transaction."""
    return lambda: UnitOfWork(test_session_factory)


@pytest_asyncio.fixture
async def known_retailer(test_session_factory, retailer_id):
    """Insert one retailer row and return its id."""
    async with test_session_factory() as session:
        session.add(RetailerModel(id=retailer_id, name="Delta Grocers", email="ops@delta.example"))
        await session.commit()
    return retailer_id
