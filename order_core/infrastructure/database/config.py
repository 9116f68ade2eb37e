"""
Database configuration.

Creates the async engine and session factory from DatabaseSettings.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from order_core.infrastructure.logging import get_logger
from order_core.settings import get_settings

logger = get_logger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        database_url: Overrides ``DB_DATABASE_URL`` when given

    Returns:
        Configured async engine
    """
    settings = get_settings().database
    url = database_url or settings.database_url
    logger.info(f"Creating database engine: {url.split('@')[-1]}")

    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False},  # Required for SQLite
            poolclass=StaticPool,
        )

    return create_async_engine(
        url,
        echo=settings.echo_sql,
        pool_pre_ping=True,  # Test connections before using
    )


# Global engine instance
engine: Optional[AsyncEngine] = None


def get_engine() -> AsyncEngine:
    """Get or create global engine instance."""
    global engine

    if engine is None:
        engine = create_engine()

    return engine


# =============================================================================
# SESSION FACTORY
# =============================================================================

def get_session_factory(bind: Optional[AsyncEngine] = None) -> async_sessionmaker[AsyncSession]:
    """
    Get session factory.

    Returns:
        Session factory for creating sessions
    """
    return async_sessionmaker(
        bind=bind or get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(bind: Optional[AsyncEngine] = None) -> None:
    """Create all tables if they don't exist."""
    from order_core.data.models import Base

    logger.info("Initializing database...")
    async with (bind or get_engine()).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


async def close_database() -> None:
    """Close database connections."""
    global engine

    if engine:
        logger.info("Closing database connections...")
        await engine.dispose()
        engine = None
