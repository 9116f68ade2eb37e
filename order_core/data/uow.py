"""Unit of Work pattern for atomic transactions."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .repositories import SqlAlchemyOrderRepository, SqlAlchemyRetailerRepository


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories

    Leaving the context without ``commit()`` discards pending changes.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._retailer_repository: Optional[SqlAlchemyRetailerRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Roll back anything uncommitted and release the session."""
        try:
            await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._order_repository = None
            self._retailer_repository = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self.session)
        return self._order_repository

    @property
    def retailers(self) -> SqlAlchemyRetailerRepository:
        """Lazy-load retailer repository."""
        if self._retailer_repository is None:
            self._retailer_repository = SqlAlchemyRetailerRepository(self.session)
        return self._retailer_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance."""
    return UnitOfWork(session_factory)
