"""SQLAlchemy repository implementations."""

from .order_repository_impl import SqlAlchemyOrderRepository
from .retailer_repository_impl import SqlAlchemyRetailerRepository

__all__ = ["SqlAlchemyOrderRepository", "SqlAlchemyRetailerRepository"]
