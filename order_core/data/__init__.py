"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderItemMapper, OrderMapper
from .models import Base, OrderItemModel, OrderModel, RetailerModel
from .repositories import SqlAlchemyOrderRepository, SqlAlchemyRetailerRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "RetailerModel",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyRetailerRepository",
    "UnitOfWork",
]
