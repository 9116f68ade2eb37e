"""Database models."""

from .base import Base
from .order_model import OrderItemModel, OrderModel
from .retailer_model import RetailerModel

__all__ = ["Base", "OrderItemModel", "OrderModel", "RetailerModel"]
