"""Repository interfaces."""

from .order_repository import (
    SORTABLE_FIELDS,
    OrderFilters,
    OrderRepository,
    PaginatedOrders,
    PaginationOptions,
)
from .retailer_repository import RetailerRepository

__all__ = [
    "SORTABLE_FIELDS",
    "OrderFilters",
    "OrderRepository",
    "PaginatedOrders",
    "PaginationOptions",
    "RetailerRepository",
]
