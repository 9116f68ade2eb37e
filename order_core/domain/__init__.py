"""Domain layer - pure domain models and interfaces."""

from .entities import Order, OrderItem
from .errors import (
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    ErrorKind,
    InternalServerError,
    InvalidStateTransitionError,
    NotFoundError,
    ValidationError,
)
from .repositories import (
    OrderFilters,
    OrderRepository,
    PaginatedOrders,
    PaginationOptions,
    RetailerRepository,
)
from .value_objects import Address, Money, OrderStatus

__all__ = [
    "Address",
    "BusinessRuleViolationError",
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "InternalServerError",
    "InvalidStateTransitionError",
    "Money",
    "NotFoundError",
    "Order",
    "OrderFilters",
    "OrderItem",
    "OrderRepository",
    "OrderStatus",
    "PaginatedOrders",
    "PaginationOptions",
    "RetailerRepository",
    "ValidationError",
]
