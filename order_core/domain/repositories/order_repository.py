"""Repository interfaces for Order aggregate."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from ..entities.order import Order
from ..value_objects import OrderStatus

SORTABLE_FIELDS = ("created_at", "updated_at", "order_number", "status", "customer_name")


@dataclass(frozen=True)
class OrderFilters:
    """Optional list filters; ``None`` means "do not filter"."""

    retailer_id: Optional[str] = None
    customer_id: Optional[str] = None
    status: Optional[OrderStatus] = None
    order_number: Optional[str] = None  # case-insensitive substring
    start_date: Optional[datetime] = None  # inclusive
    end_date: Optional[datetime] = None  # inclusive


@dataclass(frozen=True)
class PaginationOptions:
    page: int = 1
    limit: int = 10
    sort_by: str = "created_at"
    sort_order: str = "desc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class PaginatedOrders:
    """One page of orders plus totals."""

    orders: List[Order]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Insert a new order and return it with storage-assigned ids.

        Raises:
            ConflictError: If the order number is already taken
        """

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by id, or None."""

    @abstractmethod
    async def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Retrieve order by its public order number, or None."""

    @abstractmethod
    async def find_all(
        self,
        filters: Optional[OrderFilters] = None,
        pagination: Optional[PaginationOptions] = None,
    ) -> PaginatedOrders:
        """List orders matching ``filters``, one page at a time."""

    async def find_by_retailer_id(
        self,
        retailer_id: str,
        pagination: Optional[PaginationOptions] = None,
    ) -> PaginatedOrders:
        return await self.find_all(OrderFilters(retailer_id=retailer_id), pagination)

    @abstractmethod
    async def find_by_customer_id(self, customer_id: str) -> List[Order]:
        """All orders of a customer, newest first."""

    @abstractmethod
    async def update(self, order: Order) -> Order:
        """Persist a loaded order (compare-and-swap on ``order.version``).

        Returns:
            The stored order with its version incremented

        Raises:
            NotFoundError: If the order no longer exists
            ConflictError: If another writer saved the order since it was loaded
        """

    @abstractmethod
    async def delete(self, order_id: str) -> None:
        """Remove an order; missing ids are ignored."""

    @abstractmethod
    async def exists(self, order_id: str) -> bool:
        """Check if order exists."""

    @abstractmethod
    async def count_by_status(self, retailer_id: Optional[str] = None) -> Dict[OrderStatus, int]:
        """Order count per status; every status is present, zero included."""
