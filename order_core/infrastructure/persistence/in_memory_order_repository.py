"""
In-memory Order Repository Implementation.

Dictionary-backed storage for tests, demos and single-process use.
Stored aggregates are deep copies, so every load hands out an independent
Order exactly like a database round-trip would.
"""
import copy
import uuid
from datetime import timezone
from typing import Dict, List, Optional

from order_core.domain.entities import Order
from order_core.domain.errors import ConflictError, NotFoundError
from order_core.domain.repositories import (
    OrderFilters,
    OrderRepository,
    PaginatedOrders,
    PaginationOptions,
)
from order_core.domain.value_objects import OrderStatus
from order_core.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _snapshot(order: Order) -> Order:
    """Independent copy rebuilt from the plain snapshot."""
    return Order.from_dict(copy.deepcopy(order.to_dict()))


def _stamped(order: Order, order_id: str, version: int) -> Order:
    """Copy with storage-owned fields (ids, back-references, version) applied."""
    data = copy.deepcopy(order.to_dict())
    data["id"] = order_id
    data["version"] = version
    for item in data["items"]:
        item["id"] = item["id"] or str(uuid.uuid4())
        item["order_id"] = order_id
    return Order.from_dict(data)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Honours the same contract as the SQL adapter: ids assigned on create,
    unique order numbers, compare-and-swap on ``version`` in ``update``.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._storage: Dict[str, Order] = {}
        logger.debug("InMemoryOrderRepository initialized")

    async def create(self, order: Order) -> Order:
        if any(o.order_number == order.order_number for o in self._storage.values()):
            raise ConflictError(
                f"Order number {order.order_number} already exists",
                {"order_number": order.order_number},
            )

        order_id = order.id or str(uuid.uuid4())
        stored = _stamped(order, order_id, version=0)

        self._storage[order_id] = stored
        logger.info(f"Order saved to in-memory repository: {stored.order_number} (id: {order_id})")
        return _snapshot(stored)

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        stored = self._storage.get(order_id)
        return _snapshot(stored) if stored else None

    async def find_by_order_number(self, order_number: str) -> Optional[Order]:
        stored = next(
            (o for o in self._storage.values() if o.order_number == order_number), None
        )
        return _snapshot(stored) if stored else None

    async def find_all(
        self,
        filters: Optional[OrderFilters] = None,
        pagination: Optional[PaginationOptions] = None,
    ) -> PaginatedOrders:
        filters = filters or OrderFilters()
        pagination = pagination or PaginationOptions()

        matching = [o for o in self._storage.values() if self._matches(o, filters)]
        matching.sort(
            key=lambda o: getattr(o, pagination.sort_by),
            reverse=pagination.sort_order == "desc",
        )
        page = matching[pagination.offset:pagination.offset + pagination.limit]

        return PaginatedOrders(
            orders=[_snapshot(o) for o in page],
            total=len(matching),
            page=pagination.page,
            limit=pagination.limit,
        )

    async def find_by_customer_id(self, customer_id: str) -> List[Order]:
        orders = [o for o in self._storage.values() if o.customer_id == customer_id]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [_snapshot(o) for o in orders]

    async def update(self, order: Order) -> Order:
        stored = self._storage.get(order.id) if order.id else None
        if stored is None:
            raise NotFoundError("Order", order.id)
        if stored.version != order.version:
            raise ConflictError(
                f"Order {order.order_number} was modified concurrently; reload and retry",
                {"order_id": order.id, "expected_version": order.version},
            )

        updated = _stamped(order, order.id, version=order.version + 1)

        self._storage[order.id] = updated
        logger.info(
            f"Order updated in in-memory repository: {updated.order_number} "
            f"(status: {updated.status.value}, version: {updated.version})"
        )
        return _snapshot(updated)

    async def delete(self, order_id: str) -> None:
        if self._storage.pop(order_id, None) is not None:
            logger.info(f"Order deleted from in-memory repository: {order_id}")
        else:
            logger.warning(f"Order not found for deletion: {order_id}")

    async def exists(self, order_id: str) -> bool:
        return order_id in self._storage

    async def count_by_status(self, retailer_id: Optional[str] = None) -> Dict[OrderStatus, int]:
        counts = {status: 0 for status in OrderStatus}
        for order in self._storage.values():
            if retailer_id is None or order.retailer_id == retailer_id:
                counts[order.status] += 1
        return counts

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()

    @staticmethod
    def _matches(order: Order, filters: OrderFilters) -> bool:
        if filters.retailer_id and order.retailer_id != filters.retailer_id:
            return False
        if filters.customer_id and order.customer_id != filters.customer_id:
            return False
        if filters.status and order.status is not filters.status:
            return False
        if filters.order_number and filters.order_number.lower() not in order.order_number.lower():
            return False
        created_at = order.created_at
        if filters.start_date and created_at < _aware(filters.start_date):
            return False
        if filters.end_date and created_at > _aware(filters.end_date):
            return False
        return True


def _aware(value):
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
