"""Shared plumbing for use cases that operate on one stored order."""

from order_core.domain.entities import Order
from order_core.domain.errors import NotFoundError
from order_core.domain.repositories import OrderRepository


class OrderUseCase:
    """Base for stateless orchestrators backed by an OrderRepository."""

    def __init__(self, order_repository: OrderRepository):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
        """
        self.order_repository = order_repository

    async def _load_order(self, order_id: str) -> Order:
        order = await self.order_repository.find_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order
