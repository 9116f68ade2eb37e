"""Get Order Use Case."""
from order_core.domain.errors import NotFoundError
from order_core.infrastructure.logging import get_logger

from ..dtos import OrderResponseDTO
from ..mappers import OrderResponseMapper
from .base import OrderUseCase

logger = get_logger(__name__)


class GetOrderUseCase(OrderUseCase):
    """Load one order by id or by order number."""

    async def execute(self, order_id: str) -> OrderResponseDTO:
        logger.debug(f"Fetching order {order_id}")
        return OrderResponseMapper.to_response(await self._load_order(order_id))

    async def execute_by_order_number(self, order_number: str) -> OrderResponseDTO:
        logger.debug(f"Fetching order by number {order_number}")
        order = await self.order_repository.find_by_order_number(order_number)
        if order is None:
            raise NotFoundError("Order", order_number)
        return OrderResponseMapper.to_response(order)
