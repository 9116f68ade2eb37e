"""Use cases editing the lines of a CREATED order."""
from typing import Any, Mapping, Union

from order_core.infrastructure.logging import get_logger

from ..dtos import AddItemInput, OrderResponseDTO, UpdateItemQuantityInput
from ..mappers import OrderItemInputMapper, OrderResponseMapper
from ..validation import validate_or_raise
from .base import OrderUseCase

logger = get_logger(__name__)


class AddOrderItemUseCase(OrderUseCase):
    """Add a line (merged into an existing line of the same product)."""

    async def execute(
        self,
        order_id: str,
        item_input: Union[AddItemInput, Mapping[str, Any]],
    ) -> OrderResponseDTO:
        data = validate_or_raise(AddItemInput, item_input)

        order = await self._load_order(order_id)
        order.add_item(OrderItemInputMapper.to_domain(data))

        saved = await self.order_repository.update(order)
        logger.info(
            f"Item {data.product_id} x{data.quantity} added to order {saved.order_number} "
            f"(total: {saved.total_amount})"
        )
        return OrderResponseMapper.to_response(saved)


class RemoveOrderItemUseCase(OrderUseCase):
    """Remove the line of one product."""

    async def execute(self, order_id: str, product_id: str) -> OrderResponseDTO:
        order = await self._load_order(order_id)
        order.remove_item(product_id)

        saved = await self.order_repository.update(order)
        logger.info(f"Item {product_id} removed from order {saved.order_number}")
        return OrderResponseMapper.to_response(saved)


class UpdateOrderItemQuantityUseCase(OrderUseCase):
    """Replace the quantity of one line."""

    async def execute(
        self,
        order_id: str,
        product_id: str,
        input_data: Union[UpdateItemQuantityInput, Mapping[str, Any]],
    ) -> OrderResponseDTO:
        data = validate_or_raise(UpdateItemQuantityInput, input_data)

        order = await self._load_order(order_id)
        order.update_item_quantity(product_id, data.quantity)

        saved = await self.order_repository.update(order)
        logger.info(
            f"Item {product_id} quantity set to {data.quantity} on order {saved.order_number}"
        )
        return OrderResponseMapper.to_response(saved)
