"""
Create Order Use Case.

Flow:
1. Validate input shape
2. Confirm the retailer exists
3. Build the aggregate and attach items in input order
4. Persist and project
"""
from typing import Any, Mapping, Union

from order_core.domain.entities import Order
from order_core.domain.errors import NotFoundError
from order_core.domain.repositories import OrderRepository, RetailerRepository
from order_core.domain.value_objects import Address
from order_core.infrastructure.logging import get_logger

from ..dtos import CreateOrderInput, OrderResponseDTO
from ..mappers import OrderItemInputMapper, OrderResponseMapper
from ..validation import validate_or_raise

logger = get_logger(__name__)


class CreateOrderUseCase:
    """Use case for creating a new order in CREATED status."""

    def __init__(
        self,
        order_repository: OrderRepository,
        retailer_repository: RetailerRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            retailer_repository: Used only to check the retailer exists
        """
        self.order_repository = order_repository
        self.retailer_repository = retailer_repository

    async def execute(
        self, input_data: Union[CreateOrderInput, Mapping[str, Any]]
    ) -> OrderResponseDTO:
        """
        Create and persist an order.

        Args:
            input_data: CreateOrderInput or an equivalent mapping

        Returns:
            Projection of the stored order

        Raises:
            ValidationError: If the input is malformed
            NotFoundError: If the retailer does not exist
            ConflictError: If the generated order number is already taken
        """
        data = validate_or_raise(CreateOrderInput, input_data)

        if not await self.retailer_repository.exists(data.retailer_id):
            raise NotFoundError("Retailer", data.retailer_id)

        order = Order.create(
            retailer_id=data.retailer_id,
            customer_id=data.customer_id,
            customer_name=data.customer_name,
            customer_email=data.customer_email,
            delivery_address=Address.create(data.delivery_address.model_dump()),
            notes=data.notes,
        )
        for item in data.items:
            order.add_item(OrderItemInputMapper.to_domain(item))

        created = await self.order_repository.create(order)
        logger.info(
            f"Order created: {created.order_number} "
            f"(retailer: {created.retailer_id}, items: {created.item_count})"
        )
        return OrderResponseMapper.to_response(created)
