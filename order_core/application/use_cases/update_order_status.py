"""Update Order Status Use Case."""
from typing import Any, Mapping, Union

from order_core.infrastructure.logging import get_logger

from ..dtos import OrderResponseDTO, UpdateStatusInput
from ..mappers import OrderResponseMapper
from ..validation import validate_or_raise
from .base import OrderUseCase

logger = get_logger(__name__)


class UpdateOrderStatusUseCase(OrderUseCase):
    """Move an order through its lifecycle."""

    async def execute(
        self,
        order_id: str,
        input_data: Union[UpdateStatusInput, Mapping[str, Any]],
    ) -> OrderResponseDTO:
        """
        Apply a status transition and persist it.

        Business-rule and transition failures from the aggregate propagate
        unchanged.

        Raises:
            ValidationError: If the target status is not accepted
            NotFoundError: If the order does not exist
            InvalidStateTransitionError: If the transition table forbids it
            BusinessRuleViolationError: If a domain rule blocks it
            ConflictError: If the order changed since it was loaded
        """
        data = validate_or_raise(UpdateStatusInput, input_data)

        order = await self._load_order(order_id)
        previous = order.status
        order.transition_to(data.status)

        saved = await self.order_repository.update(order)
        logger.info(
            f"Order {saved.order_number} status changed: "
            f"{previous.value} -> {saved.status.value}"
        )
        return OrderResponseMapper.to_response(saved)
