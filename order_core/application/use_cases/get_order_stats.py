"""Get Order Stats Use Case."""
from typing import Optional

from order_core.domain.repositories import OrderRepository
from order_core.infrastructure.logging import get_logger

from ..dtos import OrderStatsDTO

logger = get_logger(__name__)


class GetOrderStatsUseCase:
    """Order count per status, optionally for one retailer."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, retailer_id: Optional[str] = None) -> OrderStatsDTO:
        counts = await self.order_repository.count_by_status(retailer_id)
        by_tag = {status.value: count for status, count in counts.items()}
        logger.debug(f"Order stats (retailer: {retailer_id or 'all'}): {by_tag}")
        return OrderStatsDTO(counts=by_tag, total=sum(by_tag.values()))
