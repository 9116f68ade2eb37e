"""List Orders Use Case."""
from typing import Any, Mapping, Optional, Union

from order_core.domain.repositories import (
    OrderFilters,
    OrderRepository,
    PaginatedOrders,
    PaginationOptions,
)
from order_core.infrastructure.logging import get_logger

from ..dtos import (
    OrderFilterInput,
    PaginatedOrdersResponseDTO,
    PaginationInput,
    PaginationMetaDTO,
)
from ..mappers import OrderResponseMapper
from ..validation import validate_or_raise

logger = get_logger(__name__)

FilterArg = Union[OrderFilterInput, Mapping[str, Any], None]
PaginationArg = Union[PaginationInput, Mapping[str, Any], None]


class ListOrdersUseCase:
    """
    Paginated order listing.

    Defaults: page 1, 10 per page, newest first.
    """

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(
        self,
        filters: FilterArg = None,
        pagination: PaginationArg = None,
    ) -> PaginatedOrdersResponseDTO:
        """
        List orders matching ``filters``.

        Raises:
            ValidationError: If filters or pagination are malformed
        """
        filter_data = validate_or_raise(OrderFilterInput, filters)
        options = self._to_options(pagination)

        page = await self.order_repository.find_all(
            OrderFilters(**filter_data.model_dump()), options
        )
        logger.debug(f"Listed {len(page.orders)} of {page.total} orders (page {page.page})")
        return self._to_response(page)

    async def execute_by_retailer(
        self,
        retailer_id: str,
        pagination: PaginationArg = None,
    ) -> PaginatedOrdersResponseDTO:
        options = self._to_options(pagination)
        page = await self.order_repository.find_by_retailer_id(retailer_id, options)
        logger.debug(f"Listed {len(page.orders)} orders for retailer {retailer_id}")
        return self._to_response(page)

    @staticmethod
    def _to_options(pagination: PaginationArg) -> PaginationOptions:
        data = validate_or_raise(PaginationInput, pagination)
        return PaginationOptions(**data.model_dump())

    @staticmethod
    def _to_response(page: PaginatedOrders) -> PaginatedOrdersResponseDTO:
        total_pages = page.total_pages
        return PaginatedOrdersResponseDTO(
            orders=[OrderResponseMapper.to_response(order) for order in page.orders],
            pagination=PaginationMetaDTO(
                page=page.page,
                limit=page.limit,
                total=page.total,
                total_pages=total_pages,
                has_next=page.page < total_pages,
                has_previous=page.page > 1,
            ),
        )
