"""Application layer - DTOs, input validation, mappers and use cases."""

from .dtos import (
    AddItemInput,
    CreateOrderInput,
    OrderFilterInput,
    OrderResponseDTO,
    OrderStatsDTO,
    PaginatedOrdersResponseDTO,
    PaginationInput,
    UpdateItemQuantityInput,
    UpdateStatusInput,
)
from .mappers import OrderResponseMapper
from .use_cases import (
    AddOrderItemUseCase,
    CreateOrderUseCase,
    GetOrderStatsUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    RemoveOrderItemUseCase,
    UpdateOrderItemQuantityUseCase,
    UpdateOrderStatusUseCase,
)
from .validation import validate_or_raise

__all__ = [
    # DTOs
    "AddItemInput",
    "CreateOrderInput",
    "OrderFilterInput",
    "OrderResponseDTO",
    "OrderStatsDTO",
    "PaginatedOrdersResponseDTO",
    "PaginationInput",
    "UpdateItemQuantityInput",
    "UpdateStatusInput",
    # Mappers
    "OrderResponseMapper",
    # Use Cases
    "AddOrderItemUseCase",
    "CreateOrderUseCase",
    "GetOrderStatsUseCase",
    "GetOrderUseCase",
    "ListOrdersUseCase",
    "RemoveOrderItemUseCase",
    "UpdateOrderItemQuantityUseCase",
    "UpdateOrderStatusUseCase",
    # Validation
    "validate_or_raise",
]
