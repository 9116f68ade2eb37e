"""Application DTOs."""

from .order_dto import (
    AddItemInput,
    AddressDTO,
    AddressInput,
    CreateOrderInput,
    OrderFilterInput,
    OrderItemInput,
    OrderItemResponseDTO,
    OrderResponseDTO,
    OrderStatsDTO,
    PaginatedOrdersResponseDTO,
    PaginationInput,
    PaginationMetaDTO,
    UpdateItemQuantityInput,
    UpdateStatusInput,
)

__all__ = [
    "AddItemInput",
    "AddressDTO",
    "AddressInput",
    "CreateOrderInput",
    "OrderFilterInput",
    "OrderItemInput",
    "OrderItemResponseDTO",
    "OrderResponseDTO",
    "OrderStatsDTO",
    "PaginatedOrdersResponseDTO",
    "PaginationInput",
    "PaginationMetaDTO",
    "UpdateItemQuantityInput",
    "UpdateStatusInput",
]
