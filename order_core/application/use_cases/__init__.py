"""Application use cases."""
from .create_order import CreateOrderUseCase
from .get_order import GetOrderUseCase
from .get_order_stats import GetOrderStatsUseCase
from .list_orders import ListOrdersUseCase
from .order_items import (
    AddOrderItemUseCase,
    RemoveOrderItemUseCase,
    UpdateOrderItemQuantityUseCase,
)
from .update_order_status import UpdateOrderStatusUseCase

__all__ = [
    "AddOrderItemUseCase",
    "CreateOrderUseCase",
    "GetOrderStatsUseCase",
    "GetOrderUseCase",
    "ListOrdersUseCase",
    "RemoveOrderItemUseCase",
    "UpdateOrderItemQuantityUseCase",
    "UpdateOrderStatusUseCase",
]
