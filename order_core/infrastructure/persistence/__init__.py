"""In-memory persistence adapters."""
from .in_memory_order_repository import InMemoryOrderRepository
from .in_memory_retailer_repository import InMemoryRetailerRepository

__all__ = ["InMemoryOrderRepository", "InMemoryRetailerRepository"]
