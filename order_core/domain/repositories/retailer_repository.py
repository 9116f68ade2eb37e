"""Repository interface for the retailer slice the order core needs."""

from abc import ABC, abstractmethod


class RetailerRepository(ABC):
    """Narrow retailer lookup used to validate order creation."""

    @abstractmethod
    async def exists(self, retailer_id: str) -> bool:
        """Check if retailer exists."""
