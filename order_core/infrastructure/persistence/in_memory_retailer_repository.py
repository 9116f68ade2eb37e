"""In-memory Retailer Repository Implementation."""
from typing import Iterable, Optional, Set

from order_core.domain.repositories import RetailerRepository


class InMemoryRetailerRepository(RetailerRepository):
    """Set of known retailer ids."""

    def __init__(self, retailer_ids: Optional[Iterable[str]] = None) -> None:
        self._retailer_ids: Set[str] = set(retailer_ids or [])

    def add(self, retailer_id: str) -> None:
        self._retailer_ids.add(retailer_id)

    async def exists(self, retailer_id: str) -> bool:
        return retailer_id in self._retailer_ids
