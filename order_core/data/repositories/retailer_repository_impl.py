"""SQLAlchemy implementation of RetailerRepository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from order_core.domain.repositories import RetailerRepository

from ..models.retailer_model import RetailerModel


class SqlAlchemyRetailerRepository(RetailerRepository):
    """Reads the retailers table; retailer management lives elsewhere."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, retailer_id: str) -> bool:
        result = await self._session.execute(
            select(RetailerModel.id).where(RetailerModel.id == retailer_id)
        )
        return result.scalar_one_or_none() is not None
