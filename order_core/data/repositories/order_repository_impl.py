"""SQLAlchemy implementation of OrderRepository."""

from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from order_core.domain.entities import Order
from order_core.domain.errors import ConflictError, NotFoundError
from order_core.domain.repositories import (
    OrderFilters,
    OrderRepository,
    PaginatedOrders,
    PaginationOptions,
)
from order_core.domain.value_objects import OrderStatus
from order_core.infrastructure.logging import get_logger

from ..mappers import OrderMapper, as_utc
from ..models.order_model import OrderModel

logger = get_logger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Only flushes; commit/rollback belong to the Unit of Work.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def create(self, order: Order) -> Order:
        taken = await self._session.execute(
            select(OrderModel.id).where(OrderModel.order_number == order.order_number)
        )
        if taken.scalar_one_or_none() is not None:
            raise ConflictError(
                f"Order number {order.order_number} already exists",
                {"order_number": order.order_number},
            )

        model = OrderMapper.to_persistence(order)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Order {order.order_number} violates a uniqueness constraint",
                {"order_number": order.order_number},
            ) from exc

        logger.info(f"Created order {model.order_number} (id: {model.id})")
        return OrderMapper.to_domain(model)

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        model = await self._load(OrderModel.id == order_id)
        return OrderMapper.to_domain(model) if model else None

    async def find_by_order_number(self, order_number: str) -> Optional[Order]:
        model = await self._load(OrderModel.order_number == order_number)
        return OrderMapper.to_domain(model) if model else None

    async def find_all(
        self,
        filters: Optional[OrderFilters] = None,
        pagination: Optional[PaginationOptions] = None,
    ) -> PaginatedOrders:
        pagination = pagination or PaginationOptions()
        conditions = self._build_conditions(filters or OrderFilters())

        total = (
            await self._session.execute(
                select(func.count()).select_from(OrderModel).where(*conditions)
            )
        ).scalar_one()

        sort_column = getattr(OrderModel, pagination.sort_by)
        ordering = sort_column.asc() if pagination.sort_order == "asc" else sort_column.desc()
        result = await self._session.execute(
            select(OrderModel)
            .where(*conditions)
            .order_by(ordering, OrderModel.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
            .execution_options(populate_existing=True)
        )
        orders = [OrderMapper.to_domain(model) for model in result.scalars().all()]

        return PaginatedOrders(
            orders=orders,
            total=total,
            page=pagination.page,
            limit=pagination.limit,
        )

    async def find_by_customer_id(self, customer_id: str) -> List[Order]:
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.customer_id == customer_id)
            .order_by(OrderModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def update(self, order: Order) -> Order:
        model = await self._load(OrderModel.id == order.id) if order.id else None
        if model is None:
            raise NotFoundError("Order", order.id)
        if model.version != order.version:
            raise self._stale(order)

        OrderMapper.update_persistence(order, model)
        model.version = order.version + 1
        try:
            await self._session.flush()
        except StaleDataError as exc:
            raise self._stale(order) from exc

        logger.info(
            f"Updated order {model.order_number} "
            f"(status: {model.status}, version: {model.version})"
        )
        return OrderMapper.to_domain(model)

    async def delete(self, order_id: str) -> None:
        model = await self._load(OrderModel.id == order_id)
        if model is None:
            return
        # delete-orphan cascade removes the item rows
        await self._session.delete(model)
        await self._session.flush()
        logger.info(f"Deleted order {model.order_number} (id: {order_id})")

    async def exists(self, order_id: str) -> bool:
        result = await self._session.execute(
            select(OrderModel.id).where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none() is not None

    async def count_by_status(self, retailer_id: Optional[str] = None) -> Dict[OrderStatus, int]:
        stmt = select(OrderModel.status, func.count()).group_by(OrderModel.status)
        if retailer_id:
            stmt = stmt.where(OrderModel.retailer_id == retailer_id)

        counts = {status: 0 for status in OrderStatus}
        for status, count in (await self._session.execute(stmt)).all():
            counts[OrderStatus.create(status)] = count
        return counts

    async def _load(self, condition) -> Optional[OrderModel]:
        result = await self._session.execute(
            select(OrderModel).where(condition).execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _build_conditions(filters: OrderFilters) -> list:
        conditions = []
        if filters.retailer_id:
            conditions.append(OrderModel.retailer_id == filters.retailer_id)
        if filters.customer_id:
            conditions.append(OrderModel.customer_id == filters.customer_id)
        if filters.status:
            conditions.append(OrderModel.status == filters.status.value)
        if filters.order_number:
            conditions.append(OrderModel.order_number.ilike(f"%{filters.order_number}%"))
        if filters.start_date:
            conditions.append(OrderModel.created_at >= as_utc(filters.start_date))
        if filters.end_date:
            conditions.append(OrderModel.created_at <= as_utc(filters.end_date))
        return conditions

    @staticmethod
    def _stale(order: Order) -> ConflictError:
        return ConflictError(
            f"Order {order.order_number} was modified concurrently; reload and retry",
            {"order_id": order.id, "expected_version": order.version},
        )
