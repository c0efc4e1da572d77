"""SQLAlchemy implementations of the order, coupon and return repositories."""

from decimal import Decimal
from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import Order
from core.domain.entities.return_request import ReturnRequest
from core.domain.enums import OrderStatus, ReturnStatus
from core.domain.repositories.order_repository import (
    CouponRepository,
    OrderRepository,
    ReturnRepository,
)

from ..mappers import OrderMapper, ReturnMapper
from ..models.order_model import CouponModel, OrderItemModel, OrderModel, ReturnModel


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    def _query(self):
        return select(OrderModel).options(selectinload(OrderModel.items))

    async def save(self, order: Order) -> None:
        """Persist order aggregate.

        Args:
            order: Order domain aggregate
        """
        existing = await self._session.get(OrderModel, order.id)

        if existing:
            OrderMapper.update_persistence(order, existing)
            self._session.add(existing)
        else:
            self._session.add(OrderMapper.to_persistence(order))

        await self._session.flush()  # Propagate to DB without committing

    async def get(self, order_id: str) -> Optional[Order]:
        result = await self._session.execute(self._query().where(OrderModel.id == order_id))
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderMapper.to_domain(model)

    async def list_for_buyer(self, buyer_id: str) -> List[Order]:
        result = await self._session.execute(
            self._query()
            .where(OrderModel.buyer_id == buyer_id)
            .order_by(OrderModel.created_at.desc())
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def list_for_seller(
        self,
        seller_id: str,
        status: Optional[OrderStatus] = None,
        limit: Optional[int] = None,
    ) -> List[Order]:
        stmt = self._query().where(OrderModel.seller_id == seller_id)
        if status is not None:
            stmt = stmt.where(OrderModel.status == status.value)
        stmt = stmt.order_by(OrderModel.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def has_purchased(
        self,
        buyer_id: str,
        product_id: str,
        statuses: Iterable[OrderStatus],
    ) -> bool:
        result = await self._session.execute(
            select(func.count(OrderItemModel.id))
            .join(OrderModel, OrderItemModel.order_id == OrderModel.id)
            .where(
                OrderModel.buyer_id == buyer_id,
                OrderItemModel.product_id == product_id,
                OrderModel.status.in_([s.value for s in statuses]),
            )
        )
        return (result.scalar() or 0) > 0


class SqlAlchemyCouponRepository(CouponRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_active_percentage(self, code: str) -> Optional[Decimal]:
        result = await self._session.execute(
            select(CouponModel.discount_percentage).where(
                CouponModel.code == code,
                CouponModel.is_active.is_(True),
            )
        )
        value = result.scalar_one_or_none()
        return Decimal(str(value)) if value is not None else None


class SqlAlchemyReturnRepository(ReturnRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _query(self):
        return select(ReturnModel).options(
            selectinload(ReturnModel.items),
            selectinload(ReturnModel.photos),
        )

    async def _load_model(self, return_id: str) -> Optional[ReturnModel]:
        result = await self._session.execute(self._query().where(ReturnModel.id == return_id))
        return result.scalar_one_or_none()

    async def save(self, return_request: ReturnRequest) -> None:
        existing = await self._load_model(return_request.id)
        if existing:
            ReturnMapper.update_persistence(return_request, existing)
            self._session.add(existing)
        else:
            self._session.add(ReturnMapper.to_persistence(return_request))
        await self._session.flush()

    async def get(self, return_id: str) -> Optional[ReturnRequest]:
        model = await self._load_model(return_id)
        return ReturnMapper.to_domain(model) if model else None

    async def list_for_order(self, order_id: str) -> List[ReturnRequest]:
        result = await self._session.execute(
            self._query()
            .where(ReturnModel.order_id == order_id)
            .order_by(ReturnModel.created_at.desc())
        )
        return [ReturnMapper.to_domain(m) for m in result.scalars().all()]

    async def list_for_seller(
        self, seller_id: str, status: Optional[ReturnStatus] = None
    ) -> List[ReturnRequest]:
        stmt = self._query().where(ReturnModel.seller_id == seller_id)
        if status is not None:
            stmt = stmt.where(ReturnModel.status == status.value)
        result = await self._session.execute(stmt.order_by(ReturnModel.created_at.desc()))
        return [ReturnMapper.to_domain(m) for m in result.scalars().all()]

    async def list_for_buyer(self, buyer_id: str) -> List[ReturnRequest]:
        result = await self._session.execute(
            self._query()
            .where(ReturnModel.user_id == buyer_id)
            .order_by(ReturnModel.created_at.desc())
        )
        return [ReturnMapper.to_domain(m) for m in result.scalars().all()]
