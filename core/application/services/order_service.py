"""Application service for Order operations."""

import logging
from typing import List, Optional

from core.application.dtos.order_dto import OrderDTO, OrderListDTO
from core.data.uow import UnitOfWork
from core.domain.entities.order import Order
from core.domain.enums import OrderStatus
from core.domain.exceptions import NotFoundError

from .base import ApplicationService
from .converters import order_to_dto


logger = logging.getLogger(__name__)


class OrderApplicationService(ApplicationService):
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Buyer order history and detail
    - Seller order inbox and fulfilment (advance/cancel)
    - Publish status events after commit
    """

    async def list_for_buyer(self, buyer_id: str) -> OrderListDTO:
        """List the buyer's orders, newest first, with seller party info."""
        uow = self._uow()
        async with uow:
            orders = await uow.orders.list_for_buyer(buyer_id)
            profiles = await uow.profiles.get_many({o.seller_id for o in orders})
            return OrderListDTO(
                orders=[order_to_dto(o, profiles) for o in orders],
                total=len(orders),
            )

    async def get_order(self, user_id: str, order_id: str) -> OrderDTO:
        """Get one order as seen by its buyer or seller.

        Args:
            user_id: Caller profile id
            order_id: Order id

        Returns:
            OrderDTO with parties, delivery address and returns

        Raises:
            NotFoundError: if the order does not exist or the caller is not a party
        """
        uow = self._uow()
        async with uow:
            order = await uow.orders.get(order_id)
            if order is None or user_id not in (order.buyer_id, order.seller_id):
                raise NotFoundError("order", order_id)
            return await self._detail(uow, order)

    async def list_for_seller(
        self,
        seller_id: str,
        status: Optional[OrderStatus] = None,
        limit: Optional[int] = None,
    ) -> OrderListDTO:
        uow = self._uow()
        async with uow:
            orders = await uow.orders.list_for_seller(seller_id, status=status, limit=limit)
            profiles = await uow.profiles.get_many({o.buyer_id for o in orders})
            return OrderListDTO(
                orders=[order_to_dto(o, profiles) for o in orders],
                total=len(orders),
            )

    async def advance(self, seller_id: str, order_id: str) -> OrderDTO:
        """Move an order one step along the fulfilment table.

        Raises:
            NotFoundError: unknown order
            PermissionDeniedError: caller is not the order's seller
            InvalidStateTransition: order is delivered or cancelled
        """
        uow = self._uow()
        async with uow:
            order = await self._load(uow, order_id)
            order.ensure_seller(seller_id)
            new_status = order.advance()

            await uow.orders.save(order)
            await uow.commit()

            logger.info(f"[{uow.execution_id}] Order {order.order_number} -> {new_status.value}")
            await self._publish([order], uow)
            return await self._detail(uow, order)

    async def cancel(self, seller_id: str, order_id: str, reason: Optional[str] = None) -> OrderDTO:
        uow = self._uow()
        async with uow:
            order = await self._load(uow, order_id)
            order.ensure_seller(seller_id)
            order.cancel(reason)

            await uow.orders.save(order)
            await uow.commit()

            logger.info(f"[{uow.execution_id}] Order {order.order_number} cancelled")
            await self._publish([order], uow)
            return await self._detail(uow, order)

    @staticmethod
    async def _load(uow: UnitOfWork, order_id: str) -> Order:
        order = await uow.orders.get(order_id)
        if order is None:
            raise NotFoundError("order", order_id)
        return order

    @staticmethod
    async def _detail(uow: UnitOfWork, order: Order) -> OrderDTO:
        profiles = await uow.profiles.get_many([order.buyer_id, order.seller_id])
        address = None
        if order.delivery_address_id:
            address = await uow.addresses.get(order.delivery_address_id)
        returns: List = await uow.returns.list_for_order(order.id)
        return order_to_dto(order, profiles, address, returns)
