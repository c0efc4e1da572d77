"""Application service for return requests."""

import logging
import os
import time
from typing import Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.return_dto import (
    CreateReturnRequest,
    ReturnDTO,
    ReturnItemDTO,
    UploadedPhoto,
)
from core.application.interfaces import IStorageClient, StorageError
from core.data.uow import UnitOfWork
from core.domain.entities.order import Order
from core.domain.entities.profile import Profile
from core.domain.entities.return_request import (
    NEXT_RETURN_STATUS,
    ReturnItem,
    ReturnPhoto,
    ReturnRequest,
)
from core.domain.enums import OrderStatus, ReturnStatus
from core.domain.event_bus import EventBus
from core.domain.exceptions import NotFoundError, PermissionDeniedError
from core.settings.modules.supabase_settings import SupabaseSettings

from .base import ApplicationService


logger = logging.getLogger(__name__)


def proof_photo_path(return_id: str, index: int, filename: str, millis: Optional[int] = None) -> str:
    """Object key for a return proof photo: <return_id>-<index>-<millis>.<ext>"""
    ext = os.path.splitext(filename)[1].lstrip(".").lower() or "jpg"
    if millis is None:
        millis = int(time.time() * 1000)
    return f"{return_id}-{index}-{millis}.{ext}"


class ReturnService(ApplicationService):
    """
    Application service for returns.

    Buyers open returns on delivered orders; the order's seller walks
    them through approval, pickup and refund, or rejects them.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        storage: IStorageClient,
        event_bus: Optional[EventBus] = None,
        settings: Optional[SupabaseSettings] = None,
    ) -> None:
        super().__init__(session_factory, event_bus)
        self._storage = storage
        self._settings = settings or SupabaseSettings()

    async def request_return(
        self,
        buyer_id: str,
        order_id: str,
        request: CreateReturnRequest,
        photos: Sequence[UploadedPhoto] = (),
    ) -> ReturnDTO:
        """Open a return for a delivered order.

        Photos are uploaded after the return row exists; an upload that
        fails is skipped.

        Raises:
            NotFoundError: unknown order
            PermissionDeniedError: caller did not buy the order
            ValueError: order not delivered, already returned, or bad items
        """
        uow = self._uow()
        async with uow:
            order = await uow.orders.get(order_id)
            if order is None:
                raise NotFoundError("order", order_id)
            if order.buyer_id != buyer_id:
                raise PermissionDeniedError("Only the buyer of this order can request a return")
            if order.status != OrderStatus.DELIVERED:
                raise ValueError("Returns can only be requested for delivered orders")
            if await uow.returns.list_for_order(order.id):
                raise ValueError("A return has already been requested for this order")

            items = []
            for line in request.items:
                order_item = order.contains_item(line.order_item_id)
                if order_item is None:
                    raise ValueError(f"Item {line.order_item_id} is not part of this order")
                if not 1 <= line.quantity <= order_item.quantity:
                    raise ValueError(f"Return quantity must be between 1 and {order_item.quantity}")
                items.append(ReturnItem(order_item_id=order_item.id, quantity=line.quantity))

            ret = ReturnRequest.request(
                order_id=order.id,
                user_id=buyer_id,
                seller_id=order.seller_id,
                reason=request.reason,
                refund_method=request.refund_method,
                description=(request.description or "").strip() or None,
                items=items,
            )
            await uow.returns.save(ret)

            for index, photo in enumerate(photos):
                path = proof_photo_path(ret.id, index, photo.filename)
                try:
                    url = await self._storage.upload(
                        self._settings.return_proofs_bucket, path, photo.content, photo.content_type
                    )
                except StorageError as e:
                    logger.warning(f"[{uow.execution_id}] Skipping proof photo {photo.filename}: {e}")
                    continue
                ret.photos.append(ReturnPhoto(photo_url=url))

            if ret.photos:
                await uow.returns.save(ret)
            await uow.commit()

            logger.info(
                f"[{uow.execution_id}] Return {ret.id} requested for order {order.order_number} "
                f"({len(items)} item(s), {len(ret.photos)} photo(s))"
            )
            await self._publish([ret], uow)
            return await self._to_dto(uow, ret, order)

    async def get_return(self, user_id: str, return_id: str) -> ReturnDTO:
        uow = self._uow()
        async with uow:
            ret = await uow.returns.get(return_id)
            if ret is None or user_id not in (ret.user_id, ret.seller_id):
                raise NotFoundError("return", return_id)
            return await self._to_dto(uow, ret)

    async def list_for_buyer(self, buyer_id: str) -> List[ReturnDTO]:
        uow = self._uow()
        async with uow:
            returns = await uow.returns.list_for_buyer(buyer_id)
            return [await self._to_dto(uow, r) for r in returns]

    async def list_for_seller(self, seller_id: str, status: Optional[ReturnStatus] = None) -> List[ReturnDTO]:
        uow = self._uow()
        async with uow:
            returns = await uow.returns.list_for_seller(seller_id, status=status)
            buyers = await uow.profiles.get_many({r.user_id for r in returns})
            return [await self._to_dto(uow, r, buyers=buyers) for r in returns]

    async def advance(self, seller_id: str, return_id: str) -> ReturnDTO:
        """Approve, schedule pickup or refund, depending on the current status."""
        uow = self._uow()
        async with uow:
            ret = await self._load(uow, return_id)
            ret.ensure_seller(seller_id)
            new_status = ret.advance()

            await uow.returns.save(ret)
            await uow.commit()

            logger.info(f"[{uow.execution_id}] Return {ret.id} -> {new_status.value}")
            await self._publish([ret], uow)
            return await self._to_dto(uow, ret)

    async def reject(self, seller_id: str, return_id: str) -> ReturnDTO:
        uow = self._uow()
        async with uow:
            ret = await self._load(uow, return_id)
            ret.ensure_seller(seller_id)
            ret.reject()

            await uow.returns.save(ret)
            await uow.commit()

            logger.info(f"[{uow.execution_id}] Return {ret.id} rejected")
            await self._publish([ret], uow)
            return await self._to_dto(uow, ret)

    @staticmethod
    async def _load(uow: UnitOfWork, return_id: str) -> ReturnRequest:
        ret = await uow.returns.get(return_id)
        if ret is None:
            raise NotFoundError("return", return_id)
        return ret

    @staticmethod
    async def _to_dto(
        uow: UnitOfWork,
        ret: ReturnRequest,
        order: Optional[Order] = None,
        buyers: Optional[Dict[str, Profile]] = None,
    ) -> ReturnDTO:
        if order is None:
            order = await uow.orders.get(ret.order_id)
        snapshots = {item.id: item.product_snapshot for item in order.items} if order else {}
        buyer = (buyers or {}).get(ret.user_id)

        nxt = NEXT_RETURN_STATUS.get(ret.status)

        return ReturnDTO(
            id=ret.id,
            order_id=ret.order_id,
            order_number=str(order.order_number) if order else None,
            user_id=ret.user_id,
            seller_id=ret.seller_id,
            buyer_name=buyer.full_name if buyer else None,
            reason=ret.reason.value,
            reason_label=ret.reason_label,
            description=ret.description,
            refund_method=ret.refund_method.value,
            status=ret.status.value,
            created_at=ret.created_at,
            items=[
                ReturnItemDTO(
                    id=item.id,
                    order_item_id=item.order_item_id,
                    quantity=item.quantity,
                    title=snapshots.get(item.order_item_id, {}).get("title"),
                    image=snapshots.get(item.order_item_id, {}).get("image"),
                )
                for item in ret.items
            ],
            photos=[photo.photo_url for photo in ret.photos],
            timeline_index=ret.timeline_index(),
            next_status=nxt.value if nxt else None,
        )
