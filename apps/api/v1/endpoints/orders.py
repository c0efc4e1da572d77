"""Buyer order endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from core.application.dtos.order_dto import OrderDTO, OrderListDTO
from core.application.dtos.profile_dto import ProfileDTO
from core.application.dtos.return_dto import (
    CreateReturnRequest,
    ReturnDTO,
    UploadedPhoto,
)
from core.application.services import OrderApplicationService, ReturnService

from apps.api.deps import get_current_user, get_order_service, get_return_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderListDTO)
async def list_orders(
    user: ProfileDTO = Depends(get_current_user),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderListDTO:
    """List the caller's orders, newest first."""
    return await service.list_for_buyer(user.id)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID.

    Args:
        order_id: Order ID string
        user: Signed-in buyer or seller of the order
        service: OrderApplicationService instance

    Returns:
        OrderDTO with order details
    """
    return await service.get_order(user.id, order_id)


@router.post("/{order_id}/returns", response_model=ReturnDTO, status_code=201)
async def request_return(
    order_id: str,
    payload: str = Form(..., description="CreateReturnRequest as JSON"),
    photos: Optional[List[UploadFile]] = File(default=None),
    user: ProfileDTO = Depends(get_current_user),
    service: ReturnService = Depends(get_return_service),
) -> ReturnDTO:
    """Open a return with optional proof photos (multipart form)."""
    request = CreateReturnRequest.model_validate_json(payload)
    uploads = [
        UploadedPhoto(
            filename=photo.filename or "photo.jpg",
            content=await photo.read(),
            content_type=photo.content_type,
        )
        for photo in photos or []
    ]
    return await service.request_return(user.id, order_id, request, uploads)
