"""Checkout endpoints."""

import logging

from fastapi import APIRouter, Depends

from core.application.dtos.checkout_dto import (
    CheckoutOptionsDTO,
    CheckoutQuoteDTO,
    CheckoutQuoteRequest,
    PlaceOrderRequest,
    PlaceOrderResponse,
)
from core.application.dtos.profile_dto import ProfileDTO
from core.application.services import CheckoutService

from apps.api.deps import get_checkout_service, get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.get("/options", response_model=CheckoutOptionsDTO)
async def checkout_options(
    user: ProfileDTO = Depends(get_current_user),
    service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutOptionsDTO:
    return await service.options(user.id)


@router.post("/quote", response_model=CheckoutQuoteDTO)
async def checkout_quote(
    request: CheckoutQuoteRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutQuoteDTO:
    return await service.quote(user.id, request.delivery_mode, request.coupon_code)


@router.post("/orders", response_model=PlaceOrderResponse, status_code=201)
async def place_order(
    request: PlaceOrderRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: CheckoutService = Depends(get_checkout_service),
) -> PlaceOrderResponse:
    """Place the cart as one order per seller.

    Returns:
        Ids of the created orders; the first is the page to open next
    """
    return await service.place_order(user.id, request)
