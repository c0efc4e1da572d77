"""Cart endpoints."""

from fastapi import APIRouter, Depends

from core.application.dtos.cart_dto import AddToCartRequest, CartDTO, UpdateCartItemRequest
from core.application.dtos.profile_dto import ProfileDTO
from core.application.services import CartService

from apps.api.deps import get_cart_service, get_current_user

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartDTO)
async def get_cart(
    user: ProfileDTO = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDTO:
    return await service.get_cart(user.id)


@router.post("/items", response_model=CartDTO)
async def add_to_cart(
    request: AddToCartRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDTO:
    """Add a product; an existing line's quantity grows up to the stock."""
    return await service.add_item(user.id, request.product_id, request.quantity)


@router.patch("/items/{product_id}", response_model=CartDTO)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDTO:
    return await service.update_qty(user.id, product_id, request.quantity)


@router.delete("/items/{product_id}", response_model=CartDTO)
async def remove_cart_item(
    product_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDTO:
    return await service.remove_item(user.id, product_id)


@router.delete("", response_model=CartDTO)
async def clear_cart(
    user: ProfileDTO = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDTO:
    return await service.clear(user.id)
