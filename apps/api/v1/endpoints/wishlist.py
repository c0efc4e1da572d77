"""Wishlist endpoints."""

from fastapi import APIRouter, Depends, Response

from core.application.dtos.profile_dto import ProfileDTO
from core.application.dtos.wishlist_dto import (
    SavedSearchDTO,
    SaveSearchRequest,
    ToggleResultDTO,
    WishlistDTO,
)
from core.application.services import WishlistService

from apps.api.deps import get_current_user, get_wishlist_service

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("", response_model=WishlistDTO)
async def get_wishlist(
    user: ProfileDTO = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service),
) -> WishlistDTO:
    return await service.get_wishlist(user.id)


@router.post("/products/{product_id}/toggle", response_model=ToggleResultDTO)
async def toggle_product(
    product_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service),
) -> ToggleResultDTO:
    return await service.toggle_product(user.id, product_id)


@router.post("/sellers/{seller_id}/toggle", response_model=ToggleResultDTO)
async def toggle_seller(
    seller_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service),
) -> ToggleResultDTO:
    return await service.toggle_seller(user.id, seller_id)


@router.post("/searches", response_model=SavedSearchDTO, status_code=201)
async def save_search(
    request: SaveSearchRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service),
) -> SavedSearchDTO:
    return await service.save_search(user.id, request)


@router.delete("/{kind}/{entry_id}", status_code=204)
async def remove_entry(
    kind: str,
    entry_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service),
) -> Response:
    """Delete a saved entry; kind is product, seller or search."""
    await service.remove(user.id, kind, entry_id)
    return Response(status_code=204)
