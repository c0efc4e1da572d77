"""Seller endpoints: listings, order fulfilment, returns, dashboard and farm."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from core.application.dtos.catalog_dto import (
    CreateListingRequest,
    ListingStatusRequest,
    ProductDTO,
    SellerListingsDTO,
    UpdateListingRequest,
)
from core.application.dtos.dashboard_dto import DashboardDTO
from core.application.dtos.order_dto import CancelOrderRequest, OrderDTO, OrderListDTO
from core.application.dtos.profile_dto import FarmDTO, ProfileDTO, UpsertFarmRequest
from core.application.dtos.return_dto import ReturnDTO
from core.application.services import (
    CatalogService,
    DashboardService,
    OrderApplicationService,
    ProfileService,
    ReturnService,
)
from core.domain.enums import ListingStatus, OrderStatus, ReturnStatus

from apps.api.deps import (
    get_catalog_service,
    get_current_seller,
    get_dashboard_service,
    get_order_service,
    get_profile_service,
    get_return_service,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/seller", tags=["seller"])


# =============================================================================
# DASHBOARD
# =============================================================================

@router.get("/dashboard", response_model=DashboardDTO)
async def dashboard(
    seller: ProfileDTO = Depends(get_current_seller),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardDTO:
    return await service.get_dashboard(seller.id)


# =============================================================================
# LISTINGS
# =============================================================================

@router.get("/listings", response_model=SellerListingsDTO)
async def list_listings(
    status: ListingStatus = Query(default=ListingStatus.ACTIVE),
    seller: ProfileDTO = Depends(get_current_seller),
    service: CatalogService = Depends(get_catalog_service),
) -> SellerListingsDTO:
    return await service.seller_listings(seller.id, status)


@router.post("/listings", response_model=ProductDTO, status_code=201)
async def create_listing(
    request: CreateListingRequest,
    seller: ProfileDTO = Depends(get_current_seller),
    service: CatalogService = Depends(get_catalog_service),
) -> ProductDTO:
    return await service.create_listing(seller.id, request)


@router.patch("/listings/{product_id}", response_model=ProductDTO)
async def update_listing(
    product_id: str,
    request: UpdateListingRequest,
    seller: ProfileDTO = Depends(get_current_seller),
    service: CatalogService = Depends(get_catalog_service),
) -> ProductDTO:
    """Inline edit of price and stock."""
    return await service.update_listing(seller.id, product_id, request)


@router.post("/listings/{product_id}/status", response_model=ProductDTO)
async def change_listing_status(
    product_id: str,
    request: ListingStatusRequest,
    seller: ProfileDTO = Depends(get_current_seller),
    service: CatalogService = Depends(get_catalog_service),
) -> ProductDTO:
    return await service.change_status(seller.id, product_id, request.status)


@router.post("/listings/{product_id}/duplicate", response_model=ProductDTO, status_code=201)
async def duplicate_listing(
    product_id: str,
    seller: ProfileDTO = Depends(get_current_seller),
    service: CatalogService = Depends(get_catalog_service),
) -> ProductDTO:
    return await service.duplicate_listing(seller.id, product_id)


@router.delete("/listings/{product_id}", status_code=204)
async def delete_listing(
    product_id: str,
    seller: ProfileDTO = Depends(get_current_seller),
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    await service.delete_listing(seller.id, product_id)
    return Response(status_code=204)


# =============================================================================
# ORDERS
# =============================================================================

@router.get("/orders", response_model=OrderListDTO)
async def list_orders(
    status: Optional[OrderStatus] = Query(default=None),
    seller: ProfileDTO = Depends(get_current_seller),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderListDTO:
    return await service.list_for_seller(seller.id, status=status)


@router.post("/orders/{order_id}/advance", response_model=OrderDTO)
async def advance_order(
    order_id: str,
    seller: ProfileDTO = Depends(get_current_seller),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Move the order to its next fulfilment status."""
    return await service.advance(seller.id, order_id)


@router.post("/orders/{order_id}/cancel", response_model=OrderDTO)
async def cancel_order(
    order_id: str,
    request: Optional[CancelOrderRequest] = None,
    seller: ProfileDTO = Depends(get_current_seller),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    return await service.cancel(seller.id, order_id, request.reason if request else None)


# =============================================================================
# RETURNS
# =============================================================================

@router.get("/returns", response_model=List[ReturnDTO])
async def list_returns(
    status: Optional[ReturnStatus] = Query(default=None),
    seller: ProfileDTO = Depends(get_current_seller),
    service: ReturnService = Depends(get_return_service),
) -> List[ReturnDTO]:
    return await service.list_for_seller(seller.id, status)


@router.post("/returns/{return_id}/advance", response_model=ReturnDTO)
async def advance_return(
    return_id: str,
    seller: ProfileDTO = Depends(get_current_seller),
    service: ReturnService = Depends(get_return_service),
) -> ReturnDTO:
    return await service.advance(seller.id, return_id)


@router.post("/returns/{return_id}/reject", response_model=ReturnDTO)
async def reject_return(
    return_id: str,
    seller: ProfileDTO = Depends(get_current_seller),
    service: ReturnService = Depends(get_return_service),
) -> ReturnDTO:
    return await service.reject(seller.id, return_id)


# =============================================================================
# FARM
# =============================================================================

@router.get("/farm", response_model=FarmDTO)
async def get_farm(
    seller: ProfileDTO = Depends(get_current_seller),
    service: ProfileService = Depends(get_profile_service),
) -> FarmDTO:
    return await service.get_farm(seller.id)


@router.put("/farm", response_model=FarmDTO)
async def upsert_farm(
    request: UpsertFarmRequest,
    seller: ProfileDTO = Depends(get_current_seller),
    service: ProfileService = Depends(get_profile_service),
) -> FarmDTO:
    return await service.upsert_farm(seller.id, request.model_dump())
