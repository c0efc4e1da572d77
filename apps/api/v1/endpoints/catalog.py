"""Browse and product detail endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from core.application.dtos.catalog_dto import BrowseResultDTO, CategoryDTO, ProductDetailDTO
from core.application.dtos.profile_dto import ProfileDTO
from core.application.dtos.review_dto import CreateReviewRequest, ReviewDTO, ReviewListDTO
from core.application.services import CatalogService, ReviewService
from core.domain.services.catalog_filters import BrowseSort

from apps.api.deps import (
    get_catalog_service,
    get_current_user,
    get_optional_user,
    get_review_service,
)

router = APIRouter(tags=["catalog"])


@router.get("/categories", response_model=List[CategoryDTO])
async def list_categories(service: CatalogService = Depends(get_catalog_service)) -> List[CategoryDTO]:
    return await service.list_categories()


@router.get("/products", response_model=BrowseResultDTO)
async def browse_products(
    search: Optional[str] = Query(default=None, description="Title contains (any case)"),
    category: Optional[str] = Query(default=None, description="Category slug or 'all'"),
    organic: bool = Query(default=False, description="Organic listings only"),
    sort: BrowseSort = Query(default=BrowseSort.RELEVANCE),
    service: CatalogService = Depends(get_catalog_service),
) -> BrowseResultDTO:
    """Browse active listings."""
    return await service.browse(search, category, organic, sort)


@router.get("/products/{product_id}", response_model=ProductDetailDTO)
async def product_detail(
    product_id: str,
    viewer: Optional[ProfileDTO] = Depends(get_optional_user),
    service: CatalogService = Depends(get_catalog_service),
) -> ProductDetailDTO:
    """Product page; each call counts one view."""
    return await service.product_detail(product_id, viewer.id if viewer else None)


@router.get("/products/{product_id}/reviews", response_model=ReviewListDTO)
async def list_reviews(
    product_id: str,
    viewer: Optional[ProfileDTO] = Depends(get_optional_user),
    service: ReviewService = Depends(get_review_service),
) -> ReviewListDTO:
    return await service.list_reviews(product_id, viewer.id if viewer else None)


@router.post("/products/{product_id}/reviews", response_model=ReviewDTO, status_code=201)
async def submit_review(
    product_id: str,
    request: CreateReviewRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
) -> ReviewDTO:
    return await service.submit_review(user.id, product_id, request)
