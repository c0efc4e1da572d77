"""Application DTOs for browsing and seller listings."""

from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from core.domain.enums import ListingStatus, ProduceUnit


class CategoryDTO(BaseModel):
    id: str
    name: str
    slug: str

    model_config = {"frozen": True}


class ProductDTO(BaseModel):
    """Response DTO for a listing (browse card, detail page and seller table)."""

    id: str
    seller_id: str
    title: str
    variety: Optional[str] = None
    description: Optional[str] = None
    price_per_unit: Decimal
    unit: str
    quantity_available: int
    minimum_order: int = 1
    harvest_date: Optional[date] = None
    is_organic: bool = False
    certification_url: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    village: Optional[str] = None
    district: Optional[str] = None
    pincode: Optional[str] = None
    status: str
    views_count: int = 0
    avg_rating: Optional[Decimal] = None
    total_reviews: int = 0
    created_at: Optional[datetime] = None

    category: Optional[CategoryDTO] = None
    seller_name: Optional[str] = None
    seller_district: Optional[str] = None
    seller_verified: bool = False

    model_config = {"frozen": True}


class ProductDetailDTO(BaseModel):
    product: ProductDTO
    initial_quantity: int = Field(..., description="Quantity preselected on the page")
    is_saved: bool = False
    seller_phone: Optional[str] = None
    seller_bio: Optional[str] = None

    model_config = {"frozen": True}


class BrowseResultDTO(BaseModel):
    products: List[ProductDTO] = Field(default_factory=list)
    total: int = Field(..., ge=0)

    model_config = {"frozen": True}


class SellerListingsDTO(BaseModel):
    """Seller listings page: one tab's rows plus counters for every tab."""

    status: ListingStatus
    counts: Dict[str, int] = Field(default_factory=dict)
    listings: List[ProductDTO] = Field(default_factory=list)

    model_config = {"frozen": True}


class CreateListingRequest(BaseModel):
    """Request DTO for publishing a new listing."""

    title: str = Field(..., min_length=1)
    category_slug: Optional[str] = None
    variety: Optional[str] = None
    description: Optional[str] = None
    price_per_unit: Decimal = Field(..., ge=0)
    unit: ProduceUnit = ProduceUnit.KG
    quantity_available: int = Field(..., ge=0)
    minimum_order: int = Field(default=1, ge=1)
    harvest_date: Optional[date] = None
    is_organic: bool = False
    certification_url: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    village: Optional[str] = None
    district: Optional[str] = None
    pincode: Optional[str] = None


class UpdateListingRequest(BaseModel):
    """Inline edit from the listings table."""

    price_per_unit: Optional[Decimal] = Field(None, ge=0)
    quantity_available: Optional[int] = Field(None, ge=0)


class ListingStatusRequest(BaseModel):
    status: ListingStatus
