"""Catalog entities: categories and produce listings."""
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional

from ..enums import ListingStatus, ProduceUnit
from ..value_objects import new_id

MAX_LISTING_IMAGES = 5

CATEGORY_SLUGS = (
    "crops-grains",
    "fruits",
    "vegetables",
    "dairy-poultry",
    "seeds-saplings",
    "agri-inputs",
)


@dataclass
class Category:
    name: str
    slug: str
    id: str = field(default_factory=new_id)


@dataclass
class Product:
    """A seller's produce listing."""
    seller_id: str
    title: str
    price_per_unit: Decimal
    unit: ProduceUnit
    quantity_available: int
    category_id: Optional[str] = None
    variety: Optional[str] = None
    description: Optional[str] = None
    minimum_order: int = 1
    harvest_date: Optional[date] = None
    is_organic: bool = False
    certification_url: Optional[str] = None
    images: List[str] = field(default_factory=list)
    village: Optional[str] = None
    district: Optional[str] = None
    pincode: Optional[str] = None
    status: ListingStatus = ListingStatus.ACTIVE
    views_count: int = 0
    avg_rating: Optional[Decimal] = None
    total_reviews: int = 0
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError("Title is required")
        if not isinstance(self.price_per_unit, Decimal):
            self.price_per_unit = Decimal(str(self.price_per_unit))
        if self.price_per_unit < 0:
            raise ValueError("Price cannot be negative")
        if self.quantity_available < 0:
            raise ValueError("Quantity cannot be negative")
        if self.minimum_order < 1:
            raise ValueError("Minimum order must be at least 1")
        self.images = clean_images(self.images)

    def duplicate(self) -> "Product":
        """Copy as a fresh draft; views and ratings start over."""
        return replace(
            self,
            id=new_id(),
            title=f"{self.title} (Copy)",
            status=ListingStatus.DRAFT,
            views_count=0,
            avg_rating=None,
            total_reviews=0,
            created_at=datetime.now(timezone.utc),
            images=list(self.images),
        )

    def update_inline(self, price_per_unit=None, quantity_available=None) -> None:
        if price_per_unit is not None:
            price = Decimal(str(price_per_unit))
            if price < 0:
                raise ValueError("Price cannot be negative")
            self.price_per_unit = price
        if quantity_available is not None:
            if quantity_available < 0:
                raise ValueError("Quantity cannot be negative")
            self.quantity_available = quantity_available

    def apply_ratings(self, ratings: List[int]) -> None:
        self.total_reviews = len(ratings)
        if ratings:
            self.avg_rating = (Decimal(sum(ratings)) / len(ratings)).quantize(Decimal("0.01"))
        else:
            self.avg_rating = None


def clean_images(images: List[str]) -> List[str]:
    """Drop blank image URLs and keep the first five."""
    cleaned = [url.strip() for url in images or [] if url and url.strip()]
    return cleaned[:MAX_LISTING_IMAGES]
