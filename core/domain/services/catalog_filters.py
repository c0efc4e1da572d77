"""Browse filters and sorts applied to the active-listing feed."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..entities.product import Product
from ..enums import ListingStatus


class BrowseSort(str, Enum):
    RELEVANCE = "relevance"
    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RATING = "rating"


@dataclass
class ProductCard:
    """Listing joined with the bits the browse grid shows."""
    product: Product
    seller_name: Optional[str] = None
    seller_district: Optional[str] = None
    category_slug: Optional[str] = None
    category_name: Optional[str] = None


def filter_cards(
    cards: List[ProductCard],
    search: Optional[str] = None,
    category: Optional[str] = None,
    organic_only: bool = False,
) -> List[ProductCard]:
    """Apply the browse page filters; the title search ignores case."""
    result = cards
    if organic_only:
        result = [c for c in result if c.product.is_organic]
    if category and category != "all":
        result = [c for c in result if c.category_slug == category]
    if search and search.strip():
        needle = search.strip().lower()
        result = [c for c in result if needle in c.product.title.lower()]
    return result


def sort_cards(cards: List[ProductCard], sort: BrowseSort = BrowseSort.RELEVANCE) -> List[ProductCard]:
    """Sort a copy of the cards. Relevance keeps the feed order."""
    if sort == BrowseSort.PRICE_ASC:
        return sorted(cards, key=lambda c: c.product.price_per_unit)
    if sort == BrowseSort.PRICE_DESC:
        return sorted(cards, key=lambda c: c.product.price_per_unit, reverse=True)
    if sort == BrowseSort.RATING:
        return sorted(cards, key=lambda c: c.product.avg_rating or 0, reverse=True)
    if sort == BrowseSort.NEWEST:
        return sorted(cards, key=lambda c: c.product.created_at, reverse=True)
    return list(cards)


def count_by_status(products: List[Product]) -> Dict[str, int]:
    """Tab counters for the seller listings page."""
    counts = {status.value: 0 for status in ListingStatus}
    for product in products:
        counts[product.status.value] = counts.get(product.status.value, 0) + 1
    return counts
