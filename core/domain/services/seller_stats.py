"""Seller dashboard statistics."""
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional

from ..entities.order import Order
from ..entities.product import Product
from ..enums import ListingStatus, OrderStatus
from ..value_objects import Money

RECENT_ORDER_COUNT = 5
UNCATEGORISED = "Other"


@dataclass
class SellerStats:
    active_listings: int = 0
    avg_rating: Decimal = Decimal("0.0")
    pending_orders: int = 0
    revenue: Money = field(default_factory=Money.zero)
    total_sales: int = 0
    category_breakdown: Dict[str, int] = field(default_factory=dict)


def compute_seller_stats(
    products: List[Product],
    category_names: Dict[str, str],
    recent_orders: List[Order],
) -> SellerStats:
    """
    Summarise a seller's listings and most recent orders.

    Args:
        products: every listing the seller owns
        category_names: category_id -> display name
        recent_orders: the seller's newest orders (at most five are used)

    Returns:
        SellerStats with the average rating rounded to one decimal
    """
    stats = SellerStats()
    stats.active_listings = sum(1 for p in products if p.status == ListingStatus.ACTIVE)

    # Unrated listings count as zero.
    if products:
        avg = sum((p.avg_rating or Decimal("0") for p in products), Decimal("0")) / len(products)
        stats.avg_rating = avg.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)

    for product in products:
        name = _category_name(product.category_id, category_names)
        stats.category_breakdown[name] = stats.category_breakdown.get(name, 0) + 1

    for order in recent_orders[:RECENT_ORDER_COUNT]:
        if order.status == OrderStatus.PENDING:
            stats.pending_orders += 1
        elif order.status == OrderStatus.DELIVERED:
            stats.revenue = stats.revenue + order.total_amount
            stats.total_sales += 1

    return stats


def _category_name(category_id: Optional[str], names: Dict[str, str]) -> str:
    if not category_id:
        return UNCATEGORISED
    return names.get(category_id, UNCATEGORISED)
