"""Unit tests for seller dashboard statistics."""

from decimal import Decimal

from core.domain.entities.order import Order
from core.domain.entities.product import Product
from core.domain.enums import (
    DeliveryMode,
    ListingStatus,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    ProduceUnit,
)
from core.domain.services.seller_stats import compute_seller_stats
from core.domain.value_objects import Money, OrderNumber


def _product(status=ListingStatus.ACTIVE, rating=None, category_id=None) -> Product:
    return Product(
        seller_id="s1",
        title="Onions",
        price_per_unit=Decimal("30"),
        unit=ProduceUnit.KG,
        quantity_available=50,
        status=status,
        avg_rating=Decimal(rating) if rating else None,
        category_id=category_id,
    )


def _order(status, total) -> Order:
    return Order(
        order_number=OrderNumber.generate(),
        buyer_id="b1",
        seller_id="s1",
        subtotal=Money(Decimal(total)),
        transport_fee=Money.zero(),
        platform_fee=Money.zero(),
        discount_amount=Money.zero(),
        total_amount=Money(Decimal(total)),
        delivery_mode=DeliveryMode.BUYER_PICKUP,
        payment_method=PaymentMethod.COD,
        payment_status=PaymentStatus.PENDING,
        status=status,
    )


def test_empty_seller_has_zeroed_stats():
    stats = compute_seller_stats([], {}, [])

    assert stats.active_listings == 0
    assert stats.avg_rating == Decimal("0.0")
    assert stats.revenue.is_zero()
    assert stats.category_breakdown == {}


def test_listing_counts_rating_and_breakdown():
    products = [
        _product(rating="4.0", category_id="veg"),
        _product(rating="5.0", category_id="veg"),
        _product(status=ListingStatus.DRAFT, category_id="gone"),
    ]

    stats = compute_seller_stats(products, {"veg": "Vegetables"}, [])

    assert stats.active_listings == 2
    # (4 + 5 + 0) / 3 = 3.0
    assert stats.avg_rating == Decimal("3.0")
    assert stats.category_breakdown == {"Vegetables": 2, "Other": 1}


def test_only_five_recent_orders_count():
    orders = [
        _order(OrderStatus.DELIVERED, "100"),
        _order(OrderStatus.PENDING, "50"),
        _order(OrderStatus.PENDING, "50"),
        _order(OrderStatus.DELIVERED, "250"),
        _order(OrderStatus.SHIPPED, "75"),
        _order(OrderStatus.DELIVERED, "999"),
    ]

    stats = compute_seller_stats([], {}, orders)

    assert stats.pending_orders == 2
    assert stats.total_sales == 2
    assert stats.revenue.amount == Decimal("350")
