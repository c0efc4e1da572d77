"""Unit tests for checkout pricing."""

from datetime import date
from decimal import Decimal

from core.domain.entities.cart import Cart, CartItem
from core.domain.enums import DeliveryMode, PaymentMethod, PaymentStatus
from core.domain.services import checkout_pricing


def _cart(*lines) -> Cart:
    cart = Cart(user_id="buyer")
    for product_id, seller_id, price, qty in lines:
        cart.add_item(
            CartItem(
                product_id=product_id,
                seller_id=seller_id,
                title=product_id,
                price_per_unit=Decimal(price),
                unit="kg",
                quantity=0,
                available_quantity=1000,
            ),
            qty,
        )
    return cart


class TestQuote:

    def test_seller_delivery_with_coupon(self):
        cart = _cart(("p1", "s1", "40", 5), ("p2", "s1", "25", 2))  # subtotal 250

        quote = checkout_pricing.quote(cart, DeliveryMode.SELLER_DELIVERS, coupon_percentage=Decimal("10"))

        assert quote.subtotal.amount == Decimal("250")
        assert quote.transport_fee.amount == Decimal("80")
        assert quote.platform_fee.amount == Decimal("5")
        assert quote.discount_amount.amount == Decimal("25")
        assert quote.total_amount.amount == Decimal("310")

    def test_pickup_has_no_transport(self):
        quote = checkout_pricing.quote(_cart(("p1", "s1", "100", 1)), DeliveryMode.BUYER_PICKUP)

        assert quote.transport_fee.is_zero()
        assert quote.total_amount.amount == Decimal("102")

    def test_fees_round_half_up(self):
        # 2% of 125 = 2.5 -> 3
        quote = checkout_pricing.quote(_cart(("p1", "s1", "125", 1)), DeliveryMode.BUYER_PICKUP)
        assert quote.platform_fee.amount == Decimal("3")


class TestSplitBySeller:

    def test_transport_is_shared_between_sellers(self):
        cart = _cart(("p1", "s1", "100", 1), ("p2", "s2", "50", 2), ("p3", "s3", "10", 1))

        splits = checkout_pricing.split_by_seller(cart, DeliveryMode.SELLER_DELIVERS)

        assert [s.seller_id for s in splits] == ["s1", "s2", "s3"]
        # 80 / 3 = 26.67 -> 27
        assert all(s.transport_fee.amount == Decimal("27") for s in splits)
        assert splits[0].total_amount.amount == Decimal("100") + 27 + 2

    def test_split_transport_rounds_half_up(self):
        cart = _cart(("p1", "s1", "10", 1), ("p2", "s2", "10", 1))
        fees = {DeliveryMode.SELLER_DELIVERS: Decimal("5")}

        splits = checkout_pricing.split_by_seller(cart, DeliveryMode.SELLER_DELIVERS, fees=fees)

        assert [s.transport_fee.amount for s in splits] == [Decimal("3"), Decimal("3")]

    def test_discount_is_per_seller_subtotal(self):
        cart = _cart(("p1", "s1", "200", 1), ("p2", "s2", "50", 1))

        splits = checkout_pricing.split_by_seller(
            cart, DeliveryMode.BUYER_PICKUP, coupon_percentage=Decimal("10")
        )

        assert splits[0].discount_amount.amount == Decimal("20")
        assert splits[1].discount_amount.amount == Decimal("5")

    def test_empty_cart_has_no_splits(self):
        assert checkout_pricing.split_by_seller(Cart(user_id="b"), DeliveryMode.SELLER_DELIVERS) == []


def test_payment_status_for_method():
    assert checkout_pricing.payment_status_for(PaymentMethod.COD) == PaymentStatus.PENDING
    assert checkout_pricing.payment_status_for(PaymentMethod.UPI) == PaymentStatus.PAID
    assert checkout_pricing.payment_status_for(PaymentMethod.CARD) == PaymentStatus.PAID


def test_delivery_dates_are_next_two_days():
    assert checkout_pricing.delivery_dates(date(2025, 12, 31)) == [date(2026, 1, 1), date(2026, 1, 2)]
