"""
Checkout pricing.

Pure functions that turn a cart into a quote and split it into one
priced order per seller. Fees are whole rupees, rounded half-up.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from ..entities.cart import Cart, CartItem
from ..enums import DeliveryMode, PaymentMethod, PaymentStatus
from ..value_objects import Money

DEFAULT_PLATFORM_FEE_RATE = Decimal("2")

DEFAULT_DELIVERY_FEES: Dict[DeliveryMode, Decimal] = {
    DeliveryMode.SELLER_DELIVERS: Decimal("80"),
    DeliveryMode.BUYER_PICKUP: Decimal("0"),
}

DELIVERY_SLOTS = ("09:00-13:00", "14:00-18:00")


@dataclass(frozen=True)
class CheckoutQuote:
    subtotal: Money
    transport_fee: Money
    platform_fee: Money
    discount_amount: Money
    total_amount: Money


@dataclass(frozen=True)
class SellerSplit:
    """Priced share of the cart for one seller."""
    seller_id: str
    items: List[CartItem]
    subtotal: Money
    transport_fee: Money
    platform_fee: Money
    discount_amount: Money
    total_amount: Money


def payment_status_for(method: PaymentMethod) -> PaymentStatus:
    """Cash on delivery stays pending; online methods are paid up front."""
    if method == PaymentMethod.COD:
        return PaymentStatus.PENDING
    return PaymentStatus.PAID


def delivery_dates(today: date) -> List[date]:
    """Selectable delivery dates: tomorrow and the day after."""
    return [today + timedelta(days=1), today + timedelta(days=2)]


def delivery_fee(
    mode: DeliveryMode,
    fees: Optional[Dict[DeliveryMode, Decimal]] = None,
) -> Money:
    fees = fees or DEFAULT_DELIVERY_FEES
    return Money(amount=fees.get(mode, Decimal("0")))


def quote(
    cart: Cart,
    mode: DeliveryMode,
    coupon_percentage: Decimal = Decimal("0"),
    platform_fee_rate: Decimal = DEFAULT_PLATFORM_FEE_RATE,
    fees: Optional[Dict[DeliveryMode, Decimal]] = None,
) -> CheckoutQuote:
    """
    Price the whole cart.

    total = subtotal + transport + platform fee - discount
    """
    subtotal = cart.total_amount()
    transport = delivery_fee(mode, fees)
    platform_fee = subtotal.percent(platform_fee_rate)
    discount = subtotal.percent(coupon_percentage)
    return CheckoutQuote(
        subtotal=subtotal,
        transport_fee=transport,
        platform_fee=platform_fee,
        discount_amount=discount,
        total_amount=subtotal + transport + platform_fee - discount,
    )


def split_by_seller(
    cart: Cart,
    mode: DeliveryMode,
    coupon_percentage: Decimal = Decimal("0"),
    platform_fee_rate: Decimal = DEFAULT_PLATFORM_FEE_RATE,
    fees: Optional[Dict[DeliveryMode, Decimal]] = None,
) -> List[SellerSplit]:
    """
    Split the cart into one priced share per seller.

    Transport is divided evenly across sellers and rounded; fee and
    discount are computed on each seller's own subtotal.
    """
    groups = cart.items_by_seller()
    if not groups:
        return []

    transport = delivery_fee(mode, fees)
    transport_per_seller = Money(amount=transport.amount / len(groups), currency=transport.currency).rounded()

    splits = []
    for seller_id, items in groups.items():
        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal + item.line_total
        platform_fee = subtotal.percent(platform_fee_rate)
        discount = subtotal.percent(coupon_percentage)
        splits.append(
            SellerSplit(
                seller_id=seller_id,
                items=items,
                subtotal=subtotal,
                transport_fee=transport_per_seller,
                platform_fee=platform_fee,
                discount_amount=discount,
                total_amount=subtotal + transport_per_seller + platform_fee - discount,
            )
        )
    return splits
