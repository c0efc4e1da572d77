from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from core.settings.base_settings import FarmerConnectBaseSettings


class MarketplaceSettings(FarmerConnectBaseSettings):
    """
    Checkout pricing knobs.

    Fees are whole currency units; the platform fee and coupon
    discounts are percentages of the subtotal.
    """

    currency: str = Field(default="INR", alias="MARKETPLACE_CURRENCY")
    platform_fee_rate: Decimal = Field(default=Decimal("2"), alias="MARKETPLACE_PLATFORM_FEE_RATE")
    seller_delivery_fee: Decimal = Field(default=Decimal("80"), alias="MARKETPLACE_SELLER_DELIVERY_FEE")
    pickup_fee: Decimal = Field(default=Decimal("0"), alias="MARKETPLACE_PICKUP_FEE")
    browse_limit: int = Field(default=200, alias="MARKETPLACE_BROWSE_LIMIT")
