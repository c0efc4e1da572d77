"""Application DTOs for checkout."""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from core.domain.enums import DeliveryMode, PaymentMethod

from .profile_dto import AddressDTO


class NewAddressRequest(BaseModel):
    """Address typed in at checkout; saved as the default `Home` address."""

    full_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: Optional[str] = None
    pincode: str = Field(..., min_length=1)
    latitude: Optional[float] = Field(None, description="Map pin latitude")
    longitude: Optional[float] = Field(None, description="Map pin longitude")


class CheckoutQuoteRequest(BaseModel):
    delivery_mode: DeliveryMode = DeliveryMode.SELLER_DELIVERS
    coupon_code: Optional[str] = None


class CheckoutQuoteDTO(BaseModel):
    """Price breakdown shown before the buyer confirms."""

    subtotal: Decimal
    transport_fee: Decimal
    platform_fee: Decimal
    discount_amount: Decimal
    total_amount: Decimal
    coupon_code: Optional[str] = None
    seller_count: int = Field(..., ge=0)
    currency: str = "INR"

    model_config = {"frozen": True}


class CheckoutOptionsDTO(BaseModel):
    """Choices for the checkout form."""

    addresses: List[AddressDTO] = Field(default_factory=list, description="Default address first")
    delivery_modes: List[DeliveryMode]
    payment_methods: List[PaymentMethod]
    delivery_dates: List[date]
    delivery_slots: List[str]

    model_config = {"frozen": True}


class PlaceOrderRequest(BaseModel):
    """Request DTO for placing the cart as one order per seller."""

    delivery_mode: DeliveryMode = Field(default=DeliveryMode.SELLER_DELIVERS)
    payment_method: PaymentMethod = Field(default=PaymentMethod.UPI)
    delivery_date: Optional[date] = Field(None, description="Tomorrow or the day after")
    delivery_slot: Optional[str] = Field(None, description="One of the offered slots")
    address_id: Optional[str] = Field(None, description="Saved address to deliver to")
    new_address: Optional[NewAddressRequest] = Field(None, description="Address to save and use")
    coupon_code: Optional[str] = None
    notes: Optional[str] = None


class PlaceOrderResponse(BaseModel):
    order_ids: List[str]
    order_numbers: List[str]
    redirect_order_id: str = Field(..., description="First created order")

    model_config = {"frozen": True}
