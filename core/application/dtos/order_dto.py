"""Application DTOs for Order operations."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    id: str = Field(..., description="Order item ID")
    product_id: str = Field(..., description="Product ID")
    title: str = Field(..., description="Title captured at checkout")
    image: Optional[str] = Field(None, description="Image captured at checkout")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit: str = Field(..., description="Unit of sale")
    price_per_unit: Decimal = Field(..., ge=0, description="Unit price at checkout")
    line_total: Decimal = Field(..., ge=0, description="Line total")
    product_snapshot: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class PartyDTO(BaseModel):
    """Counterpart shown next to an order (seller for buyers, buyer for sellers)."""

    id: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    district: Optional[str] = None

    model_config = {"frozen": True}


class DeliveryAddressDTO(BaseModel):
    street: str
    city: str
    district: Optional[str] = None
    state: Optional[str] = None
    pincode: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    model_config = {"frozen": True}


class OrderReturnRefDTO(BaseModel):
    id: str
    status: str

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order ID")
    order_number: str = Field(..., description="ORD-XXXXXX-YYYY")
    status: str = Field(..., description="Order status")
    buyer_id: str
    seller_id: str
    subtotal: Decimal
    transport_fee: Decimal
    platform_fee: Decimal
    discount_amount: Decimal
    total_amount: Decimal
    currency: str = "INR"
    delivery_mode: str
    delivery_date: Optional[date] = None
    delivery_slot: Optional[str] = None
    payment_method: str
    payment_status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")

    seller: Optional[PartyDTO] = None
    buyer: Optional[PartyDTO] = None
    delivery_address: Optional[DeliveryAddressDTO] = None
    returns: List[OrderReturnRefDTO] = Field(default_factory=list)
    timeline_index: int = Field(0, description="Buyer timeline position; -1 when cancelled")
    next_status: Optional[str] = Field(None, description="Status the seller can advance to")
    can_request_return: bool = False

    model_config = {"frozen": True}


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="List of orders")
    total: int = Field(..., ge=0, description="Total count")

    model_config = {"frozen": True}


class CancelOrderRequest(BaseModel):
    reason: Optional[str] = None
