"""Application DTOs for the cart."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class CartItemDTO(BaseModel):
    """DTO for one cart line."""

    product_id: str = Field(..., description="Product ID")
    seller_id: str = Field(..., description="Seller profile ID")
    title: str = Field(..., description="Listing title")
    variety: Optional[str] = Field(None, description="Produce variety")
    price_per_unit: Decimal = Field(..., ge=0, description="Price per unit")
    unit: str = Field(..., description="Unit of sale")
    quantity: int = Field(..., ge=0, description="Quantity in cart")
    available_quantity: int = Field(..., ge=0, description="Stock when added")
    image: Optional[str] = Field(None, description="First listing image")
    seller_name: Optional[str] = Field(None, description="Seller display name")
    line_total: Decimal = Field(..., ge=0, description="price_per_unit × quantity")

    model_config = {"frozen": True}


class SellerGroupDTO(BaseModel):
    """Cart lines of one seller."""

    seller_id: str
    seller_name: Optional[str] = None
    items: List[CartItemDTO] = Field(default_factory=list)
    subtotal: Decimal = Field(..., ge=0)

    model_config = {"frozen": True}


class CartDTO(BaseModel):
    """Response DTO for the whole cart."""

    items: List[CartItemDTO] = Field(default_factory=list)
    sellers: List[SellerGroupDTO] = Field(default_factory=list, description="Lines grouped by seller")
    total_items: int = Field(..., ge=0)
    total_amount: Decimal = Field(..., ge=0)
    currency: str = Field(default="INR")

    model_config = {"frozen": True}


class AddToCartRequest(BaseModel):
    product_id: str = Field(..., description="Product to add")
    quantity: int = Field(default=1, gt=0, description="Quantity to add")


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(..., description="New quantity; zero or less removes the line")
