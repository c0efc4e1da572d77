"""Application DTOs for the seller dashboard."""

from decimal import Decimal
from typing import Dict, List

from pydantic import BaseModel, Field

from .order_dto import OrderDTO


class SellerStatsDTO(BaseModel):
    active_listings: int = 0
    avg_rating: Decimal = Decimal("0.0")
    pending_orders: int = 0
    total_revenue: Decimal = Decimal("0")
    total_sales: int = 0
    category_breakdown: Dict[str, int] = Field(default_factory=dict)

    model_config = {"frozen": True}


class DashboardDTO(BaseModel):
    stats: SellerStatsDTO
    recent_orders: List[OrderDTO] = Field(default_factory=list)

    model_config = {"frozen": True}
