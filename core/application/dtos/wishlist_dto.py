"""Application DTOs for saved items."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .catalog_dto import ProductDTO
from .profile_dto import ProfileDTO


class ToggleResultDTO(BaseModel):
    saved: bool = Field(..., description="State after the toggle")
    id: Optional[str] = None

    model_config = {"frozen": True}


class SavedProductDTO(BaseModel):
    id: str
    product: Optional[ProductDTO] = None
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}


class SavedSellerDTO(BaseModel):
    id: str
    seller: Optional[ProfileDTO] = None
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}


class SavedSearchDTO(BaseModel):
    id: str
    query: str
    filters: Dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}


class SaveSearchRequest(BaseModel):
    query: str
    category: Optional[str] = None
    organic_only: bool = False


class WishlistDTO(BaseModel):
    products: List[SavedProductDTO] = Field(default_factory=list)
    sellers: List[SavedSellerDTO] = Field(default_factory=list)
    searches: List[SavedSearchDTO] = Field(default_factory=list)

    model_config = {"frozen": True}
