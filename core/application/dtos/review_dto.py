"""Application DTOs for product reviews."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ReviewDTO(BaseModel):
    id: str
    product_id: str
    buyer_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    buyer_name: Optional[str] = None
    buyer_avatar: Optional[str] = None

    model_config = {"frozen": True}


class ReviewListDTO(BaseModel):
    reviews: List[ReviewDTO] = Field(default_factory=list)
    can_review: bool = Field(False, description="Viewer bought the product and has not reviewed it")
    has_reviewed: bool = False

    model_config = {"frozen": True}


class CreateReviewRequest(BaseModel):
    rating: int = Field(..., description="1 to 5 stars")
    comment: Optional[str] = None
