"""Application DTOs for return requests."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from core.domain.enums import RefundMethod, ReturnReason


@dataclass(frozen=True)
class UploadedPhoto:
    """Raw proof photo handed over by the API layer."""
    filename: str
    content: bytes
    content_type: Optional[str] = None


class ReturnItemRequest(BaseModel):
    order_item_id: str
    quantity: int = Field(..., ge=1)


class CreateReturnRequest(BaseModel):
    """Request DTO for opening a return."""

    items: List[ReturnItemRequest] = Field(..., min_length=1)
    reason: ReturnReason
    description: Optional[str] = None
    refund_method: RefundMethod = RefundMethod.ORIGINAL_PAYMENT


class ReturnItemDTO(BaseModel):
    id: str
    order_item_id: str
    quantity: int
    title: Optional[str] = None
    image: Optional[str] = None

    model_config = {"frozen": True}


class ReturnDTO(BaseModel):
    """Response DTO for a return request."""

    id: str
    order_id: str
    order_number: Optional[str] = None
    user_id: str
    seller_id: str
    buyer_name: Optional[str] = None
    reason: str
    reason_label: str
    description: Optional[str] = None
    refund_method: str
    status: str
    created_at: Optional[datetime] = None
    items: List[ReturnItemDTO] = Field(default_factory=list)
    photos: List[str] = Field(default_factory=list, description="Public proof photo URLs")
    timeline_index: int = Field(0, description="-1 when rejected")
    next_status: Optional[str] = None

    model_config = {"frozen": True}
