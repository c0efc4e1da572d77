"""Application DTOs for buyer/seller chat."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ReactionDTO(BaseModel):
    id: str
    user_id: str
    reaction: str

    model_config = {"frozen": True}


class MessageDTO(BaseModel):
    id: str
    conversation_id: str
    sender_id: str
    content: str
    message_type: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
    delivered_at: Optional[datetime] = None
    read_at: Optional[datetime] = None
    is_deleted: bool = False
    created_at: Optional[datetime] = None
    reactions: List[ReactionDTO] = Field(default_factory=list)

    model_config = {"frozen": True}


class ConversationDTO(BaseModel):
    id: str
    buyer_id: str
    seller_id: str
    product_id: Optional[str] = None
    product_title: Optional[str] = None
    counterpart_id: str
    counterpart_name: Optional[str] = None
    counterpart_avatar: Optional[str] = None
    last_message_at: Optional[datetime] = None
    last_read_at: Optional[datetime] = Field(None, description="Viewer's own last-read time")

    model_config = {"frozen": True}


class StartConversationRequest(BaseModel):
    product_id: str


class SendMessageRequest(BaseModel):
    content: str


class ReactRequest(BaseModel):
    reaction: str = Field(..., min_length=1, max_length=16)
