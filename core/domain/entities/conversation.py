"""Buyer/seller chat entities."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..enums import MessageType
from ..exceptions import PermissionDeniedError
from ..value_objects import new_id

IMAGE_PLACEHOLDER = "📷 Image"
DELETED_PLACEHOLDER = "This message was deleted"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MessageReaction:
    message_id: str
    user_id: str
    reaction: str
    id: str = field(default_factory=new_id)


@dataclass
class Message:
    conversation_id: str
    sender_id: str
    content: str
    message_type: MessageType = MessageType.TEXT
    metadata: Dict[str, Any] = field(default_factory=dict)
    delivered_at: Optional[datetime] = None
    read_at: Optional[datetime] = None
    is_deleted: bool = False
    reactions: List[MessageReaction] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def text(cls, conversation_id: str, sender_id: str, content: str) -> "Message":
        if not content or not content.strip():
            raise ValueError("Message cannot be empty")
        return cls(
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=content.strip(),
            delivered_at=_utcnow(),
        )

    @classmethod
    def image(cls, conversation_id: str, sender_id: str, image_url: str) -> "Message":
        return cls(
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=IMAGE_PLACEHOLDER,
            message_type=MessageType.IMAGE,
            metadata={"image_url": image_url},
            delivered_at=_utcnow(),
        )

    def soft_delete(self, user_id: str) -> None:
        if self.sender_id != user_id:
            raise PermissionDeniedError("You can only delete your own messages")
        self.is_deleted = True
        self.content = DELETED_PLACEHOLDER


@dataclass
class Conversation:
    buyer_id: str
    seller_id: str
    product_id: Optional[str] = None
    last_message_at: Optional[datetime] = None
    buyer_last_read_at: Optional[datetime] = None
    seller_last_read_at: Optional[datetime] = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def start(cls, buyer_id: str, seller_id: str, product_id: Optional[str]) -> "Conversation":
        if buyer_id == seller_id:
            raise ValueError("You cannot message yourself")
        now = _utcnow()
        return cls(buyer_id=buyer_id, seller_id=seller_id, product_id=product_id, last_message_at=now)

    def is_participant(self, user_id: str) -> bool:
        return user_id in (self.buyer_id, self.seller_id)

    def ensure_participant(self, user_id: str) -> None:
        if not self.is_participant(user_id):
            raise PermissionDeniedError("Not a participant of this conversation")

    def counterpart_of(self, user_id: str) -> str:
        return self.seller_id if user_id == self.buyer_id else self.buyer_id

    def mark_read_by(self, user_id: str, at: Optional[datetime] = None) -> None:
        at = at or _utcnow()
        if user_id == self.buyer_id:
            self.buyer_last_read_at = at
        elif user_id == self.seller_id:
            self.seller_last_read_at = at
        else:
            raise PermissionDeniedError("Not a participant of this conversation")

    def touch(self, at: Optional[datetime] = None) -> None:
        self.last_message_at = at or _utcnow()
