"""SQLAlchemy ORM models for chat."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConversationModel(Base):
    __tablename__ = "conversations"

    id = Column(String(36), primary_key=True)
    buyer_id = Column(String(36), nullable=False, index=True)
    seller_id = Column(String(36), nullable=False, index=True)
    product_id = Column(String(36), nullable=True)
    last_message_at = Column(DateTime(timezone=True), nullable=True, index=True)
    buyer_last_read_at = Column(DateTime(timezone=True), nullable=True)
    seller_last_read_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class MessageModel(Base):
    __tablename__ = "messages"

    id = Column(String(36), primary_key=True)
    conversation_id = Column(String(36), ForeignKey("conversations.id"), nullable=False, index=True)
    sender_id = Column(String(36), nullable=False)
    content = Column(Text, nullable=False)
    message_type = Column(String(10), nullable=False, default="text")
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=False, default=dict)
    delivered_at = Column(DateTime(timezone=True), nullable=True)
    read_at = Column(DateTime(timezone=True), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True)

    reactions = relationship(
        "MessageReactionModel", back_populates="message", cascade="all, delete-orphan"
    )


class MessageReactionModel(Base):
    __tablename__ = "message_reactions"

    id = Column(String(36), primary_key=True)
    message_id = Column(String(36), ForeignKey("messages.id"), nullable=False, index=True)
    user_id = Column(String(36), nullable=False)
    reaction = Column(String(16), nullable=False)

    message = relationship("MessageModel", back_populates="reactions")
