"""SQLAlchemy implementation of ConversationRepository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.conversation import Conversation, Message, MessageReaction
from core.domain.repositories.conversation_repository import ConversationRepository

from ..mappers import ConversationMapper, MessageMapper
from ..models.conversation_model import ConversationModel, MessageModel, MessageReactionModel


class SqlAlchemyConversationRepository(ConversationRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, conversation_id: str) -> Optional[Conversation]:
        model = await self._session.get(ConversationModel, conversation_id)
        return ConversationMapper.to_domain(model) if model else None

    async def find(
        self, buyer_id: str, seller_id: str, product_id: Optional[str]
    ) -> Optional[Conversation]:
        stmt = select(ConversationModel).where(
            ConversationModel.buyer_id == buyer_id,
            ConversationModel.seller_id == seller_id,
        )
        if product_id is None:
            stmt = stmt.where(ConversationModel.product_id.is_(None))
        else:
            stmt = stmt.where(ConversationModel.product_id == product_id)
        result = await self._session.execute(stmt.limit(1))
        model = result.scalar_one_or_none()
        return ConversationMapper.to_domain(model) if model else None

    async def list_for_user(self, user_id: str) -> List[Conversation]:
        result = await self._session.execute(
            select(ConversationModel)
            .where(or_(ConversationModel.buyer_id == user_id, ConversationModel.seller_id == user_id))
            .order_by(ConversationModel.last_message_at.desc())
        )
        return [ConversationMapper.to_domain(m) for m in result.scalars().all()]

    async def save(self, conversation: Conversation) -> None:
        model = await self._session.get(ConversationModel, conversation.id)
        if model is None:
            model = ConversationModel(id=conversation.id, created_at=conversation.created_at)
        ConversationMapper.update_persistence(conversation, model)
        self._session.add(model)
        await self._session.flush()

    async def list_messages(self, conversation_id: str) -> List[Message]:
        result = await self._session.execute(
            select(MessageModel)
            .options(selectinload(MessageModel.reactions))
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.asc())
        )
        return [MessageMapper.to_domain(m) for m in result.scalars().all()]

    async def _load_message(self, message_id: str) -> Optional[MessageModel]:
        result = await self._session.execute(
            select(MessageModel)
            .options(selectinload(MessageModel.reactions))
            .where(MessageModel.id == message_id)
        )
        return result.scalar_one_or_none()

    async def get_message(self, message_id: str) -> Optional[Message]:
        model = await self._load_message(message_id)
        return MessageMapper.to_domain(model) if model else None

    async def save_message(self, message: Message) -> None:
        model = await self._load_message(message.id)
        if model is None:
            model = MessageModel(id=message.id, created_at=message.created_at, reactions=[])
        MessageMapper.update_persistence(message, model)
        self._session.add(model)
        await self._session.flush()

    async def mark_messages_read(self, conversation_id: str, reader_id: str, at: datetime) -> int:
        result = await self._session.execute(
            update(MessageModel)
            .where(
                MessageModel.conversation_id == conversation_id,
                MessageModel.sender_id != reader_id,
                MessageModel.read_at.is_(None),
            )
            .values(read_at=at)
        )
        return result.rowcount or 0

    async def add_reaction(self, reaction: MessageReaction) -> None:
        self._session.add(
            MessageReactionModel(
                id=reaction.id,
                message_id=reaction.message_id,
                user_id=reaction.user_id,
                reaction=reaction.reaction,
            )
        )
        await self._session.flush()
