"""Application service for buyer/seller chat."""

import logging
import time
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.message_dto import ConversationDTO, MessageDTO, ReactionDTO
from core.application.dtos.return_dto import UploadedPhoto
from core.application.interfaces import IStorageClient
from core.data.uow import UnitOfWork
from core.domain.entities.conversation import Conversation, Message, MessageReaction
from core.domain.entities.profile import Profile
from core.domain.event_bus import EventBus
from core.domain.exceptions import NotFoundError
from core.settings.modules.supabase_settings import SupabaseSettings

from .base import ApplicationService


logger = logging.getLogger(__name__)


def chat_image_path(conversation_id: str, filename: str, millis: Optional[int] = None) -> str:
    if millis is None:
        millis = int(time.time() * 1000)
    return f"chat/{conversation_id}/{millis}-{filename}"


class MessagingService(ApplicationService):
    """
    Application service for conversations.

    A conversation links one buyer, one seller and optionally the
    product it was started from. Only the two participants can read or
    post in it.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        storage: IStorageClient,
        event_bus: Optional[EventBus] = None,
        settings: Optional[SupabaseSettings] = None,
    ) -> None:
        super().__init__(session_factory, event_bus)
        self._storage = storage
        self._settings = settings or SupabaseSettings()

    async def list_conversations(self, user_id: str, search: Optional[str] = None) -> List[ConversationDTO]:
        """Conversations by latest activity, optionally filtered by name or product title."""
        uow = self._uow()
        async with uow:
            conversations = await uow.conversations.list_for_user(user_id)
            profiles = await uow.profiles.get_many({c.counterpart_of(user_id) for c in conversations})
            products = await uow.products.get_many([c.product_id for c in conversations if c.product_id])

        result = []
        for conv in conversations:
            product = products.get(conv.product_id) if conv.product_id else None
            result.append(
                _conversation_to_dto(
                    conv,
                    user_id,
                    profiles.get(conv.counterpart_of(user_id)),
                    product.title if product else None,
                )
            )

        if search and search.strip():
            needle = search.strip().lower()
            result = [
                c for c in result
                if needle in (c.counterpart_name or "").lower() or needle in (c.product_title or "").lower()
            ]
        return result

    async def start_from_product(self, buyer_id: str, product_id: str) -> ConversationDTO:
        """Open (or reuse) the conversation with a listing's seller.

        Raises:
            NotFoundError: unknown product
            ValueError: caller is the product's seller
        """
        uow = self._uow()
        async with uow:
            product = await uow.products.get(product_id)
            if product is None:
                raise NotFoundError("product", product_id)

            conv = await uow.conversations.find(buyer_id, product.seller_id, product.id)
            if conv is None:
                conv = Conversation.start(buyer_id, product.seller_id, product.id)
                await uow.conversations.save(conv)
                await uow.commit()
                logger.info(f"[{uow.execution_id}] Conversation {conv.id} started about {product.id}")

            seller = await uow.profiles.get(product.seller_id)
            return _conversation_to_dto(conv, buyer_id, seller, product.title)

    async def list_messages(self, user_id: str, conversation_id: str) -> List[MessageDTO]:
        uow = self._uow()
        async with uow:
            await self._participant(uow, user_id, conversation_id)
            return [_message_to_dto(m) for m in await uow.conversations.list_messages(conversation_id)]

    async def mark_read(self, user_id: str, conversation_id: str) -> int:
        """Record the caller's last-read time and mark the other party's messages read.

        Returns:
            Number of messages newly marked read
        """
        now = datetime.now(timezone.utc)
        uow = self._uow()
        async with uow:
            conv = await self._participant(uow, user_id, conversation_id)
            conv.mark_read_by(user_id, now)
            await uow.conversations.save(conv)
            count = await uow.conversations.mark_messages_read(conv.id, user_id, now)
            await uow.commit()
            return count

    async def send_text(self, user_id: str, conversation_id: str, content: str) -> MessageDTO:
        uow = self._uow()
        async with uow:
            conv = await self._participant(uow, user_id, conversation_id)
            message = Message.text(conv.id, user_id, content)
            return await self._post(uow, conv, message)

    async def send_image(self, user_id: str, conversation_id: str, photo: UploadedPhoto) -> MessageDTO:
        """Upload an image to chat storage and post it as a message.

        Raises:
            StorageError: the upload was rejected
        """
        uow = self._uow()
        async with uow:
            conv = await self._participant(uow, user_id, conversation_id)
            url = await self._storage.upload(
                self._settings.chat_images_bucket,
                chat_image_path(conv.id, photo.filename),
                photo.content,
                photo.content_type,
            )
            message = Message.image(conv.id, user_id, url)
            return await self._post(uow, conv, message)

    async def react(self, user_id: str, message_id: str, reaction: str) -> MessageDTO:
        uow = self._uow()
        async with uow:
            message = await self._message(uow, user_id, message_id)
            entry = MessageReaction(message_id=message.id, user_id=user_id, reaction=reaction)
            await uow.conversations.add_reaction(entry)
            await uow.commit()
            message.reactions.append(entry)
            return _message_to_dto(message)

    async def delete_message(self, user_id: str, message_id: str) -> MessageDTO:
        uow = self._uow()
        async with uow:
            message = await self._message(uow, user_id, message_id)
            message.soft_delete(user_id)
            await uow.conversations.save_message(message)
            await uow.commit()
            return _message_to_dto(message)

    @staticmethod
    async def _post(uow: UnitOfWork, conv: Conversation, message: Message) -> MessageDTO:
        await uow.conversations.save_message(message)
        conv.touch(message.created_at)
        await uow.conversations.save(conv)
        await uow.commit()
        return _message_to_dto(message)

    @staticmethod
    async def _participant(uow: UnitOfWork, user_id: str, conversation_id: str) -> Conversation:
        conv = await uow.conversations.get(conversation_id)
        if conv is None:
            raise NotFoundError("conversation", conversation_id)
        conv.ensure_participant(user_id)
        return conv

    @classmethod
    async def _message(cls, uow: UnitOfWork, user_id: str, message_id: str) -> Message:
        message = await uow.conversations.get_message(message_id)
        if message is None:
            raise NotFoundError("message", message_id)
        await cls._participant(uow, user_id, message.conversation_id)
        return message


def _conversation_to_dto(
    conv: Conversation,
    viewer_id: str,
    counterpart: Optional[Profile],
    product_title: Optional[str],
) -> ConversationDTO:
    return ConversationDTO(
        id=conv.id,
        buyer_id=conv.buyer_id,
        seller_id=conv.seller_id,
        product_id=conv.product_id,
        product_title=product_title,
        counterpart_id=conv.counterpart_of(viewer_id),
        counterpart_name=counterpart.full_name if counterpart else None,
        counterpart_avatar=counterpart.avatar_url if counterpart else None,
        last_message_at=conv.last_message_at,
        last_read_at=conv.buyer_last_read_at if viewer_id == conv.buyer_id else conv.seller_last_read_at,
    )


def _message_to_dto(message: Message) -> MessageDTO:
    return MessageDTO(
        id=message.id,
        conversation_id=message.conversation_id,
        sender_id=message.sender_id,
        content=message.content,
        message_type=message.message_type.value,
        metadata=dict(message.metadata),
        delivered_at=message.delivered_at,
        read_at=message.read_at,
        is_deleted=message.is_deleted,
        created_at=message.created_at,
        reactions=[ReactionDTO(id=r.id, user_id=r.user_id, reaction=r.reaction) for r in message.reactions],
    )
