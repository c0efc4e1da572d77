"""Repository interface for conversations and messages."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..entities.conversation import Conversation, Message, MessageReaction


class ConversationRepository(ABC):

    @abstractmethod
    async def get(self, conversation_id: str) -> Optional[Conversation]:
        pass

    @abstractmethod
    async def find(
        self, buyer_id: str, seller_id: str, product_id: Optional[str]
    ) -> Optional[Conversation]:
        """Existing conversation for the buyer/seller/product triple."""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[Conversation]:
        """Conversations where the user is buyer or seller, latest activity first."""
        pass

    @abstractmethod
    async def save(self, conversation: Conversation) -> None:
        pass

    @abstractmethod
    async def list_messages(self, conversation_id: str) -> List[Message]:
        """Messages oldest first, reactions attached."""
        pass

    @abstractmethod
    async def get_message(self, message_id: str) -> Optional[Message]:
        pass

    @abstractmethod
    async def save_message(self, message: Message) -> None:
        pass

    @abstractmethod
    async def mark_messages_read(self, conversation_id: str, reader_id: str, at: datetime) -> int:
        """Set read_at on the other party's unread messages.

        Returns:
            Number of messages updated
        """
        pass

    @abstractmethod
    async def add_reaction(self, reaction: MessageReaction) -> None:
        pass
